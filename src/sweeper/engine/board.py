"""
Board module for the Minesweeper engine.

Implements the minefield with deferred mine placement, neighbor counts,
the uncover/cascade/chord algorithm and game status queries.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Iterable, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidDimensions, MinesAlreadyPlaced, MinesNotPlaced, OutOfBounds

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

# Default mine count is one sixth of the cells
MINE_RATIO = 6


class GameStatus(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        mine_count: Total mines to place. Defaults to one cell in
            ``MINE_RATIO`` when left as None.
    """

    width: int = 20
    height: int = 20
    mine_count: Optional[int] = None

    def __post_init__(self) -> None:
        """Resolve the default mine count and validate."""
        self._validate_dimensions()
        if self.mine_count is None:
            self.mine_count = self.width * self.height // MINE_RATIO
        self._validate_mines()

    def _validate_dimensions(self) -> None:
        if self.width < 1 or self.height < 1:
            raise InvalidDimensions(
                f"Board dimensions must be positive, got {self.width}x{self.height}"
            )

    def _validate_mines(self) -> None:
        if self.mine_count < 0:
            raise InvalidDimensions("Number of mines cannot be negative")
        max_mines = self.width * self.height - 1
        if self.mine_count > max_mines:
            raise InvalidDimensions(f"Too many mines (max {max_mines})")

    @property
    def cell_count(self) -> int:
        return self.width * self.height


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are not laid at construction. The caller lays them exactly once,
    normally at the first reveal via ``place_mines`` so that the first
    uncovered cell is always safe.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    seed: Optional[int] = None
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    _rng: np.random.Generator = field(init=False, repr=False)
    _mines_placed: bool = False
    _uncovered: int = 0
    _flags: int = 0
    _exploded: bool = False

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._rng = np.random.default_rng(self.seed)
        self._init_grid()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create a grid of covered, mine-free cells."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]
        self._mines_placed = False
        self._uncovered = 0
        self._flags = 0
        self._exploded = False

    def place_mines(self, avoid_x: int, avoid_y: int) -> None:
        """
        Lay mines at random, keeping one cell mine-free.

        Draws ``mine_count`` distinct flat indices without replacement from
        every cell but the avoided one, so the run time does not depend on
        mine density.

        Args:
            avoid_x: Column of the cell that must stay safe.
            avoid_y: Row of the cell that must stay safe.

        Raises:
            MinesAlreadyPlaced: Mines were already laid on this board.
            OutOfBounds: The avoided cell is not on the board.
        """
        self._check_unplaced()
        self._check_position(avoid_x, avoid_y)

        width = self.config.width
        avoid_index = avoid_y * width + avoid_x
        count = self.config.mine_count
        if count:
            picks = self._rng.choice(self.config.cell_count - 1, size=count, replace=False)
            # Skip over the avoided index
            picks[picks >= avoid_index] += 1
        else:
            picks = []

        positions = [(int(index) % width, int(index) // width) for index in picks]
        logger.debug(
            "Placing %d mines on %dx%d board avoiding (%d, %d)",
            count, width, self.config.height, avoid_x, avoid_y,
        )
        self._lay(positions)

    def set_mines(self, positions: Iterable[Position]) -> None:
        """
        Lay mines at explicit positions.

        Args:
            positions: Exactly ``mine_count`` distinct (x, y) coordinates.

        Raises:
            MinesAlreadyPlaced: Mines were already laid on this board.
            OutOfBounds: A position is not on the board.
            InvalidDimensions: Wrong number of positions, or duplicates.
        """
        self._check_unplaced()
        positions = list(positions)
        for x, y in positions:
            self._check_position(x, y)
        if len(set(positions)) != len(positions):
            raise InvalidDimensions("Mine positions must be distinct")
        if len(positions) != self.config.mine_count:
            raise InvalidDimensions(
                f"Expected {self.config.mine_count} mine positions, got {len(positions)}"
            )
        self._lay(positions)

    def _lay(self, positions: List[Position]) -> None:
        for x, y in positions:
            self._grid[y][x].is_mine = True
        self._mines_placed = True
        self.compute_neighbor_counts()

    def _check_unplaced(self) -> None:
        if self._mines_placed:
            raise MinesAlreadyPlaced("Mines have already been placed on this board")

    def compute_neighbor_counts(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y in range(self.config.height):
            for x in range(self.config.width):
                self._grid[y][x].neighbor_mine_count = self._count_adjacent(
                    x, y, lambda cell: cell.is_mine
                )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, x: int, y: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            x: Column of center cell.
            y: Row of center cell.

        Returns:
            List of (x, y) tuples for the in-bounds neighbors. Edges are not
            wrapped.
        """
        result = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.in_bounds(new_x, new_y):
                    result.append((new_x, new_y))
        return result

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_position(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise OutOfBounds(x, y, self.config.width, self.config.height)

    def _count_adjacent(
        self, x: int, y: int, predicate: Callable[[Cell], bool]
    ) -> int:
        return sum(
            1 for nx, ny in self.neighbors(x, y) if predicate(self._grid[ny][nx])
        )

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def reveal(self, x: int, y: int) -> int:
        """
        Reveal a cell at the given position.

        A covered cell is uncovered, or explodes if it is a mine. An
        uncovered zero cell spreads to all of its neighbors. Revealing an
        already uncovered cell chords it: when the number of flagged
        neighbors equals its mine count, every covered neighbor is revealed
        in turn. Only the number of flags is checked, so a misplaced flag can
        set off a mine. Flagged and exploded cells are left alone.

        Args:
            x: Column to reveal.
            y: Row to reveal.

        Returns:
            Number of cells that changed state.

        Raises:
            MinesNotPlaced: Called before mines were laid.
            OutOfBounds: Position is not on the board.
        """
        self._check_position(x, y)
        if not self._mines_placed:
            raise MinesNotPlaced("Place mines before revealing cells")

        # Entries are (x, y, may_chord). Chord targets only count while they
        # are still covered when their turn comes. Neighbors are pushed in
        # reverse so cells are visited depth-first in row-major order.
        changed = 0
        pending = [(x, y, True)]
        while pending:
            cx, cy, may_chord = pending.pop()
            cell = self._grid[cy][cx]
            if cell.is_covered:
                cell.uncover()
                changed += 1
                if cell.is_exploded:
                    self._exploded = True
                    logger.debug("Mine exploded at (%d, %d)", cx, cy)
                    continue
                self._uncovered += 1
                if cell.neighbor_mine_count == 0:
                    pending.extend(
                        (nx, ny, True) for nx, ny in reversed(self.neighbors(cx, cy))
                    )
            elif cell.is_uncovered and may_chord:
                pending.extend(
                    (nx, ny, False) for nx, ny in reversed(self._chord_targets(cx, cy))
                )
        return changed

    def _chord_targets(self, x: int, y: int) -> List[Position]:
        """Covered neighbors to reveal if the flags around (x, y) add up."""
        cell = self._grid[y][x]
        flags = self._count_adjacent(x, y, lambda neighbor: neighbor.is_flagged)
        if flags != cell.neighbor_mine_count:
            return []
        return [
            (nx, ny) for nx, ny in self.neighbors(x, y)
            if self._grid[ny][nx].is_covered
        ]

    def toggle_flag(self, x: int, y: int) -> bool:
        """
        Toggle flag on a cell.

        Args:
            x: Column.
            y: Row.

        Returns:
            True if flag was toggled, False otherwise.
        """
        self._check_position(x, y)
        cell = self._grid[y][x]
        if not cell.toggle_flag():
            return False
        self._flags += 1 if cell.is_flagged else -1
        return True

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def game_status(self) -> GameStatus:
        """Get current game status."""
        if self._exploded:
            return GameStatus.LOST
        safe_cells = self.config.cell_count - self.config.mine_count
        if self._uncovered == safe_cells:
            return GameStatus.WON
        return GameStatus.IN_PROGRESS

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    @property
    def mine_count(self) -> int:
        return self.config.mine_count

    @property
    def mines_placed(self) -> bool:
        """Whether mines have been laid on this board."""
        return self._mines_placed

    @property
    def uncovered_count(self) -> int:
        return self._uncovered

    @property
    def flag_count(self) -> int:
        return self._flags

    def remaining_mines(self) -> int:
        """Mines not yet accounted for by a flag. Negative when over-flagged."""
        return self.config.mine_count - self._flags

    def get_cell(self, x: int, y: int) -> Cell:
        """Get cell at position."""
        self._check_position(x, y)
        return self._grid[y][x]

    def snapshot(self) -> np.ndarray:
        """
        Get the visible board as a numpy array.

        Returns:
            2D int8 array indexed [y, x] where:
                -1 = covered
                -2 = flagged
                -3 = exploded
                0-8 = uncovered with neighbor mine count
        """
        view = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y in range(self.config.height):
            for x in range(self.config.width):
                view[y, x] = self._grid[y][x].to_snapshot()
        return view

    def reset(self) -> None:
        """Reset board to initial state for new game."""
        self._init_grid()


def new_board(
    width: int, height: int, mine_count: Optional[int] = None, seed: Optional[int] = None
) -> Board:
    """
    Build an empty board.

    Raises:
        InvalidDimensions: Width or height below 1, or mine count outside
            ``0 <= mine_count < width * height``.
    """
    return Board(BoardConfig(width, height, mine_count), seed=seed)

"""
Cell module for the board engine.

Represents individual cells on the board with their visible state
(covered/uncovered/flagged/exploded) and content (mine/number).
"""
from enum import Enum, auto
from dataclasses import dataclass


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible visible states of a cell."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()
    EXPLODED = auto()


# Snapshot codes for cells that do not show a number
SNAPSHOT_COVERED = -1
SNAPSHOT_FLAGGED = -2
SNAPSHOT_EXPLODED = -3


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    A single cell in the minefield.

    Attributes:
        is_mine: Whether this cell hides a mine.
        state: Current visible state.
        neighbor_mine_count: Mines in the adjacent cells (0-8). Only
            meaningful once the board has laid its mines.
    """

    is_mine: bool = False
    state: CellState = CellState.COVERED
    neighbor_mine_count: int = 0

    def uncover(self) -> bool:
        """
        Uncover this cell, exploding it if it hides a mine.

        Returns:
            True if the state changed, False if the cell was not covered.
        """
        if self.state != CellState.COVERED:
            return False
        self.state = CellState.EXPLODED if self.is_mine else CellState.UNCOVERED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is uncovered or exploded.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
        else:
            return False
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        return self.state == CellState.FLAGGED

    @property
    def is_exploded(self) -> bool:
        return self.state == CellState.EXPLODED

    def to_snapshot(self) -> int:
        """
        Encode what the player can see of this cell.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            -3: Exploded mine
            0-8: Uncovered cell with its neighbor mine count
        """
        if self.state == CellState.COVERED:
            return SNAPSHOT_COVERED
        if self.state == CellState.FLAGGED:
            return SNAPSHOT_FLAGGED
        if self.state == CellState.EXPLODED:
            return SNAPSHOT_EXPLODED
        return self.neighbor_mine_count

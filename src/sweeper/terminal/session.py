"""
Game session for the terminal front end.

Holds the board and the cursor, and turns player actions into engine
calls. Mines are laid on the first reveal of each board so the first
uncovered cell is never a mine.
"""
import logging
from typing import Optional

from ..engine import Board, BoardConfig, GameStatus
from .controls import Action, MOVES

logger = logging.getLogger(__name__)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One player's game: a board plus a cursor.

    Once a game is won or lost, reveal and flag requests are ignored until
    ``new_game`` is called.
    """

    def __init__(self, config: BoardConfig, seed: Optional[int] = None) -> None:
        """
        Initialize the session.

        Args:
            config: Board dimensions and mine count.
            seed: Random seed for the first board. Later boards draw their
                layouts from fresh entropy.
        """
        self.config = config
        self.cursor_x = 0
        self.cursor_y = 0
        self.games_played = 0
        self.board = self._make_board(seed)

    def _make_board(self, seed: Optional[int] = None) -> Board:
        self.games_played += 1
        logger.debug(
            "Starting game %d on %dx%d board with %d mines",
            self.games_played, self.config.width, self.config.height,
            self.config.mine_count,
        )
        return Board(self.config, seed=seed)

    # ========================================================================
    # Cursor
    # ========================================================================

    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor, stopping at the board edges."""
        self.cursor_x = min(max(self.cursor_x + dx, 0), self.config.width - 1)
        self.cursor_y = min(max(self.cursor_y + dy, 0), self.config.height - 1)

    # ========================================================================
    # Game Actions
    # ========================================================================

    @property
    def status(self) -> GameStatus:
        return self.board.game_status()

    @property
    def is_playing(self) -> bool:
        return self.status == GameStatus.IN_PROGRESS

    def reveal(self) -> int:
        """
        Reveal the cell under the cursor.

        Returns:
            Number of cells that changed state.
        """
        if not self.is_playing:
            return 0
        if not self.board.mines_placed:
            self.board.place_mines(self.cursor_x, self.cursor_y)
        changed = self.board.reveal(self.cursor_x, self.cursor_y)
        self._log_outcome()
        return changed

    def toggle_flag(self) -> bool:
        """Flag or unflag the cell under the cursor."""
        if not self.is_playing:
            return False
        return self.board.toggle_flag(self.cursor_x, self.cursor_y)

    def new_game(self) -> None:
        """Throw away the current board and start over with the same config."""
        self.board = self._make_board()

    def _log_outcome(self) -> None:
        status = self.status
        if status == GameStatus.WON:
            logger.info("Game %d won", self.games_played)
        elif status == GameStatus.LOST:
            logger.info(
                "Game %d lost at (%d, %d)",
                self.games_played, self.cursor_x, self.cursor_y,
            )

    def apply(self, action: Action) -> bool:
        """
        Carry out a player action.

        Returns:
            False if the player asked to quit, True otherwise.
        """
        if action == Action.QUIT:
            return False
        if action in MOVES:
            self.move_cursor(*MOVES[action])
        elif action == Action.REVEAL:
            self.reveal()
        elif action == Action.FLAG:
            self.toggle_flag()
        elif action == Action.NEW_GAME:
            self.new_game()
        return True

    def status_line(self) -> str:
        """Text for the line under the board."""
        status = self.status
        if status == GameStatus.LOST:
            return "Game Over"
        if status == GameStatus.WON:
            return "You Win!"
        return f"Unflagged Mines: {self.board.remaining_mines()}"

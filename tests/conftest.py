"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper.engine import Board, BoardConfig, Cell, new_board
from sweeper.terminal import GameSession


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 20x20 board with the ratio mine count."""
    return Board()


@pytest.fixture
def beginner_board() -> Board:
    """Create a seeded 9x9 board with 10 mines."""
    return new_board(9, 9, 10, seed=1234)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its only mine in the top-left corner."""
    board = new_board(3, 3, 1)
    board.set_mines([(0, 0)])
    return board


@pytest.fixture
def wall_board() -> Board:
    """5x3 board with a column of mines at x=2 splitting it in two."""
    board = new_board(5, 3, 3)
    board.set_mines([(2, 0), (2, 1), (2, 2)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a 5x5 board with no mines for cascade testing."""
    board = new_board(5, 5, 0)
    board.set_mines([])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def session() -> GameSession:
    """Seeded 9x9 session with 10 mines."""
    return GameSession(BoardConfig(9, 9, 10), seed=42)


@pytest.fixture
def crowded_session() -> GameSession:
    """3x3 session with 7 mines, so the first reveal cannot win."""
    return GameSession(BoardConfig(3, 3, 7), seed=7)

"""
Unit tests for Cell class.

Tests cell state transitions, flagging and snapshot encoding.
"""
import pytest
from sweeper.engine import Cell, CellState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_covered(self) -> None:
        """New cell should be covered by default."""
        cell = Cell()
        assert cell.state == CellState.COVERED
        assert cell.is_covered is True

    def test_default_cell_has_zero_neighbor_mines(self) -> None:
        cell = Cell()
        assert cell.neighbor_mine_count == 0


# ============================================================================
# Cell Uncover Tests
# ============================================================================

class TestCellUncover:
    """Test cell uncover behavior."""

    def test_uncover_safe_cell(self, covered_cell: Cell) -> None:
        """Uncovering a safe cell marks it uncovered."""
        assert covered_cell.uncover() is True
        assert covered_cell.state == CellState.UNCOVERED
        assert covered_cell.is_uncovered is True

    def test_uncover_mine_explodes(self, mine_cell: Cell) -> None:
        """Uncovering a mine marks it exploded."""
        assert mine_cell.uncover() is True
        assert mine_cell.state == CellState.EXPLODED
        assert mine_cell.is_exploded is True

    def test_uncover_twice_returns_false(self, covered_cell: Cell) -> None:
        covered_cell.uncover()
        assert covered_cell.uncover() is False
        assert covered_cell.is_uncovered is True

    def test_uncover_flagged_cell_returns_false(self, covered_cell: Cell) -> None:
        """Flagged cells are protected from uncovering."""
        covered_cell.toggle_flag()
        assert covered_cell.uncover() is False
        assert covered_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_covered_cell(self, covered_cell: Cell) -> None:
        assert covered_cell.toggle_flag() is True
        assert covered_cell.state == CellState.FLAGGED

    def test_flag_twice_returns_to_covered(self, covered_cell: Cell) -> None:
        """Toggling twice is a round trip."""
        covered_cell.toggle_flag()
        covered_cell.toggle_flag()
        assert covered_cell.state == CellState.COVERED

    def test_flag_uncovered_cell_returns_false(self, covered_cell: Cell) -> None:
        """Cannot flag an uncovered cell."""
        covered_cell.uncover()
        assert covered_cell.toggle_flag() is False
        assert covered_cell.is_uncovered is True

    def test_flag_exploded_cell_returns_false(self, mine_cell: Cell) -> None:
        mine_cell.uncover()
        assert mine_cell.toggle_flag() is False
        assert mine_cell.is_exploded is True


# ============================================================================
# Cell Snapshot Tests
# ============================================================================

class TestCellSnapshot:
    """Test the visible-state encoding."""

    def test_covered_cell_is_negative_one(self, covered_cell: Cell) -> None:
        assert covered_cell.to_snapshot() == -1

    def test_covered_mine_is_hidden(self, mine_cell: Cell) -> None:
        """A covered mine looks like any other covered cell."""
        assert mine_cell.to_snapshot() == -1

    def test_flagged_cell_is_negative_two(self, covered_cell: Cell) -> None:
        covered_cell.toggle_flag()
        assert covered_cell.to_snapshot() == -2

    def test_exploded_cell_is_negative_three(self, mine_cell: Cell) -> None:
        mine_cell.uncover()
        assert mine_cell.to_snapshot() == -3

    @pytest.mark.parametrize("count", range(0, 9))
    def test_uncovered_cell_shows_neighbor_count(self, count: int) -> None:
        """Uncovered cell returns its neighbor mine count."""
        cell = Cell(neighbor_mine_count=count)
        cell.uncover()
        assert cell.to_snapshot() == count

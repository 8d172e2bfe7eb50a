"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, and observation conversion.
"""
import pytest
from minesweeper import Cell, CellState, CellView, ViewState


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell(0, 0)
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden and unflagged."""
        cell = Cell(0, 0)
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True
        assert cell.is_flagged is False
        assert cell.exploded is False

    def test_default_cell_has_zero_adjacent_mines(self) -> None:
        """New cell should have 0 adjacent mines by default."""
        assert Cell(0, 0).adjacent_mines == 0

    def test_position_matches_coordinates(self) -> None:
        """Position should be (row, col)."""
        assert Cell(3, 7).position == (3, 7)


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True
        assert hidden_cell.is_open is True

    def test_reveal_already_revealed_returns_false(
        self, hidden_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        hidden_cell.reveal()
        assert hidden_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True

    def test_explode_opens_and_marks_cell(self, mine_cell: Cell) -> None:
        """Exploding a mine should open it and mark it."""
        mine_cell.explode()
        assert mine_cell.is_open is True
        assert mine_cell.exploded is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot flag a revealed cell."""
        hidden_cell.reveal()
        assert hidden_cell.toggle_flag() is False
        assert hidden_cell.is_open is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test cell observation values."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1 for observation."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2 for observation."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(0, 0, adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_exploded_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Exploded mine should return 9 for observation."""
        mine_cell.explode()
        assert mine_cell.to_observation() == 9


class TestCellView:
    """Test the presentation snapshot type."""

    def test_view_defaults_to_no_count(self) -> None:
        """Non-open views carry no adjacent count."""
        assert CellView(ViewState.CLOSED).adjacent_count is None

    def test_view_is_immutable(self) -> None:
        """Views are frozen snapshots."""
        view = CellView(ViewState.OPEN, 2)
        with pytest.raises(AttributeError):
            view.adjacent_count = 3

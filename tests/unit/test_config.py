"""
Unit tests for game configuration.
"""
import pytest
from minesweeper import (
    BEGINNER,
    EXPERT,
    INTERMEDIATE,
    GameConfig,
    InvalidConfigurationError,
    get_preset,
)


# ============================================================================
# Validation Tests
# ============================================================================

class TestGameConfig:
    """Test configuration validation."""

    def test_valid_config_creation(self, valid_config: GameConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.rows == 8
        assert valid_config.cols == 8
        assert valid_config.mines == 10
        assert valid_config.total_safe_cells == 54

    def test_zero_rows_raises_error(self) -> None:
        """Zero rows should raise."""
        with pytest.raises(InvalidConfigurationError, match="dimensions must be positive"):
            GameConfig(0, 9, 10)

    def test_negative_cols_raises_error(self) -> None:
        """Negative columns should raise."""
        with pytest.raises(InvalidConfigurationError, match="dimensions must be positive"):
            GameConfig(9, -1, 0)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise."""
        with pytest.raises(InvalidConfigurationError, match="cannot be negative"):
            GameConfig(9, 9, -1)

    def test_mines_filling_grid_raises_error(self) -> None:
        """Mines must leave at least one safe cell."""
        with pytest.raises(InvalidConfigurationError, match="Too many mines"):
            GameConfig(3, 3, 9)

    def test_max_mines_is_valid(self) -> None:
        """One fewer mine than cells is accepted."""
        assert GameConfig(3, 3, 8).mines == 8

    def test_single_cell_without_mines_is_valid(self) -> None:
        """1x1 with no mines is the smallest valid game."""
        assert GameConfig(1, 1, 0).total_safe_cells == 1

    def test_error_is_a_value_error(self) -> None:
        """Configuration errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            GameConfig(1, 1, 1)


# ============================================================================
# Preset Tests
# ============================================================================

class TestPresets:
    """Test difficulty presets."""

    def test_preset_values(self) -> None:
        """Presets cover the three standard sizes."""
        assert (BEGINNER.rows, BEGINNER.cols, BEGINNER.mines) == (8, 8, 10)
        assert (INTERMEDIATE.rows, INTERMEDIATE.cols, INTERMEDIATE.mines) == (12, 12, 22)
        assert (EXPERT.rows, EXPERT.cols, EXPERT.mines) == (16, 16, 40)

    def test_get_preset_is_case_insensitive(self) -> None:
        """Preset lookup ignores case."""
        assert get_preset("Expert") is EXPERT

    def test_unknown_preset_raises(self) -> None:
        """Unknown names are configuration errors."""
        with pytest.raises(InvalidConfigurationError, match="Unknown preset"):
            get_preset("nightmare")

"""
Game configuration and difficulty presets.
"""
from dataclasses import dataclass
from typing import Dict

from .exceptions import InvalidConfigurationError


# ============================================================================
# Configuration
# ============================================================================

@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a Minesweeper session.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        mines: Requested number of mines.
    """

    rows: int = 8
    cols: int = 8
    mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfigurationError(
                f"Grid dimensions must be positive, got {self.rows}x{self.cols}"
            )
        if self.mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        if self.mines >= self.total_cells:
            raise InvalidConfigurationError(
                f"Too many mines (max {self.total_cells - 1})"
            )

    @property
    def total_cells(self) -> int:
        """Number of cells on the grid."""
        return self.rows * self.cols

    @property
    def total_safe_cells(self) -> int:
        """Number of non-mine cells when every requested mine is placed."""
        return self.total_cells - self.mines


# Preset difficulty levels
BEGINNER = GameConfig(8, 8, 10)
INTERMEDIATE = GameConfig(12, 12, 22)
EXPERT = GameConfig(16, 16, 40)

PRESETS: Dict[str, GameConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


def get_preset(name: str) -> GameConfig:
    """
    Look up a preset configuration by name (case-insensitive).

    Raises:
        InvalidConfigurationError: If no preset has that name.
    """
    try:
        return PRESETS[name.lower()]
    except KeyError:
        raise InvalidConfigurationError(
            f"Unknown preset {name!r} (choose from {', '.join(PRESETS)})"
        ) from None

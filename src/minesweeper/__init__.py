"""
Minesweeper rule engine.

Provides the grid model, safe-first-click mine placement, flood reveal,
flagging, the game state machine and a session controller that reports
changes as events.
"""
from .cell import Cell, CellState, CellView, ViewState
from .config import GameConfig, BEGINNER, INTERMEDIATE, EXPERT, PRESETS, get_preset
from .events import (
    CellsOpened,
    Event,
    Exploded,
    FlagChanged,
    GameOver,
    MinesRevealed,
    OpenedCell,
)
from .exceptions import (
    IllegalTransitionError,
    InvalidConfigurationError,
    MinesAlreadyPlacedError,
    MinesweeperError,
)
from .grid import Grid, create_grid
from .placement import place_mines
from .reveal import FlagOutcome, RevealOutcome, open_cell, toggle_flag
from .session import GameSession, GameSummary, SessionController
from .state import GamePhase, GameState
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "ViewState",
    "GameConfig",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "PRESETS",
    "get_preset",
    "CellsOpened",
    "Event",
    "Exploded",
    "FlagChanged",
    "GameOver",
    "MinesRevealed",
    "OpenedCell",
    "IllegalTransitionError",
    "InvalidConfigurationError",
    "MinesAlreadyPlacedError",
    "MinesweeperError",
    "Grid",
    "create_grid",
    "place_mines",
    "FlagOutcome",
    "RevealOutcome",
    "open_cell",
    "toggle_flag",
    "GameSession",
    "GameSummary",
    "SessionController",
    "GamePhase",
    "GameState",
    "MinesweeperEnv",
]

"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Cell,
    GameConfig,
    GameState,
    Grid,
    SessionController,
)


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced clock for timer tests."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


RiggedGame = Tuple[Grid, GameState]


def _rig(
    rows: int, cols: int, mines: Iterable[Tuple[int, int]]
) -> RiggedGame:
    """Build a started game with mines at fixed positions."""
    mines = list(mines)
    grid = Grid(rows, cols)
    for row, col in mines:
        grid.cell(row, col).is_mine = True
    for cell in grid.cells():
        if not cell.is_mine:
            cell.adjacent_mines = grid.count_adjacent_mines(cell.row, cell.col)
    state = GameState(GameConfig(rows, cols, len(mines)))
    state.start()
    return grid, state


# ============================================================================
# Randomness and Time Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible mine layouts."""
    return random.Random(1234)


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at t=100s."""
    return FakeClock()


# ============================================================================
# Grid Fixtures
# ============================================================================

@pytest.fixture
def rigged() -> Callable[..., RiggedGame]:
    """Factory for started games with hand-placed mines."""
    return _rig


@pytest.fixture
def wall_game() -> RiggedGame:
    """
    5x5 game with column 2 filled with mines.

    Column 0 is all zeros, column 1 is numbered, columns 3-4 are
    unreachable from the left side without crossing the wall.
    """
    return _rig(5, 5, [(row, 2) for row in range(5)])


@pytest.fixture
def corner_mine_game() -> RiggedGame:
    """5x5 game with a single mine at (0, 4)."""
    return _rig(5, 5, [(0, 4)])


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def controller(rng: random.Random, clock: FakeClock) -> SessionController:
    """Controller on an 8x8 grid with 10 mines."""
    return SessionController(GameConfig(8, 8, 10), rng=rng, clock=clock)


@pytest.fixture
def dense_controller(rng: random.Random, clock: FakeClock) -> SessionController:
    """Controller on an 8x8 grid with 40 mines, so one click never wins."""
    return SessionController(GameConfig(8, 8, 40), rng=rng, clock=clock)


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> GameConfig:
    """Create a valid game configuration."""
    return GameConfig(8, 8, 10)

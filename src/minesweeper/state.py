"""
Game state machine.

Tracks the coarse game phase, the player-facing counters and the timer.
Phases only move forward: IDLE -> IN_PROGRESS -> WON | LOST. A new game
gets a new GameState.
"""
import time
from enum import Enum, auto
from typing import Callable, Optional

from .config import GameConfig
from .exceptions import IllegalTransitionError


Clock = Callable[[], float]


# ============================================================================
# Constants
# ============================================================================

class GamePhase(Enum):
    """Possible phases of the game."""

    IDLE = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if no further play is possible."""
        return self in (GamePhase.WON, GamePhase.LOST)


# ============================================================================
# Game State
# ============================================================================

class GameState:
    """
    Phase, counters and timer of a single game.

    Attributes:
        config: Configuration the game was created with.
        phase: Current phase.
        flags_remaining: Flags the player may still place.
        opened_safe_count: Safe cells opened so far.
        total_safe_cells: Safe cells that must be opened to win.
        effective_mines: Mines actually on the grid, once placed.
        started_at: Clock reading at the first open, if any.
        ended_at: Clock reading when a terminal phase was entered.
    """

    def __init__(self, config: GameConfig, clock: Optional[Clock] = None) -> None:
        self.config = config
        self._clock = clock or time.monotonic
        self.phase = GamePhase.IDLE
        self.flags_remaining = config.mines
        self.opened_safe_count = 0
        self.total_safe_cells = config.total_safe_cells
        self.effective_mines = config.mines
        self.started_at: Optional[float] = None
        self.ended_at: Optional[float] = None

    def __repr__(self) -> str:
        return (
            f"GameState(phase={self.phase.name}, "
            f"opened={self.opened_safe_count}/{self.total_safe_cells}, "
            f"flags_remaining={self.flags_remaining})"
        )

    # ========================================================================
    # Phase Transitions
    # ========================================================================

    def _transition(self, expected: GamePhase, target: GamePhase) -> None:
        if self.phase != expected:
            raise IllegalTransitionError(
                f"Cannot move from {self.phase.name} to {target.name}"
            )
        self.phase = target

    def start(self) -> None:
        """Enter IN_PROGRESS and start the timer."""
        self._transition(GamePhase.IDLE, GamePhase.IN_PROGRESS)
        self.started_at = self._clock()

    def win(self) -> None:
        """Enter WON and stop the timer."""
        self._transition(GamePhase.IN_PROGRESS, GamePhase.WON)
        self.ended_at = self._clock()

    def lose(self) -> None:
        """Enter LOST and stop the timer."""
        self._transition(GamePhase.IN_PROGRESS, GamePhase.LOST)
        self.ended_at = self._clock()

    @property
    def first_move_made(self) -> bool:
        """Check if the first open has been processed."""
        return self.phase != GamePhase.IDLE

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self.phase.is_terminal

    # ========================================================================
    # Counters
    # ========================================================================

    def rebase_mines(self, effective_mines: int) -> None:
        """
        Align the win target with the mines actually placed.

        The flag budget keeps following the requested count.
        """
        self.effective_mines = effective_mines
        self.total_safe_cells = self.config.total_cells - effective_mines

    def record_opened(self, count: int) -> None:
        """Add newly opened safe cells to the running total."""
        self.opened_safe_count += count

    @property
    def all_safe_opened(self) -> bool:
        """Check the win condition."""
        return self.opened_safe_count >= self.total_safe_cells

    def take_flag(self) -> bool:
        """Spend one flag from the budget, if any is left."""
        if self.flags_remaining <= 0:
            return False
        self.flags_remaining -= 1
        return True

    def return_flag(self) -> None:
        """Give one flag back to the budget."""
        self.flags_remaining += 1

    # ========================================================================
    # Timer
    # ========================================================================

    @property
    def elapsed(self) -> float:
        """
        Seconds since the first open.

        Live while in progress, frozen once the game ends, 0 before start.
        """
        if self.started_at is None:
            return 0.0
        end = self.ended_at if self.ended_at is not None else self._clock()
        return max(0.0, end - self.started_at)

    @property
    def elapsed_seconds(self) -> int:
        """Elapsed time in whole seconds."""
        return int(self.elapsed)

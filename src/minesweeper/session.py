"""
Session controller for Minesweeper.

Owns the current game, exposes the action API to the presentation layer
and turns reveal outcomes into events.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Union

from .cell import CellView, ViewState
from .config import GameConfig, get_preset
from .events import (
    CellsOpened,
    Event,
    Exploded,
    FlagChanged,
    GameOver,
    MinesRevealed,
    OpenedCell,
)
from .grid import Grid, create_grid
from .reveal import RevealOutcome, open_cell, toggle_flag
from .state import Clock, GamePhase, GameState


logger = logging.getLogger(__name__)

Listener = Callable[[Event], None]


# ============================================================================
# Session Data
# ============================================================================

@dataclass
class GameSession:
    """
    Everything that belongs to one game.

    Restarting builds a new GameSession rather than resetting this one.
    """

    config: GameConfig
    grid: Grid
    state: GameState

    @classmethod
    def create(cls, config: GameConfig, clock: Optional[Clock] = None) -> "GameSession":
        """Build an idle session with an empty grid."""
        return cls(
            config=config,
            grid=create_grid(config.rows, config.cols),
            state=GameState(config, clock),
        )


@dataclass(frozen=True)
class GameSummary:
    """
    Snapshot of the game for status displays.

    Attributes:
        phase: Current phase.
        flags_remaining: Flags the player may still place.
        opened_safe_count: Safe cells opened so far.
        total_safe_cells: Safe cells that must be opened to win.
        elapsed_seconds: Whole seconds since the first open.
        rows: Grid rows.
        cols: Grid columns.
        mines: Requested mine count.
        effective_mines: Mines actually placed (equals mines until the
            grid proves too small).
    """

    phase: GamePhase
    flags_remaining: int
    opened_safe_count: int
    total_safe_cells: int
    elapsed_seconds: int
    rows: int
    cols: int
    mines: int
    effective_mines: int

    @property
    def first_move_made(self) -> bool:
        """Check if the game has started."""
        return self.phase != GamePhase.IDLE


# ============================================================================
# Controller
# ============================================================================

class SessionController:
    """
    Drives one game at a time.

    Player actions that cannot apply (out of range, stale, after the game
    ended) are ignored and return no events.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        """
        Initialize the controller with an idle game.

        Args:
            config: Configuration of the first game (default: 8x8, 10 mines).
            rng: Random source for mine placement.
            clock: Monotonic clock in seconds, used by the timer.
        """
        self._rng = rng or random.Random()
        self._clock = clock
        self._listeners: List[Listener] = []
        self.session = self._start(config or GameConfig())

    # ========================================================================
    # Lifecycle
    # ========================================================================

    def _start(self, config: GameConfig) -> GameSession:
        session = GameSession.create(config, self._clock)
        logger.info(
            "New game %dx%d with %d mines", config.rows, config.cols, config.mines
        )
        return session

    def new_session(self, rows: int, cols: int, mines: int) -> GameSession:
        """
        Start a new game with the given configuration.

        Raises:
            InvalidConfigurationError: If the configuration is invalid. The
                current game is left untouched.
        """
        self.session = self._start(GameConfig(rows, cols, mines))
        return self.session

    def restart(
        self, config: Union[GameConfig, str, None] = None
    ) -> GameSession:
        """
        Start over, with the previous configuration unless one is given.

        Args:
            config: A GameConfig, a preset name, or None to keep the
                current configuration.
        """
        if config is None:
            config = self.session.config
        elif isinstance(config, str):
            config = get_preset(config)
        self.session = self._start(config)
        return self.session

    # ========================================================================
    # Listeners
    # ========================================================================

    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives every emitted event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        """Remove a previously registered listener."""
        self._listeners.remove(listener)

    def _emit(self, events: List[Event]) -> None:
        for event in events:
            for listener in list(self._listeners):
                try:
                    listener(event)
                except Exception:
                    logger.exception("Listener %r failed on %r", listener, event)
                    raise

    # ========================================================================
    # Actions
    # ========================================================================

    @property
    def grid(self) -> Grid:
        """Grid of the current game."""
        return self.session.grid

    @property
    def state(self) -> GameState:
        """State of the current game."""
        return self.session.state

    def open(self, row: int, col: int) -> List[Event]:
        """
        Open a cell.

        Returns:
            Events produced, empty if the action was ignored.
        """
        if not self.grid.is_valid_position(row, col):
            logger.debug("Ignoring open outside the grid at (%d, %d)", row, col)
            return []
        outcome = open_cell(self.grid, self.state, row, col, self._rng)
        events = self._events_for_reveal(outcome)
        self._emit(events)
        return events

    def toggle_flag(self, row: int, col: int) -> List[Event]:
        """
        Place or remove a flag.

        Returns:
            A FlagChanged event, or nothing if the action was ignored.
        """
        if not self.grid.is_valid_position(row, col):
            logger.debug("Ignoring flag outside the grid at (%d, %d)", row, col)
            return []
        outcome = toggle_flag(self.grid, self.state, row, col)
        if outcome is None:
            return []
        events: List[Event] = [
            FlagChanged(outcome.row, outcome.col, outcome.flagged, outcome.flags_remaining)
        ]
        self._emit(events)
        return events

    def _events_for_reveal(self, outcome: RevealOutcome) -> List[Event]:
        events: List[Event] = []
        if outcome.opened:
            events.append(CellsOpened(tuple(
                OpenedCell(cell.row, cell.col, cell.adjacent_mines)
                for cell in outcome.opened
            )))
        if outcome.lost:
            row, col = outcome.exploded
            events.append(Exploded(row, col))
            events.append(MinesRevealed(tuple(outcome.mines)))
        if outcome.lost or outcome.won:
            elapsed = self.state.elapsed_seconds
            logger.info(
                "Game %s after %ds", "won" if outcome.won else "lost", elapsed
            )
            events.append(GameOver(outcome.won, elapsed))
        return events

    # ========================================================================
    # Queries
    # ========================================================================

    def get_cell_view(self, row: int, col: int) -> Optional[CellView]:
        """Get what to draw for a cell, or None if position is invalid."""
        if not self.grid.is_valid_position(row, col):
            return None
        cell = self.grid.cell(row, col)
        if cell.exploded:
            return CellView(ViewState.EXPLODED_MINE)
        if cell.is_mine and self.state.phase == GamePhase.LOST:
            return CellView(ViewState.MINE)
        if cell.is_flagged:
            return CellView(ViewState.FLAGGED)
        if cell.is_open:
            return CellView(ViewState.OPEN, cell.adjacent_mines)
        return CellView(ViewState.CLOSED)

    def get_summary(self) -> GameSummary:
        """Snapshot of phase, counters and elapsed time."""
        state = self.state
        config = self.session.config
        return GameSummary(
            phase=state.phase,
            flags_remaining=state.flags_remaining,
            opened_safe_count=state.opened_safe_count,
            total_safe_cells=state.total_safe_cells,
            elapsed_seconds=state.elapsed_seconds,
            rows=config.rows,
            cols=config.cols,
            mines=config.mines,
            effective_mines=state.effective_mines,
        )

    get_state = get_summary

"""
Reveal engine.

Implements opening cells (with lazy mine placement, explosion handling and
flood reveal) and flag toggling on top of a Grid and its GameState.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

from .cell import Cell
from .grid import Grid, Position
from .placement import place_mines
from .state import GameState


logger = logging.getLogger(__name__)


# ============================================================================
# Outcomes
# ============================================================================

@dataclass
class RevealOutcome:
    """
    Result of an open action.

    Attributes:
        opened: Safe cells opened by this action.
        exploded: Position of the mine that was opened, if any.
        mines: All mine positions, filled in on a loss.
        won: Whether this action won the game.
    """

    opened: List[Cell] = field(default_factory=list)
    exploded: Optional[Position] = None
    mines: List[Position] = field(default_factory=list)
    won: bool = False

    @property
    def lost(self) -> bool:
        """Check if this action lost the game."""
        return self.exploded is not None

    @property
    def changed(self) -> bool:
        """Check if the action did anything at all."""
        return bool(self.opened) or self.lost


@dataclass(frozen=True)
class FlagOutcome:
    """Result of a flag toggle that changed something."""

    row: int
    col: int
    flagged: bool
    flags_remaining: int


# ============================================================================
# Open
# ============================================================================

def open_cell(
    grid: Grid,
    state: GameState,
    row: int,
    col: int,
    rng: random.Random,
) -> RevealOutcome:
    """
    Open a cell.

    The first open of a game places the mines around it and starts the
    timer. Opening a mine loses the game; opening anything else flood
    reveals from that cell and may win the game.

    Args:
        grid: Grid to mutate.
        state: State of the same game.
        row: Row index to open.
        col: Column index to open.
        rng: Random source for mine placement.

    Returns:
        What happened. An empty outcome means the action was ignored.
    """
    cell = grid.cell(row, col)
    if state.is_over or not cell.is_hidden:
        return RevealOutcome()

    if not state.first_move_made:
        _handle_first_open(grid, state, row, col, rng)

    if cell.is_mine:
        return _explode(grid, state, cell)

    opened = flood_reveal(grid, cell)
    state.record_opened(len(opened))
    logger.debug("Opened %d cells from (%d, %d)", len(opened), row, col)

    outcome = RevealOutcome(opened=opened)
    if state.all_safe_opened:
        state.win()
        outcome.won = True
    return outcome


def _handle_first_open(
    grid: Grid, state: GameState, row: int, col: int, rng: random.Random
) -> None:
    """Place mines around the first open and start the game."""
    placed = place_mines(grid, state.config.mines, row, col, rng)
    state.rebase_mines(placed)
    state.start()


def _explode(grid: Grid, state: GameState, cell: Cell) -> RevealOutcome:
    """Open a mine and lose the game."""
    cell.explode()
    state.lose()
    return RevealOutcome(exploded=cell.position, mines=grid.mine_positions())


def flood_reveal(grid: Grid, start: Cell) -> List[Cell]:
    """
    Open a safe cell and every cell reachable through zero counts.

    Uses an explicit stack, so region size is not limited by recursion
    depth. Numbered cells are opened but not expanded.

    Args:
        grid: Grid containing the start cell.
        start: Safe, hidden cell to open from.

    Returns:
        Cells opened, in the order they were opened.
    """
    opened = []
    stack = [start]
    while stack:
        cell = stack.pop()
        if not cell.reveal():
            continue
        opened.append(cell)
        if cell.adjacent_mines > 0:
            continue
        for neighbor in grid.neighbors_of(cell.row, cell.col):
            if neighbor.is_hidden and not neighbor.is_mine:
                stack.append(neighbor)
    return opened


# ============================================================================
# Flag
# ============================================================================

def toggle_flag(
    grid: Grid, state: GameState, row: int, col: int
) -> Optional[FlagOutcome]:
    """
    Toggle the flag on a cell.

    Allowed before the first open. Placing a flag needs a flag left in the
    budget; removing one always works.

    Args:
        grid: Grid to mutate.
        state: State of the same game.
        row: Row index.
        col: Column index.

    Returns:
        The new flag state, or None if nothing changed.
    """
    cell = grid.cell(row, col)
    if state.is_over or cell.is_open:
        return None

    if cell.is_flagged:
        cell.toggle_flag()
        state.return_flag()
    elif state.take_flag():
        cell.toggle_flag()
    else:
        logger.debug("No flags left for (%d, %d)", row, col)
        return None

    return FlagOutcome(row, col, cell.is_flagged, state.flags_remaining)

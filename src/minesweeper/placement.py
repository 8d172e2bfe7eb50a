"""
Mine placement.

Mines are placed lazily on the first open so that the opened cell and its
neighbors are always safe.
"""
import logging
import random
from typing import List, Set

from .exceptions import MinesAlreadyPlacedError
from .grid import Grid, Position


logger = logging.getLogger(__name__)


def safe_zone(grid: Grid, safe_row: int, safe_col: int) -> Set[Position]:
    """Return the safe cell and all of its neighbors."""
    forbidden = {(safe_row, safe_col)}
    forbidden.update(grid.neighbor_positions(safe_row, safe_col))
    return forbidden


def _get_valid_mine_positions(
    grid: Grid, safe_row: int, safe_col: int
) -> List[Position]:
    """Get all positions outside the safe zone."""
    forbidden = safe_zone(grid, safe_row, safe_col)
    return [position for position in grid.positions() if position not in forbidden]


def _calculate_adjacent_mines(grid: Grid) -> None:
    """Calculate adjacent mine counts for all non-mine cells."""
    for cell in grid.cells():
        if not cell.is_mine:
            cell.adjacent_mines = grid.count_adjacent_mines(cell.row, cell.col)


def place_mines(
    grid: Grid,
    mines: int,
    safe_row: int,
    safe_col: int,
    rng: random.Random,
) -> int:
    """
    Place mines randomly, keeping a safe zone around the first open.

    When the grid is too small to fit the requested mines outside the safe
    zone, as many as fit are placed instead.

    Args:
        grid: Grid to populate in place.
        mines: Requested number of mines.
        safe_row: Row of the first opened cell.
        safe_col: Column of the first opened cell.
        rng: Random source used for the draw.

    Returns:
        Number of mines actually placed.

    Raises:
        MinesAlreadyPlacedError: If the grid already has mines.
    """
    if any(cell.is_mine for cell in grid.cells()):
        raise MinesAlreadyPlacedError("Mines were already placed on this grid")

    candidates = _get_valid_mine_positions(grid, safe_row, safe_col)
    to_place = min(mines, len(candidates))
    if to_place < mines:
        logger.warning(
            "Only %d of %d mines fit outside the safe zone on a %dx%d grid",
            to_place, mines, grid.rows, grid.cols,
        )

    for row, col in rng.sample(candidates, to_place):
        grid.cell(row, col).is_mine = True

    _calculate_adjacent_mines(grid)
    logger.debug(
        "Placed %d mines avoiding (%d, %d)", to_place, safe_row, safe_col
    )
    return to_place

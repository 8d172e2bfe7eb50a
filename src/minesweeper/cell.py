"""
Cell module for Minesweeper.

Represents individual cells of the grid with their state
(hidden/revealed/flagged) and content (mine/adjacent count), plus the
read-only view handed to the presentation layer.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell in the data model."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class ViewState(Enum):
    """What the presentation layer should draw for a cell."""

    CLOSED = auto()
    OPEN = auto()
    FLAGGED = auto()
    MINE = auto()
    EXPLODED_MINE = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index of the cell.
        col: Column index of the cell.
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current state (hidden, revealed, or flagged).
        exploded: Whether this is the mine that ended the game.
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    exploded: bool = False

    @property
    def position(self) -> tuple:
        """(row, col) of this cell."""
        return self.row, self.col

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was revealed, False if already revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def explode(self) -> None:
        """Open this mine as the one that was stepped on."""
        self.state = CellState.REVEALED
        self.exploded = True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_open(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines


@dataclass(frozen=True)
class CellView:
    """
    Presentation-facing snapshot of one cell.

    Attributes:
        state: What to draw.
        adjacent_count: Mine count, only set for open cells.
    """

    state: ViewState
    adjacent_count: Optional[int] = None

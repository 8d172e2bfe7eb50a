"""
Grid module for Minesweeper.

Owns the rows x cols array of cells and answers adjacency queries.
Coordinates passed in are expected to be in range; the session
controller validates player input before it gets here.
"""
from typing import Iterator, List, Tuple

import numpy as np

from .cell import Cell


Position = Tuple[int, int]


# ============================================================================
# Grid Class
# ============================================================================

class Grid:
    """
    Rectangular array of cells.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells: List[List[Cell]] = [
            [Cell(row, col) for col in range(cols)]
            for row in range(rows)
        ]

    def __repr__(self) -> str:
        return f"Grid(rows={self.rows}, cols={self.cols})"

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position."""
        return self._cells[row][col]

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within grid bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def positions(self) -> Iterator[Position]:
        """Iterate over every (row, col) in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    def cells(self) -> Iterator[Cell]:
        """Iterate over every cell in row-major order."""
        for row in self._cells:
            yield from row

    def mine_positions(self) -> List[Position]:
        """Positions of all mines currently on the grid."""
        return [cell.position for cell in self.cells() if cell.is_mine]

    # ========================================================================
    # Neighbor Utilities
    # ========================================================================

    def neighbor_positions(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for the up to 8 neighbors inside
            the grid.
        """
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    neighbors.append((new_row, new_col))
        return neighbors

    def neighbors_of(self, row: int, col: int) -> List[Cell]:
        """Get the cells adjacent to a position."""
        return [
            self._cells[neighbor_row][neighbor_col]
            for neighbor_row, neighbor_col in self.neighbor_positions(row, col)
        ]

    def count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(1 for neighbor in self.neighbors_of(row, col) if neighbor.is_mine)

    # ========================================================================
    # Observation
    # ========================================================================

    def to_observation(self) -> np.ndarray:
        """
        Get grid state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.rows, self.cols), dtype=np.int8)
        for cell in self.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs


def create_grid(rows: int, cols: int) -> Grid:
    """Create a grid of hidden, unflagged, mine-free cells."""
    return Grid(rows, cols)

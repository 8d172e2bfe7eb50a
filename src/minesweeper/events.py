"""
Events emitted to the presentation layer.

Every player action returns the events it produced, in order. An action
that changes nothing produces no events.
"""
from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class OpenedCell:
    """A safe cell that was just opened."""

    row: int
    col: int
    adjacent_count: int


@dataclass(frozen=True)
class CellsOpened:
    """One or more safe cells were opened by a single action."""

    cells: Tuple[OpenedCell, ...]


@dataclass(frozen=True)
class FlagChanged:
    """A flag was placed on or removed from a cell."""

    row: int
    col: int
    flagged: bool
    flags_remaining: int


@dataclass(frozen=True)
class Exploded:
    """The player opened a mine."""

    row: int
    col: int


@dataclass(frozen=True)
class MinesRevealed:
    """All mine positions, shown after a loss."""

    positions: Tuple[Tuple[int, int], ...]


@dataclass(frozen=True)
class GameOver:
    """The game ended."""

    won: bool
    elapsed_seconds: int


Event = Union[CellsOpened, FlagChanged, Exploded, MinesRevealed, GameOver]

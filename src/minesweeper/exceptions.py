"""
Exceptions raised by the Minesweeper core.

Player actions that make no sense (opening an open cell, acting after the
game ended, flagging past the budget) are no-ops and never raise. Only bad
configuration and broken internal invariants do.
"""


class MinesweeperError(Exception):
    """Base class for all errors raised by this package."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Grid dimensions or mine count are out of range."""


class MinesAlreadyPlacedError(MinesweeperError, RuntimeError):
    """Mine placement was requested twice for the same grid."""


class IllegalTransitionError(MinesweeperError, RuntimeError):
    """A game phase transition was attempted out of order."""

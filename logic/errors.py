"""
Errors raised by the TicTacToe game model.
"""


class GameError(Exception):
    """Base class for all game model errors."""


class InvalidMoveError(GameError, ValueError):
    """A move was rejected for the given coordinates."""


class OutOfBoundsError(InvalidMoveError):
    """Row or column is outside the 3x3 board."""


class OccupiedError(InvalidMoveError):
    """The target cell already holds a mark."""


class GameOverError(GameError, RuntimeError):
    """A move was attempted after the game ended."""

"""
Errors raised by the rules engine.
"""


class TileMergeError(Exception):
    """Base class for every error raised by this package."""


class InvalidDirection(TileMergeError, ValueError):
    """The requested direction is not one of left, up, right, down."""


class InvalidBoardShape(TileMergeError, ValueError):
    """The board is not 16 cells of zero or powers of two."""


class GameOverError(TileMergeError):
    """A move was requested on a finished game."""

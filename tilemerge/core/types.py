"""
Types exchanged between the rules engine and its callers.
"""

from enum import Enum
from typing import NamedTuple

from numpy import ndarray

# ##: Number of cells on a side, and on the whole board.
SIZE = 4
CELLS = SIZE * SIZE


class Direction(str, Enum):
    """Direction in which every tile slides."""

    LEFT = 'left'
    UP = 'up'
    RIGHT = 'right'
    DOWN = 'down'


class GameState(str, Enum):
    """Lifecycle of a game session."""

    ACTIVE = 'active'
    OVER = 'over'


class MergeEvent(NamedTuple):
    """
    Two equal tiles combined into one.
    """

    first: int
    second: int
    merged: int


class LineResult(NamedTuple):
    """
    Outcome of resolving a single line toward its start.
    """

    final_line: tuple[int, ...]
    score_gained: int
    merges: tuple[MergeEvent, ...]


class MoveResult(NamedTuple):
    """
    Outcome of sliding the whole board in one direction.

    Attributes
    ----------
    final_board : ndarray
        The board after sliding and merging, before any tile is spawned.
    score_gained : int
        Sum of every merged value.
    merges : tuple[MergeEvent, ...]
        Merge events, row by row in resolution order.
    moved : bool
        True if at least one cell changed.
    """

    final_board: ndarray
    score_gained: int
    merges: tuple[MergeEvent, ...]
    moved: bool


class SpawnResult(NamedTuple):
    """
    Outcome of placing a random tile.

    ``new_value`` is 0 and ``new_index`` is None when the board was already full.
    """

    board: ndarray
    new_value: int
    new_index: int | None

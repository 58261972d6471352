"""
Orientation of the board relative to the slide direction.

Line resolution always slides toward the start of each row. Every direction is brought back
to that case by a fixed pre-transform, and the resolved matrix is restored by the matching
post-transform.
"""

from typing import NamedTuple

from numpy import fliplr, ndarray, rot90

from tilemerge.core.types import SIZE, Direction
from tilemerge.core.validation import as_board, as_direction, freeze


class Orientation(NamedTuple):
    """
    Transform applied to a board before resolving its rows.

    Attributes
    ----------
    turns : int
        Number of clockwise quarter turns, in [0, 3].
    mirror : bool
        Whether each row is reversed.
    """

    turns: int
    mirror: bool


# ##: Pre-transform per direction; the post-transform undoes it.
ORIENTATIONS: dict[Direction, Orientation] = {
    Direction.LEFT: Orientation(turns=0, mirror=False),
    Direction.RIGHT: Orientation(turns=0, mirror=True),
    Direction.UP: Orientation(turns=3, mirror=False),
    Direction.DOWN: Orientation(turns=1, mirror=False),
}


def rotate(matrix: ndarray, times: int = 1) -> ndarray:
    """
    Rotate a matrix clockwise by a quarter turn, ``times`` times.

    Parameters
    ----------
    matrix : ndarray
        A 2D array with r rows and c columns.
    times : int, optional
        Number of quarter turns (default is 1).

    Returns
    -------
    ndarray
        A new array M' with M'[i][j] = M[c - 1 - j][i] for a single turn.
    """
    return rot90(matrix, k=-(times % 4)).copy()


def normalize(board, direction) -> ndarray:
    """
    Reshape a board into a 4x4 matrix whose rows slide toward index 0.

    Parameters
    ----------
    board : array-like
        Sixteen cell values, row-major.
    direction : Direction or str
        The requested move direction.

    Returns
    -------
    ndarray
        A new 4x4 matrix.
    """
    orientation = ORIENTATIONS[as_direction(direction)]
    matrix = as_board(board).reshape(SIZE, SIZE)
    if orientation.mirror:
        matrix = fliplr(matrix)
    return rotate(matrix, orientation.turns)


def denormalize(matrix: ndarray, direction) -> ndarray:
    """
    Restore a normalized matrix to board orientation.

    Parameters
    ----------
    matrix : ndarray
        A 4x4 matrix produced by ``normalize`` and possibly resolved.
    direction : Direction or str
        The direction given to ``normalize``.

    Returns
    -------
    ndarray
        A flat, read-only board of 16 cells.
    """
    orientation = ORIENTATIONS[as_direction(direction)]
    restored = rotate(matrix, 4 - orientation.turns)
    if orientation.mirror:
        restored = fliplr(restored)
    return freeze(restored.ravel().copy())

"""
Input checks shared by every engine operation.

The engine never repairs malformed input: a board or a direction is either accepted
as-is or rejected before any computation starts.
"""

from typing import Any

from numpy import asarray, int64, ndarray

from tilemerge.core.errors import InvalidBoardShape, InvalidDirection
from tilemerge.core.types import CELLS, SIZE, Direction

# ##: Largest tile a 4x4 game can reach.
MAX_TILE = 2**17


def freeze(board: ndarray) -> ndarray:
    """Mark a board as read-only and return it."""
    board.setflags(write=False)
    return board


def as_board(board: Any) -> ndarray:
    """
    Validate a board and return it as a fresh, read-only, flat int64 array.

    Parameters
    ----------
    board : Any
        Sixteen cell values, as a flat sequence or a 4x4 nested one.

    Returns
    -------
    ndarray
        A copy of the board with shape (16,).

    Raises
    ------
    InvalidBoardShape
        If the board does not hold exactly 16 integers, or holds a value that is negative,
        above ``MAX_TILE``, or neither zero nor a power of two greater than one.
    """
    return freeze(_as_cells(board, ((CELLS,), (SIZE, SIZE)), 'Board'))


def as_line(line: Any) -> list[int]:
    """
    Validate a single line of four cells and return its values as ints.

    Raises
    ------
    InvalidBoardShape
        If the line does not hold exactly 4 valid cell values.
    """
    return _as_cells(line, ((SIZE,),), 'Line').tolist()


def _as_cells(values: Any, shapes: tuple[tuple[int, ...], ...], name: str) -> ndarray:
    """Check shape, dtype and tile values, and return a flat int64 copy."""
    try:
        cells = asarray(values)
    except (OverflowError, TypeError, ValueError) as error:
        raise InvalidBoardShape(f'{name} is not a grid of integers: {error}') from error

    if cells.shape not in shapes:
        raise InvalidBoardShape(f'{name} must have shape {" or ".join(map(str, shapes))}, got {cells.shape}')
    if cells.dtype.kind not in 'iu':
        raise InvalidBoardShape(f'{name} cells must be integers, got dtype {cells.dtype}')

    # ##>: Range check before the int64 cast so huge unsigned values cannot wrap around.
    if (cells < 0).any():
        raise InvalidBoardShape(f'{name} holds negative values: {cells.tolist()}')
    if (cells > MAX_TILE).any():
        raise InvalidBoardShape(f'{name} holds values above {MAX_TILE}: {cells.tolist()}')

    cells = cells.astype(int64).ravel()

    # ##>: A power of two v >= 2 has exactly one bit set, so v & (v - 1) is zero.
    tiles = cells[cells != 0]
    if ((tiles < 2) | ((tiles & (tiles - 1)) != 0)).any():
        raise InvalidBoardShape(f'{name} holds values that are not powers of two: {cells.tolist()}')

    return cells


def as_direction(direction: Any) -> Direction:
    """
    Convert a direction name or member into a ``Direction``.

    Raises
    ------
    InvalidDirection
        If the value is not one of ``left``, ``up``, ``right``, ``down``.
    """
    try:
        return Direction(direction)
    except (TypeError, ValueError) as error:
        raise InvalidDirection(f'Unknown direction {direction!r}, expected one of {[d.value for d in Direction]}') from error

"""
Rules of the 4x4 sliding-tile merge puzzle: line resolution, board moves, tile spawning and
terminal detection.
"""

from itertools import chain
from typing import Sequence

from numpy import all as np_all
from numpy import any as np_any
from numpy import array, array_equal, flatnonzero, int64, ndarray, zeros
from numpy.random import PCG64DXSM, Generator, default_rng

from tilemerge.core.orientation import denormalize, normalize
from tilemerge.core.types import CELLS, SIZE, LineResult, MergeEvent, MoveResult, SpawnResult
from tilemerge.core.validation import as_board, as_direction, as_line, freeze

# ##>: Tile spawn probabilities (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

# ##>: Pre-computed tile values and probabilities for sampling.
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: Shared generator used when the caller does not inject one.
_GENERATOR = default_rng(PCG64DXSM())


def _compact(line: Sequence[int]) -> list[int]:
    """Close the gaps of a line, keeping tile order, and pad with zeros at the end."""
    tiles = [value for value in line if value != 0]
    return tiles + [0] * (len(line) - len(tiles))


def resolve_line(line: Sequence[int]) -> LineResult:
    """
    Slide a line toward index 0 and merge adjacent equal tiles.

    Parameters
    ----------
    line : Sequence[int]
        Four cell values, the slide target at index 0.

    Returns
    -------
    LineResult
        The final line, the score gained and the merge events in left-to-right order.

    Raises
    ------
    InvalidBoardShape
        If the line is not 4 cells of zero or powers of two.

    Notes
    -----
    - The line is compacted, merged in a single left-to-right pass, then compacted again.
    - A tile produced by a merge never merges again in the same pass, so [2, 2, 2, 2]
      becomes [4, 4, 0, 0] and never [8, 0, 0, 0].
    - The input is never modified.
    """
    values = as_line(line)

    compacted = _compact(values)
    merges: list[MergeEvent] = []

    # ##: Merge each pair once, then step past it.
    i = 0
    while i < SIZE - 1:
        current = compacted[i]
        if current != 0 and current == compacted[i + 1]:
            merged = current * 2
            compacted[i], compacted[i + 1] = merged, 0
            merges.append(MergeEvent(first=current, second=current, merged=merged))
            i += 2
        else:
            i += 1

    return LineResult(
        final_line=tuple(_compact(compacted)),
        score_gained=sum(event.merged for event in merges),
        merges=tuple(merges),
    )


def move(board, direction) -> MoveResult:
    """
    Slide every tile of the board in one direction.

    Parameters
    ----------
    board : array-like
        Sixteen cell values, row-major.
    direction : Direction or str
        One of left, up, right, down.

    Returns
    -------
    MoveResult
        The resolved board, the score gained, the merge events and whether any cell changed.

    Raises
    ------
    InvalidBoardShape
        If the board is malformed.
    InvalidDirection
        If the direction is unknown.

    Notes
    -----
    - No tile is spawned here; see ``spawn``.
    - Merge events are listed row by row of the normalized board, row 0 first.
    """
    cells = as_board(board)
    direction = as_direction(direction)

    lines = [resolve_line(row) for row in normalize(cells, direction)]
    final_board = denormalize(array([line.final_line for line in lines], dtype=int64), direction)

    return MoveResult(
        final_board=final_board,
        score_gained=sum(line.score_gained for line in lines),
        merges=tuple(chain.from_iterable(line.merges for line in lines)),
        moved=not array_equal(final_board, cells),
    )


def spawn(board, rng: Generator | None = None) -> SpawnResult:
    """
    Place a new tile (2 or 4) on a random empty cell.

    Parameters
    ----------
    board : array-like
        Sixteen cell values, row-major.
    rng : Generator, optional
        Random source; the module-level generator is used when omitted.

    Returns
    -------
    SpawnResult
        A new board with the placed tile, its value and its index.

    Notes
    -----
    - Every empty cell is equally likely; the value is 2 with probability 0.9, else 4.
    - On a full board the board is returned unchanged with ``new_value=0`` and
      ``new_index=None``.
    """
    cells = as_board(board)
    rng = _GENERATOR if rng is None else rng

    empty_cells = flatnonzero(cells == 0)
    if len(empty_cells) == 0:
        return SpawnResult(board=cells, new_value=0, new_index=None)

    index = int(rng.choice(empty_cells))
    value = int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))

    updated = cells.copy()
    updated[index] = value
    return SpawnResult(board=freeze(updated), new_value=value, new_index=index)


def is_terminal(board) -> bool:
    """
    Check if no move can ever change the board again.

    Parameters
    ----------
    board : array-like
        Sixteen cell values, row-major.

    Returns
    -------
    bool
        True if every cell holds a tile and no two horizontal or vertical neighbours are equal.
    """
    state = as_board(board).reshape(SIZE, SIZE)
    return bool(
        np_all(state != 0) and not np_any(state[:-1] == state[1:]) and not np_any(state[:, :-1] == state[:, 1:])
    )


def new_game(rng: Generator | None = None, start_tiles: int = 2) -> tuple[ndarray, int]:
    """
    Create the board of a new game and its starting score.

    Parameters
    ----------
    rng : Generator, optional
        Random source for the starting tiles.
    start_tiles : int, optional
        Number of tiles spawned on the empty board (default is 2).

    Returns
    -------
    tuple[ndarray, int]
        The starting board and a score of 0.
    """
    board = zeros(CELLS, dtype=int64)
    for _ in range(start_tiles):
        board = spawn(board, rng=rng).board
    return freeze(board), 0


def apply_move(
    board, score: int, direction, rng: Generator | None = None
) -> tuple[ndarray, int, MoveResult, SpawnResult | None]:
    """
    Play one turn: move, then spawn a tile if the move changed the board.

    Parameters
    ----------
    board : array-like
        Sixteen cell values, row-major.
    score : int
        Score before the move.
    direction : Direction or str
        One of left, up, right, down.
    rng : Generator, optional
        Random source for the spawned tile.

    Returns
    -------
    tuple
        - The board after the turn (ndarray)
        - The score after the turn (int)
        - The move result (MoveResult)
        - The spawn result, or None if the move changed nothing (SpawnResult | None)

    Notes
    -----
    A move that changes nothing leaves board and score untouched and spawns nothing.
    """
    result = move(board, direction)
    if not result.moved:
        return result.final_board, score, result, None

    spawned = spawn(result.final_board, rng=rng)
    return spawned.board, score + result.score_gained, result, spawned


def check_over(board) -> bool:
    """Check if the game played on this board is over."""
    return is_terminal(board)

# -*- coding: utf-8 -*-
"""
Rules engine of the 4x4 sliding-tile merge puzzle.

It includes the orientation normalizer, the line and board resolvers, the tile spawner and the
terminal detector, plus the turn-level helpers built on them.
"""

from .errors import GameOverError, InvalidBoardShape, InvalidDirection, TileMergeError
from .gameboard import (
    TILE_SPAWN_PROBS,
    apply_move,
    check_over,
    is_terminal,
    move,
    new_game,
    resolve_line,
    spawn,
)
from .orientation import denormalize, normalize, rotate
from .types import Direction, GameState, LineResult, MergeEvent, MoveResult, SpawnResult
from .validation import as_board, as_direction

__all__ = [
    "TILE_SPAWN_PROBS",
    "Direction",
    "GameState",
    "LineResult",
    "MergeEvent",
    "MoveResult",
    "SpawnResult",
    "TileMergeError",
    "InvalidDirection",
    "InvalidBoardShape",
    "GameOverError",
    "as_board",
    "as_direction",
    "rotate",
    "normalize",
    "denormalize",
    "resolve_line",
    "move",
    "spawn",
    "is_terminal",
    "new_game",
    "apply_move",
    "check_over",
]

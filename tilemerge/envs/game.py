"""Stateful game session built on the rules engine."""

import logging
import threading
from typing import NamedTuple

from numpy import ndarray
from numpy.random import default_rng

from tilemerge.config import GameConfig
from tilemerge.core.errors import GameOverError
from tilemerge.core.gameboard import apply_move, is_terminal, new_game
from tilemerge.core.types import CELLS, SIZE, GameState, MoveResult, SpawnResult
from tilemerge.core.validation import as_direction

logger = logging.getLogger(__name__)


class MoveOutcome(NamedTuple):
    """
    Everything a caller needs to redraw the board and phrase a turn.
    """

    move: MoveResult
    spawn: SpawnResult | None
    score: int
    is_over: bool


class Game:
    """
    A single game of the sliding-tile merge puzzle.

    This class holds the board, the score and the lifecycle state, and runs each turn
    (move, spawn, terminal check) as one uninterrupted unit.
    """

    # ##: Current game state.
    _board: ndarray | None = None
    _score: int = 0
    _state: GameState = GameState.ACTIVE

    def __init__(self, config: GameConfig | None = None):
        """
        Initialize the session and start a new game.

        Parameters
        ----------
        config : GameConfig, optional
            Session configuration (default is ``GameConfig()``).
        """
        self.config = config or GameConfig()
        self._lock = threading.Lock()
        self._rng = default_rng(self.config.seed)

        self.reset()

    @property
    def board(self) -> ndarray:
        """The current board, flat and read-only."""
        return self._board

    @property
    def score(self) -> int:
        """The cumulative score of the current game."""
        return self._score

    @property
    def state(self) -> GameState:
        """Whether the game is still active or over."""
        return self._state

    @property
    def is_finished(self) -> bool:
        """True once no move can change the board any more."""
        return self._state is GameState.OVER

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: fresh board with the starting tiles, score 0, state active.

        Parameters
        ----------
        seed : int, optional
            Reseed the session generator before spawning the starting tiles.

        Returns
        -------
        ndarray
            The new board.
        """
        with self._lock:
            if seed is not None:
                self._rng = default_rng(seed)
            self._board, self._score = new_game(rng=self._rng, start_tiles=self.config.start_tiles)
            self._state = GameState.ACTIVE
            logger.info('New game started: %s', self._board.tolist())
            return self._board

    def play(self, direction) -> MoveOutcome:
        """
        Apply one move to the board.

        Parameters
        ----------
        direction : Direction or str
            One of left, up, right, down.

        Returns
        -------
        MoveOutcome
            The move result, the spawned tile (None if nothing moved), the new score and
            whether the game is now over.

        Raises
        ------
        GameOverError
            If the game is already over.
        InvalidDirection
            If the direction is unknown.
        """
        direction = as_direction(direction)
        with self._lock:
            if self._state is GameState.OVER:
                logger.warning('Move %s requested after game over', direction.value)
                raise GameOverError('The game is over; start a new game to keep playing')

            board, score, result, spawned = apply_move(self._board, self._score, direction, rng=self._rng)
            if not result.moved:
                logger.debug('Move %s blocked', direction.value)
                return MoveOutcome(move=result, spawn=None, score=self._score, is_over=False)

            self._board, self._score = board, score
            logger.debug(
                'Move %s: +%d points, %d merges, new tile %d at %s',
                direction.value,
                result.score_gained,
                len(result.merges),
                spawned.new_value,
                spawned.new_index,
            )

            if is_terminal(self._board):
                self._state = GameState.OVER
                logger.info('Game over with score %d', self._score)

            return MoveOutcome(move=result, spawn=spawned, score=self._score, is_over=self.is_finished)

    def inspect(self, index: int) -> int:
        """
        Get the value of one cell.

        Parameters
        ----------
        index : int
            Cell index, row * 4 + column.

        Raises
        ------
        IndexError
            If the index is outside [0, 15].
        """
        if not 0 <= index < CELLS:
            raise IndexError(f'Cell index must be in [0, {CELLS - 1}], got {index}')
        return int(self._board[index])

    def render(self) -> None:
        """
        Render the game board. This method prints the current board and score to the console.
        """
        for row in self._board.reshape(SIZE, SIZE).tolist():
            print(' \t'.join(map(str, row)))
        print(f'score={self._score}')

# -*- coding: utf-8 -*-
"""
Play the sliding-tile merge puzzle.

Arrow keys move the tiles, the keyboard grid 1234/qwer/asdf/zxcv reads one cell, backspace starts
a new game and escape toggles the game controls.
"""
from typing import Any

from tilemerge.announce import (
    CELL_KEYS,
    GAME_OVER_MESSAGE,
    START_MESSAGE,
    Announcer,
    describe_cell,
    describe_move,
)
from tilemerge.config import GameConfig, configure_logging
from tilemerge.core import Direction
from tilemerge.envs import Game
from tilemerge.utils import WindowBoard

# ##: Matplotlib key names of the four moves.
MOVE_KEYS = {direction.value: direction for direction in Direction}


def redraw(window: WindowBoard, game: Game, message: str):
    """
    Redraw the board and the status line.

    Parameters
    ----------
    window: WindowBoard
        Class to draw the game board

    game: Game
        The game session

    message: str
        Status text to show
    """
    print(message)
    window.show_image(game.board)
    window.show_status(game.score, message)


def reset(game: Game, window: WindowBoard, announcer: Announcer):
    """
    Start a new game and redraw the board.
    """
    game.reset()
    redraw(window, game, announcer.announce(START_MESSAGE))


def step(game: Game, window: WindowBoard, announcer: Announcer, direction: Direction):
    """
    Play one move and announce it.

    Parameters
    ----------
    game: Game
        The game session

    window: WindowBoard
        Class to draw the game board

    announcer: Announcer
        Source of the status text

    direction: Direction
        Direction to play
    """
    outcome = game.play(direction)
    message = GAME_OVER_MESSAGE if outcome.is_over else describe_move(direction, outcome)
    redraw(window, game, announcer.announce(message))


def key_handler(game: Game, window: WindowBoard, announcer: Announcer, event: Any):
    """
    Handle the keyboard.

    Parameters
    ----------
    game: Game
        The game session

    window: WindowBoard
        Class to draw the game board

    announcer: Announcer
        Source of the status text

    event: Any
        event to handle
    """
    if event.key == "escape":
        redraw(window, game, announcer.toggle_active())
        return None

    if not announcer.active:
        return None

    if event.key == "backspace":
        reset(game, window, announcer)
        return None

    if game.is_finished:
        return None

    if event.key.lower() in CELL_KEYS:
        redraw(window, game, announcer.announce(describe_cell(game.inspect(CELL_KEYS[event.key.lower()]))))
        return None

    if event.key in MOVE_KEYS:
        step(game, window, announcer, MOVE_KEYS[event.key])
        return None


if __name__ == "__main__":
    config = GameConfig(log_level="INFO")
    configure_logging(config)

    session = Game(config)
    speaker = Announcer()

    window_board = WindowBoard(title="2048", size=4)
    window_board.register_key_handler(lambda event: key_handler(session, window_board, speaker, event))

    reset(session, window_board, speaker)

    # Blocking event loop
    window_board.show(block=True)

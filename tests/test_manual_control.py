"""
Tests for the keyboard handling of the manual play window.
"""

from types import SimpleNamespace
from unittest import TestCase, main
from unittest.mock import MagicMock

import numpy as np

from manuals_control import key_handler
from tilemerge.announce import CONTROLS_DISABLED_MESSAGE, GAME_OVER_MESSAGE, START_MESSAGE, Announcer
from tilemerge.config import GameConfig
from tilemerge.envs import Game


def press(key):
    """Build a fake key event."""
    return SimpleNamespace(key=key)


class TestKeyHandler(TestCase):
    """Test the mapping from keys to game actions."""

    def setUp(self):
        self.game = Game(GameConfig(seed=0))
        self.window = MagicMock()
        self.announcer = Announcer()

    def last_message(self):
        return self.window.show_status.call_args.args[1].strip()

    def test_arrow_moves(self):
        """Arrow keys play a move and redraw."""
        self.game._board = np.array([2, 2] + [0] * 14)
        key_handler(self.game, self.window, self.announcer, press('left'))

        self.assertEqual(self.game.score, 4)
        self.assertTrue(self.last_message().startswith('Left. 2 and 2 merged into 4. 4 points. New'))
        self.window.show_image.assert_called_once()

    def test_inspection_key(self):
        """Grid keys announce one cell."""
        self.game._board = np.array([0] * 4 + [16] + [0] * 11)
        key_handler(self.game, self.window, self.announcer, press('q'))
        self.assertEqual(self.last_message(), '16')

        key_handler(self.game, self.window, self.announcer, press('1'))
        self.assertEqual(self.last_message(), 'Empty')

    def test_inspection_key_ignores_case(self):
        """Grid keys pressed with shift or caps lock still announce the cell."""
        self.game._board = np.array([0] * 5 + [32] + [0] * 10)
        key_handler(self.game, self.window, self.announcer, press('W'))
        self.assertEqual(self.last_message(), '32')

    def test_escape_disables_controls(self):
        """With controls disabled, moves are ignored until escape is pressed again."""
        self.game._board = np.array([2, 2] + [0] * 14)

        key_handler(self.game, self.window, self.announcer, press('escape'))
        self.assertEqual(self.last_message(), CONTROLS_DISABLED_MESSAGE)

        key_handler(self.game, self.window, self.announcer, press('left'))
        self.assertEqual(self.game.score, 0)

        key_handler(self.game, self.window, self.announcer, press('escape'))
        key_handler(self.game, self.window, self.announcer, press('left'))
        self.assertEqual(self.game.score, 4)

    def test_game_over(self):
        """The move ending the game announces it; later moves are ignored."""
        self.game._board = np.array([2, 4, 2, 4, 4, 2, 4, 2, 2, 4, 2, 64, 0, 8, 16, 32])

        key_handler(self.game, self.window, self.announcer, press('left'))
        self.assertEqual(self.last_message(), GAME_OVER_MESSAGE)

        calls = self.window.show_status.call_count
        key_handler(self.game, self.window, self.announcer, press('up'))
        self.assertEqual(self.window.show_status.call_count, calls)

    def test_backspace_restarts(self):
        """Backspace starts a new game."""
        self.game._board = np.array([2, 2] + [0] * 14)
        key_handler(self.game, self.window, self.announcer, press('left'))
        key_handler(self.game, self.window, self.announcer, press('backspace'))

        self.assertEqual(self.game.score, 0)
        self.assertEqual(self.last_message(), START_MESSAGE)

    def test_unknown_key(self):
        """Unmapped keys do nothing."""
        key_handler(self.game, self.window, self.announcer, press('p'))
        self.window.show_status.assert_not_called()


if __name__ == '__main__':
    main()

from unittest import TestCase, main

import numpy as np

from tilemerge.announce import (
    CELL_KEYS,
    CONTROLS_DISABLED_MESSAGE,
    CONTROLS_ENABLED_MESSAGE,
    INDEX_KEYS,
    Announcer,
    describe_cell,
    describe_move,
)
from tilemerge.core.types import Direction, MergeEvent, MoveResult, SpawnResult
from tilemerge.envs import MoveOutcome

EMPTY = np.zeros(16, dtype=np.int64)


class TestKeys(TestCase):
    def test_keyboard_grid(self):
        """
        Each keyboard row maps to one board row.
        """
        self.assertEqual(len(CELL_KEYS), 16)
        self.assertEqual(CELL_KEYS['1'], 0)
        self.assertEqual(CELL_KEYS['r'], 7)
        self.assertEqual(CELL_KEYS['a'], 8)
        self.assertEqual(CELL_KEYS['v'], 15)
        self.assertEqual(INDEX_KEYS[12], 'z')


class TestDescribe(TestCase):
    def test_describe_cell(self):
        self.assertEqual(describe_cell(0), 'Empty')
        self.assertEqual(describe_cell(128), '128')

    def test_describe_merge(self):
        """
        Merges, points and the new tile are listed in order.
        """
        outcome = MoveOutcome(
            move=MoveResult(EMPTY, 12, (MergeEvent(2, 2, 4), MergeEvent(4, 4, 8)), True),
            spawn=SpawnResult(EMPTY, 2, 11),
            score=12,
            is_over=False,
        )
        self.assertEqual(
            describe_move(Direction.LEFT, outcome),
            'Left. 2 and 2 merged into 4. 4 and 4 merged into 8. 12 points. New 2 at f',
        )

    def test_describe_slide(self):
        """
        A slide without merge only reports the new tile.
        """
        outcome = MoveOutcome(
            move=MoveResult(EMPTY, 0, (), True),
            spawn=SpawnResult(EMPTY, 4, 0),
            score=0,
            is_over=False,
        )
        self.assertEqual(describe_move(Direction.UP, outcome), 'Up. New 4 at 1')

    def test_describe_blocked(self):
        outcome = MoveOutcome(move=MoveResult(EMPTY, 0, (), False), spawn=None, score=0, is_over=False)
        self.assertEqual(describe_move(Direction.DOWN, outcome), 'Down. Cannot move')


class TestAnnouncer(TestCase):
    def test_repeated_text_alternates(self):
        """
        Repeating the same text alternates a trailing non-breaking space.
        """
        announcer = Announcer()
        first = announcer.announce('Left. Cannot move')
        second = announcer.announce('Left. Cannot move')
        third = announcer.announce('Left. Cannot move')

        self.assertEqual(first, 'Left. Cannot move')
        self.assertEqual(second, 'Left. Cannot move\u00a0')
        self.assertEqual(third, first)
        self.assertEqual(announcer.message, third)

    def test_toggle_active(self):
        announcer = Announcer()

        self.assertEqual(announcer.toggle_active().strip(), CONTROLS_DISABLED_MESSAGE)
        self.assertFalse(announcer.active)
        self.assertEqual(announcer.toggle_active().strip(), CONTROLS_ENABLED_MESSAGE)
        self.assertTrue(announcer.active)


if __name__ == '__main__':
    main()

"""
Status text for assistive announcements.

This module turns the structured results of the rules engine into short English messages,
meant for a polite live region read by a screen reader. The engine itself never builds text.
"""

from tilemerge.core.types import Direction
from tilemerge.envs.game import MoveOutcome

# ##: Keyboard grid used to inspect cells, one keyboard row per board row.
CELL_KEYS: dict[str, int] = {key: index for index, key in enumerate('1234qwerasdfzxcv')}
INDEX_KEYS: dict[int, str] = {index: key for key, index in CELL_KEYS.items()}

# ##: Spoken name of each direction.
DIRECTION_LABELS: dict[Direction, str] = {
    Direction.UP: 'Up',
    Direction.DOWN: 'Down',
    Direction.LEFT: 'Left',
    Direction.RIGHT: 'Right',
}

START_MESSAGE = 'Game started. See the instructions below.'
GAME_OVER_MESSAGE = 'Game over! Start a new game to keep playing.'
CONTROLS_ENABLED_MESSAGE = 'Game controls enabled.'
CONTROLS_DISABLED_MESSAGE = 'Game controls disabled. Arrow keys now navigate the page.'

# ##>: Appended on every other announcement so repeated text is still read again.
_NBSP = '\u00a0'


def describe_cell(value: int) -> str:
    """Spoken form of one cell value."""
    return 'Empty' if value == 0 else str(value)


def describe_move(direction: Direction, outcome: MoveOutcome) -> str:
    """
    Describe one turn.

    Parameters
    ----------
    direction : Direction
        The direction that was played.
    outcome : MoveOutcome
        The result returned by ``Game.play``.

    Returns
    -------
    str
        For example ``"Left. 2 and 2 merged into 4. 4 points. New 2 at 1"``, or
        ``"Left. Cannot move"`` when nothing changed.
    """
    label = DIRECTION_LABELS[direction]
    if not outcome.move.moved:
        return f'{label}. Cannot move'

    parts = [label]
    parts.extend(f'{event.first} and {event.second} merged into {event.merged}' for event in outcome.move.merges)
    if outcome.move.score_gained > 0:
        parts.append(f'{outcome.move.score_gained} points')
    if outcome.spawn is not None and outcome.spawn.new_value > 0:
        parts.append(f'New {outcome.spawn.new_value} at {INDEX_KEYS[outcome.spawn.new_index]}')
    return '. '.join(parts)


class Announcer:
    """
    Source of the text for a live region.

    A screen reader skips an update whose text equals the previous one, so every other
    message carries a trailing non-breaking space.
    """

    def __init__(self):
        self.message = ''
        self.active = True
        self._alternate = False

    def announce(self, text: str) -> str:
        """Store and return the text to announce."""
        self.message = f'{text}{_NBSP}' if self._alternate else text
        self._alternate = not self._alternate
        return self.message

    def toggle_active(self) -> str:
        """Enable or disable game controls and announce the change."""
        self.active = not self.active
        return self.announce(CONTROLS_ENABLED_MESSAGE if self.active else CONTROLS_DISABLED_MESSAGE)

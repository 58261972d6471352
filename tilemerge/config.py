"""
Configuration of a game session.
"""

import logging
from dataclasses import dataclass

from tilemerge.core.types import CELLS


@dataclass
class GameConfig:
    """
    Configuration for a game session.

    Attributes
    ----------
    seed : int | None
        Seed of the session random generator; None draws fresh entropy.
    start_tiles : int
        Tiles spawned on the empty board of a new game.
    log_level : str
        Level applied by ``configure_logging``.
    """

    seed: int | None = None
    start_tiles: int = 2
    log_level: str = 'WARNING'

    def __post_init__(self):
        if not 0 <= self.start_tiles <= CELLS:
            raise ValueError(f'start_tiles must be in [0, {CELLS}], got {self.start_tiles}')


def configure_logging(config: GameConfig) -> None:
    """Set up root logging for scripts at the configured level."""
    logging.basicConfig(
        level=config.log_level.upper(),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

# -*- coding: utf-8 -*-
"""
Rules engine and game session for the 4x4 sliding-tile merge puzzle (the "2048" family).
"""

from .config import GameConfig
from .envs import Game, MoveOutcome

__all__ = ["Game", "GameConfig", "MoveOutcome"]

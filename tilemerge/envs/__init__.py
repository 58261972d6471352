# -*- coding: utf-8 -*-
"""
Stateful game session.

This module provides the `Game` class, which holds the board, score and lifecycle state of one game.
"""

from .game import Game, MoveOutcome

__all__ = ["Game", "MoveOutcome"]

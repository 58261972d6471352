# -*- coding: utf-8 -*-
"""
Display utilities for the sliding-tile merge puzzle.

It includes the `WindowBoard` class, a Matplotlib window drawing the board and the status line.
"""

from .windows import WindowBoard

__all__ = ["WindowBoard"]

# -*- coding: utf-8 -*-
"""
Game sessions for the sliding-tile puzzle.

This module provides the `GameSession` class and its `TwentyFortyEight` and `EntropyGrid` presets.
"""

from .session import EntropyGrid, GameSession, TwentyFortyEight

__all__ = ["GameSession", "TwentyFortyEight", "EntropyGrid"]

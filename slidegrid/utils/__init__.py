# -*- coding: utf-8 -*-
"""
Input helpers translating keyboard and touch input into slide directions.
"""

from .controls import KEY_DIRECTIONS, classify_swipe, direction_from_key

__all__ = ["KEY_DIRECTIONS", "classify_swipe", "direction_from_key"]

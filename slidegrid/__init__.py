"""Sliding-tile merge puzzle (2048 and Entropy Grid): move engine and game sessions."""

from .config import GameConfiguration
from .core import CLASSIC, ENTROPY, Direction, MergeRule, MoveResult, apply_move, is_done, spawn_tile
from .envs import EntropyGrid, GameSession, TwentyFortyEight

__version__ = "0.1.0"

__all__ = [
    "GameConfiguration",
    "Direction",
    "MergeRule",
    "MoveResult",
    "CLASSIC",
    "ENTROPY",
    "apply_move",
    "spawn_tile",
    "is_done",
    "GameSession",
    "TwentyFortyEight",
    "EntropyGrid",
]

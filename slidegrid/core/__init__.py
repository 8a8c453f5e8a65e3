# -*- coding: utf-8 -*-
"""
Core of the sliding-tile puzzle.

It provides the tile model and identity allocator, the direction table, pluggable merge rules, the move
engine, the random tile spawner, the game-over detector and legal move queries.
"""

from .directions import Direction, from_lines, reverse_rows, to_lines, transpose
from .gameboard import (
    MoveResult,
    apply_move,
    apply_move_values,
    compress,
    fill_cells,
    is_done,
    merge_column,
    merge_tiles,
    slide_and_merge,
    spawn_tile,
)
from .gamemove import can_move, illegal_actions, legal_actions, legal_actions_mask
from .rules import CLASSIC, ENTROPY, MergeRule, get_rule
from .tiles import Tile, TileIdAllocator, empty_cells, empty_grid, grid_from_values, ids_of, tiles_of, values_of

__all__ = [
    "Direction",
    "transpose",
    "reverse_rows",
    "to_lines",
    "from_lines",
    "MoveResult",
    "apply_move",
    "apply_move_values",
    "compress",
    "merge_column",
    "merge_tiles",
    "slide_and_merge",
    "spawn_tile",
    "fill_cells",
    "is_done",
    "legal_actions",
    "illegal_actions",
    "legal_actions_mask",
    "can_move",
    "MergeRule",
    "CLASSIC",
    "ENTROPY",
    "get_rule",
    "Tile",
    "TileIdAllocator",
    "empty_grid",
    "empty_cells",
    "grid_from_values",
    "values_of",
    "ids_of",
    "tiles_of",
]

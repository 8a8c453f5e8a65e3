"""
Slide directions and the orientation table used to turn every move into a left slide.
"""

from enum import IntEnum
from typing import Callable, NamedTuple

from numpy import ndarray


class Direction(IntEnum):
    """Slide directions, numbered like the action space of the environment."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3


def transpose(grid: ndarray) -> ndarray:
    """Swap rows and columns. Applying it twice returns the original grid."""
    return grid.T.copy()


def reverse_rows(grid: ndarray) -> ndarray:
    """Reverse the order of cells in every row. Applying it twice returns the original grid."""
    return grid[:, ::-1].copy()


class Orientation(NamedTuple):
    """
    Pair of functions mapping a grid to its line view and back.

    In the line view each row is one line, with index 0 at the edge the direction pushes toward.
    """

    forward: Callable[[ndarray], ndarray]
    inverse: Callable[[ndarray], ndarray]


def _identity(grid: ndarray) -> ndarray:
    return grid.copy()


# ##: Lines for up/down are columns, right/down traverse from the far edge.
ORIENTATIONS: dict[Direction, Orientation] = {
    Direction.LEFT: Orientation(forward=_identity, inverse=_identity),
    Direction.UP: Orientation(forward=transpose, inverse=transpose),
    Direction.RIGHT: Orientation(forward=reverse_rows, inverse=reverse_rows),
    Direction.DOWN: Orientation(
        forward=lambda grid: reverse_rows(transpose(grid)),
        inverse=lambda grid: transpose(reverse_rows(grid)),
    ),
}


def to_lines(grid: ndarray, direction: Direction) -> ndarray:
    """
    Orient a grid so that the move in ``direction`` becomes a left slide of each row.

    Parameters
    ----------
    grid : ndarray
        Tile grid or value board.
    direction : Direction
        Direction of travel.

    Returns
    -------
    ndarray
        A new array holding the lines of the move as rows.
    """
    return ORIENTATIONS[Direction(direction)].forward(grid)


def from_lines(lines: ndarray, direction: Direction) -> ndarray:
    """Undo ``to_lines``: map a line view back to grid coordinates."""
    return ORIENTATIONS[Direction(direction)].inverse(lines)

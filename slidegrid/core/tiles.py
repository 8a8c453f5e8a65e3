"""
Tile records, identity allocation and grid views for the sliding-tile puzzle.

The canonical board is an ``N x N`` numpy object array holding ``Tile`` or ``None``.
Value boards (integers, ``0`` for empty) and flat tile lists are derived from it on demand.
"""

from dataclasses import dataclass
from itertools import count
from typing import Iterator

from numpy import full, int64, ndarray, zeros


@dataclass(frozen=True)
class Tile:
    """
    A numbered tile with a stable identity.

    Attributes
    ----------
    id : int
        Identity assigned at spawn time, preserved across moves and merges.
    value : int
        Positive tile value.
    row : int
        Row of the cell holding the tile.
    col : int
        Column of the cell holding the tile.
    """

    id: int
    value: int
    row: int
    col: int


class TileIdAllocator:
    """Issue monotonically increasing tile identities, starting at 1."""

    def __init__(self, start: int = 1):
        self._start = start
        self._counter: Iterator[int] = count(start)
        self._last = start - 1

    def __call__(self) -> int:
        self._last = next(self._counter)
        return self._last

    @property
    def last(self) -> int:
        """Last identity handed out (``start - 1`` if none yet)."""
        return self._last

    def reset(self) -> None:
        """Restart numbering from the initial value."""
        self._counter = count(self._start)
        self._last = self._start - 1


def empty_grid(size: int) -> ndarray:
    """
    Create an empty tile grid.

    Parameters
    ----------
    size : int
        Side length of the square grid.

    Returns
    -------
    ndarray
        An object array of shape ``(size, size)`` filled with ``None``.
    """
    return full((size, size), None, dtype=object)


def grid_from_values(board, allocator: TileIdAllocator) -> ndarray:
    """
    Build a tile grid from a value board.

    Parameters
    ----------
    board : array_like
        Square board of integers, ``0`` meaning empty.
    allocator : TileIdAllocator
        Source of identities, consumed in row-major order.

    Returns
    -------
    ndarray
        Tile grid with one fresh tile per non-zero value.
    """
    rows = [list(row) for row in board]
    grid = empty_grid(len(rows))
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if value:
                grid[i, j] = Tile(id=allocator(), value=int(value), row=i, col=j)
    return grid


def values_of(grid: ndarray) -> ndarray:
    """
    Derive the value board of a tile grid.

    Parameters
    ----------
    grid : ndarray
        Tile grid. An integer board is returned as a copy.

    Returns
    -------
    ndarray
        Integer board with ``0`` for empty cells.
    """
    if grid.dtype != object:
        return grid.astype(int64, copy=True)

    board = zeros(grid.shape, dtype=int64)
    for (i, j), tile in _occupied(grid):
        board[i, j] = tile.value
    return board


def ids_of(grid: ndarray) -> ndarray:
    """Derive the identity board of a tile grid (``0`` for empty cells)."""
    board = zeros(grid.shape, dtype=int64)
    for (i, j), tile in _occupied(grid):
        board[i, j] = tile.id
    return board


def tiles_of(grid: ndarray) -> list[Tile]:
    """List the tiles of a grid in row-major order."""
    return [tile for _, tile in _occupied(grid)]


def empty_cells(grid: ndarray) -> list[tuple[int, int]]:
    """List empty cell coordinates in row-major order, for tile or value grids."""
    size_rows, size_cols = grid.shape
    if grid.dtype == object:
        return [(i, j) for i in range(size_rows) for j in range(size_cols) if grid[i, j] is None]
    return [(i, j) for i in range(size_rows) for j in range(size_cols) if grid[i, j] == 0]


def _occupied(grid: ndarray) -> Iterator[tuple[tuple[int, int], Tile]]:
    size_rows, size_cols = grid.shape
    for i in range(size_rows):
        for j in range(size_cols):
            tile = grid[i, j]
            if tile is not None:
                yield (i, j), tile

"""
Tests for tile records, identity allocation, grid views and orientation helpers.
"""

from unittest import TestCase, main

import numpy as np

from slidegrid.core.directions import ORIENTATIONS, Direction, from_lines, reverse_rows, to_lines, transpose
from slidegrid.core.tiles import (
    Tile,
    TileIdAllocator,
    empty_cells,
    empty_grid,
    grid_from_values,
    ids_of,
    tiles_of,
    values_of,
)


class TestTileIdAllocator(TestCase):
    """Test identity allocation."""

    def test_monotonic(self):
        """Ids start at 1 and increase by one."""
        allocator = TileIdAllocator()
        self.assertEqual([allocator() for _ in range(3)], [1, 2, 3])
        self.assertEqual(allocator.last, 3)

    def test_reset(self):
        """Reset restarts numbering."""
        allocator = TileIdAllocator()
        allocator()
        allocator()
        allocator.reset()
        self.assertEqual(allocator.last, 0)
        self.assertEqual(allocator(), 1)

    def test_independent_allocators(self):
        """Allocators do not share state."""
        first, second = TileIdAllocator(), TileIdAllocator()
        first()
        first()
        self.assertEqual(second(), 1)


class TestGridViews(TestCase):
    """Test conversions between tile grids and value boards."""

    def setUp(self):
        self.board = np.array([[2, 0, 0], [0, 4, 0], [8, 0, 2]])
        self.grid = grid_from_values(self.board, TileIdAllocator())

    def test_grid_from_values(self):
        """Tiles get row-major ids and their own coordinates."""
        self.assertEqual(self.grid[1, 1], Tile(id=2, value=4, row=1, col=1))
        self.assertIsNone(self.grid[0, 1])

    def test_values_of(self):
        """The value view round-trips the original board."""
        np.testing.assert_array_equal(values_of(self.grid), self.board)
        np.testing.assert_array_equal(values_of(self.board), self.board)

    def test_ids_of(self):
        """Identity view holds 0 for empty cells."""
        np.testing.assert_array_equal(ids_of(self.grid), [[1, 0, 0], [0, 2, 0], [3, 0, 4]])

    def test_tiles_of(self):
        """Tiles are listed in row-major order."""
        self.assertEqual([tile.id for tile in tiles_of(self.grid)], [1, 2, 3, 4])

    def test_empty_cells(self):
        """Empty cells are found on tile grids and value boards alike."""
        expected = [(0, 1), (0, 2), (1, 0), (1, 2), (2, 1)]
        self.assertEqual(empty_cells(self.grid), expected)
        self.assertEqual(empty_cells(self.board), expected)
        self.assertEqual(len(empty_cells(empty_grid(4))), 16)


class TestOrientation(TestCase):
    """Test the orientation helpers and direction table."""

    def setUp(self):
        self.board = np.arange(16).reshape(4, 4)

    def test_transpose_twice(self):
        """Transposing twice returns the original grid."""
        np.testing.assert_array_equal(transpose(transpose(self.board)), self.board)

    def test_reverse_twice(self):
        """Reversing twice returns the original grid."""
        np.testing.assert_array_equal(reverse_rows(reverse_rows(self.board)), self.board)

    def test_round_trip(self):
        """Every orientation is undone by its inverse."""
        for direction in Direction:
            np.testing.assert_array_equal(from_lines(to_lines(self.board, direction), direction), self.board)

    def test_lines_start_at_edge(self):
        """Index 0 of every line lies on the edge the move pushes toward."""
        np.testing.assert_array_equal(to_lines(self.board, Direction.LEFT)[0], [0, 1, 2, 3])
        np.testing.assert_array_equal(to_lines(self.board, Direction.RIGHT)[0], [3, 2, 1, 0])
        np.testing.assert_array_equal(to_lines(self.board, Direction.UP)[0], [0, 4, 8, 12])
        np.testing.assert_array_equal(to_lines(self.board, Direction.DOWN)[0], [12, 8, 4, 0])

    def test_table_covers_all_directions(self):
        """Each direction has an orientation."""
        self.assertEqual(set(ORIENTATIONS), set(Direction))

    def test_copies(self):
        """Orientation returns a new array."""
        lines = to_lines(self.board, Direction.LEFT)
        lines[0, 0] = 99
        self.assertEqual(self.board[0, 0], 0)


if __name__ == '__main__':
    main()

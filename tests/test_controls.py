"""
Tests for input classification and the console play harness.
"""

from unittest import TestCase, main

import numpy as np

from manuals_control import key_handler
from slidegrid.core.directions import Direction
from slidegrid.core.tiles import grid_from_values
from slidegrid.envs import TwentyFortyEight
from slidegrid.utils.controls import classify_swipe, direction_from_key


def load(session, board) -> None:
    """Replace the session grid by the given values."""
    session._grid = grid_from_values(np.array(board), session._allocator)


class TestDirectionFromKey(TestCase):
    """Test key bindings."""

    def test_arrow_keys(self):
        self.assertEqual(direction_from_key('ArrowLeft'), Direction.LEFT)
        self.assertEqual(direction_from_key('ArrowUp'), Direction.UP)
        self.assertEqual(direction_from_key('ArrowRight'), Direction.RIGHT)
        self.assertEqual(direction_from_key('ArrowDown'), Direction.DOWN)

    def test_names_and_wasd(self):
        self.assertEqual(direction_from_key('down'), Direction.DOWN)
        self.assertEqual(direction_from_key('w'), Direction.UP)
        self.assertEqual(direction_from_key('d'), Direction.RIGHT)

    def test_unknown_key(self):
        """Unbound keys map to None."""
        self.assertIsNone(direction_from_key('Escape'))
        self.assertIsNone(direction_from_key(''))


class TestClassifySwipe(TestCase):
    """Test swipe classification."""

    def test_horizontal(self):
        self.assertEqual(classify_swipe(45.0, 10.0), Direction.RIGHT)
        self.assertEqual(classify_swipe(-45.0, -10.0), Direction.LEFT)

    def test_vertical(self):
        """Positive dy points down the screen."""
        self.assertEqual(classify_swipe(5.0, 60.0), Direction.DOWN)
        self.assertEqual(classify_swipe(5.0, -60.0), Direction.UP)

    def test_threshold(self):
        """Drags up to the threshold are not moves."""
        self.assertIsNone(classify_swipe(30.0, 0.0))
        self.assertIsNone(classify_swipe(-12.0, 25.0))
        self.assertEqual(classify_swipe(31.0, 0.0), Direction.RIGHT)
        self.assertIsNone(classify_swipe(50.0, 0.0, threshold=60.0))

    def test_tie_is_vertical(self):
        self.assertEqual(classify_swipe(40.0, 40.0), Direction.DOWN)


class TestKeyHandler(TestCase):
    """Test the console harness."""

    def setUp(self):
        self.env = TwentyFortyEight(size=4, seed=9)

    def test_quit(self):
        self.assertFalse(key_handler(self.env, 'q'))
        self.assertFalse(key_handler(self.env, 'escape'))

    def test_reset(self):
        """Reset key restarts the game."""
        self.env._score = 32
        self.assertTrue(key_handler(self.env, 'r'))
        self.assertEqual(self.env.score, 0)
        self.assertEqual(np.count_nonzero(self.env.board), 2)

    def test_move(self):
        """Direction keys are forwarded to the session."""
        load(self.env, [[0, 0, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertTrue(key_handler(self.env, 'left'))
        self.assertEqual(self.env.board[0, 0], 2)
        self.assertEqual(np.count_nonzero(self.env.board), 2)

    def test_unbound_key(self):
        """Unbound keys leave the board untouched."""
        before = self.env.board
        self.assertTrue(key_handler(self.env, 'unbound'))
        np.testing.assert_array_equal(self.env.board, before)


if __name__ == '__main__':
    main()

"""Game sessions: hold the grid, score and game-over flag and drive the move engine."""

import logging

from numpy import ndarray
from numpy.random import Generator, default_rng

from slidegrid.config import GameConfiguration, classic, entropy
from slidegrid.core.directions import Direction
from slidegrid.core.gameboard import apply_move, is_done, spawn_tile
from slidegrid.core.rules import MergeRule, get_rule
from slidegrid.core.tiles import Tile, TileIdAllocator, empty_grid, tiles_of, values_of
from slidegrid.utils.controls import classify_swipe, direction_from_key

logger = logging.getLogger(__name__)


class GameSession:
    """
    One play-through of the sliding-tile puzzle, from reset to game over.

    The session owns its random generator and its tile id allocator, so several sessions can live side by
    side without sharing state.
    """

    def __init__(self, config: GameConfiguration | None = None):
        """
        Initialize the session and deal the starting tiles.

        Parameters
        ----------
        config : GameConfiguration, optional
            Session settings (default is a classic 4x4 game).
        """
        self.config = config if config is not None else GameConfiguration()
        self.size = self.config.size
        self.rule: MergeRule = get_rule(self.config.rule)

        self._allocator = TileIdAllocator()
        self._rng: Generator = default_rng(self.config.seed)
        self._grid: ndarray = empty_grid(self.size)
        self._score = 0
        self._reward = 0
        self._moved = False
        self._merged_ids: list[int] = []
        self._finished = False
        self._pending_spawn = False

        self.reset()

    @property
    def grid(self) -> ndarray:
        """Copy of the tile grid."""
        return self._grid.copy()

    @property
    def board(self) -> ndarray:
        """Value view of the grid, ``0`` for empty cells."""
        return values_of(self._grid)

    @property
    def tiles(self) -> list[Tile]:
        """Tiles on the grid in row-major order."""
        return tiles_of(self._grid)

    @property
    def score(self) -> int:
        """Total of every merge since the last reset."""
        return self._score

    @property
    def reward(self) -> int:
        """Score delta of the last move."""
        return self._reward

    @property
    def moved(self) -> bool:
        """Whether the last move changed the grid."""
        return self._moved

    @property
    def merged_ids(self) -> list[int]:
        """Ids of the tiles that absorbed a neighbour during the last move."""
        return list(self._merged_ids)

    @property
    def pending_spawn(self) -> bool:
        """Whether a move is waiting for its spawn (``defer_spawn`` sessions only)."""
        return self._pending_spawn

    @property
    def spawn_delay_ms(self) -> int:
        """Delay (ms) the UI leaves between a deferred move and ``complete_move``, 0 when spawns are immediate."""
        return self.config.spawn_delay_ms if self.config.defer_spawn else 0

    @property
    def is_finished(self) -> bool:
        """Whether the game is over. Only evaluated once a move's spawn has completed."""
        return self._finished

    def reset(self, seed: int | None = None) -> ndarray:
        """
        Start a new game: empty grid, zero score, ids numbered from 1 again, then the starting tiles.

        Parameters
        ----------
        seed : int, optional
            Reseed the session's generator.

        Returns
        -------
        ndarray
            The new value board.
        """
        if seed is not None:
            self._rng = default_rng(seed)

        self._allocator.reset()
        self._grid = empty_grid(self.size)
        for _ in range(self.config.start_tiles):
            self._grid = spawn_tile(self._grid, self._rng, self._allocator, self.rule)

        self._score = 0
        self._reward = 0
        self._moved = False
        self._merged_ids = []
        self._pending_spawn = False
        self._finished = is_done(self._grid, self.rule)

        logger.info('New %dx%d game (%s rule)', self.size, self.size, self.rule.name)
        return self.board

    def step(self, direction: Direction | int) -> tuple[ndarray, int, bool]:
        """
        Apply a move to the grid.

        Parameters
        ----------
        direction : Direction or int
            The move direction (0: left, 1: up, 2: right, 3: down).

        Returns
        -------
        tuple[ndarray, int, bool]
            A tuple containing:
            - The value board after the move (and its spawn, unless deferred)
            - The score obtained from this move
            - Whether the game has finished

        Notes
        -----
        - A move that changes nothing scores 0 and spawns no tile.
        - Moves are ignored once the game is over or while a deferred spawn is pending.
        """
        direction = Direction(direction)
        if self._finished or self._pending_spawn:
            logger.debug('Ignoring %s: game over or spawn pending', direction.name)
            return self.board, 0, self._finished

        outcome = apply_move(self._grid, direction, self.rule)
        self._moved = outcome.moved
        self._reward = outcome.score
        self._merged_ids = outcome.merged
        if not outcome.moved:
            logger.debug('Move %s left the grid unchanged', direction.name)
            return self.board, 0, self._finished

        self._grid = outcome.grid
        self._score += outcome.score
        self._pending_spawn = True
        logger.debug('Move %s scored %d (%d merges)', direction.name, outcome.score, len(outcome.merged))

        if not self.config.defer_spawn:
            self.complete_move()
        return self.board, outcome.score, self._finished

    def complete_move(self) -> bool:
        """
        Spawn the tile following a move, then check for game over.

        Returns
        -------
        bool
            Whether the game is over. Without a pending spawn this is a no-op.
        """
        if not self._pending_spawn:
            return self._finished

        self._grid = spawn_tile(self._grid, self._rng, self._allocator, self.rule)
        self._pending_spawn = False
        self._finished = is_done(self._grid, self.rule)
        if self._finished:
            logger.info('Game over with score %d', self._score)
        return self._finished

    def handle_key(self, key: str) -> tuple[ndarray, int, bool] | None:
        """Step toward the direction bound to ``key``; unbound keys are ignored and return None."""
        direction = direction_from_key(key)
        if direction is None:
            logger.debug('Ignoring key %r', key)
            return None
        return self.step(direction)

    def handle_swipe(self, dx: float, dy: float) -> tuple[ndarray, int, bool] | None:
        """Step toward the direction of a swipe; swipes under the threshold return None."""
        direction = classify_swipe(dx, dy, self.config.swipe_threshold)
        if direction is None:
            logger.debug('Ignoring swipe (%.1f, %.1f)', dx, dy)
            return None
        return self.step(direction)

    def render(self) -> None:
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        for row in self.board.tolist():
            print(' \t'.join(map(str, row)))


class TwentyFortyEight(GameSession):
    """Classic 2048: equal tiles merge into their double, 2s and 4s spawn."""

    def __init__(self, size: int = 4, seed: int | None = None, defer_spawn: bool = False):
        super().__init__(classic(size=size, seed=seed, defer_spawn=defer_spawn))


class EntropyGrid(GameSession):
    """Entropy Grid: tiles summing to a multiple of 5 merge into their sum, 1s and 2s spawn."""

    def __init__(self, size: int = 5, seed: int | None = None, defer_spawn: bool = False):
        super().__init__(entropy(size=size, seed=seed, defer_spawn=defer_spawn))

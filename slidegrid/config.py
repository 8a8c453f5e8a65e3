"""
Configuration of a game session.
"""

from dataclasses import dataclass

from slidegrid.core.rules import MergeRule, get_rule

# ##>: Board sizes offered by the game.
SUPPORTED_SIZES = range(4, 9)

# ##>: Delay the UI leaves between a move and the spawn that follows it.
SPAWN_DELAY_MS = 200

# ##>: Minimum swipe distance (px) before a drag counts as a move.
SWIPE_THRESHOLD = 30.0


@dataclass
class GameConfiguration:
    """
    Settings fixed for the lifetime of a session.

    Attributes
    ----------
    size : int
        Side length of the board, one of ``SUPPORTED_SIZES``.
    rule : str or MergeRule
        Merge rule, by name (``'classic'`` or ``'entropy'``) or as an instance.
    start_tiles : int
        Number of tiles spawned on reset.
    defer_spawn : bool
        Leave the spawn after a move pending until ``complete_move`` is called.
    spawn_delay_ms : int
        Delay the UI should leave before calling ``complete_move`` on deferred sessions.
    swipe_threshold : float
        Minimum swipe distance, in pixels.
    seed : int, optional
        Seed of the session's random generator.
    """

    size: int = 4
    rule: str | MergeRule = 'classic'
    start_tiles: int = 2
    defer_spawn: bool = False
    spawn_delay_ms: int = SPAWN_DELAY_MS
    swipe_threshold: float = SWIPE_THRESHOLD
    seed: int | None = None

    def __post_init__(self):
        if self.size not in SUPPORTED_SIZES:
            raise ValueError(
                f'size must be between {SUPPORTED_SIZES.start} and {SUPPORTED_SIZES.stop - 1}, got {self.size}'
            )
        # ##: Unknown names raise KeyError.
        get_rule(self.rule)
        if not 0 <= self.start_tiles <= self.size * self.size:
            raise ValueError(f'start_tiles must be between 0 and {self.size * self.size}, got {self.start_tiles}')
        if self.swipe_threshold < 0:
            raise ValueError(f'swipe_threshold must be >= 0, got {self.swipe_threshold}')
        if self.spawn_delay_ms < 0:
            raise ValueError(f'spawn_delay_ms must be >= 0, got {self.spawn_delay_ms}')


def classic(size: int = 4, **kwargs) -> GameConfiguration:
    """Configuration of the classic 2048 game."""
    return GameConfiguration(size=size, rule='classic', **kwargs)


def entropy(size: int = 5, **kwargs) -> GameConfiguration:
    """Configuration of the Entropy Grid variant (5x5 by default)."""
    return GameConfiguration(size=size, rule='entropy', **kwargs)

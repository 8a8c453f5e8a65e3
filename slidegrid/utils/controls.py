"""
Map raw input (key names, swipe deltas) to slide directions.
"""

from slidegrid.config import SWIPE_THRESHOLD
from slidegrid.core.directions import Direction

# ##: Browser key names, plain names and WASD.
KEY_DIRECTIONS: dict[str, Direction] = {
    'ArrowLeft': Direction.LEFT,
    'ArrowUp': Direction.UP,
    'ArrowRight': Direction.RIGHT,
    'ArrowDown': Direction.DOWN,
    'left': Direction.LEFT,
    'up': Direction.UP,
    'right': Direction.RIGHT,
    'down': Direction.DOWN,
    'a': Direction.LEFT,
    'w': Direction.UP,
    'd': Direction.RIGHT,
    's': Direction.DOWN,
}


def direction_from_key(key: str) -> Direction | None:
    """
    Translate a key name into a direction.

    Parameters
    ----------
    key : str
        Key name, e.g. ``'ArrowLeft'``, ``'left'`` or ``'a'``.

    Returns
    -------
    Direction or None
        The direction, or None for keys that are not bound.
    """
    return KEY_DIRECTIONS.get(key)


def classify_swipe(dx: float, dy: float, threshold: float = SWIPE_THRESHOLD) -> Direction | None:
    """
    Reduce a drag to one of the four directions.

    Parameters
    ----------
    dx : float
        Horizontal displacement, positive to the right.
    dy : float
        Vertical displacement, positive downward (screen coordinates).
    threshold : float, optional
        Minimum displacement along the dominant axis (default is 30 px).

    Returns
    -------
    Direction or None
        The swipe direction, or None if the drag is shorter than the threshold.

    Notes
    -----
    Ties between both axes resolve to a vertical swipe.
    """
    abs_dx, abs_dy = abs(dx), abs(dy)
    if max(abs_dx, abs_dy) <= threshold:
        return None

    if abs_dx > abs_dy:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP

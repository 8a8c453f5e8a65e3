"""
Legal and illegal move queries, computed without resolving the move.
"""

from numpy import ndarray

from slidegrid.core.directions import Direction
from slidegrid.core.rules import CLASSIC, MergeRule
from slidegrid.core.tiles import values_of


def legal_actions_mask(state: ndarray, rule: MergeRule = CLASSIC) -> tuple[bool, bool, bool, bool]:
    """
    Get a boolean mask for all four directions in a single pass.

    Parameters
    ----------
    state : ndarray
        Tile grid or value board.
    rule : MergeRule, optional
        Merge rule deciding which neighbours can merge.

    Returns
    -------
    tuple[bool, bool, bool, bool]
        Mask for (left, up, right, down) where True means the move changes the grid.

    Notes
    -----
    A direction is legal if a tile can slide into an empty cell toward the edge, or if two occupied
    neighbours along that axis can merge.
    """
    board = values_of(state)

    # ##>: Compute horizontal adjacency once for left/right.
    left_cols, right_cols = board[:, :-1], board[:, 1:]
    h_can_merge = (left_cols != 0) & (right_cols != 0) & rule.can_merge(left_cols, right_cols)

    # ##>: Compute vertical adjacency once for up/down.
    top_rows, bottom_rows = board[:-1, :], board[1:, :]
    v_can_merge = (top_rows != 0) & (bottom_rows != 0) & rule.can_merge(top_rows, bottom_rows)

    # ##>: Check slide conditions per direction.
    left = (left_cols == 0) & (right_cols != 0)
    right = (right_cols == 0) & (left_cols != 0)
    up = (top_rows == 0) & (bottom_rows != 0)
    down = (bottom_rows == 0) & (top_rows != 0)

    return (
        bool(left.any() or h_can_merge.any()),
        bool(up.any() or v_can_merge.any()),
        bool(right.any() or h_can_merge.any()),
        bool(down.any() or v_can_merge.any()),
    )


def illegal_actions(state: ndarray, rule: MergeRule = CLASSIC) -> list[Direction]:
    """List the directions that would leave the grid unchanged."""
    mask = legal_actions_mask(state, rule)
    return [direction for direction in Direction if not mask[direction]]


def legal_actions(state: ndarray, rule: MergeRule = CLASSIC) -> list[Direction]:
    """List the directions that would change the grid."""
    mask = legal_actions_mask(state, rule)
    return [direction for direction in Direction if mask[direction]]


def can_move(state: ndarray, direction: Direction = Direction.LEFT, rule: MergeRule = CLASSIC) -> bool:
    """Check if a move toward ``direction`` would change the grid."""
    return legal_actions_mask(state, rule)[Direction(direction)]

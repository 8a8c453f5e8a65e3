"""
Core functionality of the sliding-tile puzzle: move resolution, tile spawning and game-over detection.

Every move is resolved the same way: orient the grid so the move becomes a left slide, then for each line
compress, merge in a single pass, compress again and pad. The merge rule is injected, so the classic
2048 rule and the Entropy Grid rule share one pipeline.
"""

from dataclasses import replace
from typing import Any, NamedTuple

from numpy import all as np_all
from numpy import any as np_any
from numpy import argwhere, array, array_equal, asarray, full, ndarray, ndenumerate, zeros, zeros_like
from numpy.random import PCG64DXSM, Generator, default_rng

from slidegrid.core.directions import Direction, from_lines, to_lines
from slidegrid.core.rules import CLASSIC, MergeRule
from slidegrid.core.tiles import Tile, TileIdAllocator, empty_cells, values_of

# ##>: Module-level generator, used when no generator is injected.
_GENERATOR = default_rng(PCG64DXSM())


class MoveResult(NamedTuple):
    """
    Outcome of a move.

    Attributes
    ----------
    grid : ndarray
        The grid after the move (same representation as the input).
    score : int
        Sum of the values produced by every merge.
    moved : bool
        Whether any cell changed.
    merged : list
        Ids of the tiles that absorbed a neighbour (tile grids), or ``(row, col)`` of merged cells
        (value boards).
    """

    grid: ndarray
    score: int
    moved: bool
    merged: list[Any]


def compress(line) -> Any:
    """
    Remove empty cells from a line while keeping the order of the others.

    Parameters
    ----------
    line : ndarray
        One line of a tile grid (``None`` for empty) or of a value board (``0`` for empty).

    Returns
    -------
    list[Tile] or ndarray
        The occupied cells, as a list of tiles or an integer array.
    """
    if isinstance(line, ndarray) and line.dtype != object:
        return line[line != 0]
    return [cell for cell in line if cell is not None]


def _merge_values(non_zero: ndarray, rule: MergeRule) -> tuple[int, list[int], list[int]]:
    # ##: Single pass, a merged pair is consumed so the new value can't merge again.
    result = []
    slots = []
    score = 0

    i = 0
    while i < len(non_zero) - 1:
        if rule.can_merge(non_zero[i], non_zero[i + 1]):
            merged = int(rule.combine(non_zero[i], non_zero[i + 1]))
            slots.append(len(result))
            result.append(merged)
            score += merged
            i += 2
        else:
            result.append(int(non_zero[i]))
            i += 1

    if i == len(non_zero) - 1:
        result.append(int(non_zero[-1]))

    return score, result, slots


def merge_column(column: ndarray, rule: MergeRule = CLASSIC) -> tuple[int, ndarray]:
    """
    Merge adjacent mergeable values in a column and compute the total score.

    Parameters
    ----------
    column : ndarray
        A 1D array representing one line of the board, already oriented toward index 0.
    rule : MergeRule, optional
        Merge rule to apply (default is the classic rule).

    Returns
    -------
    score : int
        The total value produced by merges.
    merged_column : ndarray
        The compressed column after merging (not padded).

    Notes
    -----
    - Zeros (empty cells) are ignored and removed before merging.
    - Merging occurs from the start of the column towards the end.
    - Each value can only be merged once per function call.

    Examples
    --------
    >>> merge_column(array([2, 2, 2, 2]))
    (8, array([4, 4]))
    """
    non_zero = compress(column)
    if len(non_zero) <= 1:
        return 0, non_zero

    score, result, _ = _merge_values(non_zero, rule)
    return score, array(result, dtype=column.dtype)


def merge_tiles(tiles: list[Tile], rule: MergeRule = CLASSIC) -> tuple[int, list[Tile], list[int]]:
    """
    Merge a compressed line of tiles in a single pass.

    Parameters
    ----------
    tiles : list[Tile]
        Occupied cells of one line, index 0 at the edge the move pushes toward.
    rule : MergeRule, optional
        Merge rule to apply.

    Returns
    -------
    score : int
        The total value produced by merges.
    merged_tiles : list[Tile]
        The line after merging. A merged tile keeps the id of the tile nearer the edge.
    merged_ids : list[int]
        Ids of the tiles that absorbed a neighbour.
    """
    result = []
    merged_ids = []
    score = 0

    i = 0
    while i < len(tiles):
        current = tiles[i]
        if i < len(tiles) - 1 and rule.can_merge(current.value, tiles[i + 1].value):
            value = int(rule.combine(current.value, tiles[i + 1].value))
            result.append(replace(current, value=value))
            merged_ids.append(current.id)
            score += value
            i += 2
        else:
            result.append(current)
            i += 1

    return score, result, merged_ids


def _line_ids(line) -> list[int | None]:
    return [None if cell is None else cell.id for cell in line]


def apply_move(grid: ndarray, direction: Direction, rule: MergeRule = CLASSIC) -> MoveResult:
    """
    Slide every tile of the grid toward ``direction`` and merge according to ``rule``.

    Parameters
    ----------
    grid : ndarray
        Tile grid (object array of ``Tile`` or ``None``). Integer boards are delegated to
        ``apply_move_values``.
    direction : Direction
        Direction of travel.
    rule : MergeRule, optional
        Merge rule to apply (default is the classic rule).

    Returns
    -------
    MoveResult
        New grid, score delta, whether anything moved and the ids of absorbing tiles.

    Notes
    -----
    - The input grid is not modified.
    - ``moved`` compares cell occupants by id, so a merge that leaves the same value in place still counts.
    - Surviving tiles get their ``row``/``col`` updated to their new cell.
    """
    if grid.dtype != object:
        return apply_move_values(grid, direction, rule)

    lines = to_lines(grid, direction)
    result = full(lines.shape, None, dtype=object)
    score = 0
    moved = False
    merged_ids = []

    for i, line in enumerate(lines):
        line_score, merged_line, line_merged = merge_tiles(compress(line), rule)
        for j, tile in enumerate(merged_line):
            result[i, j] = tile

        score += line_score
        merged_ids.extend(line_merged)
        moved = moved or _line_ids(line) != _line_ids(result[i])

    if not moved:
        return MoveResult(grid=grid.copy(), score=0, moved=False, merged=[])

    # ##: Back to grid coordinates, then keep row/col in sync with the cell.
    new_grid = from_lines(result, direction)
    for (i, j), tile in ndenumerate(new_grid):
        if tile is not None and (tile.row != i or tile.col != j):
            new_grid[i, j] = replace(tile, row=i, col=j)

    return MoveResult(grid=new_grid, score=score, moved=True, merged=merged_ids)


def apply_move_values(board, direction: Direction, rule: MergeRule = CLASSIC) -> MoveResult:
    """
    Slide a value board (integers, ``0`` for empty) toward ``direction``.

    Parameters
    ----------
    board : array_like
        Square integer board.
    direction : Direction
        Direction of travel.
    rule : MergeRule, optional
        Merge rule to apply.

    Returns
    -------
    MoveResult
        New board, score delta, whether anything moved and the ``(row, col)`` of every merged cell.

    Notes
    -----
    Without tile identities, ``moved`` compares each line before and after compress-merge-compress. A slide
    that only closes a gap shifts at least one value, so it reports a move.
    """
    board = asarray(board)
    lines = to_lines(board, direction)
    result = zeros_like(lines)
    merged_mask = zeros(lines.shape, dtype=bool)
    score = 0
    moved = False

    for i, line in enumerate(lines):
        line_score, merged_line, slots = _merge_values(compress(line), rule)
        result[i, : len(merged_line)] = merged_line
        merged_mask[i, slots] = True

        score += line_score
        moved = moved or not array_equal(line, result[i])

    if not moved:
        return MoveResult(grid=board.copy(), score=0, moved=False, merged=[])

    merged_cells = [(int(i), int(j)) for i, j in argwhere(from_lines(merged_mask, direction))]
    return MoveResult(grid=from_lines(result, direction), score=score, moved=True, merged=merged_cells)


def slide_and_merge(board: ndarray, rule: MergeRule = CLASSIC) -> tuple[int, ndarray]:
    """
    Slide a value board to the left, merge adjacent cells, and compute the score.

    Parameters
    ----------
    board : ndarray
        The game board represented as a 2D integer array.
    rule : MergeRule, optional
        Merge rule to apply.

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        The updated game board after sliding and merging.
    """
    outcome = apply_move_values(board, Direction.LEFT, rule)
    return outcome.score, outcome.grid


def spawn_tile(
    grid: ndarray, rng: Generator, allocator: TileIdAllocator, rule: MergeRule = CLASSIC
) -> ndarray:
    """
    Place a new tile on a uniformly chosen empty cell.

    Parameters
    ----------
    grid : ndarray
        The current tile grid. It is not modified.
    rng : Generator
        Random source, injected so spawning is reproducible.
    allocator : TileIdAllocator
        Source of the new tile's identity.
    rule : MergeRule, optional
        Supplies the spawn values and probabilities (``{2: 0.9, 4: 0.1}`` for the classic rule).

    Returns
    -------
    ndarray
        A copy of the grid with one more tile, or an unchanged copy if the grid is full.
    """
    new_grid = grid.copy()
    cells = empty_cells(grid)
    if not cells:
        return new_grid

    # ##: Cell first, then value.
    row, col = cells[int(rng.integers(len(cells)))]
    value = int(rng.choice(rule.spawn_values, p=rule.spawn_probs))
    new_grid[row, col] = Tile(id=allocator(), value=value, row=row, col=col)
    return new_grid


def fill_cells(
    state: ndarray, number_tile: int, rng: Generator | None = None, rule: MergeRule = CLASSIC
) -> ndarray:
    """
    Fill empty cells of a value board with new tiles.

    Parameters
    ----------
    state : ndarray
        The current value board. **Modified in-place.**
    number_tile : int
        Number of new tiles to add.
    rng : Generator, optional
        Random source. Falls back to a module-level generator.
    rule : MergeRule, optional
        Supplies the spawn values and probabilities.

    Returns
    -------
    ndarray
        The same array reference with new tiles added.

    Notes
    -----
    - If there are fewer empty cells than requested, it fills all available cells.
    - **This function mutates the input array.** Pass ``state.copy()`` if the original must be preserved.
    """
    rng = rng if rng is not None else _GENERATOR

    # ##: Only if there are still available places.
    available_cells = argwhere(state == 0)
    number_tile = min(number_tile, len(available_cells))
    if number_tile > 0:
        values = rng.choice(rule.spawn_values, size=number_tile, p=rule.spawn_probs)
        chosen_indices = rng.choice(len(available_cells), size=number_tile, replace=False)
        state[tuple(available_cells[chosen_indices].T)] = values
    return state


def is_done(grid: ndarray, rule: MergeRule = CLASSIC) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    grid : ndarray
        Tile grid or value board.
    rule : MergeRule, optional
        Merge rule deciding which neighbours could still merge.

    Returns
    -------
    bool
        True if there is no empty cell and no adjacent pair can merge.
    """
    board = values_of(grid)
    if not np_all(board != 0):
        return False

    vertical = rule.can_merge(board[:-1], board[1:])
    horizontal = rule.can_merge(board[:, :-1], board[:, 1:])
    return not bool(np_any(vertical) or np_any(horizontal))


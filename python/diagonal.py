"""
Line traversals over rectangular grids.

Extracts rows, columns and the two 45-degree diagonal families from a grid.
Every traversal returns the grid's own element objects (no copies), so the
results are only meaningful while the caller keeps the grid unchanged.

Example:
    >>> grid = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    >>> rising_diagonals(grid)
    [[7], [4, 8], [1, 5, 9], [2, 6], [3]]
    >>> falling_diagonals(grid)
    [[1], [2, 4], [3, 5, 7], [6, 8], [9]]
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Sequence

from grid_types import (
    CellPosition,
    Family,
    Grid,
    GridLike,
    GridShapeError,
    Line,
    Lines,
    PositionLines,
    ShapePolicy,
    TraversalRules,
)

__all__ = [
    "all_families",
    "column_positions",
    "columns_major",
    "falling_diagonals",
    "falling_positions",
    "grid_shape",
    "iter_lines",
    "iter_positions",
    "rising_diagonals",
    "rising_positions",
    "row_positions",
    "rows_major",
    "traverse",
]

logger = logging.getLogger(__name__)


# =============================================================================
# Grid Access
# =============================================================================


def _cells(grid: GridLike) -> Sequence[Sequence[Any]]:
    """Unwrap a Grid to its rows; any other sequence of rows is used as-is."""
    if isinstance(grid, Grid):
        return grid.cells
    return grid


def _check_rectangular(cells: Sequence[Sequence[Any]], cols: int, grid: GridLike) -> None:
    mismatched = [(i, len(row)) for i, row in enumerate(cells) if len(row) != cols]
    if not mismatched:
        return

    name = f"grid '{grid.id}'" if isinstance(grid, Grid) else "grid"
    error_msg = (
        f"Inconsistent row lengths in {name}\n"
        f"  Expected: {cols} columns (from row 0)\n"
        f"  Mismatched rows:\n"
    )
    for row_idx, actual_cols in mismatched:
        error_msg += f"    Row {row_idx}: {actual_cols} columns\n"
    error_msg += "  All rows must have the same number of cells"
    logger.debug("grid_shape: %d mismatched rows, expected %d columns", len(mismatched), cols)
    raise GridShapeError(error_msg)


def grid_shape(grid: GridLike, rules: TraversalRules | None = None) -> tuple[int, int]:
    """
    Return the (rows, cols) dimensions of a grid.

    The column count comes from row 0. Under ShapePolicy.FIRST_ROW the other
    rows are trusted to match; under ShapePolicy.STRICT every row is checked.

    Args:
        grid: A Grid, or any indexable sequence of indexable rows
        rules: Traversal rules (defaults to TraversalRules())

    Returns:
        Tuple of (rows, cols); (0, 0) for a grid without rows

    Raises:
        GridShapeError: If rules.shape_policy is STRICT and rows differ in length
    """
    if rules is None:
        rules = TraversalRules()

    cells = _cells(grid)
    rows = len(cells)
    if rows == 0:
        return (0, 0)

    cols = len(cells[0])
    if rules.shape_policy is ShapePolicy.STRICT:
        _check_rectangular(cells, cols, grid)

    logger.debug("grid_shape: rows=%d, cols=%d (policy=%s)", rows, cols, rules.shape_policy.value)
    return (rows, cols)


def _check_dimensions(rows: int, cols: int) -> None:
    if rows < 0 or cols < 0:
        raise ValueError(f"Grid dimensions must be non-negative, got {rows}x{cols}")


# =============================================================================
# Position Traversals
# =============================================================================


def _iter_rows(rows: int, cols: int) -> Iterator[list[CellPosition]]:
    for r in range(rows):
        yield [CellPosition(r, c) for c in range(cols)]


def _iter_columns(rows: int, cols: int) -> Iterator[list[CellPosition]]:
    # No rows means no way to know the width
    if rows == 0:
        return
    for c in range(cols):
        yield [CellPosition(r, c) for r in range(rows)]


def _iter_rising(rows: int, cols: int) -> Iterator[list[CellPosition]]:
    if rows == 0 or cols == 0:
        return

    # Start points: up the left column from the bottom-left corner,
    # then along the top row, skipping the shared (0, 0) corner
    starts = [(r, 0) for r in range(rows - 1, -1, -1)]
    starts += [(0, c) for c in range(1, cols)]

    for start_row, start_col in starts:
        length = min(rows - start_row, cols - start_col)
        yield [CellPosition(start_row + k, start_col + k) for k in range(length)]


def _iter_falling(rows: int, cols: int) -> Iterator[list[CellPosition]]:
    if rows == 0 or cols == 0:
        return

    # Start points: along the top row from the top-left corner,
    # then down the right column, skipping the shared (0, cols - 1) corner
    starts = [(0, c) for c in range(cols)]
    starts += [(r, cols - 1) for r in range(1, rows)]

    for start_row, start_col in starts:
        length = min(rows - start_row, start_col + 1)
        yield [CellPosition(start_row + k, start_col - k) for k in range(length)]


_POSITION_ITERATORS: dict[Family, Callable[[int, int], Iterator[list[CellPosition]]]] = {
    Family.ROWS: _iter_rows,
    Family.COLUMNS: _iter_columns,
    Family.RISING: _iter_rising,
    Family.FALLING: _iter_falling,
}


def _iterator_for(family: Family) -> Callable[[int, int], Iterator[list[CellPosition]]]:
    if not isinstance(family, Family):
        raise ValueError(
            f"Unknown traversal family: {family!r}\n"
            f"  Valid families: {', '.join(f.name for f in Family)}"
        )
    return _POSITION_ITERATORS[family]


def iter_positions(rows: int, cols: int, family: Family) -> Iterator[list[CellPosition]]:
    """
    Lazily yield the position lines of a traversal family for a rows x cols grid.

    Raises:
        ValueError: If a dimension is negative or family is not a Family
    """
    _check_dimensions(rows, cols)
    return _iterator_for(family)(rows, cols)


def row_positions(rows: int, cols: int) -> PositionLines:
    """Positions of each row, top to bottom. cols == 0 gives `rows` empty lines."""
    return list(iter_positions(rows, cols, Family.ROWS))


def column_positions(rows: int, cols: int) -> PositionLines:
    """Positions of each column, left to right."""
    return list(iter_positions(rows, cols, Family.COLUMNS))


def rising_positions(rows: int, cols: int) -> PositionLines:
    """Positions of each (+1, +1) diagonal, bottom-left corner first."""
    return list(iter_positions(rows, cols, Family.RISING))


def falling_positions(rows: int, cols: int) -> PositionLines:
    """Positions of each (+1, -1) diagonal, top-left corner first."""
    return list(iter_positions(rows, cols, Family.FALLING))


# =============================================================================
# Element Traversals
# =============================================================================


def iter_lines(
    grid: GridLike,
    family: Family,
    rules: TraversalRules | None = None,
) -> Iterator[Line]:
    """
    Lazily yield the lines of a traversal family, one list of elements at a time.

    The grid's shape is read (and, under STRICT, validated) on the first call,
    before any line is produced.

    Args:
        grid: A Grid, or any indexable sequence of indexable rows
        family: Which traversal to run
        rules: Traversal rules (defaults to TraversalRules())

    Returns:
        Iterator of lines; each line is a list of the grid's own elements

    Raises:
        GridShapeError: If rules.shape_policy is STRICT and the grid is jagged
        ValueError: If family is not a Family
    """
    iterator = _iterator_for(family)
    cells = _cells(grid)
    rows, cols = grid_shape(grid, rules)
    return ([cells[p.row][p.col] for p in line] for line in iterator(rows, cols))


def traverse(grid: GridLike, family: Family, rules: TraversalRules | None = None) -> Lines:
    """Run the traversal for `family` and return all of its lines."""
    return list(iter_lines(grid, family, rules))


def rows_major(grid: GridLike, rules: TraversalRules | None = None) -> Lines:
    """
    Extract each row as one line, in top-to-bottom order.

    A grid with rows but no columns gives one empty line per row.
    """
    return traverse(grid, Family.ROWS, rules)


def columns_major(grid: GridLike, rules: TraversalRules | None = None) -> Lines:
    """Extract each column as one line, in left-to-right order."""
    return traverse(grid, Family.COLUMNS, rules)


def rising_diagonals(grid: GridLike, rules: TraversalRules | None = None) -> Lines:
    """
    Extract the diagonals of slope (+1 row, +1 col).

    The first line is the single bottom-left element and the last is the
    single top-right element; R + C - 1 lines for an R x C grid. Elements in
    a line are ordered by increasing row.
    """
    return traverse(grid, Family.RISING, rules)


def falling_diagonals(grid: GridLike, rules: TraversalRules | None = None) -> Lines:
    """
    Extract the diagonals of slope (+1 row, -1 col).

    Lines are ordered by row + col, from the single top-left element to the
    single bottom-right element. Elements in a line are ordered by increasing
    row (decreasing column).
    """
    return traverse(grid, Family.FALLING, rules)


def all_families(grid: GridLike, rules: TraversalRules | None = None) -> dict[Family, Lines]:
    """Run every traversal family, keyed in Family declaration order."""
    return {family: traverse(grid, family, rules) for family in Family}

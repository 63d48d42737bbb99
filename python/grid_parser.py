"""
Grid parsing utilities for the traversal engine.

Provides two parsing formats:
1. Standard format with space-separated multi-character cells
2. Concise format with single-character cells
"""

from __future__ import annotations

from grid_types import Grid, GridStore

__all__ = ["parse_grid", "parse_grid_concise", "parse_grids"]


def _check_row_lengths(grid_id: str, rows: list[tuple[str, ...]], row_strings: list[str]) -> None:
    if not rows:
        return
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid '{grid_id}'\n"
            f"  Expected: {cols} columns (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} columns - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)


def parse_grid(grid_id: str, definition: str) -> Grid:
    """
    Parse a single grid from a compact string format.

    Format:
    - Rows separated by |
    - Cells separated by whitespace; each cell keeps its whole token as a string
    - An empty (or all-whitespace) definition is a grid with no rows

    Example:
        parse_grid("g", "1 2 3|4 5 6")
        Creates a 2x3 grid with cells (("1", "2", "3"), ("4", "5", "6"))

    Args:
        grid_id: Name for the grid
        definition: The grid definition string

    Returns:
        The parsed Grid

    Raises:
        ValueError: If rows have different numbers of cells
    """
    if not definition.strip():
        return Grid(grid_id, ())

    row_strings = definition.split("|")
    rows = [tuple(row_str.split()) for row_str in row_strings]
    _check_row_lengths(grid_id, rows, row_strings)
    return Grid(grid_id, tuple(rows))


def parse_grids(definitions: dict[str, str]) -> GridStore:
    """
    Parse several grids at once.

    Args:
        definitions: Dict mapping grid_id to string definition (see parse_grid)

    Returns:
        GridStore with parsed grids
    """
    store: GridStore = {}
    for grid_id, definition in definitions.items():
        store[grid_id] = parse_grid(grid_id, definition)
    return store


def parse_grid_concise(grid_id: str, definition: str) -> Grid:
    """
    Parse a grid where every character is one cell.

    Format:
    - Rows separated by |
    - Each character (spaces included) is a cell
    - Leading and trailing whitespace of the whole definition is ignored

    Example:
        parse_grid_concise("g", "abc|def")
        Creates a 2x3 grid with cells (("a", "b", "c"), ("d", "e", "f"))

    Raises:
        ValueError: If rows have different numbers of cells
    """
    definition = definition.strip()
    if not definition:
        return Grid(grid_id, ())

    row_strings = definition.split("|")
    rows = [tuple(row_str) for row_str in row_strings]
    _check_row_lengths(grid_id, rows, row_strings)
    return Grid(grid_id, tuple(rows))

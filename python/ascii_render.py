"""
ASCII rendering for grids and their traversal lines.

Provides two views:
1. Boxed grid rendering with optional highlighted cells
2. Numbered listing of the lines of a traversal family
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Collection

import simple_chalk as chalk  # type: ignore[import-untyped]

from diagonal import grid_shape, traverse
from grid_types import CellPosition, Family, Grid, GridLike, Lines, TraversalRules

__all__ = ["render_grid", "render_lines", "render_traversal"]

logger = logging.getLogger(__name__)

# Colors cycled across consecutive traversal lines
LINE_COLORS: list[Callable[[str], str]] = [
    chalk.red,
    chalk.green,
    chalk.yellow,
    chalk.blue,
    chalk.magenta,
    chalk.cyan,
    chalk.redBright,
    chalk.greenBright,
    chalk.yellowBright,
    chalk.blueBright,
]


def _cell_text(cell: Any, cell_width: int) -> str:
    text = str(cell)
    if len(text) > cell_width:
        # Keep the leading characters, they identify the cell best
        text = text[:cell_width]
    return text.center(cell_width)


def render_grid(
    grid: GridLike,
    highlight: Collection[CellPosition] | None = None,
    cell_width: int = 3,
    title: str | None = None,
    rules: TraversalRules | None = None,
) -> str:
    """
    Render a grid as a box of fixed-width cells.

    Args:
        grid: A Grid, or any indexable sequence of indexable rows
        highlight: Positions to draw with a white background
        cell_width: Characters per cell (default 3)
        title: Text centered in the top border; defaults to the Grid's id
        rules: Traversal rules used to read the grid's shape

    Returns:
        Rendered multi-line string
    """
    rows, cols = grid_shape(grid, rules)
    cells = grid.cells if isinstance(grid, Grid) else grid
    if title is None and isinstance(grid, Grid):
        title = grid.id
    highlighted = set(highlight) if highlight is not None else set()

    grid_width = cols * cell_width + 2  # +2 for borders
    logger.debug("render_grid: %dx%d cells, width=%d chars", rows, cols, grid_width)

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if title:
        label = f" {title} "
        if len(label) <= grid_width - 2:
            title_start = (grid_width - len(label)) // 2
            title_line = (
                "┌"
                + "─" * (title_start - 1)
                + label
                + "─" * (grid_width - title_start - len(label) - 1)
                + "┐"
            )
    lines.append(title_line)

    for r_idx in range(rows):
        line_parts = ["│"]
        for c_idx in range(cols):
            content = _cell_text(cells[r_idx][c_idx], cell_width)
            if CellPosition(r_idx, c_idx) in highlighted:
                content = chalk.bgWhite.black(content)
            line_parts.append(content)
        line_parts.append("│")
        lines.append("".join(line_parts))

    lines.append("└" + "─" * (grid_width - 2) + "┘")
    return "\n".join(lines)


def render_lines(lines: Lines, family: Family | None = None) -> str:
    """
    Render traversal lines as a numbered listing, one line per row of text.

    Each line is colored from LINE_COLORS in turn. An optional family adds a
    header naming the traversal and how many lines it produced.
    """
    output: list[str] = []
    if family is not None:
        output.append(f"{family.value} ({len(lines)} lines)")

    index_width = len(str(max(len(lines) - 1, 0)))
    for i, line in enumerate(lines):
        colorize = LINE_COLORS[i % len(LINE_COLORS)]
        body = " ".join(str(element) for element in line)
        output.append(f"{str(i).rjust(index_width)}: {colorize(body)}")

    return "\n".join(output)


def render_traversal(
    grid: GridLike,
    family: Family,
    rules: TraversalRules | None = None,
) -> str:
    """Render the grid followed by the numbered lines of one traversal family."""
    lines = traverse(grid, family, rules)
    return render_grid(grid, rules=rules) + "\n" + render_lines(lines, family)

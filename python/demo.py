"""
Demonstration script for the traversal engine.
"""

import logging

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_traversal
from grid_parser import parse_grid, parse_grid_concise
from grid_types import Family, Grid


def demo_grids() -> list[Grid]:
    """The grids shown by the demo."""
    return [
        parse_grid("square", "1 2 3|4 5 6|7 8 9"),
        parse_grid("wide", "1 2 3|4 5 6"),
        parse_grid("big", "1 2 3 4|5 6 7 8|9 10 11 12|13 14 15 16"),
        parse_grid_concise("letters", "abcde|fghij"),
    ]


def demo(console: Console | None = None) -> None:
    """Print every traversal family of every demo grid."""
    if console is None:
        console = Console()

    for grid in demo_grids():
        console.rule(f"{grid.id} ({grid.rows}x{grid.cols})")
        for family in Family:
            text = Text.from_ansi(render_traversal(grid, family))
            console.print(Panel(text, title=family.name, border_style="cyan", expand=False))


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    demo()

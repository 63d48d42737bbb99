"""
Interactive demo for the traversal engine.
Display a grid and step through the lines of each traversal family with keyboard commands.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from diagonal import grid_shape, iter_positions
from grid_parser import parse_grids
from grid_types import CellPosition, Family, Grid

FAMILY_KEYS = {
    "r": Family.ROWS,
    "c": Family.COLUMNS,
    "d": Family.RISING,
    "f": Family.FALLING,
}


class InteractiveDemo:
    """Interactive stepper over traversal lines."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.console = Console()
        self.family = Family.ROWS
        self.line_index = 0
        self.running = True
        self.status_message = "Ready"

    @property
    def position_lines(self) -> list[list[CellPosition]]:
        """Position lines of the current family."""
        rows, cols = grid_shape(self.grid)
        return list(iter_positions(rows, cols, self.family))

    @property
    def current_line(self) -> list[CellPosition]:
        lines = self.position_lines
        if not lines:
            return []
        return lines[self.line_index]

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        lines = self.position_lines
        current = self.current_line

        grid_text = render_grid(self.grid, highlight=current)

        status = Text()
        status.append("Family: ", style="bold")
        status.append(f"{self.family.value}\n")
        status.append("Line: ", style="bold")
        if lines:
            status.append(f"{self.line_index + 1} of {len(lines)}\n")
        else:
            status.append("none (empty grid)\n")
        values = " ".join(str(self.grid.cells[p.row][p.col]) for p in current)
        status.append("Elements: ", style="bold")
        status.append(f"[{values}]\n\n")

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  R - Rows\n")
        status.append("  C - Columns\n")
        status.append("  D - Rising diagonals\n")
        status.append("  F - Falling diagonals\n")
        status.append("  N / P - Next / previous line\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title=f"Traversal Demo - {self.grid.id}", border_style="green", width=80)

    def select_family(self, family: Family) -> None:
        """Switch to another family, starting at its first line."""
        self.family = family
        self.line_index = 0
        self.status_message = f"Showing {family.value} ({len(self.position_lines)} lines)"

    def step(self, delta: int) -> None:
        """Move delta lines forward (or back), stopping at either end."""
        count = len(self.position_lines)
        if count == 0:
            self.status_message = "Nothing to step through"
            return
        target = self.line_index + delta
        if target < 0 or target >= count:
            self.status_message = "Already at the last line" if delta > 0 else "Already at the first line"
            return
        self.line_index = target
        self.status_message = f"Line {self.line_index + 1} of {count}"

    def handle_key(self, key: str) -> None:
        """Apply a single key press to the demo state."""
        key = key.lower()
        if key == "q":
            self.status_message = "Quitting..."
            self.running = False
        elif key in FAMILY_KEYS:
            self.select_family(FAMILY_KEYS[key])
        elif key == "n":
            self.step(1)
        elif key == "p":
            self.step(-1)
        else:
            self.status_message = f"Unknown key: {repr(key)}"

    def run(self) -> None:
        """Run the interactive demo until Q is pressed."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while self.running:
                    live.update(self.generate_display())
                    self.handle_key(readchar.readkey())
                live.update(self.generate_display())
            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    square="1 2 3|4 5 6|7 8 9",
    wide="1 2 3|4 5 6",
    tall="1 2|3 4|5 6|7 8",
    big="1 2 3 4|5 6 7 8|9 10 11 12|13 14 15 16",
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    name = sys.argv[1] if len(sys.argv) > 1 else "square"
    store = parse_grids({name: LAYOUTS[name]})
    InteractiveDemo(store[name]).run()

"""
Shared type definitions for the diagonal traversal engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence, Union


class Family(Enum):
    """Traversal family: which kind of line to extract from a grid."""

    ROWS = "rows"  # Left to right, top row first
    COLUMNS = "columns"  # Top to bottom, left column first
    RISING = "rising"  # Step (+1, +1), bottom-left corner first
    FALLING = "falling"  # Step (+1, -1), top-left corner first


class ShapePolicy(Enum):
    """How the engine treats row lengths."""

    FIRST_ROW = "first_row"  # Row 0's length is used for every row, unchecked
    STRICT = "strict"  # Every row must match row 0, else GridShapeError


@dataclass(frozen=True)
class TraversalRules:
    """Rules governing traversal behavior."""

    shape_policy: ShapePolicy = ShapePolicy.FIRST_ROW


class GridShapeError(ValueError):
    """Raised when a grid's rows do not all have the same length."""


# =============================================================================
# Grid Definition Types
# =============================================================================


@dataclass(frozen=True)
class CellPosition:
    """A position within a grid."""

    row: int
    col: int


@dataclass(frozen=True)
class Grid:
    """A named 2D grid of cells."""

    id: str
    cells: tuple[tuple[Any, ...], ...]

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0


GridStore = dict[str, Grid]

# Anything with len() and integer indexing over rows, each row likewise.
GridLike = Union[Grid, Sequence[Sequence[Any]]]

Line = list[Any]
Lines = list[Line]
PositionLines = list[list[CellPosition]]

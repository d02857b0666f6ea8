"""lightsout.types
==================

Foundational type aliases and lightweight data structures shared by the
engine modules. Every module imports the exact same aliases from here so the
representation of a cell, a state and a grid configuration stays canonical.

Nothing in this module performs I/O; importing it has no side effects.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from .constants import CANVAS_HEIGHT, CANVAS_WIDTH, NEIGHBOR_POLICIES, SPACING
from .errors import ConfigError

# ---------------------------------------------------------------------------
# Core puzzle representations
# ---------------------------------------------------------------------------
CellId = str
Coord = Tuple[int, int]
# Sparse mapping of cell id -> lit flag. Missing keys are unlit.
PuzzleState = Dict[CellId, bool]


@dataclass(frozen=True)
class GridConfig:
    """Immutable description of a puzzle grid.

    Parameters
    ----------
    row_count, col_count:
        Grid dimensions in cells.
    canvas_width, canvas_height:
        Pixel size of the drawing surface used for cell geometry.
    spacing:
        Gap in pixels between neighbouring cells (and around the border).
    neighbor_policy:
        ``"edge"`` selects the region-based neighbour table, ``"uniform"``
        the offset list filtered by bounds. Both yield the same cells.
    count_lit:
        Polarity of the solvability check vector. ``True`` counts lit cells
        as 1, ``False`` counts unlit cells as 1.
    """

    row_count: int
    col_count: int
    canvas_width: float = CANVAS_WIDTH
    canvas_height: float = CANVAS_HEIGHT
    spacing: float = SPACING
    neighbor_policy: str = "uniform"
    count_lit: bool = True

    def __post_init__(self) -> None:
        if self.row_count <= 0 or self.col_count <= 0:
            raise ConfigError(
                f"Grid needs positive dimensions, got {self.col_count}x{self.row_count}"
            )
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigError("Canvas dimensions must be positive")
        if self.spacing < 0:
            raise ConfigError("Spacing cannot be negative")
        if self.neighbor_policy not in NEIGHBOR_POLICIES:
            raise ConfigError(
                f"Unknown neighbour policy {self.neighbor_policy!r}. Expected one of {NEIGHBOR_POLICIES}"
            )

    @property
    def num_cells(self) -> int:
        return self.row_count * self.col_count

    @property
    def size(self) -> Tuple[int, int]:
        return self.row_count, self.col_count

    @property
    def cell_width(self) -> float:
        return (self.canvas_width - self.spacing) / self.col_count

    @property
    def cell_height(self) -> float:
        return (self.canvas_height - self.spacing) / self.row_count


@dataclass(frozen=True)
class CellDescriptor:
    """Read-only view of one cell handed to renderers."""

    id: CellId
    column: int
    row: int
    lit: bool
    x: float
    y: float
    width: float
    height: float


__all__ = [
    "CellId",
    "Coord",
    "PuzzleState",
    "GridConfig",
    "CellDescriptor",
]

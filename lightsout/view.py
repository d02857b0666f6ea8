"""lightsout.view
=================

Pure projections of a puzzle state for renderers. Nothing here mutates state;
calling a projection twice on the same state gives equal results.
"""

from __future__ import annotations

from typing import List

from .grid_utils import coordinate_to_id, index_to_coordinate
from .types import CellDescriptor, GridConfig, PuzzleState

LIT_GLYPH = "#"
UNLIT_GLYPH = "."


def calculate_cells_from_state(state: PuzzleState, config: GridConfig) -> List[CellDescriptor]:
    """Return one descriptor per cell in row-major order.

    Geometry follows the canvas layout: each cell occupies a
    ``cell_width x cell_height`` slot offset by ``spacing`` from the top-left
    corner, and is shrunk by ``spacing`` so neighbouring cells never touch.
    """

    cells: List[CellDescriptor] = []
    for index in range(config.num_cells):
        column, row = index_to_coordinate(index, config.col_count)
        cell_id = coordinate_to_id(column, row)
        cells.append(
            CellDescriptor(
                id=cell_id,
                column=column,
                row=row,
                lit=bool(state.get(cell_id)),
                x=config.spacing + column * config.cell_width,
                y=config.spacing + row * config.cell_height,
                width=config.cell_width - config.spacing,
                height=config.cell_height - config.spacing,
            )
        )
    return cells


def cell_at_point(x: float, y: float, config: GridConfig) -> CellDescriptor | None:
    """Map a canvas point to the cell drawn under it, or ``None`` for gaps."""

    for cell in calculate_cells_from_state({}, config):
        if cell.x <= x < cell.x + cell.width and cell.y <= y < cell.y + cell.height:
            return cell
    return None


def render_text(state: PuzzleState, config: GridConfig) -> str:
    """Plain-text board with a column header and row labels."""

    header = "   " + " ".join(str(column % 10) for column in range(config.col_count))
    lines = [header]
    cells = calculate_cells_from_state(state, config)
    for row in range(config.row_count):
        start = row * config.col_count
        glyphs = [LIT_GLYPH if cell.lit else UNLIT_GLYPH for cell in cells[start : start + config.col_count]]
        lines.append(f"{row % 10:>2} " + " ".join(glyphs))
    return "\n".join(lines)


__all__ = ["LIT_GLYPH", "UNLIT_GLYPH", "calculate_cells_from_state", "cell_at_point", "render_text"]

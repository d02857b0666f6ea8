"""lightsout.transition
=======================

The neighbour-flip rule. Clicking a cell toggles it together with its four
orthogonal neighbours; neighbours outside the grid are simply skipped.

Two ways of computing the affected cells live here. The uniform policy always
considers the same five offsets and filters by bounds when applying them. The
edge-aware policy picks the exact offset list for the region (corner, edge or
middle) the clicked cell sits in, so no filtering is needed. They produce the
same cells; :class:`~lightsout.types.GridConfig` chooses which one runs.
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .grid_utils import coordinate_to_id, in_bounds, require_in_bounds
from .types import Coord, GridConfig, PuzzleState

UNIFORM_OFFSETS: List[Coord] = [(0, 0), (-1, 0), (1, 0), (0, -1), (0, 1)]


def uniform_affected_coordinates(column: int, row: int, config: GridConfig) -> List[Coord]:
    """Clicked cell plus neighbours, dropping anything out of bounds."""

    affected = []
    for dx, dy in UNIFORM_OFFSETS:
        target = (column + dx, row + dy)
        if in_bounds(config, *target):
            affected.append(target)
    return affected


def _edge_offsets(index: int, last: int) -> List[int]:
    # first, last or middle position along one axis
    if last == 0:
        return []
    if index == 0:
        return [1]
    if index == last:
        return [-1]
    return [-1, 1]


def edge_aware_affected_coordinates(column: int, row: int, config: GridConfig) -> List[Coord]:
    """Clicked cell plus the neighbours valid for its corner/edge/middle region."""

    offsets: List[Coord] = [(0, 0)]
    offsets.extend((dx, 0) for dx in _edge_offsets(column, config.col_count - 1))
    offsets.extend((0, dy) for dy in _edge_offsets(row, config.row_count - 1))
    return [(column + dx, row + dy) for dx, dy in offsets]


AFFECTED_POLICIES: Dict[str, Callable[[int, int, GridConfig], List[Coord]]] = {
    "uniform": uniform_affected_coordinates,
    "edge": edge_aware_affected_coordinates,
}


def affected_coordinates(column: int, row: int, config: GridConfig) -> List[Coord]:
    """Cells toggled by a click on ``(column, row)`` under the config's policy."""

    require_in_bounds(config, column, row)
    return AFFECTED_POLICIES[config.neighbor_policy](column, row, config)


def apply_affected_coordinates(affected: List[Coord], state: PuzzleState) -> PuzzleState:
    """Return a copy of ``state`` with every coordinate in ``affected`` toggled."""

    next_state = dict(state)
    for column, row in affected:
        cell_id = coordinate_to_id(column, row)
        if next_state.get(cell_id):
            # unlit cells are stored by absence
            del next_state[cell_id]
        else:
            next_state[cell_id] = True
    return next_state


def flip_logic(state: PuzzleState, column: int, row: int, config: GridConfig) -> PuzzleState:
    """Apply a normal click: toggle the cell and its in-bounds neighbours."""

    return apply_affected_coordinates(affected_coordinates(column, row, config), state)


def flip_single(state: PuzzleState, column: int, row: int, config: GridConfig) -> PuzzleState:
    """Edit-mode click: toggle only the targeted cell."""

    require_in_bounds(config, column, row)
    return apply_affected_coordinates([(column, row)], state)


__all__ = [
    "UNIFORM_OFFSETS",
    "AFFECTED_POLICIES",
    "uniform_affected_coordinates",
    "edge_aware_affected_coordinates",
    "affected_coordinates",
    "apply_affected_coordinates",
    "flip_logic",
    "flip_single",
]

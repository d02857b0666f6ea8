from __future__ import annotations

from typing import Iterator, List

import numpy as np

from .errors import ActionError, InvalidCoordinate
from .types import CellId, Coord, GridConfig, PuzzleState

# ---------------------------------------------------------------------------
# Addressing
# ---------------------------------------------------------------------------
def index_to_coordinate(index: int, col_count: int) -> Coord:
    """Return ``(column, row)`` for a row-major linear ``index``."""

    return index % col_count, index // col_count


def coordinate_to_index(column: int, row: int, col_count: int) -> int:
    return row * col_count + column


def coordinate_to_id(column: int, row: int) -> CellId:
    """Stable identifier for a cell, e.g. ``"2_3"`` for column 2, row 3."""

    return f"{column}_{row}"


def id_to_coordinate(cell_id: CellId) -> Coord:
    """Inverse of :func:`coordinate_to_id`."""

    column, sep, row = cell_id.partition("_")
    if not sep:
        raise ActionError(f"Cell id {cell_id!r} is not of the form '<col>_<row>'")
    try:
        return int(column), int(row)
    except ValueError as exc:
        raise ActionError(f"Cell id {cell_id!r} must hold integer coordinates") from exc


def in_bounds(config: GridConfig, column: int, row: int) -> bool:
    return 0 <= column < config.col_count and 0 <= row < config.row_count


def require_in_bounds(config: GridConfig, column: int, row: int) -> None:
    """Raise :class:`InvalidCoordinate` when the cell lies outside the grid."""

    if not in_bounds(config, column, row):
        raise InvalidCoordinate(column, row, config.col_count, config.row_count)


def iter_coordinates(config: GridConfig) -> Iterator[Coord]:
    """Yield every ``(column, row)`` in row-major order."""

    for index in range(config.num_cells):
        yield index_to_coordinate(index, config.col_count)


def cell_ids(config: GridConfig) -> List[CellId]:
    return [coordinate_to_id(column, row) for column, row in iter_coordinates(config)]


# ---------------------------------------------------------------------------
# Vector conversions
# ---------------------------------------------------------------------------
def state_to_vector(state: PuzzleState, config: GridConfig) -> np.ndarray:
    """Return the state as a ``uint8`` 0/1 vector in linear-index order."""

    return np.fromiter(
        (1 if state.get(cell_id) else 0 for cell_id in cell_ids(config)),
        dtype=np.uint8,
        count=config.num_cells,
    )


__all__ = [
    "index_to_coordinate",
    "coordinate_to_index",
    "coordinate_to_id",
    "id_to_coordinate",
    "in_bounds",
    "require_in_bounds",
    "iter_coordinates",
    "cell_ids",
    "state_to_vector",
]

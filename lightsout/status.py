"""Win detection and summary views derived from a puzzle state."""

from __future__ import annotations

from dataclasses import dataclass

from .grid_utils import cell_ids
from .parity import is_solvable
from .types import GridConfig, PuzzleState


@dataclass(frozen=True)
class PuzzleStatus:
    """Snapshot of the derived flags a front-end displays."""

    lit: int
    total: int
    solvable: bool
    won: bool


def count_lit(state: PuzzleState, config: GridConfig) -> int:
    """Number of lit cells inside the grid; keys outside it are ignored."""

    return sum(1 for cell_id in cell_ids(config) if state.get(cell_id))


def is_won(state: PuzzleState, config: GridConfig) -> bool:
    """True when every cell of the grid is lit."""

    return all(state.get(cell_id) for cell_id in cell_ids(config))


def summarize(state: PuzzleState, config: GridConfig) -> PuzzleStatus:
    return PuzzleStatus(
        lit=count_lit(state, config),
        total=config.num_cells,
        solvable=is_solvable(state, config),
        won=is_won(state, config),
    )


__all__ = ["PuzzleStatus", "count_lit", "is_won", "summarize"]

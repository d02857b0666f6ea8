"""lightsout.parity
===================

Solvability oracle for Lights Out boards.

A board is reachable from the cleared board exactly when its 0/1 vector is
orthogonal (over GF(2)) to every quiet pattern of the grid, i.e. every press
set that leaves the board unchanged. The quiet patterns for the supported
sizes are stored as magic constants in :mod:`lightsout.constants`; they are
decoded into parity-check tables once per grid size and reused for every
check.

For sizes without stored constants the tables can be derived from the toggle
matrix by Gauss-Jordan elimination over GF(2). The same routine is used by the
test-suite to audit the stored constants.
"""

from __future__ import annotations

from functools import lru_cache
from typing import List, Tuple

import numpy as np

from .constants import PARITY_CONSTANTS
from .grid_utils import coordinate_to_index, iter_coordinates, state_to_vector
from .transition import uniform_affected_coordinates
from .types import GridConfig, PuzzleState

ParityTable = Tuple[int, ...]


# ---------------------------------------------------------------------------
# Table construction
# ---------------------------------------------------------------------------
def decode_magic(value: int, length: int) -> ParityTable:
    """Binary digits of ``value``, most significant first, padded to ``length``."""

    if value < 0 or value >= 1 << length:
        raise ValueError(f"Magic constant {value:#x} does not fit in {length} bits")
    return tuple(int(bit) for bit in format(value, f"0{length}b"))


def toggle_matrix(config: GridConfig) -> np.ndarray:
    """Return the ``N x N`` GF(2) matrix whose column ``j`` is the press at cell ``j``."""

    size = config.num_cells
    matrix = np.zeros((size, size), dtype=np.uint8)
    for column, row in iter_coordinates(config):
        pressed = coordinate_to_index(column, row, config.col_count)
        for tx, ty in uniform_affected_coordinates(column, row, config):
            matrix[coordinate_to_index(tx, ty, config.col_count), pressed] = 1
    return matrix


def gf2_nullspace(matrix: np.ndarray) -> List[np.ndarray]:
    """Basis of the null space of ``matrix`` over GF(2)."""

    reduced = (matrix % 2).astype(np.uint8)
    rows, cols = reduced.shape
    pivots: List[int] = []
    pivot_row = 0
    for col in range(cols):
        candidates = np.nonzero(reduced[pivot_row:, col])[0]
        if candidates.size == 0:
            continue
        found = pivot_row + int(candidates[0])
        if found != pivot_row:
            reduced[[pivot_row, found]] = reduced[[found, pivot_row]]
        for other in range(rows):
            if other != pivot_row and reduced[other, col]:
                reduced[other, :] ^= reduced[pivot_row, :]
        pivots.append(col)
        pivot_row += 1
        if pivot_row == rows:
            break

    basis: List[np.ndarray] = []
    for free in (col for col in range(cols) if col not in pivots):
        vector = np.zeros(cols, dtype=np.uint8)
        vector[free] = 1
        for index, pivot in enumerate(pivots):
            vector[pivot] = reduced[index, free]
        basis.append(vector)
    return basis


def derive_parity_tables(row_count: int, col_count: int) -> Tuple[ParityTable, ...]:
    """Compute parity-check tables for any grid size by elimination."""

    config = GridConfig(row_count=row_count, col_count=col_count)
    return tuple(tuple(int(bit) for bit in vector) for vector in gf2_nullspace(toggle_matrix(config)))


@lru_cache(maxsize=None)
def parity_tables(row_count: int, col_count: int) -> Tuple[ParityTable, ...]:
    """Parity-check tables for a grid size, decoded once and cached."""

    constants = PARITY_CONSTANTS.get((row_count, col_count))
    if constants is None:
        return derive_parity_tables(row_count, col_count)
    length = row_count * col_count
    return tuple(decode_magic(value, length) for value in constants)


# ---------------------------------------------------------------------------
# Oracle
# ---------------------------------------------------------------------------
def check_vector(state: PuzzleState, config: GridConfig) -> np.ndarray:
    """0/1 vector of the cells counted under the grid's polarity convention."""

    lit = state_to_vector(state, config)
    return lit if config.count_lit else 1 - lit


def parity_checks(state: PuzzleState, config: GridConfig) -> List[int]:
    """Dot product mod 2 of the check vector against each table."""

    vector = check_vector(state, config)
    results = []
    for table in parity_tables(config.row_count, config.col_count):
        weights = np.asarray(table, dtype=np.uint8)
        results.append(int(np.bitwise_and(vector, weights).sum()) % 2)
    return results


def is_solvable(state: PuzzleState, config: GridConfig) -> bool:
    """True when ``state`` is reachable from the cleared board."""

    return not any(parity_checks(state, config))


__all__ = [
    "ParityTable",
    "decode_magic",
    "toggle_matrix",
    "gf2_nullspace",
    "derive_parity_tables",
    "parity_tables",
    "check_vector",
    "parity_checks",
    "is_solvable",
]

"""lightsout.constants
======================

Global constants shared by the engine and the terminal front-end. Keeping them
here avoids import cycles between modules and makes the magic numbers easy to
audit.
"""

from __future__ import annotations

from typing import Dict, Tuple

# ---------------------------------------------------------------------------
# Canvas geometry
# ---------------------------------------------------------------------------
CANVAS_WIDTH = 512
CANVAS_HEIGHT = 512
SPACING = 4

# ---------------------------------------------------------------------------
# Parity-check constants
# ---------------------------------------------------------------------------
# Each constant is a quiet pattern written row by row, most significant bit
# first (bit for cell index 0 is the leftmost digit).
PARITY_CONSTANTS: Dict[Tuple[int, int], Tuple[int, ...]] = {
    (4, 4): (
        0b1000_1100_1010_0111,
        0b0100_1110_0001_1101,
        0b0010_0111_1000_1011,
        0b0001_0011_0101_1110,
    ),
    (5, 5): (
        0b01110_10101_11011_10101_01110,
        0b10101_10101_00000_10101_10101,
    ),
}

NEIGHBOR_POLICIES = ("edge", "uniform")
MODES = ("play", "edit")

TRACE_LOG = "lightsout_trace.jsonl"

__all__ = [
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    "SPACING",
    "PARITY_CONSTANTS",
    "NEIGHBOR_POLICIES",
    "MODES",
    "TRACE_LOG",
]

"""Public package interface for the Lights Out engine."""

from .actions import Flip, FlipSingle, Reset
from .config import GRID_4X4, GRID_5X5, load_config
from .errors import ConfigError, InvalidCoordinate, LightsOutError
from .parity import is_solvable
from .reducer import PuzzleEngine, puzzle_reducer
from .status import is_won
from .transition import flip_logic, flip_single
from .types import GridConfig
from .view import calculate_cells_from_state

__all__ = [
    "Flip",
    "FlipSingle",
    "Reset",
    "GRID_4X4",
    "GRID_5X5",
    "load_config",
    "ConfigError",
    "InvalidCoordinate",
    "LightsOutError",
    "is_solvable",
    "PuzzleEngine",
    "puzzle_reducer",
    "is_won",
    "flip_logic",
    "flip_single",
    "GridConfig",
    "calculate_cells_from_state",
]

"""lightsout.reducer
====================

Puzzle state machine. :func:`puzzle_reducer` is the pure transition
``(state, action) -> state`` driven by a handler table keyed on the action
tag; :class:`PuzzleEngine` owns the authoritative state slot and is what a
front-end talks to.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional

from .actions import FLIP, FLIP_SINGLE, RESET_PUZZLE, Action, Flip, FlipSingle, Reset, action_to_dict
from .constants import MODES
from .grid_utils import id_to_coordinate, require_in_bounds
from .logging_utils import log_event, log_transition
from .parity import is_solvable
from .status import PuzzleStatus, is_won, summarize
from .transition import flip_logic, flip_single
from .types import CellDescriptor, GridConfig, PuzzleState
from .view import calculate_cells_from_state

Handler = Callable[[PuzzleState, Any, GridConfig], PuzzleState]


def _reset(state: PuzzleState, action: Any, config: GridConfig) -> PuzzleState:
    return {}


def _flip(state: PuzzleState, action: Any, config: GridConfig) -> PuzzleState:
    return flip_logic(state, action.column, action.row, config)


def _flip_single(state: PuzzleState, action: Any, config: GridConfig) -> PuzzleState:
    return flip_single(state, action.column, action.row, config)


ACTION_HANDLERS: Dict[str, Handler] = {
    RESET_PUZZLE: _reset,
    FLIP: _flip,
    FLIP_SINGLE: _flip_single,
}


def get_handler(kind: str) -> Handler:
    """Lookup ``kind`` in :data:`ACTION_HANDLERS` with a helpful error."""

    try:
        return ACTION_HANDLERS[kind]
    except KeyError as exc:
        raise KeyError(f"Unknown action {kind!r}. Registry keys: {sorted(ACTION_HANDLERS)}") from exc


def puzzle_reducer(state: PuzzleState, action: Any, config: GridConfig) -> PuzzleState:
    """Return the state after ``action``; unknown action kinds leave it untouched."""

    try:
        handler = get_handler(getattr(action, "type", None))
    except KeyError:
        log_event("debug", f"ignoring unknown action {action!r}")
        return state
    return handler(state, action, config)


class PuzzleEngine:
    """Single puzzle session: owns the state and applies dispatched actions.

    Mutations go through :meth:`dispatch`, which holds a lock across the
    read-transition-write sequence so at most one update is in flight.
    """

    def __init__(self, config: GridConfig, trace_path: str | Path | None = None) -> None:
        self.config = config
        self.trace_path = trace_path
        self.moves = 0
        self._state: PuzzleState = {}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # State machine
    # ------------------------------------------------------------------
    def dispatch(self, action: Action) -> None:
        with self._lock:
            before = self._state
            after = puzzle_reducer(before, action, self.config)
            if after is before:
                return
            self._state = after
            kind = getattr(action, "type", None)
            if kind == RESET_PUZZLE:
                self.moves = 0
            elif kind == FLIP:
                self.moves += 1
            # trace order follows apply order
            if self.trace_path is not None:
                log_transition(action_to_dict(action), before, after, self.trace_path)

    def get_state(self) -> PuzzleState:
        return dict(self._state)

    def reset(self) -> None:
        self.dispatch(Reset())

    def flip(self, column: int, row: int) -> None:
        self.dispatch(Flip(column, row))

    def flip_single(self, column: int, row: int) -> None:
        self.dispatch(FlipSingle(column, row))

    def click(self, column: int, row: int, mode: str = "play") -> None:
        """Route a click to Flip (``play``) or FlipSingle (``edit``)."""

        if mode not in MODES:
            raise ValueError(f"Unknown mode {mode!r}. Expected one of {MODES}")
        if mode == "edit":
            self.flip_single(column, row)
        else:
            self.flip(column, row)

    def load_pattern(self, cell_ids: Iterable[str]) -> None:
        """Reset, then light each listed cell with single-cell edits.

        Every id is parsed and bounds-checked before the board is touched, and
        repeated ids light their cell once.
        """

        coords = [id_to_coordinate(cell_id) for cell_id in dict.fromkeys(cell_ids)]
        for column, row in coords:
            require_in_bounds(self.config, column, row)
        self.reset()
        for column, row in coords:
            self.flip_single(column, row)

    # ------------------------------------------------------------------
    # Derived views
    # ------------------------------------------------------------------
    def _resolve(self, state: Optional[PuzzleState]) -> PuzzleState:
        return self._state if state is None else state

    def get_cell_descriptors(self, state: Optional[PuzzleState] = None) -> List[CellDescriptor]:
        return calculate_cells_from_state(self._resolve(state), self.config)

    def is_solvable(self, state: Optional[PuzzleState] = None) -> bool:
        return is_solvable(self._resolve(state), self.config)

    def is_won(self, state: Optional[PuzzleState] = None) -> bool:
        return is_won(self._resolve(state), self.config)

    def status(self) -> PuzzleStatus:
        return summarize(self._state, self.config)


__all__ = ["ACTION_HANDLERS", "get_handler", "puzzle_reducer", "PuzzleEngine"]

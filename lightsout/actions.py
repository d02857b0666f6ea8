"""lightsout.actions
====================

Tagged requests understood by the puzzle reducer. Each action is a frozen
dataclass carrying a ``type`` tag; the reducer dispatches on that tag, so any
object with an unknown tag is ignored rather than rejected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from .errors import ActionError

RESET_PUZZLE = "RESET_PUZZLE"
FLIP = "FLIP"
FLIP_SINGLE = "FLIP_SINGLE"


@dataclass(frozen=True)
class Reset:
    """Clear every cell."""

    type: str = field(default=RESET_PUZZLE, init=False)


@dataclass(frozen=True)
class Flip:
    """Regular click at ``(column, row)``."""

    column: int
    row: int
    type: str = field(default=FLIP, init=False)


@dataclass(frozen=True)
class FlipSingle:
    """Edit-mode click: toggles only ``(column, row)``."""

    column: int
    row: int
    type: str = field(default=FLIP_SINGLE, init=False)


Action = Union[Reset, Flip, FlipSingle]


def action_to_dict(action: Action) -> dict:
    payload: dict = {"type": action.type}
    if isinstance(action, (Flip, FlipSingle)):
        payload["column"] = action.column
        payload["row"] = action.row
    return payload


def parse_action(payload: Mapping[str, Any]) -> Action:
    """Build an action from a ``{"type": ..., "column": ..., "row": ...}`` mapping."""

    kind = payload.get("type")
    if kind == RESET_PUZZLE:
        return Reset()
    if kind not in (FLIP, FLIP_SINGLE):
        raise ActionError(f"Unknown action type {kind!r}")
    try:
        column = int(payload["column"])
        row = int(payload["row"])
    except (KeyError, TypeError, ValueError) as exc:
        raise ActionError(f"Action {kind} needs integer 'column' and 'row'") from exc
    if kind == FLIP:
        return Flip(column, row)
    return FlipSingle(column, row)


__all__ = [
    "RESET_PUZZLE",
    "FLIP",
    "FLIP_SINGLE",
    "Reset",
    "Flip",
    "FlipSingle",
    "Action",
    "action_to_dict",
    "parse_action",
]

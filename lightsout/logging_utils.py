"""lightsout.logging_utils
==========================

Simple logging utilities: tagged console lines for the front-end and an
append-only JSONL trace of state transitions for later review.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, TextIO

from .constants import TRACE_LOG
from .types import PuzzleState

VERBOSE = True


def set_verbose(enabled: bool) -> None:
    global VERBOSE
    VERBOSE = enabled


def log_event(tag: str, message: str, stream: Optional[TextIO] = None) -> None:
    """Print ``[TAG] message`` to stderr unless logging is silenced."""

    if not VERBOSE:
        return
    print(f"[{tag.upper()}] {message}", file=stream or sys.stderr)


def log_transition(
    action: Dict[str, Any],
    before: PuzzleState,
    after: PuzzleState,
    path: str | Path = TRACE_LOG,
) -> None:
    """Append a JSON line describing one dispatched action to ``path``."""

    entry = {
        "time": datetime.now(timezone.utc).isoformat(),
        "action": action,
        "before": sorted(cell_id for cell_id, lit in before.items() if lit),
        "after": sorted(cell_id for cell_id, lit in after.items() if lit),
    }
    with Path(path).open("a") as handle:
        handle.write(json.dumps(entry) + "\n")


__all__ = ["VERBOSE", "set_verbose", "log_event", "log_transition"]

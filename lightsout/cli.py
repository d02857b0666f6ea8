"""lightsout.cli
================

Terminal front-end. It plays the role of the presentation layer: it turns
text commands into actions, dispatches them to a :class:`PuzzleEngine` and
prints the derived views (board, solvability, win banner).
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from .actions import Action, parse_action
from .config import load_config, preset
from .constants import MODES, TRACE_LOG
from .errors import ActionError, LightsOutError
from .logging_utils import log_event, set_verbose
from .reducer import PuzzleEngine
from .types import Coord
from .view import render_text

HELP_TEXT = "commands: <col> <row> | reset | play | edit | status | help | quit"


def parse_coordinate(text: str) -> Coord:
    """Parse ``"c,r"`` or ``"c r"`` into a ``(column, row)`` pair."""

    parts = text.replace(",", " ").split()
    if len(parts) != 2:
        raise ActionError(f"Expected '<col> <row>', got {text!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ActionError(f"Coordinates must be integers, got {text!r}") from exc


def parse_moves(text: str) -> List[Coord]:
    """Parse a whitespace separated list of ``c,r`` clicks."""

    return [parse_coordinate(token) for token in text.split()]


def load_actions(path: str | Path) -> List[Action]:
    """Read actions from a JSONL file, one per line.

    Lines may be bare action records or entries of a transition trace, whose
    action sits under the ``"action"`` key.
    """

    try:
        lines = Path(path).read_text().splitlines()
    except OSError as exc:
        raise ActionError(f"Could not read actions from {path}: {exc}") from exc
    actions: List[Action] = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            entry = json.loads(line)
        except json.JSONDecodeError as exc:
            raise ActionError(f"{path}:{number} is not valid JSON") from exc
        payload = entry.get("action", entry) if isinstance(entry, dict) else None
        if not isinstance(payload, dict):
            raise ActionError(f"{path}:{number} must hold a JSON action object")
        actions.append(parse_action(payload))
    return actions


def print_board(engine: PuzzleEngine, out: TextIO) -> None:
    status = engine.status()
    print(render_text(engine.get_state(), engine.config), file=out)
    solvable = "solvable" if status.solvable else "unsolvable"
    print(f"lit {status.lit}/{status.total} | {solvable} | moves {engine.moves}", file=out)
    if status.won:
        print("You Win!", file=out)


def apply_click(engine: PuzzleEngine, coord: Coord, mode: str) -> bool:
    """Dispatch a click unless the board is already cleared in play mode."""

    if mode == "play" and engine.is_won():
        log_event("win", "board cleared; type 'reset' to play again")
        return False
    column, row = coord
    engine.click(column, row, mode)
    log_event("move", f"{mode} click at ({column}, {row})")
    if engine.is_won():
        log_event("win", f"cleared in {engine.moves} moves")
    return True


def run_command(engine: PuzzleEngine, line: str, mode: str, out: TextIO) -> Tuple[str, bool]:
    """Execute one interactive command; return ``(mode, keep_running)``."""

    command = line.strip().lower()
    if not command:
        return mode, True
    if command in ("quit", "exit", "q"):
        return mode, False
    if command == "help":
        print(HELP_TEXT, file=out)
        return mode, True
    if command == "reset":
        engine.reset()
    elif command in MODES:
        mode = command
        print(f"mode: {mode}", file=out)
        return mode, True
    elif command != "status":
        try:
            apply_click(engine, parse_coordinate(command), mode)
        except LightsOutError as exc:
            print(f"[WARN] {exc}", file=out)
            return mode, True
    print_board(engine, out)
    return mode, True


def interactive(engine: PuzzleEngine, mode: str, stdin: TextIO, out: TextIO) -> None:
    print(HELP_TEXT, file=out)
    print_board(engine, out)
    for line in stdin:
        mode, keep_running = run_command(engine, line, mode, out)
        if not keep_running:
            break


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser("lightsout", description="Play Lights Out in the terminal")
    parser.add_argument("--size", type=int, choices=(4, 5), default=5, help="Preset grid size")
    parser.add_argument("--config", default=None, help="JSON grid configuration record (overrides --size)")
    parser.add_argument("--mode", choices=MODES, default="play", help="Click mode: play flips neighbours, edit a single cell")
    parser.add_argument("--moves", default=None, help="Scripted clicks, e.g. '0,0 2,1'; skips the interactive loop")
    parser.add_argument("--pattern", default=None, help="Starting lit cells, e.g. '0_0 1_0'")
    parser.add_argument("--replay", default=None, help="JSONL file of actions (or a saved trace) to apply; skips the interactive loop")
    parser.add_argument(
        "--trace",
        nargs="?",
        const=TRACE_LOG,
        default=None,
        help=f"Append every transition to a JSONL file (default {TRACE_LOG})",
    )
    parser.add_argument("--quiet", action="store_true", help="Silence tagged log lines")
    return parser


def main(argv: list[str] | None = None, stdin: Optional[TextIO] = None, out: Optional[TextIO] = None) -> None:
    """Parse CLI arguments and run a puzzle session."""

    args = build_parser().parse_args(argv)
    stdin = stdin or sys.stdin
    out = out or sys.stdout
    set_verbose(not args.quiet)

    try:
        config = load_config(args.config) if args.config else preset(args.size)
    except LightsOutError as exc:
        print(f"[WARN] {exc}", file=out)
        raise SystemExit(2) from exc

    engine = PuzzleEngine(config, trace_path=args.trace)
    try:
        if args.pattern:
            engine.load_pattern(args.pattern.split())
        if args.replay:
            for action in load_actions(args.replay):
                engine.dispatch(action)
        if args.moves is None and not args.replay:
            interactive(engine, args.mode, stdin, out)
            return
        for coord in parse_moves(args.moves or ""):
            apply_click(engine, coord, args.mode)
    except LightsOutError as exc:
        print(f"[WARN] {exc}", file=out)
        raise SystemExit(1) from exc
    print_board(engine, out)


__all__ = ["main", "build_parser", "parse_coordinate", "parse_moves", "run_command", "apply_click", "load_actions"]

from __future__ import annotations

import io
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from lightsout.cli import apply_click, load_actions, main, parse_coordinate, parse_moves, run_command
from lightsout.config import GRID_4X4
from lightsout.errors import ActionError
from lightsout.grid_utils import iter_coordinates
from lightsout.reducer import PuzzleEngine


def run(argv, stdin_text=""):
    out = io.StringIO()
    main(argv + ["--quiet"], stdin=io.StringIO(stdin_text), out=out)
    return out.getvalue()


def test_parse_coordinate_and_moves():
    assert parse_coordinate("2,3") == (2, 3)
    assert parse_coordinate(" 1 0 ") == (1, 0)
    assert parse_moves("0,0 4,4") == [(0, 0), (4, 4)]
    with pytest.raises(ActionError):
        parse_coordinate("1")
    with pytest.raises(ActionError):
        parse_coordinate("a,b")


def test_scripted_corner_click():
    output = run(["--size", "4", "--moves", "0,0"])
    assert "lit 3/16 | solvable | moves 1" in output
    assert " 0 # # . ." in output


def test_scripted_edit_mode_centre_cell():
    output = run(["--size", "5", "--mode", "edit", "--moves", "2,2"])
    assert "lit 1/25 | solvable | moves 0" in output


def test_pattern_seeds_unsolvable_board():
    output = run(["--size", "5", "--pattern", "0_0", "--moves", ""])
    assert "lit 1/25 | unsolvable" in output


def test_edit_mode_can_light_whole_board():
    moves = " ".join(f"{column},{row}" for column, row in iter_coordinates(GRID_4X4))
    output = run(["--size", "4", "--mode", "edit", "--moves", moves])
    assert "You Win!" in output


def test_out_of_bounds_move_exits_with_error():
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        main(["--size", "4", "--moves", "9,9", "--quiet"], out=out)
    assert excinfo.value.code == 1
    assert "[WARN]" in out.getvalue()


def test_unreadable_config_exits(tmp_path: Path):
    with pytest.raises(SystemExit) as excinfo:
        main(["--config", str(tmp_path / "nope.json"), "--quiet"], out=io.StringIO())
    assert excinfo.value.code == 2


def test_config_file_drives_grid(tmp_path: Path):
    path = tmp_path / "grid.json"
    path.write_text(json.dumps({"rowCount": 2, "colCount": 3}))
    output = run(["--config", str(path), "--moves", "0,0"])
    assert "lit 3/6" in output


def test_interactive_session():
    output = run(["--size", "4"], stdin_text="0 0\nstatus\nedit\n3 3\nreset\nbogus\nquit\n0 1\n")
    assert "lit 3/16 | solvable | moves 1" in output
    assert "mode: edit" in output
    assert "lit 4/16" in output
    assert "lit 0/16 | solvable | moves 0" in output
    assert "[WARN]" in output
    # nothing after quit is executed
    assert "moves 2" not in output


def test_run_command_quit_and_help():
    engine = PuzzleEngine(GRID_4X4)
    out = io.StringIO()
    assert run_command(engine, "help", "play", out) == ("play", True)
    assert run_command(engine, "quit", "play", out) == ("play", False)
    assert run_command(engine, "edit", "play", out) == ("edit", True)


def test_clicks_ignored_after_win_until_reset():
    engine = PuzzleEngine(GRID_4X4)
    engine.load_pattern([f"{c}_{r}" for c, r in iter_coordinates(GRID_4X4)])
    assert not apply_click(engine, (0, 0), "play")
    assert engine.is_won()
    engine.reset()
    assert apply_click(engine, (0, 0), "play")


def test_trace_flag_writes_jsonl(tmp_path: Path):
    trace = tmp_path / "trace.jsonl"
    run(["--size", "4", "--moves", "1,1 2,2", "--trace", str(trace)])
    lines = trace.read_text().splitlines()
    assert len(lines) == 2
    assert json.loads(lines[0])["action"] == {"type": "FLIP", "column": 1, "row": 1}


@pytest.mark.parametrize("pattern", ["abc", "1", "0_0 7_7"])
def test_bad_pattern_exits_with_warning(pattern):
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        main(["--size", "4", "--pattern", pattern, "--moves", "", "--quiet"], out=out)
    assert excinfo.value.code == 1
    assert "[WARN]" in out.getvalue()


def test_replay_saved_trace(tmp_path: Path):
    trace = tmp_path / "trace.jsonl"
    run(["--size", "4", "--moves", "0,0 3,3", "--trace", str(trace)])
    output = run(["--size", "4", "--replay", str(trace)])
    assert "lit 6/16 | solvable | moves 2" in output


def test_replay_bare_action_records(tmp_path: Path):
    path = tmp_path / "actions.jsonl"
    records = [
        {"type": "FLIP", "column": 1, "row": 1},
        {"type": "RESET_PUZZLE"},
        {"type": "FLIP_SINGLE", "column": 2, "row": 2},
    ]
    path.write_text("\n".join(json.dumps(record) for record in records) + "\n\n")
    assert load_actions(path)[0].type == "FLIP"
    output = run(["--size", "5", "--replay", str(path)])
    assert "lit 1/25 | solvable | moves 0" in output


@pytest.mark.parametrize(
    "content",
    ["not json\n", "[1, 2]\n", '{"type": "TELEPORT"}\n', '{"action": "FLIP"}\n', '{"type": "FLIP", "column": 9, "row": 9}\n'],
)
def test_replay_rejects_malformed_actions(tmp_path: Path, content):
    path = tmp_path / "bad.jsonl"
    path.write_text(content)
    out = io.StringIO()
    with pytest.raises(SystemExit) as excinfo:
        main(["--size", "4", "--replay", str(path), "--quiet"], out=out)
    assert excinfo.value.code == 1
    assert "[WARN]" in out.getvalue()


def test_replay_missing_file_raises():
    with pytest.raises(ActionError):
        load_actions("/nonexistent/actions.jsonl")

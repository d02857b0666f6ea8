"""lightsout.config
===================

Grid presets and loading of configuration records from JSON.
"""

from __future__ import annotations

import json
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Mapping

from .errors import ConfigError
from .types import GridConfig

# The 4x4 board uses the region-based neighbour table and counts lit cells;
# the 5x5 board filters uniform offsets and counts unlit cells.
GRID_4X4 = GridConfig(row_count=4, col_count=4, neighbor_policy="edge", count_lit=True)
GRID_5X5 = GridConfig(row_count=5, col_count=5, neighbor_policy="uniform", count_lit=False)

PRESETS: Dict[int, GridConfig] = {4: GRID_4X4, 5: GRID_5X5}

# camelCase keys accepted from front-end configuration files
_ALIASES = {
    "rowCount": "row_count",
    "colCount": "col_count",
    "canvasWidth": "canvas_width",
    "canvasHeight": "canvas_height",
    "neighborPolicy": "neighbor_policy",
    "countLit": "count_lit",
}


def preset(size: int) -> GridConfig:
    try:
        return PRESETS[size]
    except KeyError as exc:
        raise ConfigError(f"No preset for a {size}x{size} grid. Available: {sorted(PRESETS)}") from exc


def config_from_dict(payload: Mapping[str, Any]) -> GridConfig:
    """Build a :class:`GridConfig` from a configuration record.

    Missing optional keys fall back to the matching preset when the grid is
    square and a preset exists, otherwise to the dataclass defaults.
    """

    known = {field.name for field in fields(GridConfig)}
    values: Dict[str, Any] = {}
    for key, value in payload.items():
        name = _ALIASES.get(key, key)
        if name not in known:
            raise ConfigError(f"Unknown configuration key {key!r}")
        values[name] = value
    if "row_count" not in values or "col_count" not in values:
        raise ConfigError("Configuration needs both row_count and col_count")
    try:
        rows, cols = int(values["row_count"]), int(values["col_count"])
    except (TypeError, ValueError) as exc:
        raise ConfigError("row_count and col_count must be integers") from exc
    base = PRESETS.get(rows) if rows == cols else None
    if base is not None:
        values.setdefault("neighbor_policy", base.neighbor_policy)
        values.setdefault("count_lit", base.count_lit)
    values["row_count"], values["col_count"] = rows, cols
    return GridConfig(**values)


def load_config(path: str | Path) -> GridConfig:
    """Read a JSON configuration record from ``path``."""

    try:
        raw = json.loads(Path(path).read_text())
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"Could not read configuration {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise ConfigError(f"Configuration {path} must hold a JSON object")
    return config_from_dict(raw)


__all__ = ["GRID_4X4", "GRID_5X5", "PRESETS", "preset", "config_from_dict", "load_config"]

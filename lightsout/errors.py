"""Exception types raised by the puzzle engine."""

from __future__ import annotations


class LightsOutError(Exception):
    """Base class for every error raised by :mod:`lightsout`."""


class InvalidCoordinate(LightsOutError, ValueError):
    """A column/row pair falls outside the grid."""

    def __init__(self, column: int, row: int, col_count: int, row_count: int) -> None:
        super().__init__(
            f"Cell ({column}, {row}) is outside the {col_count}x{row_count} grid"
        )
        self.column = column
        self.row = row


class ConfigError(LightsOutError, ValueError):
    """A grid configuration record is malformed."""


class ActionError(LightsOutError, ValueError):
    """A textual or dict command could not be turned into an action."""


__all__ = ["LightsOutError", "InvalidCoordinate", "ConfigError", "ActionError"]

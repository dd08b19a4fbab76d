from __future__ import annotations

from enum import Enum


class PadNumbering(str, Enum):
    """How padding cells get their day_of_week."""

    # 1..n for leading pads, as the existing schedule UI expects.
    LEGACY = "legacy"
    # True weekdays of the adjacent month's days.
    CALENDAR = "calendar"


class CellKind(str, Enum):
    """Classification of a grid position."""

    REAL = "REAL"
    LEADING_PAD = "LEADING_PAD"
    TRAILING_PAD = "TRAILING_PAD"
    EMPTY = "EMPTY"

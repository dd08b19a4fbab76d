from __future__ import annotations

from ...core.constants import DAYS_PER_WEEK
from .base import PadNumberingStrategy


class CalendarPadNumbering(PadNumberingStrategy):
    """Padding cells take the true weekdays of the adjacent months' days."""

    def leading_weekdays(self, count: int) -> list[int]:
        # The 1st falls on weekday `count`, so the days before it fill 0..count-1.
        return list(range(count))

    def trailing_weekdays(self, count: int, *, last_day_of_week: int) -> list[int]:
        return [(last_day_of_week + 1 + i) % DAYS_PER_WEEK for i in range(count)]

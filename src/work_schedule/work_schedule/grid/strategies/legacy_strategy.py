from __future__ import annotations

from .base import PadNumberingStrategy


class LegacyPadNumbering(PadNumberingStrategy):
    """Numbering the schedule UI was built against.

    Leading pads are counted 1..n instead of carrying the previous month's
    weekdays, so the last leading pad shares its slot with the 1st of the
    month. Trailing pads continue from the last real weekday, 7 wrapping to 0.
    """

    def leading_weekdays(self, count: int) -> list[int]:
        return [i + 1 for i in range(count)]

    def trailing_weekdays(self, count: int, *, last_day_of_week: int) -> list[int]:
        out = []
        for i in range(count):
            n = last_day_of_week + 1 + i
            out.append(0 if n == 7 else n)
        return out

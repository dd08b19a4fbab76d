from __future__ import annotations

from dataclasses import dataclass
from datetime import date as Date
from typing import Optional

from ..core.enums import CellKind


@dataclass(frozen=True)
class DayCell:
    """One position of the month grid: a real day or a padding placeholder."""

    day: int
    day_of_week: int
    weekday_name: str
    date: Optional[Date]
    iso_date: str
    compact_date: str
    year: int
    month: str
    week_index: int
    is_leading_pad: bool = False
    is_trailing_pad: bool = False

    @property
    def is_real(self) -> bool:
        return self.day > 0

    @property
    def kind(self) -> CellKind:
        if self.is_leading_pad:
            return CellKind.LEADING_PAD
        if self.is_trailing_pad:
            return CellKind.TRAILING_PAD
        if self.is_real:
            return CellKind.REAL
        return CellKind.EMPTY

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "day_of_week": self.day_of_week,
            "weekday_name": self.weekday_name,
            "iso_date": self.iso_date,
            "compact_date": self.compact_date,
            "year": self.year,
            "month": self.month,
            "week_index": self.week_index,
            "is_leading_pad": self.is_leading_pad,
            "is_trailing_pad": self.is_trailing_pad,
            "kind": self.kind.value,
        }

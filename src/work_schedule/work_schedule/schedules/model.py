from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class CalendarCellUI:
    """Read-model of one calendar slot for templates/JSON."""

    day: int
    day_of_week: int
    weekday_name: str
    iso_date: str
    compact_date: str
    kind: str
    is_today: bool
    label: str

    @property
    def is_blank(self) -> bool:
        return self.day == 0

    def to_dict(self) -> dict:
        return {
            "day": self.day,
            "day_of_week": self.day_of_week,
            "weekday_name": self.weekday_name,
            "iso_date": self.iso_date,
            "compact_date": self.compact_date,
            "kind": self.kind,
            "is_today": self.is_today,
            "label": self.label,
        }


@dataclass(frozen=True)
class MonthView:
    month_key: str
    title: str
    previous_month: str
    next_month: str
    header: tuple[str, ...]
    weeks: list[list[CalendarCellUI]] = field(default_factory=list)

    @property
    def week_count(self) -> int:
        return len(self.weeks)

    def to_dict(self) -> dict:
        return {
            "month": self.month_key,
            "title": self.title,
            "previous_month": self.previous_month,
            "next_month": self.next_month,
            "header": list(self.header),
            "week_count": self.week_count,
            "weeks": [[c.to_dict() for c in row] for row in self.weeks],
        }

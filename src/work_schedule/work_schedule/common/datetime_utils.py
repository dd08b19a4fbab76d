from __future__ import annotations

from datetime import date, datetime

from ..core.exceptions import MalformedDate


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError) as e:
        raise MalformedDate(f"Invalid ISO date: {value!r}") from e


def parse_compact_date(value: str) -> date:
    """Parse YYYYMMDD string into date."""
    if not isinstance(value, str) or len(value) != 8 or not value.isdigit():
        raise MalformedDate(f"Invalid compact date: {value!r}")
    try:
        return date(int(value[:4]), int(value[4:6]), int(value[6:]))
    except ValueError as e:
        raise MalformedDate(f"Invalid compact date: {value!r}") from e


def to_iso(d: date) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def to_compact(d: date) -> str:
    return f"{d.year:04d}{d.month:02d}{d.day:02d}"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


def day_of_week(d: date) -> int:
    """Sunday=0 .. Saturday=6 (date.weekday() is Monday=0)."""
    return (d.weekday() + 1) % 7


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def today_local() -> date:
    return now_local().date()

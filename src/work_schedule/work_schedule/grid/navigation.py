from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import now_local
from ..common.validators import format_month_key, parse_month_key
from ..core.constants import MAX_YEAR, MIN_YEAR, MONTH_NAMES
from ..core.exceptions import InvalidArgument


def current_month_key(now: Optional[datetime] = None) -> str:
    """Month key of the local date, e.g. ``2025-06``."""
    now = now or now_local()
    return format_month_key(now.year, now.month)


def previous_month_key(year_month: str) -> str:
    year, month = parse_month_key(year_month)
    if month == 1:
        year, month = year - 1, 12
    else:
        month -= 1
    if year < MIN_YEAR:
        raise InvalidArgument(f"No month before {year_month}")
    return format_month_key(year, month)


def next_month_key(year_month: str) -> str:
    year, month = parse_month_key(year_month)
    if month == 12:
        year, month = year + 1, 1
    else:
        month += 1
    if year > MAX_YEAR:
        raise InvalidArgument(f"No month after {year_month}")
    return format_month_key(year, month)


def month_title(year_month: str) -> str:
    """``2025-03`` -> ``March 2025``."""
    year, month = parse_month_key(year_month)
    return f"{MONTH_NAMES[month - 1]} {year}"

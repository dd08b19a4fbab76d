"""Render helpers for the calendar.

These run inside template loops, so bad input degrades to a fallback value
instead of raising.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_compact_date, parse_iso_date, to_compact, today_local
from ..core.constants import DEFAULT_DISPLAY_FALLBACK, MONTH_NAMES
from ..core.exceptions import MalformedDate

logger = logging.getLogger(__name__)


def is_today(compact_date: str, *, today: Optional[date] = None) -> bool:
    """True when ``compact_date`` (YYYYMMDD) is the local date."""
    if not compact_date:
        return False
    try:
        parse_compact_date(compact_date)
    except MalformedDate as e:
        logger.debug("is_today: %s", e)
        return False

    today = today or today_local()
    return compact_date == to_compact(today)


def format_for_display(iso_date: str, *, fallback: str = DEFAULT_DISPLAY_FALLBACK) -> str:
    """``2025-03-05`` -> ``March 5, 2025``; fallback for empty/invalid input."""
    if not isinstance(iso_date, str) or not iso_date.strip():
        return fallback
    try:
        d = parse_iso_date(iso_date.strip())
    except MalformedDate as e:
        logger.debug("format_for_display: %s", e)
        return fallback
    return f"{MONTH_NAMES[d.month - 1]} {d.day}, {d.year}"

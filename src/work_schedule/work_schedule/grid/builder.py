"""Month grid for the work-schedule calendar.

The grid is a flat sequence of day cells, 7 per week row, Sunday first.
Rows are numbered from 1 and a new row starts after every Saturday; the
first and last rows are completed with padding cells.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import day_of_week, days_in_month, to_compact, to_iso
from ..common.validators import parse_month_key
from ..core.constants import DAYS_PER_WEEK, SATURDAY, WEEKDAY_NAMES
from .model import DayCell
from .strategies.base import PadNumberingStrategy
from .strategies.legacy_strategy import LegacyPadNumbering

logger = logging.getLogger(__name__)


def _pad_cell(*, year: int, month: str, weekday: int, week_index: int, leading: bool = False, trailing: bool = False) -> DayCell:
    return DayCell(
        day=0,
        day_of_week=weekday,
        weekday_name=WEEKDAY_NAMES[weekday],
        date=None,
        iso_date="",
        compact_date="",
        year=year,
        month=month,
        week_index=week_index,
        is_leading_pad=leading,
        is_trailing_pad=trailing,
    )


def _real_cells(year: int, month: int) -> list[DayCell]:
    mm = f"{month:02d}"
    first_weekday = day_of_week(date(year, month, 1))

    cells: list[DayCell] = []
    week_index = 1
    for offset in range(days_in_month(year, month)):
        d = date(year, month, offset + 1)
        weekday = (first_weekday + offset) % DAYS_PER_WEEK
        cells.append(
            DayCell(
                day=d.day,
                day_of_week=weekday,
                weekday_name=WEEKDAY_NAMES[weekday],
                date=d,
                iso_date=to_iso(d),
                compact_date=to_compact(d),
                year=year,
                month=mm,
                week_index=week_index,
            )
        )
        if weekday == SATURDAY:
            week_index += 1
    return cells


def build_month_grid(year_month: str, *, strategy: Optional[PadNumberingStrategy] = None) -> list[DayCell]:
    """Build the padded grid for a ``YYYY-MM`` month key.

    Raises InvalidArgument for a malformed key or a month outside 1-12.
    The result length is always a multiple of 7.
    """

    year, month = parse_month_key(year_month)
    strategy = strategy or LegacyPadNumbering()
    mm = f"{month:02d}"

    real = _real_cells(year, month)

    in_first_week = sum(1 for c in real if c.week_index == 1)
    leading = [
        _pad_cell(year=year, month=mm, weekday=w, week_index=1, leading=True)
        for w in strategy.leading_weekdays(DAYS_PER_WEEK - in_first_week)
    ]

    last = real[-1]
    missing = SATURDAY - last.day_of_week
    trailing: list[DayCell] = []
    if missing > 0:
        trailing = [
            _pad_cell(year=year, month=mm, weekday=w, week_index=last.week_index, trailing=True)
            for w in strategy.trailing_weekdays(missing, last_day_of_week=last.day_of_week)
        ]

    grid = leading + real + trailing
    logger.debug(
        "Built grid %s: %d leading, %d days, %d trailing, %d weeks",
        year_month,
        len(leading),
        len(real),
        len(trailing),
        week_count(grid),
    )
    return grid


def week_count(grid: Sequence[DayCell]) -> int:
    """Number of week rows, i.e. the week_index of the last cell."""
    if not grid:
        return 0
    return grid[-1].week_index


def week_row(grid: Sequence[DayCell], week_index: int) -> list[DayCell]:
    """Return the 7 cells of one week row, Sunday first.

    Slots with no matching cell are filled with an empty cell that is not
    flagged as padding. If two cells claim the same slot the real one wins.
    """

    slots: dict[int, DayCell] = {}
    for cell in grid:
        if cell.week_index != week_index:
            continue
        current = slots.get(cell.day_of_week)
        if current is None or (cell.is_real and not current.is_real):
            slots[cell.day_of_week] = cell

    sample = next((c for c in grid if c.week_index == week_index), None)
    year = sample.year if sample else 0
    month = sample.month if sample else ""

    return [
        slots.get(weekday) or _pad_cell(year=year, month=month, weekday=weekday, week_index=week_index)
        for weekday in range(DAYS_PER_WEEK)
    ]

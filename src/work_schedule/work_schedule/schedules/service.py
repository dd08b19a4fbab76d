from __future__ import annotations

import logging
from datetime import date
from functools import lru_cache
from typing import Optional

from ..core.constants import DEFAULT_DISPLAY_FALLBACK, DEFAULT_GRID_CACHE_SIZE, WEEK_DAYS
from ..core.exceptions import InvalidArgument
from ..display.formatting import format_for_display, is_today
from ..grid.builder import build_month_grid, week_count, week_row
from ..grid.model import DayCell
from ..grid.navigation import current_month_key, month_title, next_month_key, previous_month_key
from ..grid.strategies.base import PadNumberingStrategy
from ..grid.strategies.legacy_strategy import LegacyPadNumbering
from .model import CalendarCellUI, MonthView

logger = logging.getLogger(__name__)


class CalendarService:
    """Composes the month grid into the rows the schedule page renders.

    Grids are cached per month key; the builder is pure so the cache only
    saves work.
    """

    def __init__(
        self,
        *,
        strategy: Optional[PadNumberingStrategy] = None,
        display_fallback: str = DEFAULT_DISPLAY_FALLBACK,
        cache_size: int = DEFAULT_GRID_CACHE_SIZE,
    ):
        self._strategy = strategy or LegacyPadNumbering()
        self._display_fallback = display_fallback
        self._cached_grid = lru_cache(maxsize=max(int(cache_size), 0))(self._build)

    def _build(self, year_month: str) -> tuple[DayCell, ...]:
        return tuple(build_month_grid(year_month, strategy=self._strategy))

    def grid(self, year_month: str) -> tuple[DayCell, ...]:
        return self._cached_grid(year_month.strip() if isinstance(year_month, str) else year_month)

    def resolve_month(self, year_month: Optional[str]) -> str:
        """Empty input means the current month."""
        if not year_month or not str(year_month).strip():
            return current_month_key()
        return str(year_month).strip()

    def month_view(self, year_month: Optional[str] = None, *, today: Optional[date] = None) -> MonthView:
        key = self.resolve_month(year_month)
        grid = self.grid(key)

        weeks = [
            [self._to_ui(cell, today=today) for cell in week_row(grid, n)]
            for n in range(1, week_count(grid) + 1)
        ]
        logger.debug("Month view %s: %d weeks", key, len(weeks))

        return MonthView(
            month_key=f"{grid[0].year:04d}-{grid[0].month}",
            title=month_title(key),
            previous_month=self._neighbour(previous_month_key, key),
            next_month=self._neighbour(next_month_key, key),
            header=WEEK_DAYS,
            weeks=weeks,
        )

    def cache_info(self):
        return self._cached_grid.cache_info()

    def clear_cache(self) -> None:
        self._cached_grid.cache_clear()

    def _neighbour(self, step, key: str) -> str:
        # The first and last representable months have no neighbour.
        try:
            return step(key)
        except InvalidArgument:
            return ""

    def _to_ui(self, cell: DayCell, *, today: Optional[date]) -> CalendarCellUI:
        return CalendarCellUI(
            day=cell.day,
            day_of_week=cell.day_of_week,
            weekday_name=cell.weekday_name,
            iso_date=cell.iso_date,
            compact_date=cell.compact_date,
            kind=cell.kind.value,
            is_today=is_today(cell.compact_date, today=today),
            label=format_for_display(cell.iso_date, fallback=self._display_fallback),
        )

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.work_schedule.work_schedule.core.constants import WEEK_DAYS
from src.work_schedule.work_schedule.core.exceptions import InvalidArgument
from src.work_schedule.work_schedule.grid import navigation
from src.work_schedule.work_schedule.grid.strategies.calendar_strategy import CalendarPadNumbering
from src.work_schedule.work_schedule.schedules.service import CalendarService


def test_month_view_rows_and_navigation():
    svc = CalendarService()
    view = svc.month_view("2024-02", today=date(2024, 2, 14))

    assert view.month_key == "2024-02"
    assert view.title == "February 2024"
    assert view.previous_month == "2024-01"
    assert view.next_month == "2024-03"
    assert view.header == WEEK_DAYS
    assert view.week_count == 5
    assert all(len(row) == 7 for row in view.weeks)


def test_month_view_marks_today_and_labels():
    svc = CalendarService()
    view = svc.month_view("2024-02", today=date(2024, 2, 14))

    today_cells = [c for row in view.weeks for c in row if c.is_today]
    assert len(today_cells) == 1
    cell = today_cells[0]
    assert cell.day == 14
    assert cell.day_of_week == 3
    assert cell.label == "February 14, 2024"
    assert view.weeks[2][3] is cell


def test_month_view_blank_cells_use_fallback_label():
    svc = CalendarService(display_fallback="n/a")
    view = svc.month_view("2024-02", today=date(2024, 2, 14))

    first = view.weeks[0][0]
    assert first.is_blank
    assert first.label == "n/a"
    assert first.is_today is False


def test_month_view_normalizes_single_digit_month():
    view = CalendarService().month_view("2025-6", today=date(2025, 6, 1))

    assert view.month_key == "2025-06"
    assert view.weeks[0][0].day == 1


def test_month_view_defaults_to_current_month(monkeypatch):
    monkeypatch.setattr(navigation, "now_local", lambda: datetime(2025, 1, 15, 9, 0))

    view = CalendarService().month_view(None, today=date(2025, 1, 15))

    assert view.month_key == "2025-01"
    assert view.week_count == 5


def test_month_view_edges_have_no_neighbour():
    svc = CalendarService()

    assert svc.month_view("9999-12", today=date(2025, 1, 1)).next_month == ""
    assert svc.month_view("0001-01", today=date(2025, 1, 1)).previous_month == ""


def test_month_view_invalid_month_raises():
    with pytest.raises(InvalidArgument):
        CalendarService().month_view("2025-13")


def test_grid_is_cached_per_month():
    svc = CalendarService(cache_size=4)

    first = svc.grid("2025-01")
    second = svc.grid("2025-01")

    assert first is second
    assert isinstance(first, tuple)
    assert svc.cache_info().hits == 1

    svc.clear_cache()
    assert svc.cache_info().currsize == 0


def test_cache_disabled_still_returns_equal_grids():
    svc = CalendarService(cache_size=0)

    assert svc.grid("2025-01") == svc.grid("2025-01")


def test_strategy_is_applied():
    svc = CalendarService(strategy=CalendarPadNumbering())
    leading = [c for c in svc.grid("2024-02") if c.is_leading_pad]

    assert [c.day_of_week for c in leading] == [0, 1, 2, 3]


def test_month_view_to_dict():
    data = CalendarService().month_view("2025-06", today=date(2025, 6, 1)).to_dict()

    assert data["month"] == "2025-06"
    assert data["week_count"] == 5
    assert data["header"] == list(WEEK_DAYS)
    assert data["weeks"][0][0]["is_today"] is True
    assert data["weeks"][4][2]["kind"] == "TRAILING_PAD"

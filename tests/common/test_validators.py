from datetime import date

import pytest

from src.work_schedule.work_schedule.common.datetime_utils import (
    day_of_week,
    days_in_month,
    is_leap_year,
    parse_compact_date,
    parse_iso_date,
    to_compact,
    to_iso,
)
from src.work_schedule.work_schedule.common.validators import format_month_key, parse_month_key
from src.work_schedule.work_schedule.core.exceptions import InvalidArgument, MalformedDate


def test_parse_month_key():
    assert parse_month_key("2025-06") == (2025, 6)
    assert parse_month_key(" 2025-6 ") == (2025, 6)


@pytest.mark.parametrize("bad", ["0000-01", "2025-123", "2025-1a", "２０２５-01", "2025-"])
def test_parse_month_key_rejects(bad):
    with pytest.raises(InvalidArgument):
        parse_month_key(bad)


def test_format_month_key_pads():
    assert format_month_key(987, 3) == "0987-03"


def test_leap_years():
    assert is_leap_year(2024)
    assert is_leap_year(2000)
    assert not is_leap_year(1900)
    assert not is_leap_year(2023)
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2025, 9) == 30


def test_day_of_week_is_sunday_first():
    assert day_of_week(date(2025, 6, 1)) == 0
    assert day_of_week(date(2024, 2, 1)) == 4
    assert day_of_week(date(2025, 3, 1)) == 6


def test_date_codes():
    d = date(2025, 3, 5)

    assert to_iso(d) == "2025-03-05"
    assert to_compact(d) == "20250305"
    assert parse_iso_date("2025-03-05") == d
    assert parse_compact_date("20250305") == d


@pytest.mark.parametrize("bad", ["", "2025-3", "2025-02-30", None])
def test_parse_iso_date_raises_malformed(bad):
    with pytest.raises(MalformedDate):
        parse_iso_date(bad)


@pytest.mark.parametrize("bad", ["", "2025035", "20250230", "2025-03-05", 20250305])
def test_parse_compact_date_raises_malformed(bad):
    with pytest.raises(MalformedDate):
        parse_compact_date(bad)

from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.work_schedule.work_schedule.container import build_container
from src.work_schedule.work_schedule.core.exceptions import ValidationError
from src.work_schedule.work_schedule.grid.strategies.calendar_strategy import CalendarPadNumbering
from src.work_schedule.work_schedule.grid.strategies.legacy_strategy import LegacyPadNumbering


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("development", "config.development"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_from_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == expected


def test_settings_module_default(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)

    assert get_settings_module() == "config.development"


def test_container_defaults_to_legacy_numbering():
    container = build_container(settings=SimpleNamespace())

    assert isinstance(container.pad_strategy, LegacyPadNumbering)


def test_container_honours_pad_numbering_setting():
    container = build_container(settings=SimpleNamespace(PAD_NUMBERING="calendar", GRID_CACHE_SIZE=2))
    leading = [c for c in container.calendar_service.grid("2024-02") if c.is_leading_pad]

    assert isinstance(container.pad_strategy, CalendarPadNumbering)
    assert [c.day_of_week for c in leading] == [0, 1, 2, 3]


def test_container_rejects_unknown_pad_numbering():
    with pytest.raises(ValidationError):
        build_container(settings=SimpleNamespace(PAD_NUMBERING="iso"))

from __future__ import annotations

from dataclasses import dataclass

from .core.constants import DEFAULT_DISPLAY_FALLBACK, DEFAULT_GRID_CACHE_SIZE
from .core.enums import PadNumbering
from .grid.factory import PadNumberingStrategyFactory
from .grid.strategies.base import PadNumberingStrategy
from .schedules.service import CalendarService


@dataclass(frozen=True)
class Container:
    pad_strategy: PadNumberingStrategy
    calendar_service: CalendarService


def build_container(*, settings: object) -> Container:
    pad_strategy = PadNumberingStrategyFactory().for_mode(
        getattr(settings, "PAD_NUMBERING", PadNumbering.LEGACY.value)
    )
    calendar_service = CalendarService(
        strategy=pad_strategy,
        display_fallback=str(getattr(settings, "DISPLAY_FALLBACK", DEFAULT_DISPLAY_FALLBACK)),
        cache_size=int(getattr(settings, "GRID_CACHE_SIZE", DEFAULT_GRID_CACHE_SIZE)),
    )

    return Container(
        pad_strategy=pad_strategy,
        calendar_service=calendar_service,
    )

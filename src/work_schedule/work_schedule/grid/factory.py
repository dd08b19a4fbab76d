from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import PadNumbering
from ..core.exceptions import ValidationError
from .strategies.base import PadNumberingStrategy
from .strategies.calendar_strategy import CalendarPadNumbering
from .strategies.legacy_strategy import LegacyPadNumbering


@dataclass
class PadNumberingStrategyFactory:
    """Factory Pattern: choose the pad numbering from configuration."""

    def for_mode(self, mode: PadNumbering | str) -> PadNumberingStrategy:
        if not isinstance(mode, PadNumbering):
            try:
                mode = PadNumbering(str(mode).strip().lower())
            except ValueError as e:
                raise ValidationError(f"Unknown pad numbering: {mode!r}") from e

        if mode == PadNumbering.CALENDAR:
            return CalendarPadNumbering()
        return LegacyPadNumbering()

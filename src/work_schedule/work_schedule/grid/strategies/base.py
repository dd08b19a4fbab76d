from __future__ import annotations

from abc import ABC, abstractmethod


class PadNumberingStrategy(ABC):
    """Strategy Pattern: decide which day_of_week padding cells carry."""

    @abstractmethod
    def leading_weekdays(self, count: int) -> list[int]:
        raise NotImplementedError

    @abstractmethod
    def trailing_weekdays(self, count: int, *, last_day_of_week: int) -> list[int]:
        raise NotImplementedError

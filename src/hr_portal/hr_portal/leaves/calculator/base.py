from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from ...holidays.model import HolidaySet


class LeaveDurationCalculator(ABC):
    """Calculator interface (Strategy Pattern for leave duration)."""

    @abstractmethod
    def duration(self, start_date: date, end_date: date, holidays: HolidaySet) -> int:
        raise NotImplementedError

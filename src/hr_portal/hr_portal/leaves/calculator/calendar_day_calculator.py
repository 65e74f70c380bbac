from __future__ import annotations

from datetime import date

from ...holidays.model import HolidaySet
from .base import LeaveDurationCalculator


class CalendarDayCalculator(LeaveDurationCalculator):
    """Legacy rule: plain inclusive day difference, no Sunday/holiday exclusion.

    Deprecated. Kept only for leave forms that have not moved to
    WorkingDayCalculator; the dates are compared by absolute difference,
    so a reversed range still yields a positive count.
    """

    def duration(self, start_date: date, end_date: date, holidays: HolidaySet) -> int:
        return abs((end_date - start_date).days) + 1

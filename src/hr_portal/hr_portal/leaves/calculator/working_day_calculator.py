from __future__ import annotations

from datetime import date

from ...common.datetime_utils import date_key, iter_days
from ...holidays.model import HolidaySet
from ..model import DurationSummary
from .base import LeaveDurationCalculator

# date.weekday() numbering: Monday=0 ... Sunday=6.
SUNDAY = 6


class WorkingDayCalculator(LeaveDurationCalculator):
    """Standard rule: every day in the inclusive range except Sundays and holidays.

    All comparisons use local calendar dates; holiday keys are built from
    year/month/day so no timezone shift can move a day.
    """

    def is_date_excluded(self, day: date, holidays: HolidaySet) -> bool:
        return day.weekday() == SUNDAY or date_key(day) in holidays

    def count_working_days(self, start_date: date, end_date: date, holidays: HolidaySet) -> int:
        return sum(1 for day in iter_days(start_date, end_date) if not self.is_date_excluded(day, holidays))

    def excluded_count(self, start_date: date, end_date: date, holidays: HolidaySet) -> int:
        return sum(1 for day in iter_days(start_date, end_date) if self.is_date_excluded(day, holidays))

    @staticmethod
    def total_calendar_days(start_date: date, end_date: date) -> int:
        return max((end_date - start_date).days + 1, 0)

    def summarize(self, start_date: date, end_date: date, holidays: HolidaySet) -> DurationSummary:
        working = self.count_working_days(start_date, end_date, holidays)
        total = self.total_calendar_days(start_date, end_date)
        return DurationSummary(total=total, excluded=total - working, working=working)

    def duration(self, start_date: date, end_date: date, holidays: HolidaySet) -> int:
        return self.count_working_days(start_date, end_date, holidays)

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import FrozenSet, Iterable, Optional

from ..common.datetime_utils import date_key

# ISO YYYY-MM-DD keys of company holidays.
HolidaySet = FrozenSet[str]


@dataclass(frozen=True)
class Holiday:
    holiday_id: int
    holiday_date: date
    name: str
    description: Optional[str] = None


def build_holiday_set(holidays: Iterable[Holiday]) -> HolidaySet:
    return frozenset(date_key(h.holiday_date) for h in holidays)

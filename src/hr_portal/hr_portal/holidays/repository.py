from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Holiday


class HolidayRepository(Protocol):
    """Holiday calendar provider backed by the `holidays` collection."""

    def list_all(self) -> Sequence[Holiday]:
        raise NotImplementedError

    def create(self, *, holiday_date: date, name: str, description: Optional[str] = None) -> int:
        raise NotImplementedError

    def create_many(self, rows: Sequence[tuple[date, str, str]]) -> int:
        """Insert several holidays in one transaction; returns the number written."""

        raise NotImplementedError

    def delete_by_id(self, holiday_id: int) -> bool:
        raise NotImplementedError

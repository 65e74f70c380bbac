from __future__ import annotations

import logging
from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import date_key
from ..common.validators import require_non_empty
from ..core.constants import HR_ADMIN_ROLES
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, MissingFieldError, ValidationError
from .defaults import national_holidays
from .model import Holiday, HolidaySet, build_holiday_set
from .repository import HolidayRepository

logger = logging.getLogger(__name__)


class HolidayService:
    """Use case: maintain the company holiday calendar."""

    def __init__(self, holidays: HolidayRepository):
        self._holidays = holidays

    def list_holidays(self) -> Sequence[Holiday]:
        return self._holidays.list_all()

    def holiday_set(self) -> HolidaySet:
        return build_holiday_set(self._holidays.list_all())

    def add_holiday(
        self,
        *,
        current_role: Role,
        holiday_date: Optional[date],
        name: str,
        description: str = "",
    ) -> int:
        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("You are not allowed to manage holidays")
        if holiday_date is None:
            raise MissingFieldError("Please select a date and enter a holiday name")
        name = require_non_empty(name, "Holiday name")

        holiday_id = self._holidays.create(
            holiday_date=holiday_date,
            name=name,
            description=(description or "").strip() or None,
        )
        logger.info("Holiday %s added on %s", name, date_key(holiday_date))
        return holiday_id

    def delete_holiday(self, *, current_role: Role, holiday_id: int) -> None:
        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("You are not allowed to manage holidays")
        if not self._holidays.delete_by_id(int(holiday_id)):
            raise ValidationError("Holiday not found")

    def import_national_holidays(self, *, current_role: Role, year: int) -> int:
        """Add the national holiday list for `year`, skipping dates already on the calendar."""

        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("You are not allowed to manage holidays")

        existing = self.holiday_set()
        to_add = [row for row in national_holidays(year) if date_key(row[0]) not in existing]
        added = self._holidays.create_many(to_add)
        logger.info("Imported %d national holidays for %s", added, year)
        return added

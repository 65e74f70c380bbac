from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..common.datetime_utils import now_local
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_LEAVE_BALANCE, HR_ADMIN_ROLES, LEAVE_ALLOCATION_SETTING, MONTHLY_PL_ACCRUAL
from ..core.enums import LeaveType, Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import LeaveBalance
from .policy import coerce_leave_type
from .repository import LeaveBalanceRepository, SystemSettingsRepository

logger = logging.getLogger(__name__)


class LeaveBalanceService:
    """Use case: HR maintains balances and runs the monthly PL allocation."""

    def __init__(
        self,
        balances: LeaveBalanceRepository,
        employees: EmployeeRepository,
        settings: SystemSettingsRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._balances = balances
        self._employees = employees
        self._settings = settings
        self._clock = clock

    @staticmethod
    def _require_hr(current_role: Role) -> None:
        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("Only HR can manage leave balances")

    def ensure_balance(self, employee_id: str) -> LeaveBalance:
        """Return the stored balance, creating the default entitlement if there is none."""

        balance = self._balances.get_balance(employee_id)
        if balance:
            return balance

        now = self._clock()
        self._balances.save_balance(employee_id=employee_id, quantities=DEFAULT_LEAVE_BALANCE, updated_at=now)
        logger.info("Created default leave balance for %s", employee_id)
        return LeaveBalance(employee_id=employee_id, quantities=dict(DEFAULT_LEAVE_BALANCE), last_updated=now)

    def list_employee_balances(self, *, current_role: Role) -> list[dict]:
        self._require_hr(current_role)

        out: list[dict] = []
        for emp in self._employees.list_all():
            balance = self.ensure_balance(emp.user_id)
            out.append(
                {
                    "employee_id": emp.user_id,
                    "name": emp.name or "Unknown",
                    "employee_code": emp.employee_code,
                    "department": emp.department or "-",
                    "balance": {t.value: q for t, q in balance.quantities.items()},
                }
            )
        out.sort(key=lambda x: x["name"].lower())
        return out

    def update_balance(self, *, current_role: Role, employee_id: str, quantities: Mapping[str, float]) -> LeaveBalance:
        self._require_hr(current_role)

        parsed: dict[LeaveType, float] = {}
        for key, value in quantities.items():
            leave_type = coerce_leave_type(key)
            if leave_type is None:
                raise ValidationError("Leave type is required")
            try:
                parsed[leave_type] = require_non_negative(float(value), leave_type.value)
            except (TypeError, ValueError):
                raise ValidationError(f"{leave_type.value} must be a number")

        if not parsed:
            raise ValidationError("Nothing to update")

        now = self._clock()
        self._balances.save_balance(employee_id=employee_id, quantities=parsed, updated_at=now)
        current = self._balances.get_balance(employee_id)
        return current or LeaveBalance(employee_id=employee_id, quantities=parsed, last_updated=now)

    def last_allocation(self) -> Optional[datetime]:
        raw = self._settings.get_value(LEAVE_ALLOCATION_SETTING)
        return datetime.fromisoformat(raw) if raw else None

    def can_allocate(self) -> bool:
        last = self.last_allocation()
        if last is None:
            return True
        now = self._clock()
        return (last.year, last.month) != (now.year, now.month)

    def allocate_monthly(self, *, current_role: Role) -> int:
        """Add the monthly PL accrual to every employee; allowed once per calendar month."""

        self._require_hr(current_role)
        if not self.can_allocate():
            raise ValidationError("Monthly leaves have already been allocated this month")

        now = self._clock()
        allocations: dict[str, dict[LeaveType, float]] = {}
        for emp in self._employees.list_all():
            current = self._balances.get_balance(emp.user_id)
            quantities = dict(current.quantities) if current else {}
            new_balance = {t: quantities.get(t, default) for t, default in DEFAULT_LEAVE_BALANCE.items()}
            new_balance[LeaveType.PL] = quantities.get(LeaveType.PL, 0) + MONTHLY_PL_ACCRUAL
            allocations[emp.user_id] = new_balance

        self._balances.save_allocation(
            balances=allocations,
            setting_key=LEAVE_ALLOCATION_SETTING,
            setting_value=now.isoformat(),
            updated_at=now,
        )
        logger.info("Allocated monthly leave to %d employees", len(allocations))
        return len(allocations)

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional, Sequence, Union

from ..common.datetime_utils import now_local
from ..core.constants import APPROVER_ROLES, DEFAULT_HISTORY_LIMIT, UNKNOWN_EMPLOYEE_NAME
from ..core.enums import Gender, LeaveType
from ..core.exceptions import NoApproversError
from ..employees.repository import EmployeeRepository
from ..holidays.model import HolidaySet, build_holiday_set
from ..holidays.repository import HolidayRepository
from ..users.repository import UserRoleRepository
from .calculator.base import LeaveDurationCalculator
from .calculator.working_day_calculator import WorkingDayCalculator
from .model import DurationSummary, LeaveBalance, LeaveRequest
from .policy import LEAVE_TYPE_NAMES, coerce_leave_type, is_balance_exempt, is_paid, selectable_leave_types
from .repository import LeaveBalanceRepository, LeaveRepository
from .validator import check_required_fields, validate_leave_request

logger = logging.getLogger(__name__)


class LeaveService:
    """Use case: an employee previews and submits leave requests.

    The employee identity is always passed in by the caller.
    """

    def __init__(
        self,
        leaves: LeaveRepository,
        balances: LeaveBalanceRepository,
        holidays: HolidayRepository,
        employees: EmployeeRepository,
        roles: UserRoleRepository,
        *,
        calculator: Optional[LeaveDurationCalculator] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._balances = balances
        self._holidays = holidays
        self._employees = employees
        self._roles = roles
        self._calculator = calculator or WorkingDayCalculator()
        self._clock = clock

    def _holiday_set(self) -> HolidaySet:
        return build_holiday_set(self._holidays.list_all())

    def _balance_for(self, employee_id: str) -> LeaveBalance:
        return self._balances.get_balance(employee_id) or LeaveBalance(employee_id=employee_id)

    def preview_duration(self, *, start_date: date, end_date: date) -> DurationSummary:
        holidays = self._holiday_set()
        if isinstance(self._calculator, WorkingDayCalculator):
            return self._calculator.summarize(start_date, end_date, holidays)
        total = self._calculator.duration(start_date, end_date, holidays)
        return DurationSummary(total=total, excluded=0, working=total)

    def leave_type_options(self, *, employee_id: str, gender: Optional[Gender]) -> list[dict]:
        balance = self._balance_for(employee_id)
        return [
            {
                "code": t.value,
                "name": LEAVE_TYPE_NAMES[t],
                "available": None if is_balance_exempt(t) else balance.available(t),
            }
            for t in selectable_leave_types(gender)
        ]

    def get_balance(self, *, employee_id: str) -> LeaveBalance:
        return self._balance_for(employee_id)

    def resolve_approvers(self) -> list[str]:
        approver_ids: list[str] = []
        for role in APPROVER_ROLES:
            for user_id in self._roles.list_user_ids_by_role(role):
                if user_id not in approver_ids:
                    approver_ids.append(user_id)
        return approver_ids

    def submit(
        self,
        *,
        employee_id: str,
        leave_type: Union[LeaveType, str, None],
        start_date: Optional[date],
        end_date: Optional[date],
        reason: Optional[str],
    ) -> int:
        leave_type = coerce_leave_type(leave_type)
        check_required_fields(leave_type=leave_type, start_date=start_date, end_date=end_date, reason=reason)

        holidays = self._holiday_set()
        duration = self._calculator.duration(start_date, end_date, holidays) if end_date >= start_date else 0
        balance = self._balance_for(employee_id)

        validate_leave_request(
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            duration=duration,
            balance=balance.quantities,
            reason=reason,
        )

        profile = self._employees.get_by_user_id(employee_id)
        if profile:
            employee_name = profile.name or UNKNOWN_EMPLOYEE_NAME
            employee_code = profile.employee_code or ""
        else:
            logger.warning("No employee record for user %s; submitting as %s", employee_id, UNKNOWN_EMPLOYEE_NAME)
            employee_name = UNKNOWN_EMPLOYEE_NAME
            employee_code = str(employee_id)

        approver_ids = self.resolve_approvers()
        if not approver_ids:
            raise NoApproversError("No HR or HOD found to approve leave")

        now = self._clock()
        request_id = self._leaves.create_leave(
            employee_id=str(employee_id),
            employee_name=employee_name,
            employee_code=employee_code,
            leave_type=leave_type,
            start_date=start_date,
            end_date=end_date,
            duration=float(duration),
            reason=reason.strip(),
            is_paid=is_paid(leave_type),
            approver_ids=approver_ids,
            applied_at=now,
        )
        logger.info(
            "Leave request %s submitted by %s: %s %s..%s (%s days, %d approvers)",
            request_id,
            employee_id,
            leave_type.value,
            start_date,
            end_date,
            duration,
            len(approver_ids),
        )
        return request_id

    def list_my_leaves(self, *, employee_id: str) -> Sequence[LeaveRequest]:
        return self._leaves.list_leaves(employee_id=str(employee_id), limit=DEFAULT_HISTORY_LIMIT)

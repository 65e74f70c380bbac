from __future__ import annotations

from datetime import date, datetime
from typing import Mapping, Optional, Protocol, Sequence

from ..core.enums import LeaveType, RequestStatus
from .model import LeaveBalance, LeaveRequest


class LeaveRepository(Protocol):
    def create_leave(
        self,
        *,
        employee_id: str,
        employee_name: str,
        employee_code: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        duration: float,
        reason: str,
        is_paid: bool,
        approver_ids: Sequence[str],
        applied_at: datetime,
    ) -> int:
        """Persist a PENDING request. Raises PersistenceError on any backend fault."""

        raise NotImplementedError

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def list_leaves(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        """Newest first."""

        raise NotImplementedError

    def decide_leave(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_by: str,
        decided_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        """Move a PENDING request to a terminal status; False if it was not pending."""

        raise NotImplementedError


class LeaveBalanceRepository(Protocol):
    def get_balance(self, employee_id: str) -> Optional[LeaveBalance]:
        raise NotImplementedError

    def save_balance(
        self,
        *,
        employee_id: str,
        quantities: Mapping[LeaveType, float],
        updated_at: datetime,
    ) -> None:
        raise NotImplementedError

    def save_allocation(
        self,
        *,
        balances: Mapping[str, Mapping[LeaveType, float]],
        setting_key: str,
        setting_value: str,
        updated_at: datetime,
    ) -> None:
        """Write every employee's balance and the allocation marker in one transaction."""

        raise NotImplementedError


class SystemSettingsRepository(Protocol):
    def get_value(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_value(self, key: str, value: str, *, updated_at: datetime) -> None:
        raise NotImplementedError

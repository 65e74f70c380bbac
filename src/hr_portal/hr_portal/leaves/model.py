from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Optional

from ..core.enums import LeaveType, RequestStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: str
    employee_name: str
    employee_code: str
    leave_type: LeaveType
    start_date: date
    end_date: date
    duration: float
    reason: str
    status: RequestStatus
    is_paid: bool
    approver_ids: tuple[str, ...]
    applied_at: datetime
    decided_by: Optional[str] = None
    decided_at: Optional[datetime] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class LeaveBalance:
    """Remaining entitlement per leave type (0.5-day granularity)."""

    employee_id: str
    quantities: Mapping[LeaveType, float] = field(default_factory=dict)
    last_updated: Optional[datetime] = None

    def available(self, leave_type: LeaveType) -> float:
        return float(self.quantities.get(leave_type, 0))


@dataclass(frozen=True)
class DurationSummary:
    total: int
    excluded: int
    working: int

    def describe(self) -> str:
        return f"Total: {self.total} days | Excluded: {self.excluded} days | Working: {self.working} days"

"""Pre-submission checks for a leave request.

Pure decision functions over already-fetched data: no repository access and
no side effects. Every failure raises a ValidationError subclass so the
caller can stop before any backend write.
"""

from __future__ import annotations

from datetime import date
from typing import Mapping, Optional

from ..core.enums import LeaveType
from ..core.exceptions import InsufficientBalanceError, InvalidRangeError, MissingFieldError
from .policy import LEAVE_TYPE_NAMES, is_balance_exempt


def _fmt_days(value: float) -> str:
    return f"{value:g}"


def check_required_fields(
    *,
    leave_type: Optional[LeaveType],
    start_date: Optional[date],
    end_date: Optional[date],
    reason: Optional[str],
) -> None:
    if not leave_type or not start_date or not end_date or not (reason or "").strip():
        raise MissingFieldError("Please fill all fields")


def check_date_range(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise InvalidRangeError("End date cannot be before start date")


def check_balance(leave_type: LeaveType, duration: float, balance: Mapping[LeaveType, float]) -> None:
    if is_balance_exempt(leave_type):
        return
    available = float(balance.get(leave_type, 0))
    if available < duration:
        raise InsufficientBalanceError(
            f"Insufficient {LEAVE_TYPE_NAMES[leave_type]} balance. Available: {_fmt_days(available)} days",
            leave_type=leave_type,
            available=available,
            requested=float(duration),
        )


def validate_leave_request(
    *,
    leave_type: Optional[LeaveType],
    start_date: Optional[date],
    end_date: Optional[date],
    duration: float,
    balance: Mapping[LeaveType, float],
    reason: Optional[str],
) -> None:
    check_required_fields(leave_type=leave_type, start_date=start_date, end_date=end_date, reason=reason)
    check_date_range(start_date, end_date)
    if duration <= 0:
        raise InvalidRangeError("No working days in the selected range")
    check_balance(leave_type, duration, balance)

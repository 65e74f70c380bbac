from __future__ import annotations

from datetime import date

import pytest

from src.hr_portal.hr_portal.core.enums import ErrorKind, LeaveType
from src.hr_portal.hr_portal.core.exceptions import InsufficientBalanceError, InvalidRangeError, MissingFieldError
from src.hr_portal.hr_portal.leaves.validator import check_balance, validate_leave_request


def _validate(**overrides):
    kwargs = dict(
        leave_type=LeaveType.PL,
        start_date=date(2024, 2, 5),
        end_date=date(2024, 2, 7),
        duration=3,
        balance={LeaveType.PL: 10},
        reason="Family function",
    )
    kwargs.update(overrides)
    validate_leave_request(**kwargs)


def test_valid_request_passes():
    _validate()


def test_insufficient_balance_reports_available():
    with pytest.raises(InsufficientBalanceError) as exc:
        _validate(leave_type=LeaveType.SL, duration=3, balance={LeaveType.SL: 2})

    assert exc.value.kind == ErrorKind.INSUFFICIENT_BALANCE
    assert exc.value.available == 2
    assert exc.value.requested == 3
    assert str(exc.value) == "Insufficient Sick Leave balance. Available: 2 days"


def test_lwp_ignores_balance():
    _validate(leave_type=LeaveType.LWP, end_date=date(2024, 6, 30), duration=100, balance={})


def test_vacation_ignores_balance():
    check_balance(LeaveType.VACATION, 40, {})


def test_missing_balance_entry_counts_as_zero():
    with pytest.raises(InsufficientBalanceError) as exc:
        check_balance(LeaveType.COMP_OFF, 1, {LeaveType.PL: 30})
    assert exc.value.available == 0


def test_half_day_balance():
    check_balance(LeaveType.CL, 1, {LeaveType.CL: 1.5})
    with pytest.raises(InsufficientBalanceError) as exc:
        check_balance(LeaveType.CL, 2, {LeaveType.CL: 1.5})
    assert "Available: 1.5 days" in str(exc.value)


def test_exact_balance_is_enough():
    check_balance(LeaveType.SL, 7, {LeaveType.SL: 7})


@pytest.mark.parametrize(
    "overrides",
    [
        {"leave_type": None},
        {"start_date": None},
        {"end_date": None},
        {"reason": ""},
        {"reason": "   "},
    ],
)
def test_missing_fields(overrides):
    with pytest.raises(MissingFieldError) as exc:
        _validate(**overrides)
    assert exc.value.kind == ErrorKind.MISSING_FIELD


def test_end_before_start():
    with pytest.raises(InvalidRangeError):
        _validate(start_date=date(2024, 2, 7), end_date=date(2024, 2, 5), duration=0)


def test_no_working_days_rejected():
    with pytest.raises(InvalidRangeError):
        _validate(start_date=date(2024, 2, 4), end_date=date(2024, 2, 4), duration=0)


def test_missing_fields_checked_before_balance():
    with pytest.raises(MissingFieldError):
        _validate(leave_type=LeaveType.SL, duration=30, balance={}, reason="")

from __future__ import annotations

from datetime import date, datetime

import pytest

from src.hr_portal.hr_portal.core.enums import LeaveType, RequestStatus, Role
from src.hr_portal.hr_portal.core.exceptions import AuthorizationError, ValidationError
from src.hr_portal.hr_portal.leaves.approval_service import LeaveApprovalService
from tests.fakes import FakeBalanceRepo, FakeLeaveRepo


def _pending(leaves: FakeLeaveRepo, *, leave_type=LeaveType.PL, duration=3.0, employee_id="u-emp") -> int:
    return leaves.create_leave(
        employee_id=employee_id,
        employee_name="Anita Sharma",
        employee_code="EMP003",
        leave_type=leave_type,
        start_date=date(2024, 2, 5),
        end_date=date(2024, 2, 7),
        duration=duration,
        reason="Trip",
        is_paid=leave_type != LeaveType.LWP,
        approver_ids=["u-hr"],
        applied_at=datetime(2024, 1, 15, 9, 0),
    )


def _service(leaves, balances):
    return LeaveApprovalService(leaves, balances, clock=lambda: datetime(2024, 1, 16, 12, 0))


def test_approve_deducts_balance():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 10, LeaveType.SL: 7}})
    rid = _pending(leaves)

    _service(leaves, balances).approve(current_role=Role.HR, approver_id="u-hr", request_id=rid, notes=" ok ")

    req = leaves.get_leave(request_id=rid)
    assert req.status == RequestStatus.APPROVED
    assert req.decided_by == "u-hr"
    assert req.decided_at == datetime(2024, 1, 16, 12, 0)
    assert req.notes == "ok"
    assert balances.get_balance("u-emp").available(LeaveType.PL) == 7
    assert balances.get_balance("u-emp").available(LeaveType.SL) == 7


def test_approve_never_goes_below_zero():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 1}})
    rid = _pending(leaves, duration=3)

    _service(leaves, balances).approve(current_role=Role.HOD, approver_id="u-hod", request_id=rid)

    assert balances.get_balance("u-emp").available(LeaveType.PL) == 0


def test_approve_lwp_leaves_balance_untouched():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 10}})
    rid = _pending(leaves, leave_type=LeaveType.LWP, duration=20)

    _service(leaves, balances).approve(current_role=Role.HR, approver_id="u-hr", request_id=rid)

    assert balances.saved == []
    assert leaves.get_leave(request_id=rid).status == RequestStatus.APPROVED


def test_reject_keeps_balance():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 10}})
    rid = _pending(leaves)

    _service(leaves, balances).reject(current_role=Role.HR, approver_id="u-hr", request_id=rid, notes="Busy week")

    req = leaves.get_leave(request_id=rid)
    assert req.status == RequestStatus.REJECTED
    assert req.notes == "Busy week"
    assert balances.saved == []


def test_decided_request_cannot_be_decided_again():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 10}})
    svc = _service(leaves, balances)
    rid = _pending(leaves)
    svc.reject(current_role=Role.HR, approver_id="u-hr", request_id=rid)

    with pytest.raises(ValidationError):
        svc.approve(current_role=Role.HR, approver_id="u-hr", request_id=rid)
    assert balances.saved == []


def test_unknown_request():
    svc = _service(FakeLeaveRepo(), FakeBalanceRepo())
    with pytest.raises(ValidationError):
        svc.approve(current_role=Role.HR, approver_id="u-hr", request_id=99)


def test_employee_cannot_decide():
    leaves = FakeLeaveRepo()
    svc = _service(leaves, FakeBalanceRepo())
    rid = _pending(leaves)

    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.EMPLOYEE, approver_id="u-emp", request_id=rid)
    with pytest.raises(AuthorizationError):
        svc.list_leaves(current_role=Role.EMPLOYEE)


def test_list_by_status():
    leaves = FakeLeaveRepo()
    svc = _service(leaves, FakeBalanceRepo({"u-emp": {LeaveType.PL: 10}}))
    first = _pending(leaves)
    _pending(leaves)
    svc.approve(current_role=Role.ADMIN, approver_id="u-admin", request_id=first)

    pending = svc.list_leaves(current_role=Role.HR, status=RequestStatus.PENDING)
    assert [x.request_id for x in pending] == [2]
    assert len(svc.list_leaves(current_role=Role.HR)) == 2


def test_lost_race_does_not_deduct():
    leaves = FakeLeaveRepo()
    balances = FakeBalanceRepo({"u-emp": {LeaveType.PL: 10}})
    rid = _pending(leaves)
    leaves.lose_decide_race = True

    with pytest.raises(ValidationError):
        _service(leaves, balances).approve(current_role=Role.HR, approver_id="u-hr", request_id=rid)

    assert balances.saved == []
    assert balances.get_balance("u-emp").available(LeaveType.PL) == 10

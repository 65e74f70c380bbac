from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_ADMIN_LIMIT, LEAVE_DECIDER_ROLES
from ..core.enums import RequestStatus, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import LeaveRequest
from .policy import is_balance_exempt
from .repository import LeaveBalanceRepository, LeaveRepository

logger = logging.getLogger(__name__)


class LeaveApprovalService:
    """Use case: HR/HOD decide pending leave requests."""

    def __init__(
        self,
        leaves: LeaveRepository,
        balances: LeaveBalanceRepository,
        *,
        clock: Callable[[], datetime] = now_local,
    ):
        self._leaves = leaves
        self._balances = balances
        self._clock = clock

    @staticmethod
    def _require_decider(current_role: Role) -> None:
        if current_role not in LEAVE_DECIDER_ROLES:
            raise AuthorizationError("Only HR or HOD can decide leave requests")

    def _get_pending(self, request_id: int) -> LeaveRequest:
        leave = self._leaves.get_leave(request_id=int(request_id))
        if not leave:
            raise ValidationError("Leave request not found")
        if leave.status != RequestStatus.PENDING:
            raise ValidationError("Leave request has already been decided")
        return leave

    def list_leaves(self, *, current_role: Role, status: Optional[RequestStatus] = None) -> Sequence[LeaveRequest]:
        self._require_decider(current_role)
        return self._leaves.list_leaves(status=status, limit=DEFAULT_ADMIN_LIMIT)

    def approve(self, *, current_role: Role, approver_id: str, request_id: int, notes: str = "") -> None:
        """Approve and deduct the duration from the balance (never below zero)."""

        self._require_decider(current_role)
        leave = self._get_pending(request_id)
        now = self._clock()

        # Only the caller whose update moved the request out of PENDING deducts.
        ok = self._leaves.decide_leave(
            request_id=leave.request_id,
            status=RequestStatus.APPROVED,
            decided_by=str(approver_id),
            decided_at=now,
            notes=(notes or "").strip() or None,
        )
        if not ok:
            raise ValidationError("Failed to approve leave")

        if not is_balance_exempt(leave.leave_type):
            balance = self._balances.get_balance(leave.employee_id)
            if balance:
                remaining = max(0.0, balance.available(leave.leave_type) - leave.duration)
                self._balances.save_balance(
                    employee_id=leave.employee_id,
                    quantities={leave.leave_type: remaining},
                    updated_at=now,
                )
        logger.info("Leave request %s approved by %s", leave.request_id, approver_id)

    def reject(self, *, current_role: Role, approver_id: str, request_id: int, notes: str = "") -> None:
        self._require_decider(current_role)
        leave = self._get_pending(request_id)

        ok = self._leaves.decide_leave(
            request_id=leave.request_id,
            status=RequestStatus.REJECTED,
            decided_by=str(approver_id),
            decided_at=self._clock(),
            notes=(notes or "").strip() or None,
        )
        if not ok:
            raise ValidationError("Failed to reject leave")
        logger.info("Leave request %s rejected by %s", leave.request_id, approver_id)

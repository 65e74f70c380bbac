from __future__ import annotations

import logging
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Callable, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.constants import DEFAULT_HISTORY_LIMIT, HR_ADMIN_ROLES
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, MissingFieldError, ValidationError
from .calculator import calculate_settlement
from .model import Settlement, SettlementComponents, SettlementTotals
from .repository import SettlementRepository

logger = logging.getLogger(__name__)


def parse_components(raw: Mapping[str, object]) -> SettlementComponents:
    values: dict[str, Decimal] = {}
    for name in SettlementComponents.__dataclass_fields__:
        value = raw.get(name)
        if value in (None, ""):
            values[name] = Decimal("0")
            continue
        try:
            amount = Decimal(str(value))
        except InvalidOperation:
            raise ValidationError(f"{name} must be a number")
        if not amount.is_finite():
            raise ValidationError(f"{name} must be a finite number")
        if amount < 0:
            raise ValidationError(f"{name} cannot be negative")
        values[name] = amount
    return SettlementComponents(**values)


class SettlementService:
    """Use case: HR prepares full & final settlements for exiting employees."""

    def __init__(self, settlements: SettlementRepository, *, clock: Callable[[], datetime] = now_local):
        self._settlements = settlements
        self._clock = clock

    def preview(self, components: SettlementComponents) -> SettlementTotals:
        return calculate_settlement(components)

    def create_draft(
        self,
        *,
        current_role: Role,
        employee_id: str,
        components: SettlementComponents,
        remarks: Optional[str] = None,
    ) -> int:
        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("Only HR can prepare settlements")
        if not (employee_id or "").strip():
            raise MissingFieldError("Employee is required")

        clearance = self._settlements.get_completed_clearance(employee_id)
        if not clearance:
            raise ValidationError("Clearance not found")

        totals = calculate_settlement(components)
        settlement_id = self._settlements.create_settlement(
            employee_id=clearance.employee_id,
            employee_name=clearance.employee_name,
            employee_code=clearance.employee_code,
            components=components,
            totals=totals,
            remarks=(remarks or "").strip() or None,
            created_at=self._clock(),
        )
        logger.info("Settlement %s drafted for %s (net %s)", settlement_id, employee_id, totals.net_settlement)
        return settlement_id

    def list_settlements(self, *, current_role: Role) -> Sequence[Settlement]:
        if current_role not in HR_ADMIN_ROLES:
            raise AuthorizationError("Only HR can view settlements")
        return self._settlements.list_settlements(limit=DEFAULT_HISTORY_LIMIT)

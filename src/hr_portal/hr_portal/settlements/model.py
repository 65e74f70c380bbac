from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import SettlementStatus


@dataclass(frozen=True)
class SettlementComponents:
    salary_due: Decimal = Decimal("0")
    leave_encashment: Decimal = Decimal("0")
    bonus: Decimal = Decimal("0")
    gratuity: Decimal = Decimal("0")
    notice_period_recovery: Decimal = Decimal("0")
    other_recoveries: Decimal = Decimal("0")
    other_payments: Decimal = Decimal("0")


@dataclass(frozen=True)
class SettlementTotals:
    total_payable: Decimal
    total_deductions: Decimal
    net_settlement: Decimal


@dataclass(frozen=True)
class Clearance:
    employee_id: str
    employee_name: str
    employee_code: str
    overall_status: str


@dataclass(frozen=True)
class Settlement:
    settlement_id: int
    employee_id: str
    employee_name: str
    employee_code: str
    components: SettlementComponents
    totals: SettlementTotals
    status: SettlementStatus
    remarks: Optional[str]
    created_at: datetime

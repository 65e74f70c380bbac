from __future__ import annotations

from .model import SettlementComponents, SettlementTotals


def calculate_settlement(c: SettlementComponents) -> SettlementTotals:
    """Full & final settlement: payables minus recoveries."""

    total_payable = c.salary_due + c.leave_encashment + c.bonus + c.gratuity + c.other_payments
    total_deductions = c.notice_period_recovery + c.other_recoveries
    return SettlementTotals(
        total_payable=total_payable,
        total_deductions=total_deductions,
        net_settlement=total_payable - total_deductions,
    )

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from ..core.enums import SettlementStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Clearance, Settlement, SettlementComponents, SettlementTotals
from .repository import SettlementRepository

_COMPONENT_FIELDS = (
    "salary_due",
    "leave_encashment",
    "bonus",
    "gratuity",
    "notice_period_recovery",
    "other_recoveries",
    "other_payments",
)


class MySQLSettlementRepository(SettlementRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_completed_clearance(self, employee_id: str) -> Optional[Clearance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT employee_id, employee_name, employee_code, overall_status
                FROM clearances
                WHERE employee_id=%s AND overall_status='completed'
                """,
                (str(employee_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Clearance(
                employee_id=str(r["employee_id"]),
                employee_name=r["employee_name"],
                employee_code=r.get("employee_code") or "",
                overall_status=r["overall_status"],
            )

    def create_settlement(
        self,
        *,
        employee_id: str,
        employee_name: str,
        employee_code: str,
        components: SettlementComponents,
        totals: SettlementTotals,
        remarks: Optional[str],
        created_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO settlements(
                    employee_id, employee_name, employee_code,
                    {", ".join(_COMPONENT_FIELDS)},
                    total_payable, total_deductions, net_settlement,
                    status, remarks, created_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    str(employee_id),
                    employee_name,
                    employee_code,
                    *(getattr(components, f) for f in _COMPONENT_FIELDS),
                    totals.total_payable,
                    totals.total_deductions,
                    totals.net_settlement,
                    SettlementStatus.DRAFT.value,
                    remarks,
                    created_at,
                ),
            )
            return int(cur.lastrowid)

    def list_settlements(self, *, limit: int = 200) -> Sequence[Settlement]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT settlement_id, employee_id, employee_name, employee_code,
                       {", ".join(_COMPONENT_FIELDS)},
                       total_payable, total_deductions, net_settlement,
                       status, remarks, created_at
                FROM settlements
                ORDER BY created_at DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            out: list[Settlement] = []
            for r in fetchall(cur):
                out.append(
                    Settlement(
                        settlement_id=int(r["settlement_id"]),
                        employee_id=str(r["employee_id"]),
                        employee_name=r["employee_name"],
                        employee_code=r.get("employee_code") or "",
                        components=SettlementComponents(**{f: Decimal(r[f]) for f in _COMPONENT_FIELDS}),
                        totals=SettlementTotals(
                            total_payable=Decimal(r["total_payable"]),
                            total_deductions=Decimal(r["total_deductions"]),
                            net_settlement=Decimal(r["net_settlement"]),
                        ),
                        status=SettlementStatus(r["status"]),
                        remarks=r.get("remarks"),
                        created_at=r["created_at"],
                    )
                )
            return out

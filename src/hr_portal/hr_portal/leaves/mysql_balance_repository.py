from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional, Sequence, Tuple

from ..core.enums import LeaveType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import LeaveBalance
from .repository import LeaveBalanceRepository, SystemSettingsRepository


def _upsert_balances(cur, rows: Sequence[Tuple[str, Mapping[LeaveType, float]]], updated_at: datetime) -> None:
    params = [
        (str(employee_id), LeaveType(t).value, float(q), updated_at)
        for employee_id, quantities in rows
        for t, q in quantities.items()
    ]
    if not params:
        return
    cur.executemany(
        """
        INSERT INTO leave_balances(employee_id, leave_type, quantity, last_updated)
        VALUES(%s,%s,%s,%s)
        ON DUPLICATE KEY UPDATE quantity=VALUES(quantity), last_updated=VALUES(last_updated)
        """,
        params,
    )


def _upsert_setting(cur, key: str, value: str, updated_at: datetime) -> None:
    cur.execute(
        """
        INSERT INTO system_settings(setting_key, setting_value, updated_at)
        VALUES(%s,%s,%s)
        ON DUPLICATE KEY UPDATE setting_value=VALUES(setting_value), updated_at=VALUES(updated_at)
        """,
        (key, value, updated_at),
    )


class MySQLLeaveBalanceRepository(LeaveBalanceRepository):
    """One row per (employee, leave type)."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_balance(self, employee_id: str) -> Optional[LeaveBalance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT leave_type, quantity, last_updated
                FROM leave_balances
                WHERE employee_id=%s
                """,
                (str(employee_id),),
            )
            rows = fetchall(cur)
            if not rows:
                return None

            quantities: dict[LeaveType, float] = {}
            last_updated = None
            for r in rows:
                try:
                    leave_type = LeaveType(r["leave_type"])
                except ValueError:
                    continue
                quantities[leave_type] = float(r["quantity"])
                if last_updated is None or (r.get("last_updated") and r["last_updated"] > last_updated):
                    last_updated = r.get("last_updated")

            return LeaveBalance(employee_id=str(employee_id), quantities=quantities, last_updated=last_updated)

    def save_balance(
        self,
        *,
        employee_id: str,
        quantities: Mapping[LeaveType, float],
        updated_at: datetime,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            _upsert_balances(cur, [(employee_id, quantities)], updated_at)

    def save_allocation(
        self,
        *,
        balances: Mapping[str, Mapping[LeaveType, float]],
        setting_key: str,
        setting_value: str,
        updated_at: datetime,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            _upsert_balances(cur, list(balances.items()), updated_at)
            _upsert_setting(cur, setting_key, setting_value, updated_at)


class MySQLSystemSettingsRepository(SystemSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_value(self, key: str) -> Optional[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT setting_value FROM system_settings WHERE setting_key=%s", (key,))
            r = fetchone(cur)
            return r["setting_value"] if r else None

    def set_value(self, key: str, value: str, *, updated_at: datetime) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            _upsert_setting(cur, key, value, updated_at)

from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, normalize_mysql_date
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_id, holiday_date, name, description
                FROM holidays
                ORDER BY holiday_date ASC
                """
            )
            return [
                Holiday(
                    holiday_id=int(r["holiday_id"]),
                    holiday_date=normalize_mysql_date(r["holiday_date"]),
                    name=r["name"],
                    description=r.get("description"),
                )
                for r in fetchall(cur)
            ]

    def create(self, *, holiday_date: date, name: str, description: Optional[str] = None) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO holidays(holiday_date, name, description) VALUES(%s,%s,%s)",
                (holiday_date, name, description),
            )
            return int(cur.lastrowid)

    def create_many(self, rows: Sequence[tuple[date, str, str]]) -> int:
        if not rows:
            return 0
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                "INSERT INTO holidays(holiday_date, name, description) VALUES(%s,%s,%s)",
                [(d, name, desc) for d, name, desc in rows],
            )
            return len(rows)

    def delete_by_id(self, holiday_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM holidays WHERE holiday_id=%s", (int(holiday_id),))
            return cur.rowcount > 0

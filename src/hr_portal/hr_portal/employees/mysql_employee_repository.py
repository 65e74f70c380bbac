from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Gender
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmployeeProfile
from .repository import EmployeeRepository


def _to_profile(r: dict) -> EmployeeProfile:
    gender = (r.get("gender") or "").lower()
    return EmployeeProfile(
        user_id=str(r["user_id"]),
        name=r["name"],
        employee_code=r.get("employee_code") or "",
        gender=Gender(gender) if gender in {g.value for g in Gender} else None,
        department=r.get("department"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_user_id(self, user_id: str) -> Optional[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, name, employee_code, gender, department
                FROM employees
                WHERE user_id=%s
                LIMIT 1
                """,
                (str(user_id),),
            )
            r = fetchone(cur)
            return _to_profile(r) if r else None

    def list_all(self) -> Sequence[EmployeeProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT user_id, name, employee_code, gender, department
                FROM employees
                ORDER BY name ASC
                """
            )
            return [_to_profile(r) for r in fetchall(cur)]

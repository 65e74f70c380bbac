from __future__ import annotations

import json
from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import LeaveType, RequestStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, load_json_list, normalize_mysql_date
from .model import LeaveRequest
from .repository import LeaveRepository

_LEAVE_COLUMNS = """
    request_id, employee_id, employee_name, employee_code, leave_type,
    start_date, end_date, duration, reason, status, is_paid, approver_ids,
    applied_at, decided_by, decided_at, notes
"""


def _to_leave(r: dict) -> LeaveRequest:
    return LeaveRequest(
        request_id=int(r["request_id"]),
        employee_id=str(r["employee_id"]),
        employee_name=r["employee_name"],
        employee_code=r.get("employee_code") or "",
        leave_type=LeaveType(r["leave_type"]),
        start_date=normalize_mysql_date(r["start_date"]),
        end_date=normalize_mysql_date(r["end_date"]),
        duration=float(r["duration"]),
        reason=r["reason"],
        status=RequestStatus(r["status"]),
        is_paid=bool(r["is_paid"]),
        approver_ids=tuple(str(x) for x in load_json_list(r.get("approver_ids"))),
        applied_at=r["applied_at"],
        decided_by=r.get("decided_by"),
        decided_at=r.get("decided_at"),
        notes=r.get("notes"),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_leave(
        self,
        *,
        employee_id: str,
        employee_name: str,
        employee_code: str,
        leave_type: LeaveType,
        start_date: date,
        end_date: date,
        duration: float,
        reason: str,
        is_paid: bool,
        approver_ids: Sequence[str],
        applied_at: datetime,
    ) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO leave_requests(
                    employee_id, employee_name, employee_code, leave_type,
                    start_date, end_date, duration, reason, status,
                    is_paid, approver_ids, applied_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    str(employee_id),
                    employee_name,
                    employee_code,
                    LeaveType(leave_type).value,
                    start_date,
                    end_date,
                    float(duration),
                    reason,
                    RequestStatus.PENDING.value,
                    1 if is_paid else 0,
                    json.dumps(list(approver_ids)),
                    applied_at,
                ),
            )
            return int(cur.lastrowid)

    def get_leave(self, *, request_id: int) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_LEAVE_COLUMNS} FROM leave_requests WHERE request_id=%s",
                (int(request_id),),
            )
            r = fetchone(cur)
            return _to_leave(r) if r else None

    def list_leaves(
        self,
        *,
        employee_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
        limit: int = 200,
    ) -> Sequence[LeaveRequest]:
        clauses = ["1=1"]
        params: list[object] = []

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(str(employee_id))
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_LEAVE_COLUMNS}
                FROM leave_requests
                WHERE {where}
                ORDER BY applied_at DESC, request_id DESC
                LIMIT %s
                """,
                tuple(params + [int(limit)]),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def decide_leave(
        self,
        *,
        request_id: int,
        status: RequestStatus,
        decided_by: str,
        decided_at: datetime,
        notes: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE leave_requests
                SET status=%s, decided_by=%s, decided_at=%s, notes=%s
                WHERE request_id=%s AND status=%s
                """,
                (
                    status.value,
                    str(decided_by),
                    decided_at,
                    notes,
                    int(request_id),
                    RequestStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0

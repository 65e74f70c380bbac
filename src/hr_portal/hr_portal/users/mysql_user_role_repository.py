from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .repository import UserRoleRepository


class MySQLUserRoleRepository(UserRoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_user_ids_by_role(self, role: Role) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT user_id FROM user_roles WHERE role=%s ORDER BY user_id",
                (Role(role).value,),
            )
            return [str(r["user_id"]) for r in fetchall(cur)]

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeProfile


class EmployeeRepository(Protocol):
    def get_by_user_id(self, user_id: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError

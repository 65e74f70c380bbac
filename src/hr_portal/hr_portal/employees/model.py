from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Gender


@dataclass(frozen=True)
class EmployeeProfile:
    """Employee record as stored in the `employees` collection."""

    user_id: str
    name: str
    employee_code: str
    gender: Optional[Gender] = None
    department: Optional[str] = None

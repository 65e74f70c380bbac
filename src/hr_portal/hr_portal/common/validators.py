from __future__ import annotations

import math
from typing import Optional

from ..core.exceptions import MissingFieldError, ValidationError


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise MissingFieldError(f"{field_name} is required")
    return value.strip()


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or not math.isfinite(float(value)):
        raise ValidationError(f"{field_name} must be a finite number")
    if float(value) < 0:
        raise ValidationError(f"{field_name} cannot be negative")
    return float(value)

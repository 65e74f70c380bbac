from __future__ import annotations

from typing import Optional, Union

from ..core.enums import Gender, LeaveType
from ..core.exceptions import ValidationError

LEAVE_TYPE_NAMES: dict[LeaveType, str] = {
    LeaveType.PL: "Privilege Leave",
    LeaveType.CL: "Casual Leave",
    LeaveType.SL: "Sick Leave",
    LeaveType.MATERNITY: "Maternity Leave",
    LeaveType.PATERNITY: "Paternity Leave",
    LeaveType.ADOPTION: "Adoption Leave",
    LeaveType.SABBATICAL: "Sabbatical",
    LeaveType.WFH: "Work From Home",
    LeaveType.BEREAVEMENT: "Bereavement Leave",
    LeaveType.PARENTAL: "Parental Leave",
    LeaveType.COMP_OFF: "Compensatory Off",
    LeaveType.LWP: "Leave Without Pay",
    LeaveType.VACATION: "Vacation",
}

# Unpaid/unlimited types never draw from a balance.
BALANCE_EXEMPT_TYPES = frozenset({LeaveType.LWP, LeaveType.VACATION})

GENDER_RESTRICTED_TYPES: dict[LeaveType, Gender] = {
    LeaveType.MATERNITY: Gender.FEMALE,
    LeaveType.PATERNITY: Gender.MALE,
}


def is_balance_exempt(leave_type: LeaveType) -> bool:
    return leave_type in BALANCE_EXEMPT_TYPES


def is_paid(leave_type: LeaveType) -> bool:
    return leave_type != LeaveType.LWP


def is_selectable_for(leave_type: LeaveType, gender: Optional[Gender]) -> bool:
    """Whether the type is offered to an employee of this gender.

    When the gender is unknown nothing is filtered.
    """

    required = GENDER_RESTRICTED_TYPES.get(leave_type)
    if required is None or gender is None:
        return True
    return gender == required


def selectable_leave_types(gender: Optional[Gender]) -> list[LeaveType]:
    return [t for t in LeaveType if is_selectable_for(t, gender)]


def coerce_leave_type(value: Union[LeaveType, str, None]) -> Optional[LeaveType]:
    """Accept a LeaveType or its code in any case; blank means not chosen."""

    if isinstance(value, LeaveType):
        return value
    if value is None or value == "":
        return None
    try:
        return LeaveType(str(value).strip().upper())
    except ValueError:
        raise ValidationError(f"Unknown leave type: {value}")

from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Roles assigned by the hosted auth backend."""

    ADMIN = "admin"
    HR = "hr"
    HOD = "hod"
    EMPLOYEE = "employee"


class Gender(str, Enum):
    FEMALE = "female"
    MALE = "male"
    OTHER = "other"


class LeaveType(str, Enum):
    PL = "PL"
    CL = "CL"
    SL = "SL"
    MATERNITY = "MATERNITY"
    PATERNITY = "PATERNITY"
    ADOPTION = "ADOPTION"
    SABBATICAL = "SABBATICAL"
    WFH = "WFH"
    BEREAVEMENT = "BEREAVEMENT"
    PARENTAL = "PARENTAL"
    COMP_OFF = "COMP_OFF"
    LWP = "LWP"
    VACATION = "VACATION"


class RequestStatus(str, Enum):
    """Leave approval flow. APPROVED and REJECTED are terminal."""

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class SettlementStatus(str, Enum):
    DRAFT = "draft"
    APPROVED = "approved"
    PAID = "paid"


class ErrorKind(str, Enum):
    MISSING_FIELD = "MissingField"
    INVALID_RANGE = "InvalidRange"
    INSUFFICIENT_BALANCE = "InsufficientBalance"
    NO_APPROVERS = "NoApprovers"
    PERSISTENCE_FAILURE = "PersistenceFailure"
    INVALID_INPUT = "InvalidInput"
    FORBIDDEN = "Forbidden"

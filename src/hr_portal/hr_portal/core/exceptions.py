from __future__ import annotations

from typing import Optional

from .enums import ErrorKind, LeaveType


class DomainError(Exception):
    """Base exception for business rule violations."""

    kind: ErrorKind = ErrorKind.INVALID_INPUT


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MissingFieldError(ValidationError):
    kind = ErrorKind.MISSING_FIELD


class InvalidRangeError(ValidationError):
    kind = ErrorKind.INVALID_RANGE


class InsufficientBalanceError(ValidationError):
    kind = ErrorKind.INSUFFICIENT_BALANCE

    def __init__(self, message: str, *, leave_type: LeaveType, available: float, requested: float):
        super().__init__(message)
        self.leave_type = leave_type
        self.available = available
        self.requested = requested


class NoApproversError(DomainError):
    """Raised when nobody holds an approver role, before anything is written."""

    kind = ErrorKind.NO_APPROVERS


class PersistenceError(DomainError):
    """Raised for any backend fault. The original message is kept as-is."""

    kind = ErrorKind.PERSISTENCE_FAILURE

    def __init__(self, message: str, *, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""

    kind = ErrorKind.FORBIDDEN

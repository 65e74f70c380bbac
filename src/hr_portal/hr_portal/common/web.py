from __future__ import annotations

import logging
from functools import wraps
from typing import Iterable, Optional

from flask import jsonify, session

from ..core.enums import Gender, Role
from ..core.exceptions import AuthorizationError, DomainError, InsufficientBalanceError, PersistenceError

logger = logging.getLogger(__name__)


def login_required(view):
    """Session keys are written by the hosted auth layer; we only read them."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"error": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def roles_required(roles: Iterable[Role]):
    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "user_id" not in session:
                return jsonify({"error": "Please sign in to continue"}), 401
            if current_role() not in allowed:
                return jsonify({"error": "You are not allowed to do this", "kind": "Forbidden"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def current_user_id() -> str:
    return str(session["user_id"])


def current_role() -> Optional[Role]:
    try:
        return Role(session.get("role"))
    except ValueError:
        return None


def current_gender() -> Optional[Gender]:
    try:
        return Gender((session.get("gender") or "").lower())
    except ValueError:
        return None


def error_response(exc: DomainError):
    payload = {"error": str(exc), "kind": exc.kind.value}
    if isinstance(exc, InsufficientBalanceError):
        payload["available"] = exc.available

    status = 400
    if isinstance(exc, AuthorizationError):
        status = 403
    elif isinstance(exc, PersistenceError):
        status = 502
        logger.error("Backend write failed: %s", exc)
    return jsonify(payload), status


def system_error_response(message: str):
    logger.exception(message)
    return jsonify({"error": message}), 500

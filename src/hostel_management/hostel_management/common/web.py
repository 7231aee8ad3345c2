from __future__ import annotations

import logging
from functools import wraps
from typing import Any

from flask import jsonify, request, session

from ..auth.service import SessionUser
from ..core.enums import Role
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def unauthorized():
    return jsonify({"error": "Unauthorized"}), 401


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if session.get("role") != role.value:
                return unauthorized()
            if role == Role.STUDENT and not session.get("student_id"):
                return unauthorized()
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = role_required(Role.ADMIN)
student_required = role_required(Role.STUDENT)


def json_errors(failure_message: str):
    """Translate domain errors to ``{error, ...}``; anything else becomes a logged 500."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                return view(*args, **kwargs)
            except DomainError as e:
                return jsonify(e.to_dict()), e.status_code
            except Exception:
                logger.exception(failure_message)
                return jsonify({"error": failure_message}), 500

        return wrapper

    return decorator


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def current_student_id() -> str:
    return str(session["student_id"])


def login_session(user: SessionUser) -> None:
    session.clear()
    session.permanent = True
    session["role"] = user.role.value
    if user.student_id:
        session["student_id"] = user.student_id
        session["name"] = user.name
        session["email"] = user.email

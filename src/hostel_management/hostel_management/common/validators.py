from __future__ import annotations

import math
import re
from typing import Any, Iterable, Optional, Type, TypeVar
from enum import Enum

from ..core.exceptions import ValidationError

E = TypeVar("E", bound=Enum)

_STUDENT_ID_RE = re.compile(r"^[a-zA-Z0-9_-]+$")
_NAME_RE = re.compile(r"^[a-zA-Z\s.'-]+$")
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_PHONE_RE = re.compile(r"^\+?[0-9]{10,15}$")
_OTP_RE = re.compile(r"^\d{6}$")


def require_non_empty(value: Any, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_max_length(value: str, field_name: str, max_len: int) -> str:
    if len(value) > max_len:
        raise ValidationError(f"{field_name} must not exceed {max_len} characters")
    return value


def require_fields(data: dict, fields: Iterable[str], message: str) -> None:
    """Raise ``message`` when any of ``fields`` is missing or blank."""
    for name in fields:
        value = data.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(message)


def require_number(value: Any, field_name: str, *, minimum: Optional[float] = None) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{field_name} must be a number")
    if minimum is not None and number < minimum:
        raise ValidationError(f"{field_name} must be at least {minimum:g}")
    return number


def require_choice(value: Any, enum_cls: Type[E], message: str = "Invalid status") -> E:
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(message)


def validate_student_id(value: Any) -> str:
    v = str(value or "")
    require_min_length(v, "Student ID", 3)
    require_max_length(v, "Student ID", 50)
    if not _STUDENT_ID_RE.match(v):
        raise ValidationError("Student ID can only contain letters, numbers, hyphens, and underscores")
    return v


def validate_password(value: Any) -> str:
    v = str(value or "")
    require_min_length(v, "Password", 6)
    return require_max_length(v, "Password", 128)


def validate_name(value: Any) -> str:
    v = str(value or "")
    require_min_length(v, "Name", 2)
    require_max_length(v, "Name", 100)
    if not _NAME_RE.match(v):
        raise ValidationError("Name contains invalid characters")
    return v


def validate_email(value: Any) -> str:
    v = str(value or "").strip()
    if not _EMAIL_RE.match(v):
        raise ValidationError("Invalid email format")
    return require_max_length(v, "Email", 255)


def validate_phone(value: Any) -> str:
    v = str(value or "")
    if not _PHONE_RE.match(v):
        raise ValidationError("Phone number must be 10-15 digits, optionally starting with +")
    return v


def validate_otp_format(value: Any) -> str:
    v = str(value or "")
    if not _OTP_RE.match(v):
        raise ValidationError("OTP must be 6 digits")
    return v


KEY_ATTRIBUTES = frozenset({"PK", "SK", "entityType"})


def clean_updates(updates: Any, *, protected: Iterable[str] = ()) -> dict[str, Any]:
    """Drop key and protected attributes from a generic ``updates`` payload."""
    if not isinstance(updates, dict):
        raise ValidationError("Updates must be an object")
    blocked = KEY_ATTRIBUTES | set(protected)
    cleaned = {k: v for k, v in updates.items() if k not in blocked}
    if not cleaned:
        raise ValidationError("No updatable fields provided")
    return cleaned

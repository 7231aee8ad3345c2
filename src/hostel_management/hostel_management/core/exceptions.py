from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` is the HTTP status the controllers answer with and
    ``extra`` is merged into the JSON error body.
    """

    status_code = 400

    def __init__(self, message: str, *, extra: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.extra = dict(extra or {})

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    status_code = 400


class AuthenticationError(DomainError):
    """Raised when credentials or the session are missing or invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when an account may not perform an action (e.g. inactive)."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class ConflictError(DomainError):
    """Raised on duplicates and on lost conditional writes."""

    status_code = 409


class TooManyAttemptsError(DomainError):
    status_code = 429


class DeliveryError(DomainError):
    """Raised when an outgoing email could not be sent."""

    status_code = 500


class ConditionFailedError(Exception):
    """Raised by a store when a conditional update does not match."""

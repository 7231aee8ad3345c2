from __future__ import annotations

from typing import Any, Optional, Protocol

from .model import OTPVerification, PendingStudent


class PendingStudentRepository(Protocol):
    def get(self, email: str) -> Optional[PendingStudent]:
        raise NotImplementedError

    def save(self, pending: PendingStudent) -> None:
        raise NotImplementedError

    def delete(self, email: str) -> None:
        raise NotImplementedError


class OTPRepository(Protocol):
    def get(self, email: str) -> Optional[OTPVerification]:
        raise NotImplementedError

    def save(self, record: OTPVerification) -> None:
        raise NotImplementedError

    def update(self, email: str, updates: dict[str, Any]) -> OTPVerification:
        raise NotImplementedError

    def delete(self, email: str) -> None:
        raise NotImplementedError

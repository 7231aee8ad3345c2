from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import FeeConfiguration, Payment


class FeeConfigRepository(Protocol):
    def get(self, year: str) -> Optional[FeeConfiguration]:
        raise NotImplementedError

    def save(self, config: FeeConfiguration) -> None:
        """Insert or replace the configuration of ``config.year``."""

        raise NotImplementedError

    def delete(self, year: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[FeeConfiguration]:
        raise NotImplementedError


class PaymentRepository(Protocol):
    def create(self, payment: Payment) -> None:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[Payment]:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> list[str]:
        raise NotImplementedError

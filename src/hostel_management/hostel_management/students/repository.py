from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service layer depends on this interface, not on a concrete store.
    """

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def create(self, student: Student) -> None:
        raise NotImplementedError

    def update(self, student_id: str, updates: dict[str, Any]) -> Student:
        raise NotImplementedError

    def delete(self, student_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_email(self, email: str) -> Sequence[Student]:
        raise NotImplementedError

    def list_by_branch(self, branch_id: str) -> Sequence[Student]:
        raise NotImplementedError

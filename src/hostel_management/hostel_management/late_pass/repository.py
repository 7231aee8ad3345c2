from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import LatePassRequest


class LatePassRepository(Protocol):
    def create(self, request: LatePassRequest) -> None:
        raise NotImplementedError

    def get(self, *, student_id: str, request_id: str) -> Optional[LatePassRequest]:
        raise NotImplementedError

    def update(self, *, student_id: str, request_id: str, updates: dict[str, Any]) -> LatePassRequest:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[LatePassRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[LatePassRequest]:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> list[str]:
        raise NotImplementedError

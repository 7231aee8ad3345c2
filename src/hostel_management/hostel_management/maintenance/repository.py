from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import MaintenanceRequest


class MaintenanceRepository(Protocol):
    def create(self, request: MaintenanceRequest) -> None:
        raise NotImplementedError

    def get(self, *, student_id: str, request_id: str) -> Optional[MaintenanceRequest]:
        raise NotImplementedError

    def update(self, *, student_id: str, request_id: str, updates: dict[str, Any]) -> MaintenanceRequest:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[MaintenanceRequest]:
        raise NotImplementedError

    def list_all(self) -> Sequence[MaintenanceRequest]:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> list[str]:
        """Delete every request of the student and return the deleted sort keys."""

        raise NotImplementedError

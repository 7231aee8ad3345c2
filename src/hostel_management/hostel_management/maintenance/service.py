from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import new_id
from ..common.validators import require_choice, require_non_empty
from ..core.enums import MaintenanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import MaintenanceRequest
from .repository import MaintenanceRepository


class MaintenanceService:
    def __init__(self, requests: MaintenanceRepository, students: StudentRepository):
        self._requests = requests
        self._students = students

    def submit(
        self,
        student_id: str,
        *,
        issue: Any,
        description: Any = None,
        category: Any = None,
        now: Optional[datetime] = None,
    ) -> MaintenanceRequest:
        now = now or now_utc()
        issue = require_non_empty(issue, "Issue")

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        if not student.has_room:
            raise ValidationError("Room not assigned. Please contact admin.")

        request = MaintenanceRequest(
            request_id=new_id("REQ", now=now),
            student_id=student_id,
            student_name=student.name,
            branch=student.branch or "",
            room_number=student.room_number or "",
            issue=issue,
            description=str(description or ""),
            category=str(category or "").strip() or "Other",
            status=MaintenanceStatus.PENDING,
            created_at=to_iso(now),
            updated_at=to_iso(now),
        )
        self._requests.create(request)
        return request

    def list_for_student(self, student_id: str) -> Sequence[MaintenanceRequest]:
        return self._requests.list_for_student(student_id)

    def list_all(self) -> Sequence[MaintenanceRequest]:
        return self._requests.list_all()

    def update_status(
        self,
        *,
        request_id: Any,
        student_id: Any,
        status: Any,
        admin_notes: Any = None,
        now: Optional[datetime] = None,
    ) -> MaintenanceRequest:
        if not request_id or not student_id or not status:
            raise ValidationError("Request ID, student ID, and status are required")
        new_status = require_choice(status, MaintenanceStatus)
        now = now or now_utc()

        if not self._requests.get(student_id=str(student_id), request_id=str(request_id)):
            raise NotFoundError("Maintenance request not found")

        updates: dict[str, Any] = {"status": new_status.value, "updatedAt": to_iso(now)}
        if admin_notes:
            updates["adminNotes"] = str(admin_notes)
        if new_status == MaintenanceStatus.COMPLETED:
            updates["resolvedAt"] = to_iso(now)
        return self._requests.update(student_id=str(student_id), request_id=str(request_id), updates=updates)

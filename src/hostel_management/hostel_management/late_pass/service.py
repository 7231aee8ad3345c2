from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import epoch_millis, now_utc, to_iso
from ..common.validators import require_choice, require_fields
from ..core.constants import ADMIN_APPROVER, NOT_ASSIGNED
from ..core.enums import LatePassStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import LatePassRequest
from .repository import LatePassRepository

_FIELDS = ("requestedDate", "startTime", "endTime", "reason", "description")


class LatePassService:
    def __init__(self, requests: LatePassRepository, students: StudentRepository):
        self._requests = requests
        self._students = students

    def submit(self, student_id: str, data: dict[str, Any], *, now: Optional[datetime] = None) -> LatePassRequest:
        now = now or now_utc()
        require_fields(data, _FIELDS, "All fields are required")

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")

        request = LatePassRequest(
            request_id=f"LP{epoch_millis(now)}",
            student_id=student_id,
            student_name=student.name,
            branch=student.branch or NOT_ASSIGNED,
            room_number=student.room_number or NOT_ASSIGNED,
            requested_date=str(data["requestedDate"]),
            start_time=str(data["startTime"]),
            end_time=str(data["endTime"]),
            reason=str(data["reason"]).strip(),
            description=str(data["description"]).strip(),
            status=LatePassStatus.PENDING,
            created_at=to_iso(now),
        )
        self._requests.create(request)
        return request

    def list_for_student(self, student_id: str) -> Sequence[LatePassRequest]:
        return self._requests.list_for_student(student_id)

    def list_all(self) -> Sequence[LatePassRequest]:
        return self._requests.list_all()

    def decide(
        self,
        *,
        request_id: Any,
        student_id: Any,
        status: Any,
        approval_notes: Any = None,
        now: Optional[datetime] = None,
    ) -> LatePassRequest:
        if not request_id or not student_id or not status:
            raise ValidationError("Request ID, student ID, and status are required")
        new_status = require_choice(status, LatePassStatus)
        now = now or now_utc()

        keys = {"student_id": str(student_id), "request_id": str(request_id)}
        if not self._requests.get(**keys):
            raise NotFoundError("Late pass request not found")

        updates: dict[str, Any] = {"status": new_status.value, "updatedAt": to_iso(now)}
        if new_status in (LatePassStatus.APPROVED, LatePassStatus.REJECTED):
            updates["approvedAt"] = to_iso(now)
            updates["approvedBy"] = ADMIN_APPROVER
        if approval_notes:
            updates["approvalNotes"] = str(approval_notes)
        return self._requests.update(updates=updates, **keys)

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import LatePassStatus


@dataclass(frozen=True)
class LatePassRequest:
    """A student's request to return after curfew on ``requested_date``."""

    request_id: str
    student_id: str
    student_name: str
    branch: str
    room_number: str
    requested_date: str
    start_time: str
    end_time: str
    reason: str
    description: str
    status: LatePassStatus
    created_at: str
    updated_at: Optional[str] = None
    approved_at: Optional[str] = None
    approved_by: Optional[str] = None
    approval_notes: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "requestId": self.request_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "branch": self.branch,
            "roomNumber": self.room_number,
            "requestedDate": self.requested_date,
            "startTime": self.start_time,
            "endTime": self.end_time,
            "reason": self.reason,
            "description": self.description,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        optional = {
            "updatedAt": self.updated_at,
            "approvedAt": self.approved_at,
            "approvedBy": self.approved_by,
            "approvalNotes": self.approval_notes,
        }
        data.update({k: v for k, v in optional.items() if v is not None})
        return data

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "LatePassRequest":
        return cls(
            request_id=str(item["requestId"]),
            student_id=str(item["studentId"]),
            student_name=item.get("studentName", ""),
            branch=item.get("branch", ""),
            room_number=item.get("roomNumber", ""),
            requested_date=item.get("requestedDate", ""),
            start_time=item.get("startTime", ""),
            end_time=item.get("endTime", ""),
            reason=item.get("reason", ""),
            description=item.get("description", ""),
            status=LatePassStatus(item.get("status", LatePassStatus.PENDING.value)),
            created_at=item.get("createdAt", ""),
            updated_at=item.get("updatedAt"),
            approved_at=item.get("approvedAt"),
            approved_by=item.get("approvedBy"),
            approval_notes=item.get("approvalNotes"),
        )

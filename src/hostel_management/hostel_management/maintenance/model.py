from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import MaintenanceStatus


@dataclass(frozen=True)
class MaintenanceRequest:
    request_id: str
    student_id: str
    student_name: str
    branch: str
    room_number: str
    issue: str
    description: str
    status: MaintenanceStatus
    created_at: str
    updated_at: str
    category: str = "Other"
    admin_notes: Optional[str] = None
    resolved_at: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "requestId": self.request_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "branch": self.branch,
            "roomNumber": self.room_number,
            "issue": self.issue,
            "description": self.description,
            "category": self.category,
            "status": self.status.value,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.admin_notes is not None:
            data["adminNotes"] = self.admin_notes
        if self.resolved_at is not None:
            data["resolvedAt"] = self.resolved_at
        return data

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "MaintenanceRequest":
        return cls(
            request_id=str(item["requestId"]),
            student_id=str(item["studentId"]),
            student_name=item.get("studentName", ""),
            branch=item.get("branch", ""),
            room_number=item.get("roomNumber", ""),
            issue=item.get("issue", ""),
            description=item.get("description", ""),
            status=MaintenanceStatus(item.get("status", MaintenanceStatus.PENDING.value)),
            created_at=item.get("createdAt", ""),
            updated_at=item.get("updatedAt", ""),
            category=item.get("category") or "Other",
            admin_notes=item.get("adminNotes"),
            resolved_at=item.get("resolvedAt"),
        )

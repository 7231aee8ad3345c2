from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AttendanceRecord:
    """One row per student per day (``date`` is YYYY-MM-DD)."""

    student_id: str
    student_name: str
    branch: str
    date: str
    present: bool
    check_in_time: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "branch": self.branch,
            "date": self.date,
            "present": self.present,
            "checkInTime": self.check_in_time,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "AttendanceRecord":
        return cls(
            student_id=str(item["studentId"]),
            student_name=item.get("studentName", ""),
            branch=item.get("branch", ""),
            date=str(item.get("date", "")),
            present=bool(item.get("present", False)),
            check_in_time=item.get("checkInTime", ""),
        )

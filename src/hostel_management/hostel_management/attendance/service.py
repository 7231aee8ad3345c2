from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import iso_date, now_utc, to_iso
from ..common.numbers import percentage, round1
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import AttendanceRecord
from .repository import AttendanceRepository


@dataclass(frozen=True)
class StudentAttendanceStats:
    student_id: str
    student_name: str
    branch: Optional[str]
    room_number: Optional[str]
    total_days: int
    present_days: int
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "branch": self.branch,
            "roomNumber": self.room_number,
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "percentage": self.percentage,
        }


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, students: StudentRepository):
        self._attendance = attendance
        self._students = students

    def mark_today(self, student_id: str, *, now: Optional[datetime] = None) -> AttendanceRecord:
        now = now or now_utc()
        today = iso_date(now)

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        if not student.branch:
            raise ValidationError("Branch not assigned. Please contact admin.")

        if self._attendance.get_for_student_and_date(student_id, today):
            raise ConflictError("Attendance already marked for today")

        record = AttendanceRecord(
            student_id=student_id,
            student_name=student.name,
            branch=student.branch,
            date=today,
            present=True,
            check_in_time=to_iso(now),
        )
        self._attendance.create(record)
        return record

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_student(student_id)

    @staticmethod
    def _stats_for(student: Student, records: Sequence[AttendanceRecord]) -> StudentAttendanceStats:
        own = [r for r in records if r.student_id == student.student_id]
        present = sum(1 for r in own if r.present)
        return StudentAttendanceStats(
            student_id=student.student_id,
            student_name=student.name,
            branch=student.branch,
            room_number=student.room_number,
            total_days=len(own),
            present_days=present,
            percentage=percentage(present, len(own)),
        )

    def overview(self, *, now: Optional[datetime] = None) -> dict[str, Any]:
        """All records plus per-student, per-branch and today's figures."""
        today = iso_date(now or now_utc())
        records = self._attendance.list_all()
        students = self._students.list_all()

        student_stats = [self._stats_for(s, records) for s in students]

        branches: dict[str, list[float]] = {}
        for stats in student_stats:
            if stats.branch:
                branches.setdefault(stats.branch, []).append(stats.percentage)
        branch_stats = [
            {
                "branch": branch,
                "totalStudents": len(values),
                "averageAttendance": round1(sum(values) / len(values)) if values else 0,
            }
            for branch, values in branches.items()
        ]

        marked_today = sum(1 for r in records if r.date == today)
        active = sum(1 for s in students if s.active)
        return {
            "attendance": [r.to_dict() for r in records],
            "studentStats": [s.to_dict() for s in student_stats],
            "branchStats": branch_stats,
            "todayStats": {
                "date": today,
                "totalMarked": marked_today,
                "totalStudents": active,
                "percentage": percentage(marked_today, active),
            },
        }

from __future__ import annotations

import logging
from typing import Any, Sequence

from ..common.validators import clean_updates, require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from .model import Student
from .repository import StudentRepository
from .room_assignment import RoomAssignment

logger = logging.getLogger(__name__)

_PROTECTED = ("studentId", "password", "registrationDate")
_ROOM_FIELDS = ("branch", "roomNumber")


class StudentService:
    def __init__(self, students: StudentRepository, assignment: RoomAssignment):
        self._students = students
        self._assignment = assignment

    def _get(self, student_id: Any) -> Student:
        student_id = require_non_empty(student_id, "Student ID")
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")
        return student

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_profile(self, student_id: str) -> Student:
        return self._get(student_id)

    def update_student(self, student_id: Any, updates: Any) -> Student:
        """Generic admin update; room fields are routed through room assignment."""
        student = self._get(student_id)
        cleaned = clean_updates(updates, protected=_PROTECTED)
        for flag in ("active", "feesPaid"):
            if flag in cleaned and not isinstance(cleaned[flag], bool):
                raise ValidationError(f"{flag} must be true or false")

        room_changes = {k: cleaned.pop(k) for k in _ROOM_FIELDS if k in cleaned}
        if room_changes:
            branch = room_changes.get("branch", student.branch)
            room_number = room_changes.get("roomNumber", student.room_number)
            if branch and room_number:
                student = self.assign_room(student.student_id, branch, room_number)
            elif student.has_room:
                student = self.unassign_room(student.student_id)

        if not cleaned:
            return student
        return self._students.update(student.student_id, cleaned)

    def deactivate(self, student_id: Any) -> None:
        student = self._get(student_id)
        self._students.update(student.student_id, {"active": False})
        logger.info("Student %s deactivated", student.student_id)

    def assign_room(self, student_id: Any, branch: Any, room_number: Any) -> Student:
        student = self._get(student_id)
        if not branch or not room_number:
            raise ValidationError("Branch and room number are required")
        branch, room_number = str(branch), str(room_number)

        if student.branch == branch and student.room_number == room_number:
            return student

        room = self._assignment.get_room(branch, room_number)
        # Claim the new bed first so a lost race leaves the old assignment intact.
        self._assignment.claim(room, student.student_id)
        self._assignment.release(student.branch, student.room_number, student.student_id)

        logger.info("Student %s assigned to %s-%s", student.student_id, branch, room_number)
        return self._students.update(student.student_id, {"branch": branch, "roomNumber": room_number})

    def unassign_room(self, student_id: Any) -> Student:
        student = self._get(student_id)
        if not student.has_room:
            raise ValidationError("Student has no room assigned")

        self._assignment.release(student.branch, student.room_number, student.student_id)
        logger.info("Student %s removed from %s-%s", student.student_id, student.branch, student.room_number)
        return self._students.update(student.student_id, {"branch": None, "roomNumber": None})

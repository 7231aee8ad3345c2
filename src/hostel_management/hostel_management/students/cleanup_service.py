from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

from ..attendance.repository import AttendanceRepository
from ..auth.repository import OTPRepository, PendingStudentRepository
from ..common.validators import require_non_empty
from ..fees.repository import PaymentRepository
from ..food.repository import FoodOrderRepository
from ..late_pass.repository import LatePassRepository
from ..maintenance.repository import MaintenanceRepository
from .model import Student
from .repository import StudentRepository
from .room_assignment import RoomAssignment

logger = logging.getLogger(__name__)


@dataclass
class DeletionLog:
    """Human-readable trail of a cascading delete. Each step is logged as it happens."""

    steps: list[str] = field(default_factory=list)

    def add(self, message: str) -> None:
        logger.info("cleanup: %s", message)
        self.steps.append(message)


class StudentCleanupService:
    """Removes a student and everything hanging off their partitions.

    The deletes are issued one by one; a failure part-way leaves the
    records deleted so far gone.
    """

    def __init__(
        self,
        students: StudentRepository,
        pending: PendingStudentRepository,
        otps: OTPRepository,
        maintenance: MaintenanceRepository,
        food_orders: FoodOrderRepository,
        payments: PaymentRepository,
        attendance: AttendanceRepository,
        late_passes: LatePassRepository,
        assignment: RoomAssignment,
    ):
        self._students = students
        self._pending = pending
        self._otps = otps
        self._assignment = assignment
        self._partitions: Sequence[tuple[str, str, Callable[[str], list[str]]]] = (
            ("MAINTENANCE", "maintenance request", maintenance.delete_for_student),
            ("FOOD_ORDER", "food order", food_orders.delete_for_student),
            ("PAYMENT", "payment", payments.delete_for_student),
            ("ATTENDANCE", "attendance record", attendance.delete_for_student),
            ("LATE_PASS", "late pass request", late_passes.delete_for_student),
        )

    def _delete_signup_records(self, email: str, log: DeletionLog) -> None:
        pending = self._pending.get(email)
        if pending:
            self._pending.delete(email)
            log.add(f"Deleted PENDING_STUDENT record (Student ID: {pending.student_id})")
        else:
            log.add("No PENDING_STUDENT record found")

        if self._otps.get(email):
            self._otps.delete(email)
            log.add("Deleted OTP record")
        else:
            log.add("No OTP record found")

    def _delete_owned_records(self, student_id: str, log: DeletionLog) -> None:
        for entity, label, delete_for_student in self._partitions:
            deleted = delete_for_student(student_id)
            if deleted:
                log.add(f"Deleted {len(deleted)} {label}(s): {', '.join(deleted)}")
            else:
                log.add(f"No {entity} records found")

    def _detach_from_room(self, student: Student, log: DeletionLog) -> None:
        if self._assignment.release(student.branch, student.room_number, student.student_id):
            log.add(f"Removed student from room: {student.branch}-{student.room_number}")
        else:
            log.add("No ROOM assignment found")

    def _cascade(self, student: Student, log: DeletionLog) -> None:
        self._students.delete(student.student_id)
        log.add(f"Deleted STUDENT record for {student.student_id}")
        self._delete_owned_records(student.student_id, log)
        self._detach_from_room(student, log)

    def delete_student(self, student_id: Any) -> list[str]:
        student_id = require_non_empty(student_id, "Student ID")
        log = DeletionLog()

        student = self._students.get_by_id(student_id)
        if student:
            log.add(f"Found student: {student.name} ({student.email})")
            self._students.delete(student_id)
            log.add("Deleted STUDENT record")
            if student.email:
                self._delete_signup_records(student.email, log)
        else:
            log.add("No STUDENT record found")

        self._delete_owned_records(student_id, log)
        if student:
            self._detach_from_room(student, log)

        log.add(f"Successfully deleted all data for student: {student_id}")
        return log.steps

    def delete_by_email(self, email: Any) -> list[str]:
        email = require_non_empty(email, "Email")
        log = DeletionLog()

        self._delete_signup_records(email, log)

        matching = self._students.list_by_email(email)
        if matching:
            log.add(f"Found {len(matching)} student(s) with this email")
            for student in matching:
                log.add(f"Processing student: {student.student_id} ({student.name})")
                self._cascade(student, log)
        else:
            log.add("No STUDENT records found with this email")

        log.add(f"Successfully deleted all data for email: {email}")
        return log.steps

from __future__ import annotations

import hmac
import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import now_utc, parse_iso, to_iso
from ..common.validators import (
    require_fields,
    validate_email,
    validate_name,
    validate_otp_format,
    validate_password,
    validate_phone,
    validate_student_id,
)
from ..core.constants import OTP_EXPIRY_MINUTES, OTP_LENGTH, OTP_MAX_ATTEMPTS
from ..core.enums import Role
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DeliveryError,
    NotFoundError,
    TooManyAttemptsError,
    ValidationError,
)
from ..students.model import Student
from ..students.repository import StudentRepository
from .email_sender import EmailSender
from .model import OTPVerification, PendingStudent
from .repository import OTPRepository, PendingStudentRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    role: Role
    student_id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None


@dataclass(frozen=True)
class SignupData:
    student_id: str
    password: str
    name: str
    email: str
    phone: str


def generate_otp() -> str:
    return str(secrets.randbelow(9 * 10 ** (OTP_LENGTH - 1)) + 10 ** (OTP_LENGTH - 1))


def parse_signup(data: dict[str, Any]) -> SignupData:
    """Validate every signup field and report all problems at once."""
    checks: list[tuple[str, Callable[[Any], str]]] = [
        ("studentId", validate_student_id),
        ("password", validate_password),
        ("name", validate_name),
        ("email", validate_email),
        ("phone", validate_phone),
    ]
    values: dict[str, str] = {}
    errors: list[str] = []
    for field_name, check in checks:
        try:
            values[field_name] = check(data.get(field_name))
        except ValidationError as e:
            errors.append(e.message)
    if errors:
        raise ValidationError(f"Validation failed: {', '.join(errors)}")

    return SignupData(
        student_id=values["studentId"],
        password=values["password"],
        name=values["name"],
        email=values["email"],
        phone=values["phone"],
    )


class AuthService:
    """Use cases: OTP signup, direct signup, student and admin login."""

    def __init__(
        self,
        students: StudentRepository,
        pending: PendingStudentRepository,
        otps: OTPRepository,
        email_sender: EmailSender,
        *,
        admin_password: str,
        otp_expiry_minutes: int = OTP_EXPIRY_MINUTES,
        otp_max_attempts: int = OTP_MAX_ATTEMPTS,
        otp_generator: Callable[[], str] = generate_otp,
    ):
        self._students = students
        self._pending = pending
        self._otps = otps
        self._email_sender = email_sender
        self._admin_password = admin_password
        self._otp_expiry = timedelta(minutes=int(otp_expiry_minutes))
        self._otp_max_attempts = int(otp_max_attempts)
        self._otp_generator = otp_generator

    def _discard_signup(self, email: str) -> None:
        self._otps.delete(email)
        self._pending.delete(email)

    def send_otp(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> str:
        now = now or now_utc()
        signup = parse_signup(data)

        if self._students.get_by_id(signup.student_id):
            raise ConflictError("Student ID already registered")

        # Re-registration replaces whatever was parked for this email.
        self._discard_signup(signup.email)

        otp = self._otp_generator()
        self._pending.save(
            PendingStudent(
                student_id=signup.student_id,
                password_hash=generate_password_hash(signup.password),
                name=signup.name,
                email=signup.email,
                phone=signup.phone,
                created_at=to_iso(now),
            )
        )
        self._otps.save(OTPVerification(email=signup.email, otp=otp, created_at=to_iso(now)))

        if not self._email_sender.send_otp(email=signup.email, otp=otp, name=signup.name):
            self._discard_signup(signup.email)
            raise DeliveryError("Failed to send verification email. Please try again.")

        logger.info("OTP sent to %s for student %s", signup.email, signup.student_id)
        return signup.email

    def _is_expired(self, record: OTPVerification, now: datetime) -> bool:
        return now - parse_iso(record.created_at) > self._otp_expiry

    def verify_otp(self, email: Any, otp: Any, *, now: Optional[datetime] = None) -> Student:
        now = now or now_utc()
        email = validate_email(email)
        otp = validate_otp_format(otp)

        record = self._otps.get(email)
        if not record:
            raise NotFoundError("OTP not found or expired. Please request a new OTP.")
        if record.verified:
            raise ValidationError("OTP already used. Please request a new OTP.")
        if self._is_expired(record, now):
            self._discard_signup(email)
            raise ValidationError("OTP has expired. Please request a new OTP.")
        if record.attempts >= self._otp_max_attempts:
            self._discard_signup(email)
            raise TooManyAttemptsError("Too many failed attempts. Please request a new OTP.")

        if not hmac.compare_digest(record.otp, otp):
            attempts = record.attempts + 1
            self._otps.update(email, {"attempts": attempts})
            raise ValidationError(
                "Invalid OTP. Please try again.",
                extra={"attemptsRemaining": self._otp_max_attempts - attempts},
            )

        pending = self._pending.get(email)
        if not pending:
            raise NotFoundError("Registration data not found. Please start registration again.")

        # The id may have been taken while the OTP was outstanding.
        if self._students.get_by_id(pending.student_id):
            self._discard_signup(email)
            raise ConflictError("Student ID already registered")

        student = Student(
            student_id=pending.student_id,
            password_hash=pending.password_hash,
            name=pending.name,
            email=pending.email,
            phone=pending.phone,
            registration_date=to_iso(now),
        )
        self._students.create(student)
        self._otps.update(email, {"verified": True})
        self._pending.delete(email)
        logger.info("Student %s registered via OTP", student.student_id)
        return student

    def signup(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> Student:
        """Register without email verification."""
        now = now or now_utc()
        require_fields(data, ("studentId", "password", "name", "email", "phone"), "All fields are required")
        student_id = str(data["studentId"]).strip()

        if self._students.get_by_id(student_id):
            raise ConflictError("Student ID already registered")

        student = Student(
            student_id=student_id,
            password_hash=generate_password_hash(str(data["password"])),
            name=str(data["name"]).strip(),
            email=str(data["email"]).strip(),
            phone=str(data["phone"]).strip(),
            registration_date=to_iso(now),
        )
        self._students.create(student)
        return student

    def authenticate_student(self, student_id: Any, password: Any) -> Student:
        if not student_id or not password:
            raise ValidationError("Student ID and password are required")

        student = self._students.get_by_id(str(student_id))
        if not student:
            raise AuthenticationError("Invalid student ID or password")
        if not student.active:
            raise AuthorizationError("Student account is inactive")

        try:
            ok = check_password_hash(student.password_hash, str(password))
        except ValueError:
            # corrupted or placeholder hashes
            ok = False
        if not ok:
            raise AuthenticationError("Invalid student ID or password")
        return student

    def authenticate_admin(self, password: Any) -> SessionUser:
        if not password:
            raise ValidationError("Password is required")
        if not self._admin_password or not hmac.compare_digest(str(password).encode(), self._admin_password.encode()):
            raise AuthenticationError("Invalid admin password")
        return SessionUser(role=Role.ADMIN)

    @staticmethod
    def session_user_for(student: Student) -> SessionUser:
        return SessionUser(role=Role.STUDENT, student_id=student.student_id, name=student.name, email=student.email)

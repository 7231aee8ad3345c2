from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

import pytest
from werkzeug.security import generate_password_hash

from src.hostel_management.hostel_management.container import Container, build_container
from src.hostel_management.hostel_management.database.memory_store import MemoryStore
from src.hostel_management.hostel_management.main import create_app
from src.hostel_management.hostel_management.students.model import Student

ADMIN_PASSWORD = "admin-test-password"


@dataclass
class RecordingEmailSender:
    """Keeps every OTP instead of sending it."""

    deliver: bool = True
    sent: list = field(default_factory=list)

    def send_otp(self, *, email, otp, name):
        self.sent.append({"email": email, "otp": otp, "name": name})
        return self.deliver


@pytest.fixture
def fixed_now():
    return datetime(2026, 3, 15, 9, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def email_sender():
    return RecordingEmailSender()


@pytest.fixture
def container(store, email_sender) -> Container:
    return build_container(store=store, email_sender=email_sender, admin_password=ADMIN_PASSWORD)


@pytest.fixture
def make_student(container):
    def _make(student_id="stu-001", *, name="Asha Rao", email="asha@example.com", password="secret123", **kw):
        student = Student(
            student_id=student_id,
            password_hash=generate_password_hash(password),
            name=name,
            email=email,
            phone="+919876543210",
            registration_date="2026-01-10T08:00:00.000Z",
            **kw,
        )
        container.students_repo.create(student)
        return student

    return _make


@pytest.fixture
def app(store, email_sender):
    return create_app("config.testing", store=store, email_sender=email_sender)


@pytest.fixture
def client(app):
    return app.test_client()

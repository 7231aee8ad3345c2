from __future__ import annotations

from datetime import timedelta

import pytest

from src.hostel_management.hostel_management.auth.model import OTPVerification, PendingStudent
from src.hostel_management.hostel_management.core.exceptions import ValidationError


@pytest.fixture
def resident(container, make_student, fixed_now):
    container.branch_service.create_branch(name="North Block")
    container.room_service.create_room(room_number="101", branch="north-block")
    menu = container.food_service.add_menu_item({"name": "Tea", "price": 10, "category": "Snacks"}, now=fixed_now)

    make_student("stu-1", email="asha@example.com")
    container.student_service.assign_room("stu-1", "north-block", "101")
    container.maintenance_service.submit("stu-1", issue="Leaking tap", now=fixed_now)
    container.food_service.place_order("stu-1", [{"menuId": menu.menu_id, "quantity": 2}], now=fixed_now)
    container.payment_service.pay("stu-1", amount=500, now=fixed_now)
    container.attendance_service.mark_today("stu-1", now=fixed_now)
    container.late_pass_service.submit(
        "stu-1",
        {
            "requestedDate": "2026-03-20",
            "startTime": "21:00",
            "endTime": "23:00",
            "reason": "Family visit",
            "description": "Dinner with parents",
        },
        now=fixed_now + timedelta(seconds=1),
    )
    container.pending_repo.save(
        PendingStudent(
            student_id="stu-1",
            password_hash="x",
            name="Asha Rao",
            email="asha@example.com",
            phone="+919876543210",
            created_at="2026-03-15T09:00:00.000Z",
        )
    )
    container.otp_repo.save(OTPVerification(email="asha@example.com", otp="123456", created_at="2026-03-15T09:00:00.000Z"))
    return container


def _entity_types(store):
    return sorted({item["entityType"] for item in store.scan()})


def test_delete_student_removes_everything(resident):
    log = resident.cleanup_service.delete_student("stu-1")

    assert log[0] == "Found student: Asha Rao (asha@example.com)"
    assert log[-1] == "Successfully deleted all data for student: stu-1"
    assert any(line.startswith("Deleted 1 food order(s): FOOD_ORDER#ORD-") for line in log)
    assert "Removed student from room: north-block-101" in log
    assert _entity_types(resident.store) == ["BRANCH", "FOOD_MENU", "ROOM"]
    assert resident.rooms_repo.get("north-block", "101").occupied == 0
    assert resident.branches_repo.get_by_id("north-block").occupied == 0


def test_delete_unknown_student_still_reports(container):
    log = container.cleanup_service.delete_student("ghost")

    assert log[0] == "No STUDENT record found"
    assert "No MAINTENANCE records found" in log
    assert log[-1] == "Successfully deleted all data for student: ghost"


def test_delete_by_email(resident):
    log = resident.cleanup_service.delete_by_email("asha@example.com")

    assert log[0] == "Deleted PENDING_STUDENT record (Student ID: stu-1)"
    assert "Found 1 student(s) with this email" in log
    assert "Deleted STUDENT record for stu-1" in log
    assert _entity_types(resident.store) == ["BRANCH", "FOOD_MENU", "ROOM"]


def test_delete_requires_identifier(container):
    with pytest.raises(ValidationError):
        container.cleanup_service.delete_student(" ")
    with pytest.raises(ValidationError):
        container.cleanup_service.delete_by_email(None)

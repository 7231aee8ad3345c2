from __future__ import annotations

from src.hostel_management.hostel_management.seed import DEMO_STUDENT_ID, seed_demo_data


def test_seed_is_idempotent(container, fixed_now):
    seed_demo_data(container, now=fixed_now)
    first = len(container.store)
    seed_demo_data(container, now=fixed_now)

    assert len(container.store) == first
    student = container.students_repo.get_by_id(DEMO_STUDENT_ID)
    assert (student.branch, student.room_number) == ("north-block", "101")
    assert container.rooms_repo.get("north-block", "101").occupied == 1
    assert container.fee_service.current_configuration(now=fixed_now).total_fee == 65000


def test_demo_student_can_log_in(container):
    seed_demo_data(container)
    assert container.auth_service.authenticate_student(DEMO_STUDENT_ID, "student123").name == "Demo Student"

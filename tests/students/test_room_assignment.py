from __future__ import annotations

import pytest

from src.hostel_management.hostel_management.core.exceptions import (
    ConditionFailedError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.hostel_management.hostel_management.students.room_assignment import RoomAssignment


@pytest.fixture
def hostel(container):
    container.branch_service.create_branch(name="North Block", capacity=10)
    container.room_service.create_room(room_number="101", branch="north-block", capacity=2)
    container.room_service.create_room(room_number="102", branch="north-block", capacity=1)
    return container


def test_assign_room_updates_room_branch_and_student(hostel, make_student):
    make_student("stu-1")

    student = hostel.student_service.assign_room("stu-1", "north-block", "101")

    assert (student.branch, student.room_number) == ("north-block", "101")
    room = hostel.rooms_repo.get("north-block", "101")
    assert room.students == ("stu-1",)
    assert room.occupied == 1
    assert hostel.branches_repo.get_by_id("north-block").occupied == 1


def test_assign_same_room_twice_is_a_no_op(hostel, make_student):
    make_student("stu-1")
    hostel.student_service.assign_room("stu-1", "north-block", "101")
    hostel.student_service.assign_room("stu-1", "north-block", "101")

    assert hostel.rooms_repo.get("north-block", "101").occupied == 1
    assert hostel.branches_repo.get_by_id("north-block").occupied == 1


def test_moving_releases_old_room(hostel, make_student):
    make_student("stu-1")
    hostel.student_service.assign_room("stu-1", "north-block", "101")
    hostel.student_service.assign_room("stu-1", "north-block", "102")

    assert hostel.rooms_repo.get("north-block", "101").students == ()
    assert hostel.rooms_repo.get("north-block", "102").students == ("stu-1",)
    assert hostel.branches_repo.get_by_id("north-block").occupied == 1


def test_full_room_is_rejected(hostel, make_student):
    make_student("stu-1")
    make_student("stu-2", email="b@example.com")
    hostel.student_service.assign_room("stu-1", "north-block", "102")

    with pytest.raises(ValidationError, match="Room is full"):
        hostel.student_service.assign_room("stu-2", "north-block", "102")
    assert hostel.students_repo.get_by_id("stu-2").room_number is None


def test_unknown_room_or_student(hostel, make_student):
    make_student("stu-1")
    with pytest.raises(NotFoundError, match="Room not found"):
        hostel.student_service.assign_room("stu-1", "north-block", "999")
    with pytest.raises(NotFoundError, match="Student not found"):
        hostel.student_service.assign_room("ghost", "north-block", "101")


def test_lost_race_on_last_bed(hostel, make_student):
    make_student("stu-1")
    assignment = RoomAssignment(hostel.rooms_repo, hostel.branches_repo)
    stale = hostel.rooms_repo.get("north-block", "102")

    # someone else takes the bed after we read the room
    assignment.claim(stale, "stu-9")

    with pytest.raises(ConflictError):
        assignment.claim(stale, "stu-1")
    assert hostel.rooms_repo.get("north-block", "102").students == ("stu-9",)


def test_unassign_room(hostel, make_student):
    make_student("stu-1")
    hostel.student_service.assign_room("stu-1", "north-block", "101")

    student = hostel.student_service.unassign_room("stu-1")

    assert student.branch is None and student.room_number is None
    assert hostel.rooms_repo.get("north-block", "101").occupied == 0
    assert hostel.branches_repo.get_by_id("north-block").occupied == 0
    with pytest.raises(ValidationError, match="no room"):
        hostel.student_service.unassign_room("stu-1")


def test_room_without_branch_record_still_assigns(container, make_student):
    container.room_service.create_room(room_number="1", branch="annex")
    make_student("stu-1")

    container.student_service.assign_room("stu-1", "annex", "1")
    assert container.rooms_repo.get("annex", "1").occupied == 1


def test_generic_update_routes_room_fields(hostel, make_student):
    make_student("stu-1")

    student = hostel.student_service.update_student(
        "stu-1", {"branch": "north-block", "roomNumber": "101", "feesPaid": True, "password": "x"}
    )

    assert student.room_number == "101"
    assert student.fees_paid is True
    assert hostel.rooms_repo.get("north-block", "101").students == ("stu-1",)

    with pytest.raises(ValidationError, match="active must be true or false"):
        hostel.student_service.update_student("stu-1", {"active": "no"})


def test_deactivate(hostel, make_student):
    make_student("stu-1")
    hostel.student_service.deactivate("stu-1")
    assert hostel.students_repo.get_by_id("stu-1").active is False


def test_bad_flag_is_rejected_before_room_change(hostel, make_student):
    make_student("stu-1")

    with pytest.raises(ValidationError, match="active must be true or false"):
        hostel.student_service.update_student(
            "stu-1", {"roomNumber": "101", "branch": "north-block", "active": "no"}
        )

    assert hostel.rooms_repo.get("north-block", "101").students == ()
    assert hostel.branches_repo.get_by_id("north-block").occupied == 0
    student = hostel.students_repo.get_by_id("stu-1")
    assert (student.branch, student.room_number) == (None, None)


class LosingBranches:
    """Branch repository whose counter write always loses the race."""

    def __init__(self, inner):
        self._inner = inner

    def get_by_id(self, branch_id):
        return self._inner.get_by_id(branch_id)

    def update(self, branch_id, updates, *, expected=None):
        raise ConditionFailedError(f"Condition failed for {branch_id}")


def test_claim_is_undone_when_branch_counter_loses_race(hostel, make_student):
    make_student("stu-1")
    assignment = RoomAssignment(hostel.rooms_repo, LosingBranches(hostel.branches_repo))

    with pytest.raises(ConflictError):
        assignment.claim(hostel.rooms_repo.get("north-block", "102"), "stu-1")

    room = hostel.rooms_repo.get("north-block", "102")
    assert room.students == ()
    assert room.occupied == 0
    assert hostel.branches_repo.get_by_id("north-block").occupied == 0

from __future__ import annotations

import pytest

from src.hostel_management.hostel_management.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_branch_slugifies_name(container, fixed_now):
    branch = container.branch_service.create_branch(name="  North   Block ", capacity="40", now=fixed_now)

    assert branch.branch_id == "north-block"
    assert branch.name == "North   Block"
    assert branch.capacity == 40
    assert branch.occupied == 0
    assert branch.created_at == "2026-03-15T09:30:00.000Z"

    with pytest.raises(ConflictError):
        container.branch_service.create_branch(name="north block")


def test_create_branch_requires_name(container):
    with pytest.raises(ValidationError):
        container.branch_service.create_branch(name="   ")


def test_update_branch(container):
    container.branch_service.create_branch(name="East Wing", capacity=10)

    updated = container.branch_service.update_branch(
        "east-wing", {"description": "Renovated", "capacity": 12, "branchId": "hacked", "PK": "x"}
    )
    assert updated.branch_id == "east-wing"
    assert updated.description == "Renovated"
    assert updated.capacity == 12

    with pytest.raises(NotFoundError):
        container.branch_service.update_branch("west-wing", {"description": "x"})
    with pytest.raises(ValidationError, match="No updatable fields"):
        container.branch_service.update_branch("east-wing", {"createdAt": "x"})


def test_delete_branch_blocked_by_students(container, make_student):
    container.branch_service.create_branch(name="East Wing")
    make_student("stu-1", branch="east-wing", room_number="1")
    make_student("stu-2", branch="east-wing", room_number="2", email="b@example.com")

    with pytest.raises(ValidationError) as e:
        container.branch_service.delete_branch("east-wing")
    assert e.value.to_dict() == {"error": "Cannot delete branch with assigned students", "studentsCount": 2}

    container.store.delete("STUDENT#stu-1", "STUDENT#stu-1")
    container.store.delete("STUDENT#stu-2", "STUDENT#stu-2")
    container.branch_service.delete_branch("east-wing")
    assert container.branch_service.list_branches() == []

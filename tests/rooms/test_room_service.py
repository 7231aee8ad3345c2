from __future__ import annotations

import pytest

from src.hostel_management.hostel_management.core.exceptions import ConflictError, NotFoundError, ValidationError


def test_create_room_defaults(container):
    data = container.room_service.create_room(room_number="101", branch="north-block")

    assert data["roomId"] == "ROOM-north-block-101"
    assert data["capacity"] == 2
    assert data["occupied"] == 0
    assert data["students"] == []
    assert data["floor"] == 1
    assert data["type"] == "double"
    assert data["status"] == "available"

    with pytest.raises(ConflictError):
        container.room_service.create_room(room_number="101", branch="north-block")


def test_create_room_requires_keys(container):
    with pytest.raises(ValidationError):
        container.room_service.create_room(room_number="", branch="north-block")


def test_list_rooms_by_branch(container):
    container.room_service.create_room(room_number="102", branch="north-block")
    container.room_service.create_room(room_number="101", branch="north-block")
    container.room_service.create_room(room_number="201", branch="south-block")

    assert [r.room_number for r in container.room_service.list_rooms(branch="north-block")] == ["101", "102"]
    assert len(container.room_service.list_rooms()) == 3


def test_update_room_protects_occupancy(container):
    container.room_service.create_room(room_number="101", branch="north-block", capacity=3)
    container.rooms_repo.update("north-block", "101", {"occupied": 2, "students": ["a", "b"]})

    updated = container.room_service.update_room("north-block", "101", {"capacity": 4, "occupied": 0})
    assert updated.capacity == 4
    assert updated.occupied == 2

    with pytest.raises(ValidationError, match="lower than current occupancy"):
        container.room_service.update_room("north-block", "101", {"capacity": 1})
    with pytest.raises(NotFoundError):
        container.room_service.update_room("north-block", "999", {"capacity": 1})


def test_delete_room_with_students_is_refused(container):
    container.room_service.create_room(room_number="101", branch="north-block")
    container.rooms_repo.update("north-block", "101", {"occupied": 1, "students": ["a"]})

    with pytest.raises(ValidationError) as e:
        container.room_service.delete_room("north-block", "101")
    assert e.value.extra == {"studentsCount": 1}

    container.room_service.create_room(room_number="102", branch="north-block")
    container.room_service.delete_room("north-block", "102")
    assert container.rooms_repo.get("north-block", "102") is None


@pytest.mark.parametrize("capacity", ["Infinity", "NaN"])
def test_room_capacity_must_be_finite(container, capacity):
    with pytest.raises(ValidationError, match="Capacity must be a number"):
        container.room_service.create_room(room_number="101", branch="north-block", capacity=capacity)

    container.room_service.create_room(room_number="101", branch="north-block")
    with pytest.raises(ValidationError, match="Capacity must be a number"):
        container.room_service.update_room("north-block", "101", {"capacity": capacity})
    assert container.rooms_repo.get("north-block", "101").capacity == 2

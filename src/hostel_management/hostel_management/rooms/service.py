from __future__ import annotations

from typing import Any, Optional, Sequence

from ..common.validators import clean_updates, require_number
from ..core.constants import DEFAULT_ROOM_CAPACITY, DEFAULT_ROOM_FLOOR, DEFAULT_ROOM_TYPE
from ..core.exceptions import ConflictError, NotFoundError, ValidationError
from .model import Room
from .repository import RoomRepository

# Occupancy is owned by room assignment, keys cannot move.
_PROTECTED = ("branch", "roomNumber", "occupied", "students")


class RoomService:
    def __init__(self, rooms: RoomRepository):
        self._rooms = rooms

    def list_rooms(self, *, branch: Optional[str] = None) -> Sequence[Room]:
        if branch:
            return self._rooms.list_by_branch(branch)
        return self._rooms.list_all()

    def create_room(
        self,
        *,
        room_number: Any,
        branch: Any,
        capacity: Any = None,
        floor: Any = None,
        room_type: Any = None,
    ) -> dict[str, Any]:
        if not room_number or not branch:
            raise ValidationError("Room number and branch are required")
        room_number, branch = str(room_number).strip(), str(branch).strip()

        if self._rooms.get(branch, room_number):
            raise ConflictError("Room already exists in this branch")

        room = Room(
            branch=branch,
            room_number=room_number,
            capacity=int(require_number(capacity or DEFAULT_ROOM_CAPACITY, "Capacity", minimum=1)),
        )
        self._rooms.create(room)

        # floor/type/status are echoed back but not persisted
        return {
            **room.to_dict(),
            "roomId": room.room_id,
            "floor": floor or DEFAULT_ROOM_FLOOR,
            "type": room_type or DEFAULT_ROOM_TYPE,
            "status": "available",
        }

    def update_room(self, branch: Any, room_number: Any, updates: Any) -> Room:
        if not branch or not room_number:
            raise ValidationError("Branch and room number are required")
        cleaned = clean_updates(updates, protected=_PROTECTED)

        room = self._rooms.get(str(branch), str(room_number))
        if not room:
            raise NotFoundError("Room not found")
        if "capacity" in cleaned:
            capacity = int(require_number(cleaned["capacity"], "Capacity", minimum=1))
            if capacity < room.occupied:
                raise ValidationError("Capacity cannot be lower than current occupancy")
            cleaned["capacity"] = capacity
        return self._rooms.update(room.branch, room.room_number, cleaned)

    def delete_room(self, branch: Any, room_number: Any) -> None:
        if not branch or not room_number:
            raise ValidationError("Branch and room number are required")
        room = self._rooms.get(str(branch), str(room_number))
        if room and room.students:
            raise ValidationError(
                "Cannot delete room with assigned students",
                extra={"studentsCount": len(room.students)},
            )
        self._rooms.delete(str(branch), str(room_number))

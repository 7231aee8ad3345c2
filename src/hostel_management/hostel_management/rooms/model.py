from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Room:
    """A room inside a branch. ``students`` holds the ids of its occupants."""

    branch: str
    room_number: str
    capacity: int
    occupied: int = 0
    students: tuple[str, ...] = field(default_factory=tuple)

    @property
    def room_id(self) -> str:
        return f"ROOM-{self.branch}-{self.room_number}"

    @property
    def is_full(self) -> bool:
        return self.occupied >= self.capacity

    def to_dict(self) -> dict[str, Any]:
        return {
            "branch": self.branch,
            "roomNumber": self.room_number,
            "capacity": self.capacity,
            "occupied": self.occupied,
            "students": list(self.students),
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Room":
        return cls(
            branch=str(item["branch"]),
            room_number=str(item["roomNumber"]),
            capacity=int(item.get("capacity") or 0),
            occupied=int(item.get("occupied") or 0),
            students=tuple(str(s) for s in item.get("students") or ()),
        )

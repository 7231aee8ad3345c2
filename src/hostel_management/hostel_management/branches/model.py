from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Branch:
    branch_id: str
    name: str
    description: str
    capacity: int
    occupied: int
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "branchId": self.branch_id,
            "name": self.name,
            "description": self.description,
            "capacity": self.capacity,
            "occupied": self.occupied,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "Branch":
        return cls(
            branch_id=str(item["branchId"]),
            name=item.get("name", ""),
            description=item.get("description", ""),
            capacity=int(item.get("capacity") or 0),
            occupied=int(item.get("occupied") or 0),
            created_at=item.get("createdAt", ""),
        )

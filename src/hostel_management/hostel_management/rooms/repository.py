from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import Room


class RoomRepository(Protocol):
    def get(self, branch: str, room_number: str) -> Optional[Room]:
        raise NotImplementedError

    def create(self, room: Room) -> None:
        raise NotImplementedError

    def update(
        self,
        branch: str,
        room_number: str,
        updates: dict[str, Any],
        *,
        expected: Optional[dict[str, Any]] = None,
    ) -> Room:
        raise NotImplementedError

    def delete(self, branch: str, room_number: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[Room]:
        raise NotImplementedError

    def list_by_branch(self, branch: str) -> Sequence[Room]:
        raise NotImplementedError

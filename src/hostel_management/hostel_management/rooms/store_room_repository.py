from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key
from .model import Room
from .repository import RoomRepository


def _keys(branch: str, room_number: str) -> tuple[str, str]:
    return entity_key(EntityType.ROOM, branch), entity_key(EntityType.ROOM, room_number)


class StoreRoomRepository(RoomRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, branch: str, room_number: str) -> Optional[Room]:
        item = self._store.get(*_keys(branch, room_number))
        return Room.from_item(item) if item else None

    def create(self, room: Room) -> None:
        pk, sk = _keys(room.branch, room.room_number)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.ROOM.value, **room.to_dict()})

    def update(
        self,
        branch: str,
        room_number: str,
        updates: dict[str, Any],
        *,
        expected: Optional[dict[str, Any]] = None,
    ) -> Room:
        item = self._store.update(*_keys(branch, room_number), updates, expected=expected)
        return Room.from_item(item)

    def delete(self, branch: str, room_number: str) -> None:
        self._store.delete(*_keys(branch, room_number))

    def list_all(self) -> Sequence[Room]:
        rows = [Room.from_item(i) for i in self._store.scan_by_type(EntityType.ROOM)]
        rows.sort(key=lambda r: (r.branch, r.room_number))
        return rows

    def list_by_branch(self, branch: str) -> Sequence[Room]:
        # No secondary index: full scan filtered client-side.
        return [r for r in self.list_all() if r.branch == branch]

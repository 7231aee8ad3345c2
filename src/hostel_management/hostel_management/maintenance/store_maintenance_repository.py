from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key
from .model import MaintenanceRequest
from .repository import MaintenanceRepository


def _keys(student_id: str, request_id: str) -> tuple[str, str]:
    return entity_key(EntityType.MAINTENANCE, student_id), entity_key(EntityType.MAINTENANCE, request_id)


class StoreMaintenanceRepository(MaintenanceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def create(self, request: MaintenanceRequest) -> None:
        pk, sk = _keys(request.student_id, request.request_id)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.MAINTENANCE.value, **request.to_dict()})

    def get(self, *, student_id: str, request_id: str) -> Optional[MaintenanceRequest]:
        item = self._store.get(*_keys(student_id, request_id))
        return MaintenanceRequest.from_item(item) if item else None

    def update(self, *, student_id: str, request_id: str, updates: dict[str, Any]) -> MaintenanceRequest:
        item = self._store.update(*_keys(student_id, request_id), updates)
        return MaintenanceRequest.from_item(item)

    def list_for_student(self, student_id: str) -> Sequence[MaintenanceRequest]:
        items = self._store.query(entity_key(EntityType.MAINTENANCE, student_id), EntityType.MAINTENANCE.value)
        rows = [MaintenanceRequest.from_item(i) for i in items]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return rows

    def list_all(self) -> Sequence[MaintenanceRequest]:
        rows = [MaintenanceRequest.from_item(i) for i in self._store.scan_by_type(EntityType.MAINTENANCE)]
        rows.sort(key=lambda r: r.created_at, reverse=True)
        return rows

    def delete_for_student(self, student_id: str) -> list[str]:
        deleted: list[str] = []
        for item in self._store.query(entity_key(EntityType.MAINTENANCE, student_id)):
            self._store.delete(item["PK"], item["SK"])
            deleted.append(item["SK"])
        return deleted

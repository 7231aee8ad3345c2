from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key
from .model import LatePassRequest
from .repository import LatePassRepository


def _keys(student_id: str, request_id: str) -> tuple[str, str]:
    return entity_key(EntityType.LATE_PASS, student_id), entity_key(EntityType.LATE_PASS, request_id)


def _newest_first(rows: list[LatePassRequest]) -> list[LatePassRequest]:
    return sorted(rows, key=lambda r: r.created_at, reverse=True)


class StoreLatePassRepository(LatePassRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def create(self, request: LatePassRequest) -> None:
        pk, sk = _keys(request.student_id, request.request_id)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.LATE_PASS.value, **request.to_dict()})

    def get(self, *, student_id: str, request_id: str) -> Optional[LatePassRequest]:
        item = self._store.get(*_keys(student_id, request_id))
        return LatePassRequest.from_item(item) if item else None

    def update(self, *, student_id: str, request_id: str, updates: dict[str, Any]) -> LatePassRequest:
        return LatePassRequest.from_item(self._store.update(*_keys(student_id, request_id), updates))

    def list_for_student(self, student_id: str) -> Sequence[LatePassRequest]:
        items = self._store.query(entity_key(EntityType.LATE_PASS, student_id), f"{EntityType.LATE_PASS.value}#")
        return _newest_first([LatePassRequest.from_item(i) for i in items])

    def list_all(self) -> Sequence[LatePassRequest]:
        return _newest_first([LatePassRequest.from_item(i) for i in self._store.scan_by_type(EntityType.LATE_PASS)])

    def delete_for_student(self, student_id: str) -> list[str]:
        deleted: list[str] = []
        for item in self._store.query(entity_key(EntityType.LATE_PASS, student_id)):
            self._store.delete(item["PK"], item["SK"])
            deleted.append(item["SK"])
        return deleted

from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key
from .model import AttendanceRecord
from .repository import AttendanceRepository


def _keys(student_id: str, day: str) -> tuple[str, str]:
    return entity_key(EntityType.ATTENDANCE, student_id), entity_key(EntityType.ATTENDANCE, day)


class StoreAttendanceRepository(AttendanceRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_for_student_and_date(self, student_id: str, day: str) -> Optional[AttendanceRecord]:
        item = self._store.get(*_keys(student_id, day))
        return AttendanceRecord.from_item(item) if item else None

    def create(self, record: AttendanceRecord) -> None:
        pk, sk = _keys(record.student_id, record.date)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.ATTENDANCE.value, **record.to_dict()})

    def list_for_student(self, student_id: str) -> Sequence[AttendanceRecord]:
        # SK carries the date, so partition order is chronological.
        items = self._store.query(entity_key(EntityType.ATTENDANCE, student_id), EntityType.ATTENDANCE.value)
        return [AttendanceRecord.from_item(i) for i in items]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return [AttendanceRecord.from_item(i) for i in self._store.scan_by_type(EntityType.ATTENDANCE)]

    def delete_for_student(self, student_id: str) -> list[str]:
        deleted: list[str] = []
        for item in self._store.query(entity_key(EntityType.ATTENDANCE, student_id)):
            self._store.delete(item["PK"], item["SK"])
            deleted.append(item["SK"])
        return deleted

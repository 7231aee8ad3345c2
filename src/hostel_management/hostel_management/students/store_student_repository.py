from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, key_pair
from .model import Student
from .repository import StudentRepository


class StoreStudentRepository(StudentRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_by_id(self, student_id: str) -> Optional[Student]:
        item = self._store.get(*key_pair(EntityType.STUDENT, student_id))
        return Student.from_item(item) if item else None

    def create(self, student: Student) -> None:
        pk, sk = key_pair(EntityType.STUDENT, student.student_id)
        self._store.put(
            {
                "PK": pk,
                "SK": sk,
                "entityType": EntityType.STUDENT.value,
                **student.to_dict(include_password=True),
            }
        )

    def update(self, student_id: str, updates: dict[str, Any]) -> Student:
        item = self._store.update(*key_pair(EntityType.STUDENT, student_id), updates)
        return Student.from_item(item)

    def delete(self, student_id: str) -> None:
        self._store.delete(*key_pair(EntityType.STUDENT, student_id))

    def list_all(self) -> Sequence[Student]:
        return [Student.from_item(i) for i in self._store.scan_by_type(EntityType.STUDENT)]

    def list_by_email(self, email: str) -> Sequence[Student]:
        return [s for s in self.list_all() if s.email == email]

    def list_by_branch(self, branch_id: str) -> Sequence[Student]:
        return [s for s in self.list_all() if s.branch == branch_id]

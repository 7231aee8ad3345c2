from __future__ import annotations

from typing import Any, Optional

from ..core.enums import EntityType
from ..database.store import KeyValueStore, key_pair
from .model import OTPVerification, PendingStudent
from .repository import OTPRepository, PendingStudentRepository


class StorePendingStudentRepository(PendingStudentRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, email: str) -> Optional[PendingStudent]:
        item = self._store.get(*key_pair(EntityType.PENDING_STUDENT, email))
        return PendingStudent.from_item(item) if item else None

    def save(self, pending: PendingStudent) -> None:
        pk, sk = key_pair(EntityType.PENDING_STUDENT, pending.email)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.PENDING_STUDENT.value, **pending.to_dict()})

    def delete(self, email: str) -> None:
        self._store.delete(*key_pair(EntityType.PENDING_STUDENT, email))


class StoreOTPRepository(OTPRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, email: str) -> Optional[OTPVerification]:
        item = self._store.get(*key_pair(EntityType.OTP, email))
        return OTPVerification.from_item(item) if item else None

    def save(self, record: OTPVerification) -> None:
        pk, sk = key_pair(EntityType.OTP, record.email)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.OTP.value, **record.to_dict()})

    def update(self, email: str, updates: dict[str, Any]) -> OTPVerification:
        return OTPVerification.from_item(self._store.update(*key_pair(EntityType.OTP, email), updates))

    def delete(self, email: str) -> None:
        self._store.delete(*key_pair(EntityType.OTP, email))

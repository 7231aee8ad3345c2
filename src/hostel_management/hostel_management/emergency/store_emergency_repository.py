from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import ContactCategory, EntityType
from ..database.store import KeyValueStore, entity_key
from .model import EmergencyContact
from .repository import EmergencyContactRepository


def _keys(category: ContactCategory, contact_id: str) -> tuple[str, str]:
    # Partitioned by category so a category change means delete + put.
    return (
        entity_key(EntityType.EMERGENCY_CONTACT, category.value),
        entity_key(EntityType.EMERGENCY_CONTACT, contact_id),
    )


class StoreEmergencyContactRepository(EmergencyContactRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, category: ContactCategory, contact_id: str) -> Optional[EmergencyContact]:
        item = self._store.get(*_keys(category, contact_id))
        return EmergencyContact.from_item(item) if item else None

    def create(self, contact: EmergencyContact) -> None:
        pk, sk = _keys(contact.category, contact.contact_id)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.EMERGENCY_CONTACT.value, **contact.to_dict()})

    def update(self, category: ContactCategory, contact_id: str, updates: dict[str, Any]) -> EmergencyContact:
        return EmergencyContact.from_item(self._store.update(*_keys(category, contact_id), updates))

    def delete(self, category: ContactCategory, contact_id: str) -> None:
        self._store.delete(*_keys(category, contact_id))

    def list_all(self) -> Sequence[EmergencyContact]:
        rows = [EmergencyContact.from_item(i) for i in self._store.scan_by_type(EntityType.EMERGENCY_CONTACT)]
        rows.sort(key=lambda c: (c.category.value, c.name))
        return rows

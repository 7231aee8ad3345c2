from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.ids import new_id
from ..common.validators import clean_updates, require_choice
from ..core.enums import ContactCategory
from ..core.exceptions import NotFoundError, ValidationError
from .model import EmergencyContact
from .repository import EmergencyContactRepository


class EmergencyContactService:
    def __init__(self, contacts: EmergencyContactRepository):
        self._contacts = contacts

    def list_contacts(self) -> Sequence[EmergencyContact]:
        return self._contacts.list_all()

    def grouped(self) -> dict[str, list[dict[str, Any]]]:
        groups: dict[str, list[dict[str, Any]]] = {}
        for c in self._contacts.list_all():
            groups.setdefault(c.category.value, []).append(c.to_dict())
        return groups

    def add_contact(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> EmergencyContact:
        if not all(data.get(k) for k in ("category", "name", "phone", "description")):
            raise ValidationError("Category, name, phone, and description are required")

        contact = EmergencyContact(
            contact_id=new_id("CONTACT", now=now),
            category=require_choice(data["category"], ContactCategory, "Invalid category"),
            name=str(data["name"]).strip(),
            phone=str(data["phone"]).strip(),
            description=str(data["description"]).strip(),
            email=str(data.get("email") or "").strip() or None,
            available_24x7=bool(data.get("available247", False)),
        )
        self._contacts.create(contact)
        return contact

    def _require_keys(self, contact_id: Any, category: Any) -> tuple[str, ContactCategory]:
        if not contact_id or not category:
            raise ValidationError("Contact ID and category are required")
        return str(contact_id), require_choice(category, ContactCategory, "Invalid category")

    def update_contact(self, contact_id: Any, category: Any, updates: Any) -> EmergencyContact:
        contact_id, cat = self._require_keys(contact_id, category)
        cleaned = clean_updates(updates, protected=("contactId",))

        current = self._contacts.get(cat, contact_id)
        if not current:
            raise NotFoundError("Emergency contact not found")

        new_category = cleaned.pop("category", cat.value)
        moved = require_choice(new_category, ContactCategory, "Invalid category")
        if moved == cat:
            if not cleaned:
                return current
            return self._contacts.update(cat, contact_id, cleaned)

        # category is the partition key: re-put under the new partition
        merged = EmergencyContact.from_item({**current.to_dict(), **cleaned, "category": moved.value})
        self._contacts.create(merged)
        self._contacts.delete(cat, contact_id)
        return merged

    def delete_contact(self, contact_id: Any, category: Any) -> None:
        contact_id, cat = self._require_keys(contact_id, category)
        self._contacts.delete(cat, contact_id)

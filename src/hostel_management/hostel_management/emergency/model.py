from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import ContactCategory


@dataclass(frozen=True)
class EmergencyContact:
    contact_id: str
    category: ContactCategory
    name: str
    phone: str
    description: str
    email: Optional[str] = None
    available_24x7: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "contactId": self.contact_id,
            "category": self.category.value,
            "name": self.name,
            "phone": self.phone,
            "email": self.email,
            "description": self.description,
            "available247": self.available_24x7,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "EmergencyContact":
        return cls(
            contact_id=str(item["contactId"]),
            category=ContactCategory(item.get("category", ContactCategory.OTHER.value)),
            name=item.get("name", ""),
            phone=item.get("phone", ""),
            description=item.get("description", ""),
            email=item.get("email") or None,
            available_24x7=bool(item.get("available247", False)),
        )

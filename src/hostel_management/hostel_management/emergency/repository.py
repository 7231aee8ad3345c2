from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from ..core.enums import ContactCategory
from .model import EmergencyContact


class EmergencyContactRepository(Protocol):
    def get(self, category: ContactCategory, contact_id: str) -> Optional[EmergencyContact]:
        raise NotImplementedError

    def create(self, contact: EmergencyContact) -> None:
        raise NotImplementedError

    def update(self, category: ContactCategory, contact_id: str, updates: dict[str, Any]) -> EmergencyContact:
        raise NotImplementedError

    def delete(self, category: ContactCategory, contact_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmergencyContact]:
        raise NotImplementedError

from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, key_pair
from .model import Branch
from .repository import BranchRepository


class StoreBranchRepository(BranchRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_by_id(self, branch_id: str) -> Optional[Branch]:
        item = self._store.get(*key_pair(EntityType.BRANCH, branch_id))
        return Branch.from_item(item) if item else None

    def create(self, branch: Branch) -> None:
        pk, sk = key_pair(EntityType.BRANCH, branch.branch_id)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.BRANCH.value, **branch.to_dict()})

    def update(self, branch_id: str, updates: dict[str, Any], *, expected: Optional[dict[str, Any]] = None) -> Branch:
        item = self._store.update(*key_pair(EntityType.BRANCH, branch_id), updates, expected=expected)
        return Branch.from_item(item)

    def delete(self, branch_id: str) -> None:
        self._store.delete(*key_pair(EntityType.BRANCH, branch_id))

    def list_all(self) -> Sequence[Branch]:
        rows = [Branch.from_item(i) for i in self._store.scan_by_type(EntityType.BRANCH)]
        rows.sort(key=lambda b: b.name.lower())
        return rows

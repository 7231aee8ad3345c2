from __future__ import annotations

import copy
from typing import Optional, Sequence

from ..core.enums import EntityType
from ..core.exceptions import ConditionFailedError
from .store import Item, ItemFilter, KeyValueStore, expected_matches, merge_updates


class MemoryStore(KeyValueStore):
    """Process-local store for tests and ``STORE_BACKEND=memory`` runs."""

    def __init__(self):
        self._items: dict[tuple[str, str], Item] = {}

    def put(self, item: Item) -> None:
        self._items[(item["PK"], item["SK"])] = copy.deepcopy(item)

    def get(self, pk: str, sk: str) -> Optional[Item]:
        item = self._items.get((pk, sk))
        return copy.deepcopy(item) if item is not None else None

    def query(self, pk: str, sk_prefix: Optional[str] = None) -> Sequence[Item]:
        rows = [
            copy.deepcopy(v)
            for (p, s), v in self._items.items()
            if p == pk and (not sk_prefix or s.startswith(sk_prefix))
        ]
        rows.sort(key=lambda r: r["SK"])
        return rows

    def update(self, pk: str, sk: str, updates: Item, *, expected: Optional[Item] = None) -> Item:
        current = self._items.get((pk, sk))
        if not expected_matches(current, expected):
            raise ConditionFailedError(f"Condition failed for {pk}/{sk}")

        merged = merge_updates(current or {"PK": pk, "SK": sk}, copy.deepcopy(updates))
        self._items[(pk, sk)] = merged
        return copy.deepcopy(merged)

    def delete(self, pk: str, sk: str) -> None:
        self._items.pop((pk, sk), None)

    def scan(self, item_filter: Optional[ItemFilter] = None) -> Sequence[Item]:
        rows = [copy.deepcopy(v) for v in self._items.values()]
        if item_filter is not None:
            rows = [r for r in rows if item_filter(r)]
        return rows

    def scan_by_type(self, entity_type: EntityType) -> Sequence[Item]:
        return self.scan(lambda r: r.get("entityType") == entity_type.value)

    def __len__(self) -> int:
        return len(self._items)

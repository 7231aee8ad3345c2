from __future__ import annotations

from typing import Any, Callable, Optional, Protocol, Sequence

from ..core.enums import EntityType

Item = dict[str, Any]
ItemFilter = Callable[[Item], bool]


def entity_key(entity_type: EntityType, value: str) -> str:
    """Build a ``PK``/``SK`` value of the form ``ENTITY_TYPE#id``."""
    return f"{entity_type.value}#{value}"


def key_pair(entity_type: EntityType, value: str) -> tuple[str, str]:
    """``(PK, SK)`` for items whose partition and sort key are the same."""
    k = entity_key(entity_type, value)
    return k, k


def strip_keys(item: Item) -> Item:
    return {k: v for k, v in item.items() if k not in {"PK", "SK"}}


def merge_updates(current: Item, updates: Item) -> Item:
    merged = dict(current)
    merged.update(updates)
    return merged


def expected_matches(current: Optional[Item], expected: Optional[Item]) -> bool:
    if not expected:
        return True
    if current is None:
        return False
    return all(current.get(k) == v for k, v in expected.items())


class KeyValueStore(Protocol):
    """Generic single-table data access.

    Every item carries ``PK``, ``SK`` and ``entityType``. Lists served by
    ``scan``/``scan_by_type`` read the whole table; callers filter client-side.
    """

    def put(self, item: Item) -> None:
        raise NotImplementedError

    def get(self, pk: str, sk: str) -> Optional[Item]:
        raise NotImplementedError

    def query(self, pk: str, sk_prefix: Optional[str] = None) -> Sequence[Item]:
        """Items of one partition ordered by ``SK``, optionally narrowed by an SK prefix."""

        raise NotImplementedError

    def update(self, pk: str, sk: str, updates: Item, *, expected: Optional[Item] = None) -> Item:
        """SET ``updates`` on the item and return all of its new attributes.

        With ``expected`` every listed attribute must equal the stored value,
        otherwise ``ConditionFailedError`` is raised and nothing is written.
        """

        raise NotImplementedError

    def delete(self, pk: str, sk: str) -> None:
        raise NotImplementedError

    def scan(self, item_filter: Optional[ItemFilter] = None) -> Sequence[Item]:
        raise NotImplementedError

    def scan_by_type(self, entity_type: EntityType) -> Sequence[Item]:
        raise NotImplementedError

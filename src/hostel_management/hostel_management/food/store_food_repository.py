from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import EntityType
from ..database.store import KeyValueStore, entity_key, key_pair
from .model import FoodOrder, MenuItem
from .repository import FoodOrderRepository, MenuRepository


class StoreMenuRepository(MenuRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, menu_id: str) -> Optional[MenuItem]:
        item = self._store.get(*key_pair(EntityType.FOOD_MENU, menu_id))
        return MenuItem.from_item(item) if item else None

    def create(self, item: MenuItem) -> None:
        pk, sk = key_pair(EntityType.FOOD_MENU, item.menu_id)
        self._store.put({"PK": pk, "SK": sk, "entityType": EntityType.FOOD_MENU.value, **item.to_dict()})

    def update(self, menu_id: str, updates: dict[str, Any]) -> MenuItem:
        return MenuItem.from_item(self._store.update(*key_pair(EntityType.FOOD_MENU, menu_id), updates))

    def delete(self, menu_id: str) -> None:
        self._store.delete(*key_pair(EntityType.FOOD_MENU, menu_id))

    def list_all(self) -> Sequence[MenuItem]:
        rows = [MenuItem.from_item(i) for i in self._store.scan_by_type(EntityType.FOOD_MENU)]
        rows.sort(key=lambda m: (m.category, m.name))
        return rows


class StoreFoodOrderRepository(FoodOrderRepository):
    def __init__(self, store: KeyValueStore):
        self._store = store

    def create(self, order: FoodOrder) -> None:
        self._store.put(
            {
                "PK": entity_key(EntityType.FOOD_ORDER, order.student_id),
                "SK": entity_key(EntityType.FOOD_ORDER, order.order_id),
                "entityType": EntityType.FOOD_ORDER.value,
                **order.to_dict(),
            }
        )

    def find_by_id(self, order_id: str) -> Optional[FoodOrder]:
        for item in self._store.scan_by_type(EntityType.FOOD_ORDER):
            if item.get("orderId") == order_id:
                return FoodOrder.from_item(item)
        return None

    def update(self, *, student_id: str, order_id: str, updates: dict[str, Any]) -> FoodOrder:
        item = self._store.update(
            entity_key(EntityType.FOOD_ORDER, student_id),
            entity_key(EntityType.FOOD_ORDER, order_id),
            updates,
        )
        return FoodOrder.from_item(item)

    def list_for_student(self, student_id: str) -> Sequence[FoodOrder]:
        items = self._store.query(entity_key(EntityType.FOOD_ORDER, student_id), EntityType.FOOD_ORDER.value)
        return [FoodOrder.from_item(i) for i in items]

    def list_all(self) -> Sequence[FoodOrder]:
        rows = [FoodOrder.from_item(i) for i in self._store.scan_by_type(EntityType.FOOD_ORDER)]
        rows.sort(key=lambda o: o.created_at, reverse=True)
        return rows

    def delete_for_student(self, student_id: str) -> list[str]:
        deleted: list[str] = []
        for item in self._store.query(entity_key(EntityType.FOOD_ORDER, student_id)):
            self._store.delete(item["PK"], item["SK"])
            deleted.append(item["SK"])
        return deleted

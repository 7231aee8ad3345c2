from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from .model import FoodOrder, MenuItem


class MenuRepository(Protocol):
    def get(self, menu_id: str) -> Optional[MenuItem]:
        raise NotImplementedError

    def create(self, item: MenuItem) -> None:
        raise NotImplementedError

    def update(self, menu_id: str, updates: dict[str, Any]) -> MenuItem:
        raise NotImplementedError

    def delete(self, menu_id: str) -> None:
        raise NotImplementedError

    def list_all(self) -> Sequence[MenuItem]:
        raise NotImplementedError


class FoodOrderRepository(Protocol):
    def create(self, order: FoodOrder) -> None:
        raise NotImplementedError

    def find_by_id(self, order_id: str) -> Optional[FoodOrder]:
        """Locate an order without knowing its student (full scan)."""

        raise NotImplementedError

    def update(self, *, student_id: str, order_id: str, updates: dict[str, Any]) -> FoodOrder:
        raise NotImplementedError

    def list_for_student(self, student_id: str) -> Sequence[FoodOrder]:
        raise NotImplementedError

    def list_all(self) -> Sequence[FoodOrder]:
        raise NotImplementedError

    def delete_for_student(self, student_id: str) -> list[str]:
        raise NotImplementedError

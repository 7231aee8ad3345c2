from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc, to_iso
from ..common.ids import new_id
from ..common.validators import clean_updates, require_choice, require_non_empty, require_number
from ..core.enums import OrderStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..students.repository import StudentRepository
from .model import FoodOrder, MenuItem, OrderLine
from .repository import FoodOrderRepository, MenuRepository

logger = logging.getLogger(__name__)


def _price(value: Any) -> float:
    n = require_number(value, "Price", minimum=0)
    return int(n) if n.is_integer() else n


class FoodService:
    def __init__(self, menu: MenuRepository, orders: FoodOrderRepository, students: StudentRepository):
        self._menu = menu
        self._orders = orders
        self._students = students

    # --- menu (admin) ---

    def list_menu(self) -> Sequence[MenuItem]:
        return self._menu.list_all()

    def list_all_orders(self) -> Sequence[FoodOrder]:
        return self._orders.list_all()

    def add_menu_item(self, data: dict[str, Any], *, now: Optional[datetime] = None) -> MenuItem:
        now = now or now_utc()
        if not data.get("name") or not data.get("price") or not data.get("category"):
            raise ValidationError("Name, price, and category are required")

        item = MenuItem(
            menu_id=new_id("MENU", now=now),
            name=str(data["name"]).strip(),
            description=str(data.get("description") or ""),
            price=_price(data["price"]),
            category=str(data["category"]).strip(),
            available=True,
            created_at=to_iso(now),
        )
        self._menu.create(item)
        return item

    def update_menu_item(self, menu_id: Any, updates: Any) -> MenuItem:
        menu_id = require_non_empty(menu_id, "Menu ID")
        cleaned = clean_updates(updates, protected=("menuId", "createdAt"))
        if "price" in cleaned:
            cleaned["price"] = _price(cleaned["price"])
        if "available" in cleaned and not isinstance(cleaned["available"], bool):
            raise ValidationError("available must be true or false")

        if not self._menu.get(menu_id):
            raise NotFoundError("Menu item not found")
        return self._menu.update(menu_id, cleaned)

    def delete_menu_item(self, menu_id: Any) -> None:
        self._menu.delete(require_non_empty(menu_id, "Menu ID"))

    def update_order_status(self, order_id: Any, status: Any, *, now: Optional[datetime] = None) -> FoodOrder:
        if not order_id or not status:
            raise ValidationError("Order ID and status are required")
        new_status = require_choice(status, OrderStatus)

        order = self._orders.find_by_id(str(order_id))
        if not order:
            raise NotFoundError("Order not found")

        updates: dict[str, Any] = {"status": new_status.value}
        if new_status == OrderStatus.DELIVERED:
            updates["deliveredAt"] = to_iso(now or now_utc())
        return self._orders.update(student_id=order.student_id, order_id=order.order_id, updates=updates)

    # --- orders (student) ---

    def list_orders(self, student_id: str) -> Sequence[FoodOrder]:
        return self._orders.list_for_student(student_id)

    def _resolve_lines(self, items: Any) -> list[OrderLine]:
        if not isinstance(items, list) or not items:
            raise ValidationError("No items in order")

        lines: list[OrderLine] = []
        for raw in items:
            if not isinstance(raw, dict) or not raw.get("menuId"):
                raise ValidationError("Each item needs a menuId")
            quantity = require_number(raw.get("quantity"), "Quantity", minimum=1)
            if not quantity.is_integer():
                raise ValidationError("Quantity must be a whole number")

            # Names and prices come from the menu, never from the client.
            menu_item = self._menu.get(str(raw["menuId"]))
            if not menu_item:
                raise ValidationError(f"Menu item {raw['menuId']} not found")
            if not menu_item.available:
                raise ValidationError(f"{menu_item.name} is not available")
            lines.append(
                OrderLine(
                    menu_id=menu_item.menu_id,
                    name=menu_item.name,
                    price=menu_item.price,
                    quantity=int(quantity),
                )
            )
        return lines

    def place_order(self, student_id: str, items: Any, *, now: Optional[datetime] = None) -> FoodOrder:
        now = now or now_utc()
        lines = self._resolve_lines(items)

        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student not found")

        total = round(sum(line.subtotal for line in lines), 2)
        order = FoodOrder(
            order_id=new_id("ORD", now=now),
            student_id=student_id,
            student_name=student.name,
            items=tuple(lines),
            total_amount=int(total) if float(total).is_integer() else total,
            status=OrderStatus.PENDING,
            created_at=to_iso(now),
        )
        self._orders.create(order)
        logger.info("Order %s placed by %s (%d items)", order.order_id, student_id, len(lines))
        return order

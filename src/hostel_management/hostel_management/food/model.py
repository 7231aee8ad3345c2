from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..core.enums import OrderStatus


def _number(value: Any) -> float:
    n = float(value or 0)
    return int(n) if n.is_integer() else n


@dataclass(frozen=True)
class MenuItem:
    menu_id: str
    name: str
    description: str
    price: float
    category: str
    available: bool
    created_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "menuId": self.menu_id,
            "name": self.name,
            "description": self.description,
            "price": self.price,
            "category": self.category,
            "available": self.available,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "MenuItem":
        return cls(
            menu_id=str(item["menuId"]),
            name=item.get("name", ""),
            description=item.get("description", ""),
            price=_number(item.get("price")),
            category=item.get("category", ""),
            available=bool(item.get("available", True)),
            created_at=item.get("createdAt", ""),
        )


@dataclass(frozen=True)
class OrderLine:
    """One ordered menu item, name and price copied from the menu at order time."""

    menu_id: str
    name: str
    price: float
    quantity: int

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity

    def to_dict(self) -> dict[str, Any]:
        return {"menuId": self.menu_id, "name": self.name, "price": self.price, "quantity": self.quantity}

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "OrderLine":
        return cls(
            menu_id=str(item.get("menuId", "")),
            name=item.get("name") or item.get("itemName") or "Unknown",
            price=_number(item.get("price")),
            quantity=int(item.get("quantity") or 1),
        )


@dataclass(frozen=True)
class FoodOrder:
    order_id: str
    student_id: str
    student_name: str
    total_amount: float
    status: OrderStatus
    created_at: str
    items: tuple[OrderLine, ...] = field(default_factory=tuple)
    delivered_at: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "orderId": self.order_id,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "items": [line.to_dict() for line in self.items],
            "totalAmount": self.total_amount,
            "status": self.status.value,
            "createdAt": self.created_at,
        }
        if self.delivered_at is not None:
            data["deliveredAt"] = self.delivered_at
        return data

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "FoodOrder":
        return cls(
            order_id=str(item["orderId"]),
            student_id=str(item["studentId"]),
            student_name=item.get("studentName", ""),
            total_amount=_number(item.get("totalAmount")),
            status=OrderStatus(item.get("status", OrderStatus.PENDING.value)),
            created_at=item.get("createdAt", ""),
            items=tuple(OrderLine.from_item(i) for i in item.get("items") or ()),
            delivered_at=item.get("deliveredAt"),
        )

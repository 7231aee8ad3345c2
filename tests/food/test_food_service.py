from __future__ import annotations

import pytest

from src.hostel_management.hostel_management.core.enums import OrderStatus
from src.hostel_management.hostel_management.core.exceptions import NotFoundError, ValidationError


@pytest.fixture
def menu(container, fixed_now):
    food = container.food_service
    dosa = food.add_menu_item({"name": "Masala Dosa", "price": 40, "category": "Breakfast"}, now=fixed_now)
    juice = food.add_menu_item({"name": "Juice", "price": "25.5", "category": "Snacks"}, now=fixed_now)
    return dosa, juice


def test_add_menu_item_validation(container):
    with pytest.raises(ValidationError, match="Name, price, and category are required"):
        container.food_service.add_menu_item({"name": "Tea", "price": 10})


def test_place_order_uses_menu_prices(container, make_student, menu, fixed_now):
    dosa, juice = menu
    make_student("stu-1")

    order = container.food_service.place_order(
        "stu-1",
        [
            {"menuId": dosa.menu_id, "quantity": 2, "price": 1},
            {"menuId": juice.menu_id, "quantity": 1, "name": "Free juice"},
        ],
        now=fixed_now,
    )

    assert order.order_id.startswith("ORD-")
    assert order.status == OrderStatus.PENDING
    assert order.total_amount == 105.5
    assert [(line.name, line.price, line.quantity) for line in order.items] == [
        ("Masala Dosa", 40, 2),
        ("Juice", 25.5, 1),
    ]
    assert container.food_service.list_orders("stu-1")[0].order_id == order.order_id


def test_place_order_rejects_bad_items(container, make_student, menu):
    dosa, _ = menu
    make_student("stu-1")
    food = container.food_service

    with pytest.raises(ValidationError, match="No items"):
        food.place_order("stu-1", [])
    with pytest.raises(ValidationError, match="not found"):
        food.place_order("stu-1", [{"menuId": "MENU-nope", "quantity": 1}])
    with pytest.raises(ValidationError, match="Quantity"):
        food.place_order("stu-1", [{"menuId": dosa.menu_id, "quantity": 0}])

    food.update_menu_item(dosa.menu_id, {"available": False})
    with pytest.raises(ValidationError, match="not available"):
        food.place_order("stu-1", [{"menuId": dosa.menu_id, "quantity": 1}])


def test_update_order_status(container, make_student, menu, fixed_now):
    dosa, _ = menu
    make_student("stu-1")
    order = container.food_service.place_order("stu-1", [{"menuId": dosa.menu_id, "quantity": 1}], now=fixed_now)

    preparing = container.food_service.update_order_status(order.order_id, "preparing", now=fixed_now)
    assert preparing.status == OrderStatus.PREPARING
    assert preparing.delivered_at is None

    delivered = container.food_service.update_order_status(order.order_id, "delivered", now=fixed_now)
    assert delivered.delivered_at == "2026-03-15T09:30:00.000Z"

    with pytest.raises(ValidationError, match="Invalid status"):
        container.food_service.update_order_status(order.order_id, "eaten")
    with pytest.raises(NotFoundError):
        container.food_service.update_order_status("ORD-missing", "preparing")


def test_update_and_delete_menu_item(container, menu):
    dosa, _ = menu
    food = container.food_service

    updated = food.update_menu_item(dosa.menu_id, {"price": "45", "menuId": "other"})
    assert updated.price == 45
    assert updated.menu_id == dosa.menu_id

    with pytest.raises(NotFoundError):
        food.update_menu_item("MENU-missing", {"price": 1})

    food.delete_menu_item(dosa.menu_id)
    assert [m.name for m in food.list_menu()] == ["Juice"]


@pytest.mark.parametrize("price", ["NaN", "Infinity"])
def test_menu_price_must_be_finite(container, price):
    with pytest.raises(ValidationError, match="Price must be a number"):
        container.food_service.add_menu_item({"name": "Tea", "price": price, "category": "Snacks"})
    assert list(container.food_service.list_menu()) == []

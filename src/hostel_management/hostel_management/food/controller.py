from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_student_id, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    food = container.food_service

    @app.route("/api/admin/food", methods=["GET"], endpoint="admin_food")
    @admin_required
    @json_errors("Failed to fetch food data")
    def admin_food():
        return jsonify(
            {
                "menu": [m.to_dict() for m in food.list_menu()],
                "orders": [o.to_dict() for o in food.list_all_orders()],
            }
        )

    @app.route("/api/admin/food", methods=["POST"], endpoint="admin_add_menu_item")
    @admin_required
    @json_errors("Failed to add menu item")
    def add_menu_item():
        item = food.add_menu_item(json_body())
        return jsonify({"message": "Menu item added successfully", "menuItem": item.to_dict()})

    @app.route("/api/admin/food", methods=["PATCH"], endpoint="admin_update_menu_item")
    @admin_required
    @json_errors("Failed to update menu item")
    def update_menu_item():
        data = json_body()
        item = food.update_menu_item(data.get("menuId"), data.get("updates"))
        return jsonify({"message": "Menu item updated successfully", "menuItem": item.to_dict()})

    @app.route("/api/admin/food", methods=["DELETE"], endpoint="admin_delete_menu_item")
    @admin_required
    @json_errors("Failed to delete menu item")
    def delete_menu_item():
        food.delete_menu_item(request.args.get("menuId"))
        return jsonify({"message": "Menu item deleted successfully"})

    @app.route("/api/admin/food/orders", methods=["PATCH"], endpoint="admin_update_order")
    @admin_required
    @json_errors("Failed to update order status")
    def update_order():
        data = json_body()
        order = food.update_order_status(data.get("orderId"), data.get("status"))
        return jsonify({"message": "Order status updated successfully", "order": order.to_dict()})

    @app.route("/api/student/food", methods=["GET"], endpoint="student_food")
    @student_required
    @json_errors("Failed to fetch food data")
    def student_food():
        return jsonify(
            {
                "menu": [m.to_dict() for m in food.list_menu()],
                "orders": [o.to_dict() for o in food.list_orders(current_student_id())],
            }
        )

    @app.route("/api/student/food", methods=["POST"], endpoint="student_place_order")
    @student_required
    @json_errors("Failed to place order")
    def place_order():
        order = food.place_order(current_student_id(), json_body().get("items"))
        return jsonify({"message": "Order placed successfully", "order": order.to_dict()})

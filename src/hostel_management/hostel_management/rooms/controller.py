from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    rooms = container.room_service

    @app.route("/api/admin/rooms", methods=["GET"], endpoint="admin_list_rooms")
    @admin_required
    @json_errors("Failed to fetch rooms")
    def list_rooms():
        rows = rooms.list_rooms(branch=request.args.get("branch") or None)
        return jsonify({"rooms": [r.to_dict() for r in rows]})

    @app.route("/api/admin/rooms", methods=["POST"], endpoint="admin_create_room")
    @admin_required
    @json_errors("Failed to create room")
    def create_room():
        data = json_body()
        room = rooms.create_room(
            room_number=data.get("roomNumber"),
            branch=data.get("branch"),
            capacity=data.get("capacity"),
            floor=data.get("floor"),
            room_type=data.get("type"),
        )
        return jsonify({"message": "Room created successfully", "room": room})

    @app.route("/api/admin/rooms", methods=["PATCH"], endpoint="admin_update_room")
    @admin_required
    @json_errors("Failed to update room")
    def update_room():
        data = json_body()
        room = rooms.update_room(data.get("branch"), data.get("roomNumber"), data.get("updates"))
        return jsonify({"message": "Room updated successfully", "room": room.to_dict()})

    @app.route("/api/admin/rooms", methods=["DELETE"], endpoint="admin_delete_room")
    @admin_required
    @json_errors("Failed to delete room")
    def delete_room():
        rooms.delete_room(request.args.get("branch"), request.args.get("roomNumber"))
        return jsonify({"message": "Room deleted successfully"})

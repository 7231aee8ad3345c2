from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    contacts = container.emergency_service

    @app.route("/api/admin/emergency", methods=["GET"], endpoint="admin_list_contacts")
    @admin_required
    @json_errors("Failed to fetch emergency contacts")
    def list_contacts():
        return jsonify({"contacts": [c.to_dict() for c in contacts.list_contacts()]})

    @app.route("/api/admin/emergency", methods=["POST"], endpoint="admin_add_contact")
    @admin_required
    @json_errors("Failed to add emergency contact")
    def add_contact():
        contact = contacts.add_contact(json_body())
        return jsonify({"message": "Emergency contact added successfully", "contact": contact.to_dict()})

    @app.route("/api/admin/emergency", methods=["PATCH"], endpoint="admin_update_contact")
    @admin_required
    @json_errors("Failed to update emergency contact")
    def update_contact():
        data = json_body()
        contact = contacts.update_contact(data.get("contactId"), data.get("category"), data.get("updates"))
        return jsonify({"message": "Emergency contact updated successfully", "contact": contact.to_dict()})

    @app.route("/api/admin/emergency", methods=["DELETE"], endpoint="admin_delete_contact")
    @admin_required
    @json_errors("Failed to delete emergency contact")
    def delete_contact():
        contacts.delete_contact(request.args.get("contactId"), request.args.get("category"))
        return jsonify({"message": "Emergency contact deleted successfully"})

    @app.route("/api/student/emergency", methods=["GET"], endpoint="student_contacts")
    @student_required
    @json_errors("Failed to fetch emergency contacts")
    def student_contacts():
        return jsonify(
            {
                "contacts": [c.to_dict() for c in contacts.list_contacts()],
                "grouped": contacts.grouped(),
            }
        )

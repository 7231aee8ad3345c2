from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_student_id, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    maintenance = container.maintenance_service

    @app.route("/api/student/maintenance", methods=["GET"], endpoint="student_list_maintenance")
    @student_required
    @json_errors("Failed to fetch maintenance requests")
    def student_list():
        rows = maintenance.list_for_student(current_student_id())
        return jsonify({"requests": [r.to_dict() for r in rows]})

    @app.route("/api/student/maintenance", methods=["POST"], endpoint="student_submit_maintenance")
    @student_required
    @json_errors("Failed to submit maintenance request")
    def student_submit():
        data = json_body()
        req = maintenance.submit(
            current_student_id(),
            issue=data.get("issue"),
            description=data.get("description"),
            category=data.get("category"),
        )
        return jsonify({"message": "Maintenance request submitted successfully", "request": req.to_dict()})

    @app.route("/api/admin/maintenance", methods=["GET"], endpoint="admin_list_maintenance")
    @admin_required
    @json_errors("Failed to fetch maintenance requests")
    def admin_list():
        return jsonify({"requests": [r.to_dict() for r in maintenance.list_all()]})

    @app.route("/api/admin/maintenance", methods=["PATCH"], endpoint="admin_update_maintenance")
    @admin_required
    @json_errors("Failed to update maintenance request")
    def admin_update():
        data = json_body()
        req = maintenance.update_status(
            request_id=data.get("requestId"),
            student_id=data.get("studentId"),
            status=data.get("status"),
            admin_notes=data.get("adminNotes"),
        )
        return jsonify({"message": "Maintenance request updated successfully", "request": req.to_dict()})

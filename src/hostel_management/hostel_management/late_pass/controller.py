from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_student_id, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    late_passes = container.late_pass_service

    @app.route("/api/student/late-pass", methods=["GET"], endpoint="student_list_late_pass")
    @student_required
    @json_errors("Failed to fetch late pass requests")
    def student_list():
        rows = late_passes.list_for_student(current_student_id())
        return jsonify({"requests": [r.to_dict() for r in rows]})

    @app.route("/api/student/late-pass", methods=["POST"], endpoint="student_submit_late_pass")
    @student_required
    @json_errors("Failed to submit late pass request")
    def student_submit():
        req = late_passes.submit(current_student_id(), json_body())
        return jsonify({"message": "Late pass request submitted successfully", "request": req.to_dict()})

    @app.route("/api/admin/late-pass", methods=["GET"], endpoint="admin_list_late_pass")
    @admin_required
    @json_errors("Failed to fetch late pass requests")
    def admin_list():
        return jsonify({"requests": [r.to_dict() for r in late_passes.list_all()]})

    @app.route("/api/admin/late-pass", methods=["PATCH"], endpoint="admin_decide_late_pass")
    @admin_required
    @json_errors("Failed to update late pass request")
    def admin_decide():
        data = json_body()
        req = late_passes.decide(
            request_id=data.get("requestId"),
            student_id=data.get("studentId"),
            status=data.get("status"),
            approval_notes=data.get("approvalNotes"),
        )
        return jsonify({"message": "Late pass request updated successfully", "request": req.to_dict()})

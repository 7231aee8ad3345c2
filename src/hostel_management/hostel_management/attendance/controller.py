from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, current_student_id, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service

    @app.route("/api/student/attendance", methods=["GET"], endpoint="student_attendance")
    @student_required
    @json_errors("Failed to fetch attendance")
    def student_history():
        rows = attendance.list_for_student(current_student_id())
        return jsonify({"attendance": [r.to_dict() for r in rows]})

    @app.route("/api/student/attendance", methods=["POST"], endpoint="student_mark_attendance")
    @student_required
    @json_errors("Failed to mark attendance")
    def mark():
        record = attendance.mark_today(current_student_id())
        return jsonify({"message": "Attendance marked successfully", "attendance": record.to_dict()})

    @app.route("/api/admin/attendance", methods=["GET"], endpoint="admin_attendance")
    @admin_required
    @json_errors("Failed to fetch attendance data")
    def overview():
        return jsonify(attendance.overview())

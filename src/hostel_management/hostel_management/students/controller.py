from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_student_id, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    students = container.student_service
    cleanup = container.cleanup_service

    @app.route("/api/admin/students", methods=["GET"], endpoint="admin_list_students")
    @admin_required
    @json_errors("Failed to fetch students")
    def list_students():
        return jsonify({"students": [s.to_dict() for s in students.list_students()]})

    @app.route("/api/admin/students", methods=["PATCH"], endpoint="admin_update_student")
    @admin_required
    @json_errors("Failed to update student")
    def update_student():
        data = json_body()
        student = students.update_student(data.get("studentId"), data.get("updates"))
        return jsonify({"message": "Student updated successfully", "student": student.to_dict()})

    @app.route("/api/admin/students", methods=["DELETE"], endpoint="admin_deactivate_student")
    @admin_required
    @json_errors("Failed to deactivate student")
    def deactivate_student():
        students.deactivate(request.args.get("studentId"))
        return jsonify({"message": "Student deactivated successfully"})

    @app.route("/api/admin/students/assign-room", methods=["POST"], endpoint="admin_assign_room")
    @admin_required
    @json_errors("Failed to assign room")
    def assign_room():
        data = json_body()
        student = students.assign_room(data.get("studentId"), data.get("branch"), data.get("roomNumber"))
        return jsonify({"message": "Room assigned successfully", "student": student.to_dict()})

    @app.route("/api/admin/students/unassign-room", methods=["POST"], endpoint="admin_unassign_room")
    @admin_required
    @json_errors("Failed to unassign room")
    def unassign_room():
        student = students.unassign_room(json_body().get("studentId"))
        return jsonify({"message": "Room unassigned successfully", "student": student.to_dict()})

    @app.route("/api/admin/delete-student", methods=["POST"], endpoint="admin_delete_student")
    @admin_required
    @json_errors("Failed to delete student data")
    def delete_student():
        student_id = json_body().get("studentId")
        log = cleanup.delete_student(student_id)
        return jsonify({"message": "Student data deleted successfully", "studentId": student_id, "log": log})

    @app.route("/api/admin/delete-by-email", methods=["POST"], endpoint="admin_delete_by_email")
    @admin_required
    @json_errors("Failed to delete email data")
    def delete_by_email():
        email = json_body().get("email")
        log = cleanup.delete_by_email(email)
        return jsonify({"message": "Email data deleted successfully", "email": email, "log": log})

    @app.route("/api/student/profile", methods=["GET"], endpoint="student_profile")
    @student_required
    @json_errors("Failed to fetch profile")
    def profile():
        return jsonify({"student": students.get_profile(current_student_id()).to_dict()})

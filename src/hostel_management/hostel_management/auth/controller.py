from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.web import json_body, json_errors, login_session
from ..container import Container


def _student_summary(student) -> dict:
    return {
        "studentId": student.student_id,
        "name": student.name,
        "email": student.email,
        "phone": student.phone,
    }


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service

    @app.route("/api/auth/student/send-otp", methods=["POST"], endpoint="student_send_otp")
    @json_errors("Failed to send OTP")
    def student_send_otp():
        email = auth.send_otp(json_body())
        return jsonify({"message": "OTP sent successfully to your email", "email": email})

    @app.route("/api/auth/student/verify-otp", methods=["POST"], endpoint="student_verify_otp")
    @json_errors("Failed to verify OTP")
    def student_verify_otp():
        data = json_body()
        student = auth.verify_otp(data.get("email"), data.get("otp"))
        login_session(auth.session_user_for(student))
        return (
            jsonify(
                {
                    "message": "Email verified and registration completed successfully",
                    "student": _student_summary(student),
                }
            ),
            201,
        )

    @app.route("/api/auth/student/signup", methods=["POST"], endpoint="student_signup")
    @json_errors("Failed to register student")
    def student_signup():
        student = auth.signup(json_body())
        login_session(auth.session_user_for(student))
        return jsonify({"message": "Student registered successfully", "student": _student_summary(student)}), 201

    @app.route("/api/auth/student/login", methods=["POST"], endpoint="student_login")
    @json_errors("Failed to login")
    def student_login():
        data = json_body()
        student = auth.authenticate_student(data.get("studentId"), data.get("password"))
        login_session(auth.session_user_for(student))
        return jsonify(
            {
                "message": "Login successful",
                "student": {
                    **_student_summary(student),
                    "branch": student.branch,
                    "roomNumber": student.room_number,
                    "feesPaid": student.fees_paid,
                },
            }
        )

    @app.route("/api/auth/student/logout", methods=["POST"], endpoint="student_logout")
    def student_logout():
        session.clear()
        return jsonify({"message": "Logged out successfully"})

    @app.route("/api/auth/admin/login", methods=["POST"], endpoint="admin_login")
    @json_errors("Failed to login")
    def admin_login():
        user = auth.authenticate_admin(json_body().get("password"))
        login_session(user)
        return jsonify({"message": "Admin login successful"})

    @app.route("/api/auth/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.clear()
        return jsonify({"message": "Logged out successfully"})

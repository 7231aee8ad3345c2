from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, current_student_id, json_body, json_errors, student_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    fees = container.fee_service
    payments = container.payment_service

    @app.route("/api/admin/fees", methods=["GET"], endpoint="admin_list_fees")
    @admin_required
    @json_errors("Failed to fetch fee configurations")
    def list_fees():
        return jsonify({"feeConfigurations": [c.to_dict() for c in fees.list_configurations()]})

    @app.route("/api/admin/fees", methods=["POST"], endpoint="admin_save_fees")
    @admin_required
    @json_errors("Failed to save fee configuration")
    def save_fees():
        config, created = fees.save_configuration(json_body())
        message = "Fee configuration created" if created else "Fee configuration updated"
        return jsonify({"message": message, "feeConfiguration": config.to_dict()})

    @app.route("/api/admin/fees", methods=["DELETE"], endpoint="admin_delete_fees")
    @admin_required
    @json_errors("Failed to delete fee configuration")
    def delete_fees():
        fees.delete_configuration(request.args.get("year"))
        return jsonify({"message": "Fee configuration deleted successfully"})

    @app.route("/api/student/fees", methods=["GET"], endpoint="student_fees")
    @student_required
    @json_errors("Failed to fetch fee configuration")
    def student_fees():
        config = fees.current_configuration()
        if config is None:
            return jsonify({"feeConfiguration": None, "message": "No fee configuration found for current year"})
        return jsonify({"feeConfiguration": config.to_dict()})

    @app.route("/api/student/payment", methods=["GET"], endpoint="student_payments")
    @student_required
    @json_errors("Failed to fetch payments")
    def list_payments():
        return jsonify({"payments": [p.to_dict() for p in payments.list_payments(current_student_id())]})

    @app.route("/api/student/payment", methods=["POST"], endpoint="student_pay")
    @student_required
    @json_errors("Failed to process payment")
    def pay():
        data = json_body()
        payment = payments.pay(current_student_id(), amount=data.get("amount"), payment_type=data.get("paymentType"))
        return jsonify({"message": "Payment successful", "payment": payment.to_dict()})

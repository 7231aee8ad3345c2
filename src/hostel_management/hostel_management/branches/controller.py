from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import admin_required, json_body, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    branches = container.branch_service

    @app.route("/api/admin/branches", methods=["GET"], endpoint="admin_list_branches")
    @admin_required
    @json_errors("Failed to fetch branches")
    def list_branches():
        return jsonify({"branches": [b.to_dict() for b in branches.list_branches()]})

    @app.route("/api/admin/branches", methods=["POST"], endpoint="admin_create_branch")
    @admin_required
    @json_errors("Failed to create branch")
    def create_branch():
        data = json_body()
        branch = branches.create_branch(
            name=data.get("name"),
            description=data.get("description"),
            capacity=data.get("capacity"),
        )
        return jsonify({"message": "Branch created successfully", "branch": branch.to_dict()})

    @app.route("/api/admin/branches", methods=["PATCH"], endpoint="admin_update_branch")
    @admin_required
    @json_errors("Failed to update branch")
    def update_branch():
        data = json_body()
        branch = branches.update_branch(data.get("branchId"), data.get("updates"))
        return jsonify({"message": "Branch updated successfully", "branch": branch.to_dict()})

    @app.route("/api/admin/branches", methods=["DELETE"], endpoint="admin_delete_branch")
    @admin_required
    @json_errors("Failed to delete branch")
    def delete_branch():
        branches.delete_branch(request.args.get("branchId"))
        return jsonify({"message": "Branch deleted successfully"})

from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import admin_required, json_errors
from ..container import Container


def register(app: Flask, container: Container) -> None:
    stats = container.statistics_service

    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    @admin_required
    @json_errors("Failed to fetch statistics")
    def dashboard():
        return jsonify({"stats": stats.dashboard()})

    @app.route("/api/admin/statistics", methods=["GET"], endpoint="admin_statistics")
    @admin_required
    @json_errors("Failed to fetch statistics")
    def detailed():
        return jsonify({"statistics": stats.detailed()})

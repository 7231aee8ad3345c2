from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .auth.email_sender import EmailSender, build_email_sender
from .container import build_container
from .core.constants import DEFAULT_SESSION_DAYS, OTP_EXPIRY_MINUTES, OTP_MAX_ATTEMPTS
from .database.bootstrap import build_store, init_store
from .database.store import KeyValueStore
from .seed import seed_demo_data

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .branches.controller import register as register_branches
from .emergency.controller import register as register_emergency
from .fees.controller import register as register_fees
from .food.controller import register as register_food
from .late_pass.controller import register as register_late_pass
from .maintenance.controller import register as register_maintenance
from .rooms.controller import register as register_rooms
from .statistics.controller import register as register_statistics
from .students.controller import register as register_students

logger = logging.getLogger("hostel_management")


def create_app(
    settings_module: Optional[str] = None,
    *,
    store: Optional[KeyValueStore] = None,
    email_sender: Optional[EmailSender] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)

    logging.basicConfig(
        level=str(getattr(settings, "LOG_LEVEL", "INFO")).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SAMESITE"] = "Lax"
    app.config["SESSION_COOKIE_SECURE"] = bool(getattr(settings, "SESSION_COOKIE_SECURE", False))
    app.permanent_session_lifetime = timedelta(days=int(getattr(settings, "SESSION_DAYS", DEFAULT_SESSION_DAYS)))

    backend = str(getattr(settings, "STORE_BACKEND", "dynamodb"))
    logger.info("settings=%s store=%s", settings_module, backend)

    if store is None:
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            init_store(settings)
            logger.info("store ready (%s)", backend)
        store = build_store(settings)

    otp_expiry = int(getattr(settings, "OTP_EXPIRY_MINUTES", OTP_EXPIRY_MINUTES))
    if email_sender is None:
        email_sender = build_email_sender(
            host=getattr(settings, "SMTP_HOST", None),
            port=int(getattr(settings, "SMTP_PORT", 587)),
            user=str(getattr(settings, "SMTP_USER", "")),
            password=str(getattr(settings, "SMTP_PASSWORD", "")),
            sender=str(getattr(settings, "EMAIL_FROM", "")),
            expiry_minutes=otp_expiry,
        )

    container = build_container(
        store=store,
        email_sender=email_sender,
        admin_password=str(getattr(settings, "ADMIN_PASSWORD", "")),
        otp_expiry_minutes=otp_expiry,
        otp_max_attempts=int(getattr(settings, "OTP_MAX_ATTEMPTS", OTP_MAX_ATTEMPTS)),
    )
    app.extensions["hostel_container"] = container

    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        seed_demo_data(container)

    register_auth(app, container)
    register_branches(app, container)
    register_rooms(app, container)
    register_students(app, container)
    register_fees(app, container)
    register_maintenance(app, container)
    register_food(app, container)
    register_emergency(app, container)
    register_late_pass(app, container)
    register_attendance(app, container)
    register_statistics(app, container)

    @app.route("/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    @app.errorhandler(404)
    def not_found(_):
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_):
        return jsonify({"error": "Method not allowed"}), 405

    return app

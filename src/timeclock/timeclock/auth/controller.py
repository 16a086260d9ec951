from __future__ import annotations

from functools import wraps

from flask import Flask, jsonify, request, session

from ..common.logger import get_logger
from ..core.exceptions import AuthenticationError
from ..container import Container


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get("is_admin"):
            return error_response("Admin login required", 403)
        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    logger = get_logger("timeclock.auth")

    @app.route("/admin/login", methods=["POST"], endpoint="admin_login")
    def admin_login():
        data = request.get_json(silent=True) or {}
        try:
            container.auth_service.authenticate(str(data.get("password", "")))
        except AuthenticationError as e:
            return error_response(str(e), 401)
        except Exception:
            logger.exception("Admin login failed")
            return error_response("System error during login", 500)

        session["is_admin"] = True
        return jsonify({"success": True}), 200

    @app.route("/admin/logout", methods=["POST"], endpoint="admin_logout")
    def admin_logout():
        session.pop("is_admin", None)
        return jsonify({"success": True}), 200

from __future__ import annotations

from dataclasses import asdict

from flask import Flask, jsonify, request

from ..auth.controller import admin_required, error_response
from ..common.logger import get_logger
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    logger = get_logger("timeclock.staff")

    def _form() -> dict:
        data = request.get_json(silent=True) or {}
        return {
            "name": str(data.get("name", "")),
            "pin": str(data.get("pin", "")),
            "card_id": str(data.get("card_id", "")),
        }

    @app.route("/admin/staff", methods=["GET"], endpoint="admin_staff")
    @admin_required
    def admin_staff():
        members = container.staff_service.list_members()
        return jsonify({"success": True, "staff": [asdict(m) for m in members]}), 200

    @app.route("/admin/staff", methods=["POST"], endpoint="add_staff")
    @admin_required
    def add_staff():
        try:
            member = container.staff_service.add_member(**_form())
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Adding staff member failed")
            return error_response("System error while adding staff member", 500)
        return jsonify({"success": True, "staff": asdict(member)}), 201

    @app.route("/admin/staff/<int:member_id>", methods=["POST"], endpoint="edit_staff")
    @admin_required
    def edit_staff(member_id: int):
        try:
            member = container.staff_service.edit_member(member_id, **_form())
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Editing staff member failed")
            return error_response("System error while editing staff member", 500)
        return jsonify({"success": True, "staff": asdict(member)}), 200

    @app.route("/admin/staff/<int:member_id>/visibility", methods=["POST"], endpoint="staff_visibility")
    @admin_required
    def staff_visibility(member_id: int):
        data = request.get_json(silent=True) or {}
        visible = data.get("visible", True)
        if not isinstance(visible, bool):
            return error_response("visible must be true or false", 400)
        try:
            member = container.staff_service.set_visibility(member_id, visible=visible)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Changing visibility failed")
            return error_response("System error while changing visibility", 500)
        return jsonify({"success": True, "staff": asdict(member)}), 200

    @app.route("/admin/staff/<int:member_id>/deactivate", methods=["POST"], endpoint="deactivate_staff")
    @admin_required
    def deactivate_staff(member_id: int):
        try:
            container.staff_service.deactivate(member_id)
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Deactivating staff member failed")
            return error_response("System error while deactivating staff member", 500)
        return jsonify({"success": True}), 200

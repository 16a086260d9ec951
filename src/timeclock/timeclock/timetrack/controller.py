from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.controller import error_response
from ..common.datetime_utils import now_local
from ..common.logger import get_logger
from ..core.exceptions import ValidationError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    logger = get_logger("timeclock.timetrack")

    @app.route("/api/staff", methods=["GET"], endpoint="api_staff")
    def api_staff():
        show_all = request.args.get("all") == "1"
        try:
            entries = container.timetrack_service.current_staff(now_local())
        except Exception:
            logger.exception("Loading staff status failed")
            return error_response("System error while loading staff", 500)

        if not show_all:
            entries = [e for e in entries if e.member.is_visible]
        return jsonify({"success": True, "staff": [e.to_dict() for e in entries]}), 200

    @app.route("/api/timetrack/toggle", methods=["POST"], endpoint="api_toggle")
    def api_toggle():
        data = request.get_json(silent=True) or {}
        ident = str(data.get("ident", "")).strip()
        if not ident:
            return error_response("PIN or card ID must not be empty", 400)

        try:
            entry = container.timetrack_service.toggle(ident, now_local())
        except ValidationError as e:
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Status change failed")
            return error_response("System error while changing status", 500)

        return jsonify({
            "success": True,
            "message": f"{entry.member.name} is now {entry.status.label}",
            "staff": entry.to_dict(),
        }), 200

    @app.route("/api/timetrack/end-event", methods=["POST"], endpoint="api_end_event")
    def api_end_event():
        try:
            signed_off = container.timetrack_service.end_event(now_local())
        except Exception:
            logger.exception("Ending event failed")
            return error_response("System error while ending the event", 500)

        return jsonify({"success": True, "signed_off": [m.name for m in signed_off]}), 200

    @app.route("/api/journal", methods=["GET"], endpoint="api_journal")
    def api_journal():
        try:
            events = container.journal_service.journal(now_local())
        except Exception:
            logger.exception("Loading journal failed")
            return error_response("System error while loading the journal", 500)

        return jsonify({"success": True, "events": [e.describe() for e in events]}), 200

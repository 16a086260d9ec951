from __future__ import annotations

import csv
import io

from flask import Flask, jsonify, request

from ..auth.controller import admin_required, error_response
from ..common.datetime_utils import now_local, parse_month
from ..common.logger import get_logger
from ..core.exceptions import EvaluationError, ValidationError
from ..container import Container
from .report import Report


def register(app: Flask, container: Container) -> None:
    logger = get_logger("timeclock.statistics")

    def _evaluate() -> Report:
        raw = (request.args.get("month") or "").strip()
        try:
            month = parse_month(raw) if raw else now_local().date()
        except ValueError:
            raise ValidationError("Month must be given as YYYY-MM")
        visible_only = request.args.get("visible_only") == "1"
        return container.evaluation_service.evaluate_month(month, visible_only=visible_only)

    def _write_report_csv(*, report: Report, filename: str):
        out = io.StringIO()
        writer = csv.writer(out)
        for row in report.to_table():
            writer.writerow(row)

        csv_bytes = out.getvalue().encode("utf-8-sig")
        return app.response_class(
            csv_bytes,
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/admin/report", methods=["GET"], endpoint="admin_report")
    @admin_required
    def admin_report():
        try:
            report = _evaluate()
        except ValidationError as e:
            return error_response(str(e), 400)
        except EvaluationError as e:
            logger.error(f"Evaluation aborted: {e}")
            return error_response(f"Evaluation failed: {e}", 500)
        except Exception:
            logger.exception("Evaluation failed")
            return error_response("System error during evaluation", 500)
        return jsonify({"success": True, "report": report.to_dict()}), 200

    @app.route("/admin/report.csv", methods=["GET"], endpoint="admin_report_csv")
    @admin_required
    def admin_report_csv():
        try:
            report = _evaluate()
        except ValidationError as e:
            return error_response(str(e), 400)
        except EvaluationError as e:
            logger.error(f"Evaluation aborted: {e}")
            return error_response(f"Evaluation failed: {e}", 500)
        except Exception:
            logger.exception("Evaluation failed")
            return error_response("System error during evaluation", 500)
        return _write_report_csv(report=report, filename=f"{report.period_start:%Y-%m}.csv")

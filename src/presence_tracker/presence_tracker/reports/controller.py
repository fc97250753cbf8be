from __future__ import annotations

import logging
from datetime import date

from flask import Flask, jsonify, render_template, request

from ..common.auth import admin_required, api_admin_required
from ..common.datetime_utils import parse_request_date
from ..core.constants import ALL_CATEGORIES, XLSX_MIMETYPE
from ..core.exceptions import ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/admin", endpoint="admin_home")
    @app.route("/admin/reports", methods=["GET"], endpoint="admin_reports")
    @admin_required
    def admin_reports():
        today = date.today()
        return render_template(
            "admin/reports.html",
            start=today.replace(day=1).isoformat(),
            end=today.isoformat(),
            categories=container.category_service.list_all(),
            active_page="admin_reports",
        )

    @app.route("/api/reports/attendance", methods=["GET"], endpoint="api_report_attendance")
    @api_admin_required
    def api_report_attendance():
        try:
            start = parse_request_date(request.args.get("from"), "from")
            end = parse_request_date(request.args.get("to"), "to")
        except ValidationError as e:
            return jsonify({"success": False, "message": f"Date range (from, to) is required: {e}"}), 400

        category_id = request.args.get("categoryId") or ALL_CATEGORIES

        try:
            report = container.report_service.export_xlsx(start=start, end=end, category_id=category_id)
        except Exception:
            logger.exception("Generating attendance report failed")
            return jsonify({"success": False, "message": "Failed to generate report"}), 500

        return app.response_class(
            report.content,
            mimetype=XLSX_MIMETYPE,
            headers={"Content-Disposition": f'attachment; filename="{report.filename}"'},
        )

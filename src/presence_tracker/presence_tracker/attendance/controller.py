from __future__ import annotations

import logging
from datetime import date

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.datetime_utils import parse_month, parse_request_date, shift_month
from ..core.exceptions import BlockedDayError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _json_error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    def _parse_user_id(value) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValidationError("userId is required")

    def _month_context(year: int, month: int) -> dict:
        prev_y, prev_m = shift_month(year, month, -1)
        next_y, next_m = shift_month(year, month, 1)
        return {
            "month_label": date(year, month, 1).strftime("%B %Y"),
            "prev_month": f"{prev_y:04d}-{prev_m:02d}",
            "next_month": f"{next_y:04d}-{next_m:02d}",
        }

    @app.route("/portal", endpoint="portal")
    def portal():
        users = container.user_service.list_users()
        return render_template("portal/index.html", users=users, active_page="portal")

    @app.route("/portal/<int:user_id>", endpoint="portal_user")
    def portal_user(user_id: int):
        try:
            year, month = parse_month(request.args.get("month"))
            grid = container.attendance_service.month_grid(year, month, user_id=user_id)
        except NotFoundError as e:
            flash(str(e), "warning")
            return redirect(url_for("portal"))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("portal_user", user_id=user_id))

        return render_template(
            "portal/month.html",
            grid=grid,
            show_totals=False,
            page_url=url_for("portal_user", user_id=user_id),
            **_month_context(year, month),
        )

    @app.route("/grid", endpoint="team_grid")
    def team_grid():
        try:
            year, month = parse_month(request.args.get("month"))
        except ValidationError as e:
            flash(str(e), "warning")
            return redirect(url_for("team_grid"))

        grid = container.attendance_service.month_grid(year, month)
        return render_template(
            "portal/month.html",
            grid=grid,
            show_totals=True,
            page_url=url_for("team_grid"),
            **_month_context(year, month),
        )

    @app.route("/api/attendance", methods=["GET"], endpoint="api_get_attendance")
    def api_get_attendance():
        try:
            user_id = _parse_user_id(request.args.get("userId"))
            work_date = parse_request_date(request.args.get("date"), "date")
            code = container.attendance_service.get_attendance(user_id, work_date)
            return jsonify({"success": True, "code": code})
        except NotFoundError as e:
            return _json_error(str(e), 404)
        except ValidationError as e:
            return _json_error(str(e), 400)
        except Exception:
            logger.exception("Reading attendance failed")
            return _json_error("Failed to read attendance", 500)

    @app.route("/api/attendance", methods=["POST"], endpoint="api_update_attendance")
    def api_update_attendance():
        data = request.get_json(silent=True) or {}
        try:
            user_id = _parse_user_id(data.get("userId"))
            work_date = parse_request_date(data.get("date"), "date")
            raw_category = data.get("categoryId")
            try:
                category_id = int(raw_category) if raw_category not in (None, "") else None
            except (TypeError, ValueError):
                raise ValidationError("categoryId must be numeric")

            code = container.attendance_service.update_attendance(
                user_id=user_id,
                work_date=work_date,
                category_id=category_id,
            )
            return jsonify({"success": True, "code": code})
        except BlockedDayError as e:
            return _json_error(str(e), 409)
        except NotFoundError as e:
            return _json_error(str(e), 404)
        except ValidationError as e:
            return _json_error(str(e), 400)
        except Exception:
            logger.exception("Updating attendance failed")
            return _json_error("Failed to save attendance", 500)

    @app.route("/api/attendance/cycle", methods=["POST"], endpoint="api_cycle_attendance")
    def api_cycle_attendance():
        data = request.get_json(silent=True) or {}
        try:
            user_id = _parse_user_id(data.get("userId"))
            work_date = parse_request_date(data.get("date"), "date")
            code = container.attendance_service.cycle_day(user_id=user_id, work_date=work_date)
            return jsonify({"success": True, "code": code})
        except BlockedDayError as e:
            return _json_error(str(e), 409)
        except NotFoundError as e:
            return _json_error(str(e), 404)
        except ValidationError as e:
            return _json_error(str(e), 400)
        except Exception:
            logger.exception("Cycling attendance failed")
            return _json_error("Failed to save attendance", 500)

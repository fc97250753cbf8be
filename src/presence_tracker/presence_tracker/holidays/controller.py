from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.auth import admin_required
from ..common.datetime_utils import parse_request_date
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/admin/holidays", methods=["GET", "POST"], endpoint="admin_holidays")
    @admin_required
    def admin_holidays():
        if request.method == "POST":
            try:
                container.holiday_service.add(
                    parse_request_date(request.form.get("date"), "Date"),
                    request.form.get("name", ""),
                )
                flash("Holiday added.", "success")
                return redirect(url_for("admin_holidays"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Adding holiday failed")
                flash("System error while adding holiday", "danger")

        return render_template(
            "admin/holidays.html",
            holidays=container.holiday_service.list_all(),
            active_page="admin_holidays",
        )

    @app.route("/admin/holidays/<int:holiday_id>/delete", methods=["POST"], endpoint="admin_holiday_delete")
    @admin_required
    def admin_holiday_delete(holiday_id: int):
        try:
            container.holiday_service.remove(holiday_id)
            flash("Holiday removed.", "success")
        except NotFoundError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Removing holiday %s failed", holiday_id)
            flash("System error while removing holiday", "danger")
        return redirect(url_for("admin_holidays"))

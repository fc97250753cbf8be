from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, redirect, render_template, request, url_for

from ..common.auth import admin_required
from ..core.exceptions import NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/categories", methods=["GET"], endpoint="api_categories")
    def api_categories():
        return jsonify(
            [
                {
                    "id": c.category_id,
                    "code": c.code,
                    "label": c.label,
                    "color": c.color,
                    "isWorkDay": c.is_work_day,
                    "isActive": c.is_active,
                }
                for c in container.category_service.list_all()
            ]
        )

    @app.route("/admin/categories", methods=["GET", "POST"], endpoint="admin_categories")
    @admin_required
    def admin_categories():
        if request.method == "POST":
            try:
                container.category_service.create(
                    code=request.form.get("code", ""),
                    label=request.form.get("label", ""),
                    color=request.form.get("color", ""),
                    is_work_day=bool(request.form.get("isWorkDay")),
                )
                flash("Category added.", "success")
                return redirect(url_for("admin_categories"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Creating category failed")
                flash("System error while adding category", "danger")

        return render_template(
            "admin/categories.html",
            categories=container.category_service.list_all(),
            active_page="admin_categories",
        )

    @app.route("/admin/categories/<int:category_id>/toggle", methods=["POST"], endpoint="admin_category_toggle")
    @admin_required
    def admin_category_toggle(category_id: int):
        try:
            category = container.category_service.toggle_active(category_id)
            state = "activated" if category.is_active else "deactivated"
            flash(f"Category {category.code} {state}.", "success")
        except NotFoundError as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Toggling category %s failed", category_id)
            flash("System error while updating category", "danger")
        return redirect(url_for("admin_categories"))

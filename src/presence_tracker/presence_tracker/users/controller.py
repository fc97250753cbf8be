from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..common.auth import admin_required
from ..common.datetime_utils import parse_iso_date, parse_request_date
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("portal"))

    @app.route("/admin/login", methods=["GET", "POST"], endpoint="admin_login")
    def admin_login():
        if "admin_id" in session:
            return redirect(url_for("admin_reports"))

        if request.method == "POST":
            username = request.form.get("username", "")
            password = request.form.get("password", "")

            try:
                admin = container.auth_service.authenticate(username, password)

                session.permanent = True
                app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
                session["admin_id"] = admin.admin_id
                session["admin_name"] = admin.username

                logger.info("Admin %s signed in", admin.username)
                flash("Signed in.", "success")
                target = request.args.get("next") or ""
                if not target.startswith("/admin"):
                    target = url_for("admin_reports")
                return redirect(target)
            except AuthenticationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Admin login failed")
                flash("System error while signing in", "danger")

        return render_template("admin/login.html")

    @app.route("/admin/logout", endpoint="admin_logout")
    def admin_logout():
        session.clear()
        flash("Signed out.", "info")
        return redirect(url_for("admin_login"))

    @app.route("/admin/users", methods=["GET", "POST"], endpoint="admin_users")
    @admin_required
    def admin_users():
        if request.method == "POST":
            try:
                end_s = request.form.get("endDate") or ""
                dept_s = request.form.get("department") or ""
                container.user_service.create_user(
                    am=request.form.get("am", ""),
                    surname=request.form.get("surname", ""),
                    name=request.form.get("name", ""),
                    department_id=int(dept_s) if dept_s else None,
                    start_date=parse_request_date(request.form.get("startDate"), "Start date"),
                    end_date=parse_iso_date(end_s) if end_s else None,
                )
                flash("User added.", "success")
                return redirect(url_for("admin_users"))
            except ValidationError as e:
                flash(str(e), "danger")
            except ValueError:
                flash("Invalid form values", "danger")
            except Exception:
                logger.exception("Creating user failed")
                flash("System error while adding user", "danger")

        return render_template(
            "admin/users.html",
            users=container.user_service.list_users(),
            departments=container.user_service.list_departments(),
            active_page="admin_users",
        )

    @app.route("/admin/users/<int:user_id>/end-date", methods=["POST"], endpoint="admin_user_end_date")
    @admin_required
    def admin_user_end_date(user_id: int):
        try:
            end_s = request.form.get("endDate") or ""
            container.user_service.set_end_date(user_id, parse_iso_date(end_s) if end_s else None)
            flash("Employment window updated.", "success")
        except (ValidationError, NotFoundError) as e:
            flash(str(e), "danger")
        except ValueError:
            flash("End date must be a YYYY-MM-DD date", "danger")
        except Exception:
            logger.exception("Updating end date failed for user %s", user_id)
            flash("System error while updating user", "danger")
        return redirect(url_for("admin_users"))

    @app.route("/admin/departments", methods=["GET", "POST"], endpoint="admin_departments")
    @admin_required
    def admin_departments():
        if request.method == "POST":
            try:
                container.user_service.create_department(request.form.get("name", ""))
                flash("Department added.", "success")
                return redirect(url_for("admin_departments"))
            except ValidationError as e:
                flash(str(e), "danger")
            except Exception:
                logger.exception("Creating department failed")
                flash("System error while adding department", "danger")

        return render_template(
            "admin/departments.html",
            departments=container.user_service.list_departments(),
            active_page="admin_departments",
        )

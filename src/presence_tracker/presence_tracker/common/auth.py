from __future__ import annotations

from functools import wraps

from flask import flash, jsonify, redirect, request, session, url_for


def admin_required(view):
    """Redirect to the admin login page unless an admin session exists."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            flash("Please sign in to continue.", "warning")
            return redirect(url_for("admin_login", next=request.path))
        return view(*args, **kwargs)

    return wrapper


def api_admin_required(view):
    """JSON flavour of admin_required: answers 401 instead of redirecting."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "admin_id" not in session:
            return jsonify({"success": False, "message": "Admin session required"}), 401
        return view(*args, **kwargs)

    return wrapper

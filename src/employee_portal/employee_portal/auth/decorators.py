from __future__ import annotations

from functools import wraps

from flask import jsonify, session

SESSION_KEY = "employee_name"


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if SESSION_KEY not in session:
            return jsonify({"error": "Please sign in to continue"}), 401
        return view(*args, **kwargs)

    return wrapper


def current_employee() -> str:
    return session[SESSION_KEY]

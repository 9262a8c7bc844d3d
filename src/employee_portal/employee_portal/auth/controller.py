from __future__ import annotations

from flask import Flask, jsonify, session

from ..common.http import request_json
from ..container import Container
from .decorators import SESSION_KEY, current_employee, login_required


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="api_login")
    def api_login():
        data = request_json()
        s_user = container.auth_service.authenticate(data.get("employeeName", ""))

        session.clear()
        session.permanent = bool(data.get("rememberMe"))
        session[SESSION_KEY] = s_user.employee_name
        return jsonify({"employeeName": s_user.employee_name})

    @app.route("/api/logout", methods=["POST"], endpoint="api_logout")
    def api_logout():
        session.clear()
        return jsonify({"message": "Signed out"})

    @app.route("/api/me", methods=["GET"], endpoint="api_me")
    @login_required
    def api_me():
        return jsonify({"employeeName": current_employee()})

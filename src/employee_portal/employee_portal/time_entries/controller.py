from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import current_employee, login_required
from ..common.http import request_json
from ..auth.service import AuthService
from ..container import Container


def register(app: Flask, container: Container) -> None:
    def _acting_employee(requested: str | None) -> str:
        return AuthService.resolve_acting_employee(current_employee(), requested)

    @app.route("/api/clock-in", methods=["POST"], endpoint="api_clock_in")
    @login_required
    def api_clock_in():
        data = request_json()
        entry = container.time_tracking_service.clock_in(_acting_employee(data.get("employeeName")))
        return jsonify(
            {
                "id": entry.id,
                "employeeName": entry.employee_name,
                "clockIn": entry.clock_in.isoformat(),
                "date": entry.date,
            }
        )

    @app.route("/api/clock-out", methods=["POST"], endpoint="api_clock_out")
    @login_required
    def api_clock_out():
        data = request_json()
        entry = container.time_tracking_service.clock_out(_acting_employee(data.get("employeeName")))
        return jsonify(
            {
                "id": entry.id,
                "employeeName": entry.employee_name,
                "clockIn": entry.clock_in.isoformat(),
                "clockOut": entry.clock_out.isoformat(),
                "duration": entry.duration_minutes,
            }
        )

    @app.route("/api/manual-time-entry", methods=["POST"], endpoint="api_manual_time_entry")
    @login_required
    def api_manual_time_entry():
        data = request_json()
        entry = container.time_tracking_service.manual_entry(
            employee_name=data.get("employeeName"),
            clock_in=data.get("clockIn"),
            clock_out=data.get("clockOut"),
            date=data.get("date"),
        )
        return jsonify(
            {
                "id": entry.id,
                "employeeName": entry.employee_name,
                "clockIn": entry.clock_in.isoformat(),
                "clockOut": entry.clock_out.isoformat(),
                "duration": entry.duration_minutes,
                "date": entry.date,
            }
        )

    @app.route("/api/status/<employee_name>", methods=["GET"], endpoint="api_status")
    @login_required
    def api_status(employee_name: str):
        status = container.time_tracking_service.get_status(_acting_employee(employee_name))
        return jsonify(status.to_dict())

    @app.route("/api/time-entries", methods=["GET"], endpoint="api_time_entries")
    @login_required
    def api_time_entries():
        entries = container.time_tracking_service.list_entries(
            date=request.args.get("date"),
            employee_name=request.args.get("employeeName"),
        )
        return jsonify([e.to_dict() for e in entries])

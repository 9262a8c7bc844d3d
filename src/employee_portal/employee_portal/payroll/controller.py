from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll-report", methods=["GET"], endpoint="api_payroll_report")
    @login_required
    def api_payroll_report():
        report = container.payroll_report_service.generate_report(
            start_date=request.args.get("startDate"),
            end_date=request.args.get("endDate"),
            employee_name=request.args.get("employeeName"),
        )
        return jsonify(report.to_dict())

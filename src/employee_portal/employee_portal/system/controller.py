from __future__ import annotations

from flask import Flask, jsonify

from ..auth.decorators import login_required
from ..common.datetime_utils import now_local, today_str
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify(
            {
                "status": "ok",
                "message": "Employee Portal API",
                "timestamp": now_local().isoformat(),
            }
        )

    @app.route("/api/debug/database", methods=["GET"], endpoint="api_debug_database")
    @login_required
    def api_debug_database():
        today = today_str(now_local())
        templates = container.default_task_service.list_templates()
        return jsonify(
            {
                "default_tasks_count": len(templates),
                "tasks_today_count": container.task_service.count_for_date(today),
                "default_tasks": [t.to_dict() for t in templates],
                "today_date": today,
            }
        )

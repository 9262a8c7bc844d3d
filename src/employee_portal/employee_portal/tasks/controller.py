from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import current_employee, login_required
from ..common.http import request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/tasks", methods=["GET"], endpoint="api_tasks")
    @login_required
    def api_tasks():
        tasks = container.task_service.list_tasks(request.args.get("date"))
        return jsonify([t.to_dict() for t in tasks])

    @app.route("/api/tasks", methods=["POST"], endpoint="api_tasks_create")
    @login_required
    def api_tasks_create():
        data = request_json()
        task = container.task_service.create_task(
            task_name=data.get("taskName"),
            description=data.get("description"),
            date=data.get("date"),
            created_by=data.get("createdBy") or current_employee(),
        )
        return jsonify(task.to_dict())

    # Registered before /api/tasks/<id> so "reorder" is never taken for an id.
    @app.route("/api/tasks/reorder", methods=["PUT"], endpoint="api_tasks_reorder")
    @login_required
    def api_tasks_reorder():
        data = request_json()
        container.task_service.reorder(data.get("tasks"))
        return jsonify({"message": "Tasks reordered successfully"})

    @app.route("/api/tasks/<int:task_id>", methods=["PUT"], endpoint="api_tasks_update")
    @login_required
    def api_tasks_update(task_id: int):
        data = request_json()
        task = container.task_service.update_task(
            task_id,
            task_name=data.get("taskName"),
            description=data.get("description"),
        )
        return jsonify(task.to_dict() if task else None)

    @app.route("/api/tasks/<int:task_id>", methods=["PATCH"], endpoint="api_tasks_toggle")
    @login_required
    def api_tasks_toggle(task_id: int):
        data = request_json()
        task = container.task_service.toggle_complete(task_id, data.get("completed"))
        return jsonify(task.to_dict() if task else None)

    @app.route("/api/tasks/<int:task_id>", methods=["DELETE"], endpoint="api_tasks_delete")
    @login_required
    def api_tasks_delete(task_id: int):
        container.task_service.delete_task(task_id)
        return jsonify({"message": "Task deleted successfully"})

    @app.route("/api/default-tasks", methods=["GET"], endpoint="api_default_tasks")
    @login_required
    def api_default_tasks():
        return jsonify([t.to_dict() for t in container.default_task_service.list_templates()])

    @app.route("/api/default-tasks", methods=["POST"], endpoint="api_default_tasks_create")
    @login_required
    def api_default_tasks_create():
        data = request_json()
        template = container.default_task_service.create_template(
            task_name=data.get("taskName"),
            description=data.get("description"),
        )
        return jsonify(
            {
                "id": template.id,
                "taskName": template.task_name,
                "description": template.description,
                "sortOrder": template.sort_order,
            }
        )

    @app.route("/api/default-tasks/<int:template_id>", methods=["DELETE"], endpoint="api_default_tasks_delete")
    @login_required
    def api_default_tasks_delete(template_id: int):
        container.default_task_service.delete_template(template_id)
        return jsonify({"message": "Default task deleted successfully"})

from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.decorators import login_required
from ..common.datetime_utils import now_local, today_str
from ..common.http import request_json
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/clients", methods=["GET"], endpoint="api_clients")
    @login_required
    def api_clients():
        return jsonify([c.to_dict() for c in container.client_service.list_clients()])

    @app.route("/api/clients", methods=["POST"], endpoint="api_clients_create")
    @login_required
    def api_clients_create():
        data = request_json()
        client = container.client_service.create_client(data.get("clientName"))
        return jsonify(client.to_dict())

    @app.route("/api/clients/<int:client_id>", methods=["DELETE"], endpoint="api_clients_delete")
    @login_required
    def api_clients_delete(client_id: int):
        container.client_service.delete_client(client_id)
        return jsonify({"message": "Client deleted successfully"})

    @app.route("/api/projects", methods=["GET"], endpoint="api_projects")
    @login_required
    def api_projects():
        today = today_str(now_local())
        projects = container.project_service.list_projects(client_id=request.args.get("clientId"))
        return jsonify([p.to_dict(today=today) for p in projects])

    @app.route("/api/projects/due", methods=["GET"], endpoint="api_projects_due")
    @login_required
    def api_projects_due():
        today = request.args.get("today") or today_str(now_local())
        projects = container.project_service.list_due_or_overdue_projects(today)
        return jsonify([p.to_dict(today=today) for p in projects])

    @app.route("/api/projects", methods=["POST"], endpoint="api_projects_create")
    @login_required
    def api_projects_create():
        data = request_json()
        project = container.project_service.create_project(
            client_id=data.get("clientId"),
            project_name=data.get("projectName"),
            description=data.get("description"),
            due_date=data.get("dueDate"),
        )
        return jsonify(project.to_dict(today=today_str(now_local())))

    @app.route("/api/projects/<int:project_id>", methods=["PATCH"], endpoint="api_projects_update")
    @login_required
    def api_projects_update(project_id: int):
        data = request_json()
        project = container.project_service.update_project(project_id, data)
        return jsonify(project.to_dict(today=today_str(now_local())) if project else None)

    @app.route("/api/projects/<int:project_id>", methods=["DELETE"], endpoint="api_projects_delete")
    @login_required
    def api_projects_delete(project_id: int):
        container.project_service.delete_project(project_id)
        return jsonify({"message": "Project deleted successfully"})

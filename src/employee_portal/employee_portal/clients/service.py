from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_local, today_str
from ..common.validators import optional_text, parse_bool, require_int, require_iso_date, require_non_empty
from ..core.exceptions import ValidationError
from .model import Client, Project, ProjectChanges
from .repository import ClientRepository, ProjectRepository

logger = logging.getLogger(__name__)


class ClientService:
    def __init__(self, clients: ClientRepository):
        self._clients = clients

    def list_clients(self) -> Sequence[Client]:
        return self._clients.list_all()

    def create_client(self, client_name: Optional[str], *, now: datetime | None = None) -> Client:
        client_name = require_non_empty(client_name, "clientName")
        created_at = now or now_local()
        client_id = self._clients.create(client_name=client_name, created_at=created_at)
        logger.info("Client %s created (%s)", client_id, client_name)
        return Client(id=client_id, client_name=client_name, created_at=created_at)

    def delete_client(self, client_id: Any) -> None:
        """Remove a client together with all of its projects."""
        client_id = require_int(client_id, "id")
        removed = self._clients.delete_with_projects(client_id=client_id)
        logger.info("Client %s deleted with %d projects", client_id, removed)


class ProjectService:
    def __init__(self, projects: ProjectRepository, clients: ClientRepository):
        self._projects = projects
        self._clients = clients

    def list_projects(self, *, client_id: Any = None) -> Sequence[Project]:
        if client_id in (None, ""):
            return self._projects.list_projects()
        return self._projects.list_projects(client_id=require_int(client_id, "clientId"))

    def list_due_or_overdue_projects(self, today: Optional[str] = None, *, now: datetime | None = None) -> Sequence[Project]:
        day = require_iso_date(today, "today") if optional_text(today) else today_str(now or now_local())
        return self._projects.list_due_or_overdue(today=day)

    def create_project(
        self,
        *,
        client_id: Any,
        project_name: Optional[str],
        description: Optional[str] = None,
        due_date: Optional[str],
        now: datetime | None = None,
    ) -> Project:
        if client_id in (None, ""):
            raise ValidationError("clientId is required")
        client_id = require_int(client_id, "clientId")
        project_name = require_non_empty(project_name, "projectName")
        due_date = require_iso_date(due_date, "dueDate")

        if not self._clients.get_by_id(client_id):
            raise ValidationError("Client does not exist")

        created_at = now or now_local()
        project_id = self._projects.create(
            client_id=client_id,
            project_name=project_name,
            description=optional_text(description),
            due_date=due_date,
            created_at=created_at,
        )
        logger.info("Project %s created for client %s, due %s", project_id, client_id, due_date)
        return Project(
            id=project_id,
            client_id=client_id,
            project_name=project_name,
            description=optional_text(description),
            due_date=due_date,
            completed=False,
            completed_at=None,
            created_at=created_at,
        )

    def update_project(self, project_id: Any, fields: Mapping[str, Any], *, now: datetime | None = None) -> Optional[Project]:
        """Partial update from request fields (projectName, description, dueDate, completed).

        Absent keys are left unchanged; completed_at follows completed.
        """
        project_id = require_int(project_id, "id")

        completed = parse_bool(fields["completed"]) if "completed" in fields else None
        changes = ProjectChanges(
            project_name=require_non_empty(fields["projectName"], "projectName") if "projectName" in fields else None,
            description=(str(fields["description"] or "").strip()) if "description" in fields else None,
            due_date=require_iso_date(fields["dueDate"], "dueDate") if "dueDate" in fields else None,
            completed=completed,
            completed_at=(now or now_local()) if completed else None,
        )
        if changes.is_empty():
            raise ValidationError("Nothing to update")

        self._projects.update(project_id=project_id, changes=changes)
        return self._projects.get_by_id(project_id)

    def delete_project(self, project_id: Any) -> None:
        self._projects.delete(project_id=require_int(project_id, "id"))

from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import Client, Project, ProjectChanges


class ClientRepository(Protocol):
    def list_all(self) -> Sequence[Client]:
        raise NotImplementedError

    def get_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

    def create(self, *, client_name: str, created_at: datetime) -> int:
        raise NotImplementedError

    def delete_with_projects(self, *, client_id: int) -> int:
        """Delete the client's projects, then the client, in one transaction.

        Returns the number of projects removed.
        """

        raise NotImplementedError


class ProjectRepository(Protocol):
    def list_projects(self, *, client_id: Optional[int] = None) -> Sequence[Project]:
        raise NotImplementedError

    def list_due_or_overdue(self, *, today: str) -> Sequence[Project]:
        """Incomplete projects with due_date <= today, earliest due first."""

        raise NotImplementedError

    def get_by_id(self, project_id: int) -> Optional[Project]:
        raise NotImplementedError

    def create(
        self,
        *,
        client_id: int,
        project_name: str,
        description: Optional[str],
        due_date: str,
        created_at: datetime,
    ) -> int:
        raise NotImplementedError

    def update(self, *, project_id: int, changes: ProjectChanges) -> bool:
        raise NotImplementedError

    def delete(self, *, project_id: int) -> bool:
        raise NotImplementedError

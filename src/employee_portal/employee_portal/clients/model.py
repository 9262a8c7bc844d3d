from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import DueStatus


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


@dataclass(frozen=True)
class Client:
    id: int
    client_name: str
    created_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {"id": self.id, "client_name": self.client_name, "created_at": _iso(self.created_at)}


@dataclass(frozen=True)
class Project:
    """A client deliverable with a due date (YYYY-MM-DD string)."""

    id: int
    client_id: int
    project_name: str
    description: Optional[str]
    due_date: str
    completed: bool
    completed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    def due_status(self, today: str) -> Optional[DueStatus]:
        if self.completed:
            return None
        if self.due_date < today:
            return DueStatus.OVERDUE
        if self.due_date == today:
            return DueStatus.DUE_TODAY
        return None

    def to_dict(self, *, today: Optional[str] = None) -> dict:
        out = {
            "id": self.id,
            "client_id": self.client_id,
            "project_name": self.project_name,
            "description": self.description,
            "due_date": self.due_date,
            "completed": self.completed,
            "completed_at": _iso(self.completed_at),
            "created_at": _iso(self.created_at),
        }
        if today is not None:
            status = self.due_status(today)
            out["due_status"] = status.value if status else None
        return out


@dataclass(frozen=True)
class ProjectChanges:
    """Partial update; None means "leave unchanged"."""

    project_name: Optional[str] = None
    description: Optional[str] = None
    due_date: Optional[str] = None
    completed: Optional[bool] = None
    completed_at: Optional[datetime] = None

    def is_empty(self) -> bool:
        return (
            self.project_name is None
            and self.description is None
            and self.due_date is None
            and self.completed is None
        )

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Task:
    """Domain entity: one checklist item of a given day.

    completed and completed_at always move together.
    """

    id: int
    task_name: str
    description: Optional[str]
    completed: bool
    date: str
    completed_at: Optional[datetime]
    is_default: bool
    created_by: Optional[str]
    sort_order: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "task_name": self.task_name,
            "description": self.description,
            "completed": self.completed,
            "date": self.date,
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "is_default": self.is_default,
            "created_by": self.created_by,
            "sort_order": self.sort_order,
        }


@dataclass(frozen=True)
class DefaultTask:
    """Template copied into every day's task list."""

    id: int
    task_name: str
    description: Optional[str]
    sort_order: int

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "task_name": self.task_name,
            "description": self.description,
            "sort_order": self.sort_order,
        }

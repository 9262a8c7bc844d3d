from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import DefaultTask, Task


class TaskRepository(Protocol):
    def seed_from_defaults(self, *, date: str) -> int:
        """Copy every template into the date's list, at most once per date.

        Returns the number of tasks created (0 when already seeded or when
        there are no templates).
        """

        raise NotImplementedError

    def list_for_date(self, *, date: str) -> Sequence[Task]:
        """Incomplete first, then sort_order, then id."""

        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def append(self, *, task_name: str, description: Optional[str], date: str, created_by: Optional[str]) -> int:
        """Insert a non-default task after the date's current last sort_order."""

        raise NotImplementedError

    def update_details(self, *, task_id: int, task_name: str, description: Optional[str]) -> bool:
        raise NotImplementedError

    def set_completed(self, *, task_id: int, completed: bool, completed_at: Optional[datetime]) -> bool:
        raise NotImplementedError

    def reorder(self, *, ordered_ids: Sequence[int]) -> int:
        """Set sort_order to each id's position; completed tasks are skipped.

        Returns the number of rows updated.
        """

        raise NotImplementedError

    def delete(self, *, task_id: int) -> bool:
        raise NotImplementedError

    def count_for_date(self, *, date: str) -> int:
        raise NotImplementedError


class DefaultTaskRepository(Protocol):
    def list_all(self) -> Sequence[DefaultTask]:
        raise NotImplementedError

    def append(self, *, task_name: str, description: Optional[str]) -> DefaultTask:
        raise NotImplementedError

    def delete(self, *, template_id: int) -> bool:
        raise NotImplementedError

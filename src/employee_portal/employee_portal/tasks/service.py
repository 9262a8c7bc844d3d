from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_local, today_str
from ..common.validators import optional_text, parse_bool, require_int, require_iso_date, require_non_empty
from ..core.exceptions import ValidationError
from .model import DefaultTask, Task
from .repository import DefaultTaskRepository, TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Daily checklist: lazy seeding from templates, completion and ordering."""

    def __init__(self, tasks: TaskRepository):
        self._tasks = tasks

    def _resolve_date(self, date: Optional[str], now: datetime | None) -> str:
        if optional_text(date):
            return require_iso_date(date, "date")
        return today_str(now or now_local())

    def ensure_daily_tasks(self, date: str) -> int:
        created = self._tasks.seed_from_defaults(date=date)
        if created:
            logger.info("Seeded %d default tasks for %s", created, date)
        return created

    def list_tasks(self, date: Optional[str] = None, *, now: datetime | None = None) -> Sequence[Task]:
        day = self._resolve_date(date, now)
        self.ensure_daily_tasks(day)
        return self._tasks.list_for_date(date=day)

    def create_task(
        self,
        *,
        task_name: Optional[str],
        description: Optional[str] = None,
        date: Optional[str] = None,
        created_by: Optional[str] = None,
        now: datetime | None = None,
    ) -> Task:
        task_name = require_non_empty(task_name, "taskName")
        day = self._resolve_date(date, now)

        task_id = self._tasks.append(
            task_name=task_name,
            description=optional_text(description),
            date=day,
            created_by=optional_text(created_by),
        )
        task = self._tasks.get_by_id(task_id)
        logger.info("Task %s created for %s by %s", task_id, day, created_by or "-")
        return task

    def update_task(self, task_id: Any, *, task_name: Optional[str], description: Optional[str] = None) -> Optional[Task]:
        task_id = require_int(task_id, "id")
        task_name = require_non_empty(task_name, "taskName")
        self._tasks.update_details(task_id=task_id, task_name=task_name, description=optional_text(description))
        return self._tasks.get_by_id(task_id)

    def toggle_complete(self, task_id: Any, completed: Any, *, now: datetime | None = None) -> Optional[Task]:
        task_id = require_int(task_id, "id")
        done = parse_bool(completed)
        completed_at = (now or now_local()) if done else None
        self._tasks.set_completed(task_id=task_id, completed=done, completed_at=completed_at)
        return self._tasks.get_by_id(task_id)

    def reorder(self, ordered_ids: Any) -> int:
        """Apply a new order to a day's incomplete tasks.

        Accepts a list of ids or of ``{"id": ...}`` objects. The whole update
        is applied in one transaction; on failure the client re-fetches.
        """
        if not isinstance(ordered_ids, list):
            raise ValidationError("Invalid tasks array")

        ids: list[int] = []
        for item in ordered_ids:
            raw = item.get("id") if isinstance(item, dict) else item
            ids.append(require_int(raw, "id"))

        return self._tasks.reorder(ordered_ids=ids)

    def delete_task(self, task_id: Any) -> None:
        self._tasks.delete(task_id=require_int(task_id, "id"))

    def count_for_date(self, date: str) -> int:
        return self._tasks.count_for_date(date=date)


class DefaultTaskService:
    """Administrative CRUD over the daily task templates."""

    def __init__(self, templates: DefaultTaskRepository):
        self._templates = templates

    def list_templates(self) -> Sequence[DefaultTask]:
        return self._templates.list_all()

    def create_template(self, *, task_name: Optional[str], description: Optional[str] = None) -> DefaultTask:
        task_name = require_non_empty(task_name, "taskName")
        template = self._templates.append(task_name=task_name, description=optional_text(description))
        logger.info("Default task %s added at position %s", template.id, template.sort_order)
        return template

    def delete_template(self, template_id: Any) -> None:
        self._templates.delete(template_id=require_int(template_id, "id"))

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from src.employee_portal.employee_portal.clients.model import Client, Project, ProjectChanges
from src.employee_portal.employee_portal.container import build_services
from src.employee_portal.employee_portal.main import create_app
from src.employee_portal.employee_portal.tasks.model import DefaultTask, Task
from src.employee_portal.employee_portal.time_entries.model import PayrollEntryRow, TimeEntry

EMPLOYEES = ["Brendan Abbott", "Kyla Abbott"]


class InMemoryTimeEntries:
    def __init__(self):
        self.rows: dict[int, TimeEntry] = {}
        self._id = 0

    def _next_id(self) -> int:
        self._id += 1
        return self._id

    def get_open_entry(self, *, employee_name: str, date: str) -> Optional[TimeEntry]:
        for e in self.rows.values():
            if e.employee_name == employee_name and e.date == date and e.clock_out is None:
                return e
        return None

    def create_open_entry(self, *, employee_name: str, clock_in: datetime, date: str) -> Optional[int]:
        if self.get_open_entry(employee_name=employee_name, date=date):
            return None
        entry_id = self._next_id()
        self.rows[entry_id] = TimeEntry(entry_id, employee_name, clock_in, None, None, date)
        return entry_id

    def close_entry(self, *, entry_id: int, clock_out: datetime, duration_minutes: int) -> bool:
        e = self.rows.get(entry_id)
        if not e or e.clock_out is not None:
            return False
        self.rows[entry_id] = replace(e, clock_out=clock_out, duration_minutes=duration_minutes)
        return True

    def create_closed_entry(self, *, employee_name, clock_in, clock_out, duration_minutes, date) -> int:
        entry_id = self._next_id()
        self.rows[entry_id] = TimeEntry(entry_id, employee_name, clock_in, clock_out, duration_minutes, date)
        return entry_id

    def list_entries(self, *, date=None, employee_name=None):
        items = [
            e
            for e in self.rows.values()
            if (date is None or e.date == date) and (employee_name is None or e.employee_name == employee_name)
        ]
        items.sort(key=lambda e: e.clock_in, reverse=True)
        return items

    def get_report_rows(self, *, start_date=None, end_date=None, employee_name=None):
        self.last_report_filters = {"start_date": start_date, "end_date": end_date, "employee_name": employee_name}
        items = [
            e
            for e in self.rows.values()
            if e.clock_out is not None
            and (start_date is None or e.date >= start_date)
            and (end_date is None or e.date <= end_date)
            and (employee_name is None or e.employee_name == employee_name)
        ]
        items.sort(key=lambda e: (e.employee_name, e.date, e.clock_in))
        return [PayrollEntryRow(e.employee_name, e.date, e.clock_in, e.clock_out, e.duration_minutes) for e in items]


class InMemoryDefaultTasks:
    def __init__(self, names: tuple[str, ...] = ()):
        self.rows: dict[int, DefaultTask] = {}
        self._id = 0
        for name in names:
            self.append(task_name=name, description=None)

    def list_all(self):
        return sorted(self.rows.values(), key=lambda t: (t.sort_order, t.id))

    def append(self, *, task_name: str, description: Optional[str]) -> DefaultTask:
        self._id += 1
        position = max((t.sort_order for t in self.rows.values()), default=0) + 1
        template = DefaultTask(self._id, task_name, description, position)
        self.rows[self._id] = template
        return template

    def delete(self, *, template_id: int) -> bool:
        return self.rows.pop(template_id, None) is not None


class InMemoryTasks:
    def __init__(self, templates: InMemoryDefaultTasks):
        self._templates = templates
        self.rows: dict[int, Task] = {}
        self.seeded: set[str] = set()
        self._id = 0

    def _insert(self, **kwargs) -> int:
        self._id += 1
        self.rows[self._id] = Task(id=self._id, completed=False, completed_at=None, **kwargs)
        return self._id

    def seed_from_defaults(self, *, date: str) -> int:
        templates = self._templates.list_all()
        if not templates or date in self.seeded:
            return 0
        self.seeded.add(date)
        for position, t in enumerate(templates):
            self._insert(
                task_name=t.task_name,
                description=t.description,
                date=date,
                is_default=True,
                created_by=None,
                sort_order=position,
            )
        return len(templates)

    def list_for_date(self, *, date: str):
        items = [t for t in self.rows.values() if t.date == date]
        items.sort(key=lambda t: (t.completed, t.sort_order, t.id))
        return items

    def get_by_id(self, task_id: int) -> Optional[Task]:
        return self.rows.get(task_id)

    def append(self, *, task_name, description, date, created_by) -> int:
        position = max((t.sort_order for t in self.rows.values() if t.date == date), default=0) + 1
        return self._insert(
            task_name=task_name,
            description=description,
            date=date,
            is_default=False,
            created_by=created_by,
            sort_order=position,
        )

    def update_details(self, *, task_id, task_name, description) -> bool:
        t = self.rows.get(task_id)
        if not t:
            return False
        self.rows[task_id] = replace(t, task_name=task_name, description=description)
        return True

    def set_completed(self, *, task_id, completed, completed_at) -> bool:
        t = self.rows.get(task_id)
        if not t:
            return False
        self.rows[task_id] = replace(t, completed=completed, completed_at=completed_at)
        return True

    def reorder(self, *, ordered_ids) -> int:
        updated = 0
        for position, task_id in enumerate(ordered_ids):
            t = self.rows.get(task_id)
            if t and not t.completed:
                self.rows[task_id] = replace(t, sort_order=position)
                updated += 1
        return updated

    def delete(self, *, task_id) -> bool:
        return self.rows.pop(task_id, None) is not None

    def count_for_date(self, *, date: str) -> int:
        return len([t for t in self.rows.values() if t.date == date])


class InMemoryClients:
    def __init__(self, projects: "InMemoryProjects"):
        self._projects = projects
        self.rows: dict[int, Client] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.rows.values(), key=lambda c: c.client_name)

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self.rows.get(client_id)

    def create(self, *, client_name: str, created_at: datetime) -> int:
        self._id += 1
        self.rows[self._id] = Client(self._id, client_name, created_at)
        return self._id

    def delete_with_projects(self, *, client_id: int) -> int:
        doomed = [p.id for p in self._projects.rows.values() if p.client_id == client_id]
        for project_id in doomed:
            del self._projects.rows[project_id]
        self.rows.pop(client_id, None)
        return len(doomed)


class InMemoryProjects:
    def __init__(self):
        self.rows: dict[int, Project] = {}
        self._id = 0

    def list_projects(self, *, client_id=None):
        items = [p for p in self.rows.values() if client_id is None or p.client_id == client_id]
        items.sort(key=lambda p: (p.completed, p.due_date, p.id))
        return items

    def list_due_or_overdue(self, *, today: str):
        items = [p for p in self.rows.values() if not p.completed and p.due_date <= today]
        items.sort(key=lambda p: (p.due_date, p.id))
        return items

    def get_by_id(self, project_id: int) -> Optional[Project]:
        return self.rows.get(project_id)

    def create(self, *, client_id, project_name, description, due_date, created_at) -> int:
        self._id += 1
        self.rows[self._id] = Project(self._id, client_id, project_name, description, due_date, False, None, created_at)
        return self._id

    def update(self, *, project_id: int, changes: ProjectChanges) -> bool:
        p = self.rows.get(project_id)
        if not p:
            return False
        updates = {}
        if changes.project_name is not None:
            updates["project_name"] = changes.project_name
        if changes.description is not None:
            updates["description"] = changes.description
        if changes.due_date is not None:
            updates["due_date"] = changes.due_date
        if changes.completed is not None:
            updates["completed"] = changes.completed
            updates["completed_at"] = changes.completed_at
        self.rows[project_id] = replace(p, **updates)
        return True

    def delete(self, *, project_id: int) -> bool:
        return self.rows.pop(project_id, None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 15, 9, 0, 0)


@pytest.fixture
def time_entries() -> InMemoryTimeEntries:
    return InMemoryTimeEntries()


@pytest.fixture
def default_tasks() -> InMemoryDefaultTasks:
    return InMemoryDefaultTasks(("Check email", "Update CRM"))


@pytest.fixture
def tasks(default_tasks) -> InMemoryTasks:
    return InMemoryTasks(default_tasks)


@pytest.fixture
def projects() -> InMemoryProjects:
    return InMemoryProjects()


@pytest.fixture
def clients(projects) -> InMemoryClients:
    return InMemoryClients(projects)


@pytest.fixture
def container(time_entries, tasks, default_tasks, clients, projects):
    return build_services(
        conn=None,
        time_entries_repo=time_entries,
        tasks_repo=tasks,
        default_tasks_repo=default_tasks,
        clients_repo=clients,
        projects_repo=projects,
        authorized_employees=EMPLOYEES,
    )


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def signed_in(client):
    resp = client.post("/api/login", json={"employeeName": EMPLOYEES[0]})
    assert resp.status_code == 200
    return client

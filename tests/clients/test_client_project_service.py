from __future__ import annotations

import pytest

from src.employee_portal.employee_portal.core.enums import DueStatus
from src.employee_portal.employee_portal.core.exceptions import ValidationError
from src.employee_portal.employee_portal.clients.service import ClientService, ProjectService


def test_deleting_client_removes_its_projects(clients, projects, fixed_now):
    client_service = ClientService(clients)
    project_service = ProjectService(projects, clients)
    acme = client_service.create_client("Acme", now=fixed_now)
    other = client_service.create_client("Globex", now=fixed_now)
    project_service.create_project(client_id=acme.id, project_name="Site", due_date="2024-02-01")
    project_service.create_project(client_id=acme.id, project_name="Logo", due_date="2024-02-02")
    kept = project_service.create_project(client_id=other.id, project_name="Audit", due_date="2024-02-03")

    client_service.delete_client(acme.id)

    assert [c.client_name for c in client_service.list_clients()] == ["Globex"]
    assert [p.id for p in project_service.list_projects()] == [kept.id]


def test_create_client_requires_name(clients):
    with pytest.raises(ValidationError, match="clientName is required"):
        ClientService(clients).create_client(" ")


def test_create_project_requires_existing_client(clients, projects):
    service = ProjectService(projects, clients)

    with pytest.raises(ValidationError, match="clientId is required"):
        service.create_project(client_id=None, project_name="Site", due_date="2024-02-01")
    with pytest.raises(ValidationError, match="Client does not exist"):
        service.create_project(client_id=42, project_name="Site", due_date="2024-02-01")


def test_create_project_validates_due_date(clients, projects, fixed_now):
    acme = ClientService(clients).create_client("Acme", now=fixed_now)

    with pytest.raises(ValidationError, match="dueDate"):
        ProjectService(projects, clients).create_project(client_id=acme.id, project_name="Site", due_date="01/02/2024")


def test_due_or_overdue_lists_incomplete_projects_up_to_today(clients, projects, fixed_now):
    acme = ClientService(clients).create_client("Acme", now=fixed_now)
    service = ProjectService(projects, clients)
    late = service.create_project(client_id=acme.id, project_name="Late", due_date="2024-01-10")
    today = service.create_project(client_id=acme.id, project_name="Today", due_date="2024-01-15")
    service.create_project(client_id=acme.id, project_name="Later", due_date="2024-01-20")
    done = service.create_project(client_id=acme.id, project_name="Done", due_date="2024-01-01")
    service.update_project(done.id, {"completed": True}, now=fixed_now)

    due = service.list_due_or_overdue_projects(now=fixed_now)

    assert [p.id for p in due] == [late.id, today.id]
    assert due[0].due_status("2024-01-15") is DueStatus.OVERDUE
    assert due[1].to_dict(today="2024-01-15")["due_status"] == DueStatus.DUE_TODAY.value


def test_update_project_partial_fields(clients, projects, fixed_now):
    acme = ClientService(clients).create_client("Acme", now=fixed_now)
    service = ProjectService(projects, clients)
    project = service.create_project(client_id=acme.id, project_name="Site", description="v1", due_date="2024-02-01")

    updated = service.update_project(project.id, {"dueDate": "2024-03-01", "completed": "true"}, now=fixed_now)

    assert updated.project_name == "Site"
    assert updated.description == "v1"
    assert updated.due_date == "2024-03-01"
    assert updated.completed is True
    assert updated.completed_at == fixed_now
    assert updated.due_status("2024-04-01") is None


def test_update_project_with_no_fields_is_rejected(clients, projects):
    with pytest.raises(ValidationError, match="Nothing to update"):
        ProjectService(projects, clients).update_project(1, {"unknown": "x"})


def test_list_projects_filters_by_client(clients, projects, fixed_now):
    client_service = ClientService(clients)
    service = ProjectService(projects, clients)
    acme = client_service.create_client("Acme", now=fixed_now)
    other = client_service.create_client("Globex", now=fixed_now)
    service.create_project(client_id=acme.id, project_name="Site", due_date="2024-02-01")
    service.create_project(client_id=other.id, project_name="Audit", due_date="2024-02-01")

    assert [p.project_name for p in service.list_projects(client_id=str(other.id))] == ["Audit"]

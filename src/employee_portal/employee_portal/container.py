from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .auth.service import AuthService
from .clients.mysql_client_repository import MySQLClientRepository
from .clients.mysql_project_repository import MySQLProjectRepository
from .clients.repository import ClientRepository, ProjectRepository
from .clients.service import ClientService, ProjectService
from .database.connection import DatabaseConnection, DBConfig
from .payroll.service import PayrollReportService
from .tasks.mysql_default_task_repository import MySQLDefaultTaskRepository
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import DefaultTaskRepository, TaskRepository
from .tasks.service import DefaultTaskService, TaskService
from .time_entries.factory import ManualEntryPolicyFactory
from .time_entries.mysql_time_entry_repository import MySQLTimeEntryRepository
from .time_entries.repository import TimeEntryRepository
from .time_entries.service import TimeTrackingService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    time_entries_repo: TimeEntryRepository
    tasks_repo: TaskRepository
    default_tasks_repo: DefaultTaskRepository
    clients_repo: ClientRepository
    projects_repo: ProjectRepository

    auth_service: AuthService
    time_tracking_service: TimeTrackingService
    task_service: TaskService
    default_task_service: DefaultTaskService
    payroll_report_service: PayrollReportService
    client_service: ClientService
    project_service: ProjectService


def build_services(
    *,
    conn: Optional[DatabaseConnection],
    time_entries_repo: TimeEntryRepository,
    tasks_repo: TaskRepository,
    default_tasks_repo: DefaultTaskRepository,
    clients_repo: ClientRepository,
    projects_repo: ProjectRepository,
    authorized_employees: Iterable[str],
    manual_entry_policy: str = "permissive",
) -> Container:
    """Wire services over the given repositories (MySQL in production, fakes in tests)."""
    policy = ManualEntryPolicyFactory().for_name(manual_entry_policy)

    return Container(
        conn=conn,
        time_entries_repo=time_entries_repo,
        tasks_repo=tasks_repo,
        default_tasks_repo=default_tasks_repo,
        clients_repo=clients_repo,
        projects_repo=projects_repo,
        auth_service=AuthService(authorized_employees),
        time_tracking_service=TimeTrackingService(time_entries_repo, manual_entry_policy=policy),
        task_service=TaskService(tasks_repo),
        default_task_service=DefaultTaskService(default_tasks_repo),
        payroll_report_service=PayrollReportService(time_entries_repo),
        client_service=ClientService(clients_repo),
        project_service=ProjectService(projects_repo, clients_repo),
    )


def build_container(
    *,
    db_config: dict,
    authorized_employees: Iterable[str],
    manual_entry_policy: str = "permissive",
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    return build_services(
        conn=conn,
        time_entries_repo=MySQLTimeEntryRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
        default_tasks_repo=MySQLDefaultTaskRepository(conn),
        clients_repo=MySQLClientRepository(conn),
        projects_repo=MySQLProjectRepository(conn),
        authorized_employees=authorized_employees,
        manual_entry_policy=manual_entry_policy,
    )

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..common.validators import require_non_empty
from ..core.exceptions import AuthenticationError, AuthorizationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    employee_name: str


class AuthService:
    """Use case: sign in against the server-side list of authorized employees."""

    def __init__(self, authorized_employees: Iterable[str]):
        self._authorized = frozenset(name.strip() for name in authorized_employees if name and name.strip())

    def authenticate(self, employee_name: str) -> SessionUser:
        name = require_non_empty(employee_name, "employeeName")
        if name not in self._authorized:
            logger.warning("Sign-in refused for %r", name)
            raise AuthenticationError("Access denied. Only authorized employees can sign in.")
        logger.info("%s signed in", name)
        return SessionUser(employee_name=name)

    @staticmethod
    def resolve_acting_employee(session_employee: str, requested: str | None) -> str:
        """The employee a clock action applies to: always the signed-in one."""
        if isinstance(requested, str):
            requested = requested.strip()
        if requested and requested != session_employee:
            raise AuthorizationError("You can only clock in or out for yourself")
        return session_employee

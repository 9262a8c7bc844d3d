class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class StateConflictError(DomainError):
    """Raised when an operation does not fit the current clock state."""


class AlreadyClockedInError(StateConflictError):
    """Raised when an employee already has an open time entry today."""


class NotClockedInError(StateConflictError):
    """Raised when an employee has no open time entry today."""


class AuthenticationError(DomainError):
    """Raised when an employee name is not on the authorized list."""


class AuthorizationError(DomainError):
    """Raised when a user acts on behalf of someone else."""

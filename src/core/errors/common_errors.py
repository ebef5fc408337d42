"""Common error classes shared by every resource.

Error Types:
- ValidationError: Input validation failures
- NotFoundError: Resource not found (or soft-deleted)
- ConflictError: Duplicates and rows still referenced elsewhere
- AuthenticationError: Bad credentials or tokens
- AuthorizationError: Caller lacks the role or does not own the record

Usage:
    from src.core.errors import NotFoundError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.TASK_NOT_FOUND,
        message="Task not found",
        resource_type="Task",
        resource_id=str(task_id),
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Task, Project, etc.).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate key, row still referenced).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has conflict (email, code, etc.).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid credentials, bad refresh token)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authorization failure (missing role, not the owner).

    Attributes:
        required_permission: Permission that was required.
    """

    required_permission: str | None = None

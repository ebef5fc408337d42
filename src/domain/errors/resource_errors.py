"""Constructors for the errors every resource handler reports.

Handlers across resources fail in the same few ways: a row is missing, the
caller does not own it, the caller lacks a manager role, or a unique value
is taken. These helpers keep codes and messages uniform.

Usage:
    from src.domain.errors import not_found, not_owner

    if task is None:
        return Failure(error=not_found(ErrorCode.TASK_NOT_FOUND, "Task", task_id))
    if not task.is_created_by(actor_id):
        return Failure(error=not_owner("task"))
"""

from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, ConflictError, NotFoundError


def not_found(
    code: ErrorCode, resource_type: str, resource_id: UUID | str
) -> NotFoundError:
    """Build a NotFoundError with the "<Resource> not found" message."""
    return NotFoundError(
        code=code,
        message=f"{resource_type} not found",
        resource_type=resource_type,
        resource_id=str(resource_id),
    )


def not_owner(resource: str) -> AuthorizationError:
    """Build an AuthorizationError for a caller who does not own the record.

    Args:
        resource: Lower-case resource noun ("project", "comment", ...).
    """
    return AuthorizationError(
        code=ErrorCode.RESOURCE_NOT_OWNED,
        message=f"Unauthorized: not the {resource} owner",
        required_permission=f"{resource}:owner",
    )


def manager_required(action: str) -> AuthorizationError:
    """Build an AuthorizationError for an action restricted to managers."""
    return AuthorizationError(
        code=ErrorCode.PERMISSION_DENIED,
        message=f"Unauthorized: only managers can {action}",
        required_permission="manager",
    )


def already_exists(
    code: ErrorCode, resource_type: str, field: str, value: str
) -> ConflictError:
    """Build a ConflictError for a duplicate unique value."""
    return ConflictError(
        code=code,
        message=f"{resource_type} with {field} '{value}' already exists",
        resource_type=resource_type,
        conflicting_field=field,
    )

"""Application layer error types.

This module defines application-level errors that wrap domain errors and add
application-specific context for the presentation layer.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
"""

from dataclasses import dataclass
from enum import Enum

from src.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes.

    Each code maps to one HTTP status in the presentation layer.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Task not found",
        ... )
    """

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Wraps domain errors with application-specific context. Used by routers
    to hand structured error information to the response builder.

    Attributes:
        code: Application error code (from ApplicationErrorCode enum)
        message: Human-readable error message
        domain_error: Original domain error (if error originated from domain layer)
        details: Additional context as key-value pairs

    Examples:
        >>> error = ApplicationError.from_domain_error(
        ...     not_owner("project"),
        ... )
        >>> error.code
        <ApplicationErrorCode.FORBIDDEN: 'forbidden'>
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None

    @classmethod
    def from_domain_error(cls, error: DomainError) -> "ApplicationError":
        """Wrap a handler's domain error, picking the code from its type.

        Args:
            error: DomainError returned inside a Failure.

        Returns:
            ApplicationError carrying the domain error and its message.
        """
        return cls(
            code=_code_for(error),
            message=error.message,
            domain_error=error,
            details=error.details,
        )


def _code_for(error: DomainError) -> ApplicationErrorCode:
    match error:
        case NotFoundError():
            return ApplicationErrorCode.NOT_FOUND
        case AuthorizationError():
            return ApplicationErrorCode.FORBIDDEN
        case AuthenticationError():
            return ApplicationErrorCode.UNAUTHORIZED
        case ConflictError():
            return ApplicationErrorCode.CONFLICT
        case ValidationError():
            return ApplicationErrorCode.COMMAND_VALIDATION_FAILED
        case _:
            return ApplicationErrorCode.COMMAND_EXECUTION_FAILED

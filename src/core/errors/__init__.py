"""Core errors package.

DomainError and its typed subclasses. Handlers return them inside Failure;
the presentation layer maps each type to an HTTP status.

Usage:
    from src.core.errors import ConflictError, NotFoundError
"""

from src.core.errors.common_errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
]

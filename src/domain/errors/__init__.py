"""Domain errors package.

Usage:
    from src.domain.errors import TokenError, not_found, not_owner
"""

from src.domain.errors.persistence_error import RecordConflictError
from src.domain.errors.resource_errors import (
    already_exists,
    manager_required,
    not_found,
    not_owner,
)
from src.domain.errors.token_error import TokenError

__all__ = [
    "RecordConflictError",
    "TokenError",
    "already_exists",
    "manager_required",
    "not_found",
    "not_owner",
]

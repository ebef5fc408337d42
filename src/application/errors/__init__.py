"""Application layer errors.

Usage:
    from src.application.errors import ApplicationError

    app_error = ApplicationError.from_domain_error(result.error)
"""

from src.application.errors.application_error import (
    ApplicationError,
    ApplicationErrorCode,
)

__all__ = [
    "ApplicationError",
    "ApplicationErrorCode",
]

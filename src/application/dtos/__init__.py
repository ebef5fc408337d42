"""Data Transfer Objects (DTOs) for application layer.

DTOs are response/result dataclasses returned by command and query handlers.
They transfer data from the application layer to the presentation layer.

Handlers for resources without secrets return domain entities directly;
members go through MemberResult so the password hash never leaves the
application layer.

Usage:
    from src.application.dtos import AuthorizedResult, MemberResult
"""

from src.application.dtos.member_dtos import AuthorizedResult, MemberResult

__all__ = [
    "AuthorizedResult",
    "MemberResult",
]

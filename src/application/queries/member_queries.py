"""Member directory queries (CQRS read operations).

Queries NEVER change state and do NOT emit events.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import MemberFilter, PageRequest


@dataclass(frozen=True, kw_only=True)
class GetMember:
    """Get one active member by ID."""

    member_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListMembers:
    """Search the member directory.

    Attributes:
        criteria: Role, name, email and creation date filters.
        page: Requested slice and ordering.

    Example:
        >>> query = ListMembers(
        ...     criteria=MemberFilter(role=MemberRole.QA),
        ...     page=PageRequest(page=1, limit=20),
        ... )
    """

    criteria: MemberFilter
    page: PageRequest

"""MemberRepository protocol for member persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Member
from src.domain.value_objects import MemberFilter, Page, PageRequest


class MemberRepository(Protocol):
    """Member repository protocol (port).

    Methods:
        find_by_id: Retrieve an active member by ID
        find_by_email: Retrieve a member by email (including soft-deleted)
        save: Create new member
        update: Persist changes to an existing member
        search: Filtered, paginated member directory
    """

    async def find_by_id(self, member_id: UUID) -> Member | None:
        """Find an active (not soft-deleted) member by ID."""
        ...

    async def find_by_email(self, email: str) -> Member | None:
        """Find a member by email, soft-deleted rows included.

        Soft-deleted rows still hold their email, so join must see them to
        report the conflict instead of hitting the unique constraint.
        """
        ...

    async def save(self, member: Member) -> None:
        """Create a new member."""
        ...

    async def update(self, member: Member) -> None:
        """Update an existing member (including soft delete)."""
        ...

    async def search(
        self, criteria: MemberFilter, page: PageRequest
    ) -> Page[Member]:
        """Return one page of active members matching criteria."""
        ...

"""Catalog commands shared by roles, task statuses and priorities.

Which catalog a command targets is decided by the handler it is sent to.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class CreateCatalogEntry:
    """Add a code/name row to a catalog (managers only).

    Example:
        >>> command = CreateCatalogEntry(
        ...     actor_role=MemberRole.PM,
        ...     code="in_progress",
        ...     name="In Progress",
        ... )
    """

    actor_role: MemberRole
    code: str
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateCatalogEntry:
    """Change a catalog row (managers only). None leaves a field unchanged."""

    actor_role: MemberRole
    entry_id: UUID
    code: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteCatalogEntry:
    """Hard delete a catalog row that nothing references (managers only)."""

    actor_role: MemberRole
    entry_id: UUID

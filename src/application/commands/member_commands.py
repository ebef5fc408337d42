"""Member directory commands.

actor_id/actor_role identify the authenticated caller; handlers use them
for the manager and self-service rules.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class CreateMember:
    """Create a member of any role (managers only)."""

    actor_id: UUID
    actor_role: MemberRole
    email: str
    password: str
    name: str
    role: MemberRole


@dataclass(frozen=True, kw_only=True)
class UpdateMember:
    """Update a member's profile.

    The member themself or a manager may update. None leaves a field
    unchanged.

    Attributes:
        actor_id: Caller's member ID.
        actor_role: Caller's role.
        member_id: Member to update.
        name: New display name.
        email: New email address (must stay unique).
        password: New plain text password (will be hashed).
    """

    actor_id: UUID
    actor_role: MemberRole
    member_id: UUID
    name: str | None = None
    email: str | None = None
    password: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteMember:
    """Soft delete a member (managers only, never themselves)."""

    actor_id: UUID
    actor_role: MemberRole
    member_id: UUID

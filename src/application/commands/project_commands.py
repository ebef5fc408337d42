"""Project and project membership commands."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class CreateProject:
    """Create a project owned by the calling manager.

    Attributes:
        actor_id: Caller (becomes owner_id).
        actor_role: Caller's role (must be a manager role).
        code: Unique project code.
        name: Project name.
        description: Optional description.
    """

    actor_id: UUID
    actor_role: MemberRole
    code: str
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateProject:
    """Change a project (owner only). None leaves a field unchanged."""

    actor_id: UUID
    project_id: UUID
    code: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteProject:
    """Soft delete a project (owner only)."""

    actor_id: UUID
    project_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddProjectMember:
    """Add a member to a project (project owner only)."""

    actor_id: UUID
    project_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RemoveProjectMember:
    """Remove a membership from a project (project owner only, hard delete)."""

    actor_id: UUID
    project_id: UUID
    membership_id: UUID

"""Board and board membership commands."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class CreateBoard:
    """Create a board inside a project (managers only; caller becomes owner).

    Attributes:
        actor_id: Caller (becomes owner_id).
        actor_role: Caller's role.
        project_id: Parent project (must exist).
        code: Board code, unique within the project.
        name: Board name.
        description: Optional description.
    """

    actor_id: UUID
    actor_role: MemberRole
    project_id: UUID
    code: str
    name: str
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateBoard:
    """Change a board (board owner only). None leaves a field unchanged."""

    actor_id: UUID
    project_id: UUID
    board_id: UUID
    code: str | None = None
    name: str | None = None
    description: str | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteBoard:
    """Soft delete a board (board owner only)."""

    actor_id: UUID
    project_id: UUID
    board_id: UUID


@dataclass(frozen=True, kw_only=True)
class AddBoardMember:
    """Add a member to a board (board owner only)."""

    actor_id: UUID
    board_id: UUID
    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class RemoveBoardMember:
    """Soft delete a board membership (board owner only)."""

    actor_id: UUID
    board_id: UUID
    membership_id: UUID

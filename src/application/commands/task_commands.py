"""Task commands (CQRS write operations).

Pattern:
- Commands are data containers (no logic)
- Handlers check references, ownership and roles
- None in an update command leaves the field unchanged
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class CreateTask:
    """Create a task; the caller becomes its creator.

    Attributes:
        actor_id: Caller (becomes creator_id).
        status_id: Initial status (must exist).
        priority_id: Priority (must exist).
        title: Short title.
        description: Optional body.
        due_date: Optional due date.
        project_id: Optional project (must exist when given).
        board_id: Optional board (must exist when given).

    Example:
        >>> command = CreateTask(
        ...     actor_id=member_id,
        ...     status_id=todo.id,
        ...     priority_id=high.id,
        ...     title="Write release notes",
        ... )
    """

    actor_id: UUID
    status_id: UUID
    priority_id: UUID
    title: str
    description: str | None = None
    due_date: datetime | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateTask:
    """Change a task (creator or manager)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID
    status_id: UUID | None = None
    priority_id: UUID | None = None
    title: str | None = None
    description: str | None = None
    due_date: datetime | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteTask:
    """Soft delete a task (creator or manager)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID

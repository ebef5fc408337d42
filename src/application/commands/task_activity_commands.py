"""Commands for assignments, comments and status changes on a task.

Every command names the parent task_id; a child record addressed under a
different task is reported as not found.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class AssignTask:
    """Assign a member to a task (manager or task creator)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID
    assignee_id: UUID


@dataclass(frozen=True, kw_only=True)
class UnassignTask:
    """Remove an assignment (manager or task creator, hard delete)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID
    assignment_id: UUID


@dataclass(frozen=True, kw_only=True)
class CreateComment:
    """Comment on a task (any authenticated member)."""

    actor_id: UUID
    task_id: UUID
    comment_body: str


@dataclass(frozen=True, kw_only=True)
class UpdateComment:
    """Edit a comment (commenter only)."""

    actor_id: UUID
    task_id: UUID
    comment_id: UUID
    comment_body: str


@dataclass(frozen=True, kw_only=True)
class DeleteComment:
    """Soft delete a comment (commenter only)."""

    actor_id: UUID
    task_id: UUID
    comment_id: UUID


@dataclass(frozen=True, kw_only=True)
class RecordStatusChange:
    """Move a task to a new status and record the transition.

    Attributes:
        actor_id: Caller (becomes changed_by_id).
        task_id: Task to move.
        new_status_id: Target status (must exist).
        comment: Optional note.
        changed_at: When the change happened (defaults to now).
    """

    actor_id: UUID
    task_id: UUID
    new_status_id: UUID
    comment: str | None = None
    changed_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateStatusChange:
    """Correct a recorded status change (its author or a manager)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID
    status_change_id: UUID
    new_status_id: UUID | None = None
    comment: str | None = None
    changed_at: datetime | None = None


@dataclass(frozen=True, kw_only=True)
class DeleteStatusChange:
    """Delete a recorded status change (its author or a manager, hard delete)."""

    actor_id: UUID
    actor_role: MemberRole
    task_id: UUID
    status_change_id: UUID

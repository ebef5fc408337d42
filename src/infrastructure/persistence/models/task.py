"""Task model and the activity tables attached to a task.

Tables:
    tasks: Units of work (soft delete)
    task_assignments: Member assigned to a task (hard delete)
    task_comments: Discussion on a task (soft delete)
    task_status_changes: Status history (hard delete)
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import (
    BaseMutableModel,
    BaseSoftDeleteModel,
    UTCDateTime,
)


class Task(BaseSoftDeleteModel):
    """Task tracked on a board.

    Foreign Keys:
        - status_id: References task_statuses(id) ON DELETE RESTRICT
        - priority_id: References priorities(id) ON DELETE RESTRICT
        - creator_id: References members(id)
        - project_id: References projects(id) (nullable)
        - board_id: References boards(id) (nullable)
    """

    __tablename__ = "tasks"

    status_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("task_statuses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    priority_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("priorities.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    creator_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id"),
        nullable=False,
        index=True,
    )

    project_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("projects.id"),
        nullable=True,
        index=True,
    )

    board_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("boards.id"),
        nullable=True,
        index=True,
    )

    title: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    due_date: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title!r})>"


class TaskAssignment(BaseMutableModel):
    """Assignment of a member to a task; one row per (task, assignee)."""

    __tablename__ = "task_assignments"

    task_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    assignee_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    assigned_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
    )

    __table_args__ = (
        UniqueConstraint("task_id", "assignee_id", name="uq_task_assignments_task_assignee"),
    )


class TaskComment(BaseSoftDeleteModel):
    """Comment on a task."""

    __tablename__ = "task_comments"

    task_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    commenter_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id"),
        nullable=False,
        index=True,
    )

    comment_body: Mapped[str] = mapped_column(Text, nullable=False)


class TaskStatusChange(BaseMutableModel):
    """One transition of a task to a new status."""

    __tablename__ = "task_status_changes"

    task_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    new_status_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("task_statuses.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    changed_by_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id"),
        nullable=False,
    )

    changed_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        index=True,
    )

    comment: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

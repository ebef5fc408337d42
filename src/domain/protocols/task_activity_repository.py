"""Repository protocols for activity attached to a task.

Covers assignments, comments and status changes.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities import TaskAssignment, TaskComment, TaskStatusChange
from src.domain.value_objects import (
    AssignmentFilter,
    CommentFilter,
    Page,
    PageRequest,
    StatusChangeFilter,
)


class TaskAssignmentRepository(Protocol):
    """Task assignment repository protocol (port)."""

    async def find_by_id(self, assignment_id: UUID) -> TaskAssignment | None:
        """Find an assignment by ID."""
        ...

    async def find_by_task_and_assignee(
        self, task_id: UUID, assignee_id: UUID
    ) -> TaskAssignment | None:
        """Find the assignment of assignee_id to task_id."""
        ...

    async def save(self, assignment: TaskAssignment) -> None:
        """Create a new assignment."""
        ...

    async def delete(self, assignment_id: UUID) -> None:
        """Hard-delete an assignment."""
        ...

    async def search(
        self, criteria: AssignmentFilter, page: PageRequest
    ) -> Page[TaskAssignment]:
        """Return one page of assignments for a task."""
        ...


class TaskCommentRepository(Protocol):
    """Task comment repository protocol (port).

    Lookups never return soft-deleted comments.
    """

    async def find_by_id(self, comment_id: UUID) -> TaskComment | None:
        """Find an active comment by ID."""
        ...

    async def save(self, comment: TaskComment) -> None:
        """Create a new comment."""
        ...

    async def update(self, comment: TaskComment) -> None:
        """Update a comment (including soft delete)."""
        ...

    async def search(
        self, criteria: CommentFilter, page: PageRequest
    ) -> Page[TaskComment]:
        """Return one page of active comments for a task."""
        ...


class TaskStatusChangeRepository(Protocol):
    """Task status change repository protocol (port)."""

    async def find_by_id(self, status_change_id: UUID) -> TaskStatusChange | None:
        """Find a status change by ID."""
        ...

    async def find_latest(self, task_id: UUID) -> TaskStatusChange | None:
        """Return the task's most recent change by changed_at, if any."""
        ...

    async def save(self, status_change: TaskStatusChange) -> None:
        """Create a new status change record."""
        ...

    async def update(self, status_change: TaskStatusChange) -> None:
        """Update a status change record."""
        ...

    async def delete(self, status_change_id: UUID) -> None:
        """Hard-delete a status change record."""
        ...

    async def search(
        self, criteria: StatusChangeFilter, page: PageRequest
    ) -> Page[TaskStatusChange]:
        """Return one page of status changes for a task."""
        ...

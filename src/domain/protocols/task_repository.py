"""Task repository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Task, TaskSummary
from src.domain.value_objects import Page, PageRequest, TaskFilter


class TaskRepository(Protocol):
    """Task repository protocol (port).

    Lookups never return soft-deleted tasks. search() returns summaries
    joined with status and priority names.
    """

    async def find_by_id(self, task_id: UUID) -> Task | None:
        """Find an active task by ID."""
        ...

    async def save(self, task: Task) -> None:
        """Create a new task."""
        ...

    async def update(self, task: Task) -> None:
        """Update an existing task (including soft delete)."""
        ...

    async def search(
        self, criteria: TaskFilter, page: PageRequest
    ) -> Page[TaskSummary]:
        """Return one page of active task summaries matching criteria."""
        ...

"""Task and task activity queries.

Child records (assignments, comments, status changes) are always addressed
under their task; the task must exist and not be soft-deleted.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import (
    AssignmentFilter,
    CommentFilter,
    PageRequest,
    StatusChangeFilter,
    TaskFilter,
)


@dataclass(frozen=True, kw_only=True)
class GetTask:
    """Get one active task."""

    task_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListTasks:
    """Search tasks; results carry status and priority names.

    Example:
        >>> query = ListTasks(
        ...     criteria=TaskFilter(board_id=board_id, search="release"),
        ...     page=PageRequest.build(
        ...         page=1, limit=20, sort="-due_date",
        ...         allowed_sort_fields=TASK_SORT_FIELDS,
        ...     ),
        ... )
    """

    criteria: TaskFilter
    page: PageRequest


@dataclass(frozen=True, kw_only=True)
class GetAssignment:
    task_id: UUID
    assignment_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListAssignments:
    criteria: AssignmentFilter
    page: PageRequest


@dataclass(frozen=True, kw_only=True)
class GetComment:
    task_id: UUID
    comment_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListComments:
    criteria: CommentFilter
    page: PageRequest


@dataclass(frozen=True, kw_only=True)
class GetStatusChange:
    task_id: UUID
    status_change_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListStatusChanges:
    criteria: StatusChangeFilter
    page: PageRequest

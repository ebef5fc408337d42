"""Task and task activity query handlers.

Assignments, comments and status changes are read under their task. The
task must be active, and a child row of another task is reported missing.
"""

from src.application.commands.handlers.task_handlers import load_task
from src.application.queries.task_queries import (
    GetAssignment,
    GetComment,
    GetStatusChange,
    GetTask,
    ListAssignments,
    ListComments,
    ListStatusChanges,
    ListTasks,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import (
    Task,
    TaskAssignment,
    TaskComment,
    TaskStatusChange,
    TaskSummary,
)
from src.domain.errors import not_found
from src.domain.protocols import (
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskRepository,
    TaskStatusChangeRepository,
)
from src.domain.value_objects import Page


class GetTaskHandler:
    def __init__(self, task_repo: TaskRepository) -> None:
        self._tasks = task_repo

    async def handle(self, query: GetTask) -> Result[Task, DomainError]:
        return await load_task(self._tasks, query.task_id)


class ListTasksHandler:
    """List task summaries (status and priority names included)."""

    def __init__(self, task_repo: TaskRepository) -> None:
        self._tasks = task_repo

    async def handle(self, query: ListTasks) -> Result[Page[TaskSummary], DomainError]:
        return Success(value=await self._tasks.search(query.criteria, query.page))


class GetAssignmentHandler:
    def __init__(
        self, task_repo: TaskRepository, assignment_repo: TaskAssignmentRepository
    ) -> None:
        self._tasks = task_repo
        self._assignments = assignment_repo

    async def handle(self, query: GetAssignment) -> Result[TaskAssignment, DomainError]:
        loaded = await load_task(self._tasks, query.task_id)
        if isinstance(loaded, Failure):
            return loaded

        assignment = await self._assignments.find_by_id(query.assignment_id)
        if assignment is None or assignment.task_id != query.task_id:
            return Failure(
                error=not_found(
                    ErrorCode.ASSIGNMENT_NOT_FOUND, "Assignment", query.assignment_id
                )
            )
        return Success(value=assignment)


class ListAssignmentsHandler:
    def __init__(
        self, task_repo: TaskRepository, assignment_repo: TaskAssignmentRepository
    ) -> None:
        self._tasks = task_repo
        self._assignments = assignment_repo

    async def handle(
        self, query: ListAssignments
    ) -> Result[Page[TaskAssignment], DomainError]:
        loaded = await load_task(self._tasks, query.criteria.task_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(
            value=await self._assignments.search(query.criteria, query.page)
        )


class GetCommentHandler:
    def __init__(
        self, task_repo: TaskRepository, comment_repo: TaskCommentRepository
    ) -> None:
        self._tasks = task_repo
        self._comments = comment_repo

    async def handle(self, query: GetComment) -> Result[TaskComment, DomainError]:
        loaded = await load_task(self._tasks, query.task_id)
        if isinstance(loaded, Failure):
            return loaded

        comment = await self._comments.find_by_id(query.comment_id)
        if comment is None or comment.task_id != query.task_id:
            return Failure(
                error=not_found(ErrorCode.COMMENT_NOT_FOUND, "Comment", query.comment_id)
            )
        return Success(value=comment)


class ListCommentsHandler:
    def __init__(
        self, task_repo: TaskRepository, comment_repo: TaskCommentRepository
    ) -> None:
        self._tasks = task_repo
        self._comments = comment_repo

    async def handle(
        self, query: ListComments
    ) -> Result[Page[TaskComment], DomainError]:
        loaded = await load_task(self._tasks, query.criteria.task_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(value=await self._comments.search(query.criteria, query.page))


class GetStatusChangeHandler:
    def __init__(
        self,
        task_repo: TaskRepository,
        status_change_repo: TaskStatusChangeRepository,
    ) -> None:
        self._tasks = task_repo
        self._status_changes = status_change_repo

    async def handle(
        self, query: GetStatusChange
    ) -> Result[TaskStatusChange, DomainError]:
        loaded = await load_task(self._tasks, query.task_id)
        if isinstance(loaded, Failure):
            return loaded

        status_change = await self._status_changes.find_by_id(query.status_change_id)
        if status_change is None or status_change.task_id != query.task_id:
            return Failure(
                error=not_found(
                    ErrorCode.STATUS_CHANGE_NOT_FOUND,
                    "Status change",
                    query.status_change_id,
                )
            )
        return Success(value=status_change)


class ListStatusChangesHandler:
    def __init__(
        self,
        task_repo: TaskRepository,
        status_change_repo: TaskStatusChangeRepository,
    ) -> None:
        self._tasks = task_repo
        self._status_changes = status_change_repo

    async def handle(
        self, query: ListStatusChanges
    ) -> Result[Page[TaskStatusChange], DomainError]:
        loaded = await load_task(self._tasks, query.criteria.task_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(
            value=await self._status_changes.search(query.criteria, query.page)
        )

"""Command handlers for activity on a task.

Rules:
- Assignments: the task creator or a manager assigns and unassigns; a
  member is assigned to a task at most once; removal is a hard delete
- Comments: any member comments; only the commenter edits or deletes
  (soft delete)
- Status changes: any member records one, which also moves the task's
  status; the author or a manager edits or deletes (hard delete); editing
  the newest change moves the task along with it

Assignments, comments and status changes raise notifications through
TaskNotifier inside the same unit of work.
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.handlers.task_handlers import (
    can_manage_task,
    load_task,
)
from src.application.commands.task_activity_commands import (
    AssignTask,
    CreateComment,
    DeleteComment,
    DeleteStatusChange,
    RecordStatusChange,
    UnassignTask,
    UpdateComment,
    UpdateStatusChange,
)
from src.application.services import TaskNotifier
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import (
    Task,
    TaskAssignment,
    TaskComment,
    TaskStatus,
    TaskStatusChange,
)
from src.domain.errors import RecordConflictError, already_exists, not_found, not_owner
from src.domain.protocols import (
    CatalogRepository,
    LoggerProtocol,
    MemberRepository,
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskRepository,
    TaskStatusChangeRepository,
)


class AssignTaskHandler:
    """Assign a member to a task and notify them."""

    def __init__(
        self,
        task_repo: TaskRepository,
        assignment_repo: TaskAssignmentRepository,
        member_repo: MemberRepository,
        notifier: TaskNotifier,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._assignments = assignment_repo
        self._members = member_repo
        self._notifier = notifier
        self._logger = logger

    async def handle(self, cmd: AssignTask) -> Result[TaskAssignment, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        if not can_manage_task(task, cmd.actor_id, cmd.actor_role):
            return Failure(error=not_owner("task"))

        if await self._members.find_by_id(cmd.assignee_id) is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", cmd.assignee_id)
            )

        existing = await self._assignments.find_by_task_and_assignee(
            task.id, cmd.assignee_id
        )
        if existing is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.ASSIGNMENT_ALREADY_EXISTS,
                    "Assignment",
                    "assignee_id",
                    str(cmd.assignee_id),
                )
            )

        now = datetime.now(UTC)
        assignment = TaskAssignment(
            id=uuid7(),
            task_id=task.id,
            assignee_id=cmd.assignee_id,
            assigned_at=now,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._assignments.save(assignment)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        await self._notifier.assigned(task, assignee_id=cmd.assignee_id, now=now)

        self._logger.info(
            "Task assigned",
            task_id=str(task.id),
            assignee_id=str(cmd.assignee_id),
            assigned_by=str(cmd.actor_id),
        )
        return Success(value=assignment)


class UnassignTaskHandler:
    """Remove an assignment (task creator or manager)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        assignment_repo: TaskAssignmentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._assignments = assignment_repo
        self._logger = logger

    async def handle(self, cmd: UnassignTask) -> Result[None, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        assignment = await self._assignments.find_by_id(cmd.assignment_id)
        if assignment is None or assignment.task_id != task.id:
            return Failure(
                error=not_found(
                    ErrorCode.ASSIGNMENT_NOT_FOUND, "Assignment", cmd.assignment_id
                )
            )

        if not can_manage_task(task, cmd.actor_id, cmd.actor_role):
            return Failure(error=not_owner("task"))

        await self._assignments.delete(assignment.id)

        self._logger.info(
            "Task unassigned",
            task_id=str(task.id),
            assignee_id=str(assignment.assignee_id),
        )
        return Success(value=None)


async def _load_comment(
    comments: TaskCommentRepository, task_id: UUID, comment_id: UUID, actor_id: UUID
) -> Result[TaskComment, DomainError]:
    comment = await comments.find_by_id(comment_id)
    if comment is None or comment.task_id != task_id:
        return Failure(
            error=not_found(ErrorCode.COMMENT_NOT_FOUND, "Comment", comment_id)
        )
    if comment.commenter_id != actor_id:
        return Failure(error=not_owner("comment"))
    return Success(value=comment)


class CreateCommentHandler:
    """Add a comment to a task and notify the task creator."""

    def __init__(
        self,
        task_repo: TaskRepository,
        comment_repo: TaskCommentRepository,
        notifier: TaskNotifier,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._comments = comment_repo
        self._notifier = notifier
        self._logger = logger

    async def handle(self, cmd: CreateComment) -> Result[TaskComment, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        now = datetime.now(UTC)
        comment = TaskComment(
            id=uuid7(),
            task_id=task.id,
            commenter_id=cmd.actor_id,
            comment_body=cmd.comment_body,
            created_at=now,
            updated_at=now,
        )
        await self._comments.save(comment)
        await self._notifier.commented(task, commenter_id=cmd.actor_id, now=now)

        self._logger.info(
            "Comment created", task_id=str(task.id), comment_id=str(comment.id)
        )
        return Success(value=comment)


class UpdateCommentHandler:
    """Edit a comment (commenter only)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        comment_repo: TaskCommentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._comments = comment_repo
        self._logger = logger

    async def handle(self, cmd: UpdateComment) -> Result[TaskComment, DomainError]:
        loaded_task = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded_task, Failure):
            return loaded_task

        loaded = await _load_comment(
            self._comments, cmd.task_id, cmd.comment_id, cmd.actor_id
        )
        if isinstance(loaded, Failure):
            return loaded

        updated = replace(
            loaded.value,
            comment_body=cmd.comment_body,
            updated_at=datetime.now(UTC),
        )
        await self._comments.update(updated)

        self._logger.info("Comment updated", comment_id=str(updated.id))
        return Success(value=updated)


class DeleteCommentHandler:
    """Soft delete a comment (commenter only)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        comment_repo: TaskCommentRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._comments = comment_repo
        self._logger = logger

    async def handle(self, cmd: DeleteComment) -> Result[None, DomainError]:
        loaded_task = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded_task, Failure):
            return loaded_task

        loaded = await _load_comment(
            self._comments, cmd.task_id, cmd.comment_id, cmd.actor_id
        )
        if isinstance(loaded, Failure):
            return loaded

        now = datetime.now(UTC)
        await self._comments.update(replace(loaded.value, deleted_at=now, updated_at=now))

        self._logger.info("Comment deleted", comment_id=str(cmd.comment_id))
        return Success(value=None)


async def _load_status_change(
    status_changes: TaskStatusChangeRepository,
    task_id: UUID,
    status_change_id: UUID,
) -> Result[TaskStatusChange, DomainError]:
    status_change = await status_changes.find_by_id(status_change_id)
    if status_change is None or status_change.task_id != task_id:
        return Failure(
            error=not_found(
                ErrorCode.STATUS_CHANGE_NOT_FOUND, "Status change", status_change_id
            )
        )
    return Success(value=status_change)


class RecordStatusChangeHandler:
    """Move a task to a new status and keep the history row."""

    def __init__(
        self,
        task_repo: TaskRepository,
        status_repo: CatalogRepository[TaskStatus],
        status_change_repo: TaskStatusChangeRepository,
        notifier: TaskNotifier,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._statuses = status_repo
        self._status_changes = status_change_repo
        self._notifier = notifier
        self._logger = logger

    async def handle(
        self, cmd: RecordStatusChange
    ) -> Result[TaskStatusChange, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        status = await self._statuses.find_by_id(cmd.new_status_id)
        if status is None:
            return Failure(
                error=not_found(
                    ErrorCode.TASK_STATUS_NOT_FOUND, "Task status", cmd.new_status_id
                )
            )

        now = datetime.now(UTC)
        status_change = TaskStatusChange(
            id=uuid7(),
            task_id=task.id,
            new_status_id=status.id,
            changed_by_id=cmd.actor_id,
            changed_at=cmd.changed_at or now,
            comment=cmd.comment,
            created_at=now,
            updated_at=now,
        )
        await self._status_changes.save(status_change)
        await self._tasks.update(replace(task, status_id=status.id, updated_at=now))
        await self._notifier.status_changed(
            task, changed_by_id=cmd.actor_id, status_name=status.name, now=now
        )

        self._logger.info(
            "Task status changed",
            task_id=str(task.id),
            new_status=status.code,
            changed_by=str(cmd.actor_id),
        )
        return Success(value=status_change)


class UpdateStatusChangeHandler:
    """Edit a status change record (author or manager)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        status_repo: CatalogRepository[TaskStatus],
        status_change_repo: TaskStatusChangeRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._statuses = status_repo
        self._status_changes = status_change_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateStatusChange
    ) -> Result[TaskStatusChange, DomainError]:
        loaded_task = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded_task, Failure):
            return loaded_task

        loaded = await _load_status_change(
            self._status_changes, cmd.task_id, cmd.status_change_id
        )
        if isinstance(loaded, Failure):
            return loaded
        status_change = loaded.value

        if (
            status_change.changed_by_id != cmd.actor_id
            and not cmd.actor_role.is_manager
        ):
            return Failure(error=not_owner("status change"))

        if (
            cmd.new_status_id is not None
            and await self._statuses.find_by_id(cmd.new_status_id) is None
        ):
            return Failure(
                error=not_found(
                    ErrorCode.TASK_STATUS_NOT_FOUND, "Task status", cmd.new_status_id
                )
            )

        updated = replace(
            status_change,
            new_status_id=cmd.new_status_id or status_change.new_status_id,
            comment=cmd.comment if cmd.comment is not None else status_change.comment,
            changed_at=cmd.changed_at or status_change.changed_at,
            updated_at=datetime.now(UTC),
        )
        await self._status_changes.update(updated)
        if cmd.new_status_id is not None or cmd.changed_at is not None:
            await self._sync_task_status(loaded_task.value, updated)

        self._logger.info("Status change updated", status_change_id=str(updated.id))
        return Success(value=updated)

    async def _sync_task_status(
        self, task: Task, edited: TaskStatusChange
    ) -> None:
        """Keep the task on the status of its newest change."""
        latest = await self._status_changes.find_latest(task.id)
        if latest is None or latest.id != edited.id:
            return
        if task.status_id == edited.new_status_id:
            return
        await self._tasks.update(
            replace(task, status_id=edited.new_status_id, updated_at=edited.updated_at)
        )
        self._logger.info(
            "Task status realigned",
            task_id=str(task.id),
            status_change_id=str(edited.id),
        )


class DeleteStatusChangeHandler:
    """Remove a status change record (author or manager)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        status_change_repo: TaskStatusChangeRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._status_changes = status_change_repo
        self._logger = logger

    async def handle(self, cmd: DeleteStatusChange) -> Result[None, DomainError]:
        loaded_task = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded_task, Failure):
            return loaded_task

        loaded = await _load_status_change(
            self._status_changes, cmd.task_id, cmd.status_change_id
        )
        if isinstance(loaded, Failure):
            return loaded
        status_change = loaded.value

        if (
            status_change.changed_by_id != cmd.actor_id
            and not cmd.actor_role.is_manager
        ):
            return Failure(error=not_owner("status change"))

        await self._status_changes.delete(status_change.id)

        self._logger.info(
            "Status change deleted", status_change_id=str(status_change.id)
        )
        return Success(value=None)

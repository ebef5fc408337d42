"""Task command handlers.

Rules:
- Any authenticated member creates tasks; the caller becomes the creator
- Status and priority must exist; project and board must exist when given
- A board given together with a project must belong to that project
- The creator or a manager updates and deletes (soft delete)
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.task_commands import CreateTask, DeleteTask, UpdateTask
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Priority, Task, TaskStatus
from src.domain.enums import MemberRole
from src.domain.errors import RecordConflictError, not_found, not_owner
from src.domain.protocols import (
    BoardRepository,
    CatalogRepository,
    LoggerProtocol,
    ProjectRepository,
    TaskRepository,
)


class TaskReferences:
    """Existence checks for the rows a task points at."""

    def __init__(
        self,
        status_repo: CatalogRepository[TaskStatus],
        priority_repo: CatalogRepository[Priority],
        project_repo: ProjectRepository,
        board_repo: BoardRepository,
    ) -> None:
        self._statuses = status_repo
        self._priorities = priority_repo
        self._projects = project_repo
        self._boards = board_repo

    async def check(
        self,
        *,
        status_id: UUID | None = None,
        priority_id: UUID | None = None,
        project_id: UUID | None = None,
        board_id: UUID | None = None,
    ) -> DomainError | None:
        """Return a NotFoundError for the first missing reference, else None."""
        if status_id is not None and await self._statuses.find_by_id(status_id) is None:
            return not_found(ErrorCode.TASK_STATUS_NOT_FOUND, "Task status", status_id)
        if (
            priority_id is not None
            and await self._priorities.find_by_id(priority_id) is None
        ):
            return not_found(ErrorCode.PRIORITY_NOT_FOUND, "Priority", priority_id)
        if project_id is not None and await self._projects.find_by_id(project_id) is None:
            return not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        if board_id is not None:
            return await self.check_board(board_id, project_id)
        return None

    async def check_board(
        self, board_id: UUID, project_id: UUID | None
    ) -> DomainError | None:
        """Board must exist and, when the task has a project, belong to it."""
        board = await self._boards.find_by_id(board_id)
        if board is None or (
            project_id is not None and board.project_id != project_id
        ):
            return not_found(ErrorCode.BOARD_NOT_FOUND, "Board", board_id)
        return None


async def load_task(tasks: TaskRepository, task_id: UUID) -> Result[Task, DomainError]:
    """Load an active task or report it missing."""
    task = await tasks.find_by_id(task_id)
    if task is None:
        return Failure(error=not_found(ErrorCode.TASK_NOT_FOUND, "Task", task_id))
    return Success(value=task)


def can_manage_task(task: Task, actor_id: UUID, actor_role: MemberRole) -> bool:
    """Creator or any manager."""
    return task.is_created_by(actor_id) or actor_role.is_manager


class CreateTaskHandler:
    """Create a task after checking everything it references exists."""

    def __init__(
        self,
        task_repo: TaskRepository,
        references: TaskReferences,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._references = references
        self._logger = logger

    async def handle(self, cmd: CreateTask) -> Result[Task, DomainError]:
        missing = await self._references.check(
            status_id=cmd.status_id,
            priority_id=cmd.priority_id,
            project_id=cmd.project_id,
            board_id=cmd.board_id,
        )
        if missing is not None:
            return Failure(error=missing)

        now = datetime.now(UTC)
        task = Task(
            id=uuid7(),
            status_id=cmd.status_id,
            priority_id=cmd.priority_id,
            creator_id=cmd.actor_id,
            project_id=cmd.project_id,
            board_id=cmd.board_id,
            title=cmd.title,
            description=cmd.description,
            due_date=cmd.due_date,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._tasks.save(task)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Task created", task_id=str(task.id), creator_id=str(cmd.actor_id)
        )
        return Success(value=task)


class UpdateTaskHandler:
    """Update a task (creator or manager)."""

    def __init__(
        self,
        task_repo: TaskRepository,
        references: TaskReferences,
        logger: LoggerProtocol,
    ) -> None:
        self._tasks = task_repo
        self._references = references
        self._logger = logger

    async def handle(self, cmd: UpdateTask) -> Result[Task, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        if not can_manage_task(task, cmd.actor_id, cmd.actor_role):
            return Failure(error=not_owner("task"))

        missing = await self._references.check(
            status_id=cmd.status_id,
            priority_id=cmd.priority_id,
            project_id=cmd.project_id,
        )
        board_id = cmd.board_id or task.board_id
        if missing is None and board_id is not None and (
            cmd.board_id is not None or cmd.project_id is not None
        ):
            missing = await self._references.check_board(
                board_id, cmd.project_id or task.project_id
            )
        if missing is not None:
            return Failure(error=missing)

        updated = replace(
            task,
            status_id=cmd.status_id or task.status_id,
            priority_id=cmd.priority_id or task.priority_id,
            project_id=cmd.project_id or task.project_id,
            board_id=cmd.board_id or task.board_id,
            title=cmd.title if cmd.title is not None else task.title,
            description=(
                cmd.description if cmd.description is not None else task.description
            ),
            due_date=cmd.due_date if cmd.due_date is not None else task.due_date,
            updated_at=datetime.now(UTC),
        )
        try:
            await self._tasks.update(updated)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Task updated", task_id=str(task.id), updated_by=str(cmd.actor_id)
        )
        return Success(value=updated)


class DeleteTaskHandler:
    """Soft delete a task (creator or manager)."""

    def __init__(self, task_repo: TaskRepository, logger: LoggerProtocol) -> None:
        self._tasks = task_repo
        self._logger = logger

    async def handle(self, cmd: DeleteTask) -> Result[None, DomainError]:
        loaded = await load_task(self._tasks, cmd.task_id)
        if isinstance(loaded, Failure):
            return loaded
        task = loaded.value

        if not can_manage_task(task, cmd.actor_id, cmd.actor_role):
            return Failure(error=not_owner("task"))

        now = datetime.now(UTC)
        await self._tasks.update(replace(task, deleted_at=now, updated_at=now))

        self._logger.info(
            "Task deleted", task_id=str(task.id), deleted_by=str(cmd.actor_id)
        )
        return Success(value=None)

"""Repositories for the activity attached to a task.

Adapters for hexagonal architecture:
    TaskAssignmentRepository: hard delete, unique (task_id, assignee_id)
    TaskCommentRepository: soft delete
    TaskStatusChangeRepository: hard delete
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.domain.entities import TaskAssignment, TaskComment, TaskStatusChange
from src.domain.value_objects import (
    AssignmentFilter,
    CommentFilter,
    Page,
    PageRequest,
    StatusChangeFilter,
)
from src.infrastructure.persistence.models.task import (
    TaskAssignment as TaskAssignmentModel,
    TaskComment as TaskCommentModel,
    TaskStatusChange as TaskStatusChangeModel,
)
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
    within,
)


class TaskAssignmentRepository:
    """SQLAlchemy implementation of TaskAssignmentRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, assignment_id: UUID) -> TaskAssignment | None:
        stmt = select(TaskAssignmentModel).where(TaskAssignmentModel.id == assignment_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def find_by_task_and_assignee(
        self, task_id: UUID, assignee_id: UUID
    ) -> TaskAssignment | None:
        stmt = select(TaskAssignmentModel).where(
            TaskAssignmentModel.task_id == task_id,
            TaskAssignmentModel.assignee_id == assignee_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def save(self, assignment: TaskAssignment) -> None:
        """Create new assignment.

        Raises:
            RecordConflictError: If the member is already assigned.
        """
        self.session.add(
            TaskAssignmentModel(
                id=assignment.id,
                task_id=assignment.task_id,
                assignee_id=assignment.assignee_id,
                assigned_at=assignment.assigned_at,
                created_at=assignment.created_at,
                updated_at=assignment.updated_at,
            )
        )
        await flush_or_conflict(
            self.session,
            resource_type="TaskAssignment",
            field="assignee_id",
            code=ErrorCode.ASSIGNMENT_ALREADY_EXISTS,
        )

    async def delete(self, assignment_id: UUID) -> None:
        stmt = delete(TaskAssignmentModel).where(TaskAssignmentModel.id == assignment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def search(
        self, criteria: AssignmentFilter, page: PageRequest
    ) -> Page[TaskAssignment]:
        stmt = select(TaskAssignmentModel).where(
            TaskAssignmentModel.task_id == criteria.task_id
        )
        if criteria.assignee_id is not None:
            stmt = stmt.where(TaskAssignmentModel.assignee_id == criteria.assignee_id)

        result, total = await fetch_page(
            self.session, stmt, model=TaskAssignmentModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: TaskAssignmentModel) -> TaskAssignment:
        return TaskAssignment(
            id=model.id,
            task_id=model.task_id,
            assignee_id=model.assignee_id,
            assigned_at=model.assigned_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class TaskCommentRepository:
    """SQLAlchemy implementation of TaskCommentRepository protocol.

    Soft-deleted comments are invisible to every lookup, so deleting twice
    reports "not found".
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, comment_id: UUID) -> TaskComment | None:
        stmt = select(TaskCommentModel).where(
            TaskCommentModel.id == comment_id,
            TaskCommentModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def save(self, comment: TaskComment) -> None:
        self.session.add(
            TaskCommentModel(
                id=comment.id,
                task_id=comment.task_id,
                commenter_id=comment.commenter_id,
                comment_body=comment.comment_body,
                created_at=comment.created_at,
                updated_at=comment.updated_at,
                deleted_at=comment.deleted_at,
            )
        )
        await flush_or_conflict(self.session, resource_type="TaskComment")

    async def update(self, comment: TaskComment) -> None:
        stmt = select(TaskCommentModel).where(TaskCommentModel.id == comment.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.comment_body = comment.comment_body
        model.updated_at = comment.updated_at
        model.deleted_at = comment.deleted_at

        await self.session.flush()

    async def search(
        self, criteria: CommentFilter, page: PageRequest
    ) -> Page[TaskComment]:
        """Comments on one task, with author, text and date range filters."""
        stmt = select(TaskCommentModel).where(
            TaskCommentModel.task_id == criteria.task_id,
            TaskCommentModel.deleted_at.is_(None),
        )
        if criteria.commenter_id is not None:
            stmt = stmt.where(TaskCommentModel.commenter_id == criteria.commenter_id)
        if criteria.comment_body:
            stmt = stmt.where(contains(TaskCommentModel.comment_body, criteria.comment_body))
        stmt = stmt.where(
            *within(
                TaskCommentModel.created_at,
                criteria.created_at_from,
                criteria.created_at_to,
            ),
            *within(
                TaskCommentModel.updated_at,
                criteria.updated_at_from,
                criteria.updated_at_to,
            ),
        )

        result, total = await fetch_page(
            self.session, stmt, model=TaskCommentModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: TaskCommentModel) -> TaskComment:
        return TaskComment(
            id=model.id,
            task_id=model.task_id,
            commenter_id=model.commenter_id,
            comment_body=model.comment_body,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )


class TaskStatusChangeRepository:
    """SQLAlchemy implementation of TaskStatusChangeRepository protocol."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, status_change_id: UUID) -> TaskStatusChange | None:
        stmt = select(TaskStatusChangeModel).where(
            TaskStatusChangeModel.id == status_change_id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def find_latest(self, task_id: UUID) -> TaskStatusChange | None:
        stmt = (
            select(TaskStatusChangeModel)
            .where(TaskStatusChangeModel.task_id == task_id)
            .order_by(
                TaskStatusChangeModel.changed_at.desc(),
                TaskStatusChangeModel.created_at.desc(),
                TaskStatusChangeModel.id.desc(),
            )
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def save(self, status_change: TaskStatusChange) -> None:
        self.session.add(
            TaskStatusChangeModel(
                id=status_change.id,
                task_id=status_change.task_id,
                new_status_id=status_change.new_status_id,
                changed_by_id=status_change.changed_by_id,
                changed_at=status_change.changed_at,
                comment=status_change.comment,
                created_at=status_change.created_at,
                updated_at=status_change.updated_at,
            )
        )
        await flush_or_conflict(self.session, resource_type="TaskStatusChange")

    async def update(self, status_change: TaskStatusChange) -> None:
        stmt = select(TaskStatusChangeModel).where(
            TaskStatusChangeModel.id == status_change.id
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.new_status_id = status_change.new_status_id
        model.changed_at = status_change.changed_at
        model.comment = status_change.comment
        model.updated_at = status_change.updated_at

        await flush_or_conflict(self.session, resource_type="TaskStatusChange")

    async def delete(self, status_change_id: UUID) -> None:
        stmt = delete(TaskStatusChangeModel).where(
            TaskStatusChangeModel.id == status_change_id
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def search(
        self, criteria: StatusChangeFilter, page: PageRequest
    ) -> Page[TaskStatusChange]:
        stmt = select(TaskStatusChangeModel).where(
            TaskStatusChangeModel.task_id == criteria.task_id
        )
        if criteria.new_status_id is not None:
            stmt = stmt.where(TaskStatusChangeModel.new_status_id == criteria.new_status_id)
        stmt = stmt.where(
            *within(
                TaskStatusChangeModel.changed_at,
                criteria.changed_at_from,
                criteria.changed_at_to,
            )
        )

        result, total = await fetch_page(
            self.session, stmt, model=TaskStatusChangeModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: TaskStatusChangeModel) -> TaskStatusChange:
        return TaskStatusChange(
            id=model.id,
            task_id=model.task_id,
            new_status_id=model.new_status_id,
            changed_by_id=model.changed_by_id,
            changed_at=model.changed_at,
            comment=model.comment,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

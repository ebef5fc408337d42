"""TaskRepository - SQLAlchemy implementation of TaskRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Task entities and database TaskModel. Index queries
outer-join the status and priority catalogs to return TaskSummary rows.
"""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Task, TaskSummary
from src.domain.value_objects import Page, PageRequest, TaskFilter
from src.infrastructure.persistence.models.catalog import (
    Priority as PriorityModel,
    TaskStatus as TaskStatusModel,
)
from src.infrastructure.persistence.models.task import Task as TaskModel
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
)


class TaskRepository:
    """SQLAlchemy implementation of TaskRepository protocol.

    This class does NOT inherit from the protocol (Protocol uses structural
    typing).

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = TaskRepository(session)
        ...     page = await repo.search(TaskFilter(board_id=board_id), PageRequest())
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, task_id: UUID) -> Task | None:
        """Find an active task by ID.

        Args:
            task_id: Task identifier.

        Returns:
            Task entity if found and not soft-deleted, None otherwise.
        """
        stmt = select(TaskModel).where(
            TaskModel.id == task_id,
            TaskModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, task: Task) -> None:
        """Create new task.

        Raises:
            RecordConflictError: If a referenced row vanished before flush.
        """
        self.session.add(self._to_model(task))
        await flush_or_conflict(self.session, resource_type="Task")

    async def update(self, task: Task) -> None:
        """Persist changes to an existing task (including soft delete).

        Raises:
            NoResultFound: If the task row doesn't exist.
        """
        stmt = select(TaskModel).where(TaskModel.id == task.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.status_id = task.status_id
        model.priority_id = task.priority_id
        model.project_id = task.project_id
        model.board_id = task.board_id
        model.title = task.title
        model.description = task.description
        model.due_date = task.due_date
        model.updated_at = task.updated_at
        model.deleted_at = task.deleted_at

        await flush_or_conflict(self.session, resource_type="Task")

    async def search(
        self, criteria: TaskFilter, page: PageRequest
    ) -> Page[TaskSummary]:
        """Filtered, paginated task summaries.

        Args:
            criteria: Foreign key filters and title/description search.
            page: Requested slice and ordering.

        Returns:
            Page of TaskSummary (task plus status and priority names).
        """
        stmt = (
            select(TaskModel, TaskStatusModel.name, PriorityModel.name)
            .outerjoin(TaskStatusModel, TaskStatusModel.id == TaskModel.status_id)
            .outerjoin(PriorityModel, PriorityModel.id == TaskModel.priority_id)
            .where(TaskModel.deleted_at.is_(None))
        )

        if criteria.status_id is not None:
            stmt = stmt.where(TaskModel.status_id == criteria.status_id)
        if criteria.priority_id is not None:
            stmt = stmt.where(TaskModel.priority_id == criteria.priority_id)
        if criteria.creator_id is not None:
            stmt = stmt.where(TaskModel.creator_id == criteria.creator_id)
        if criteria.project_id is not None:
            stmt = stmt.where(TaskModel.project_id == criteria.project_id)
        if criteria.board_id is not None:
            stmt = stmt.where(TaskModel.board_id == criteria.board_id)
        if criteria.search:
            stmt = stmt.where(
                or_(
                    contains(TaskModel.title, criteria.search),
                    contains(TaskModel.description, criteria.search),
                )
            )

        result, total = await fetch_page(self.session, stmt, model=TaskModel, page=page)
        items = [
            TaskSummary(
                task=self._to_domain(model),
                status_name=status_name,
                priority_name=priority_name,
            )
            for model, status_name, priority_name in result.all()
        ]
        return Page(items=items, total=total, page=page.page, limit=page.limit)

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: TaskModel) -> Task:
        return Task(
            id=model.id,
            status_id=model.status_id,
            priority_id=model.priority_id,
            creator_id=model.creator_id,
            project_id=model.project_id,
            board_id=model.board_id,
            title=model.title,
            description=model.description,
            due_date=model.due_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _to_model(self, task: Task) -> TaskModel:
        return TaskModel(
            id=task.id,
            status_id=task.status_id,
            priority_id=task.priority_id,
            creator_id=task.creator_id,
            project_id=task.project_id,
            board_id=task.board_id,
            title=task.title,
            description=task.description,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
            deleted_at=task.deleted_at,
        )

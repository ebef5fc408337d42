"""Catalog repositories for roles, task statuses and priorities.

One generic implementation maps any code/name lookup model to its domain
entity; the three concrete classes only bind the model, the entity and the
task column that references the catalog (if any).
"""

from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy import delete, exists, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.domain.entities import CatalogEntry, Priority, Role, TaskStatus
from src.domain.value_objects import CatalogFilter, Page, PageRequest
from src.infrastructure.persistence.models.catalog import (
    Priority as PriorityModel,
    Role as RoleModel,
    TaskStatus as TaskStatusModel,
)
from src.infrastructure.persistence.models.task import (
    Task as TaskModel,
    TaskStatusChange as TaskStatusChangeModel,
)
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
)

EntryT = TypeVar("EntryT", bound=CatalogEntry)


class SqlCatalogRepository(Generic[EntryT]):
    """SQLAlchemy implementation of CatalogRepository protocol.

    Subclasses set:
        model: Mapped catalog class.
        entity: Domain dataclass to build.
        resource_type: Name used in conflict errors.
    """

    model: type[RoleModel] | type[TaskStatusModel] | type[PriorityModel]
    entity: type[EntryT]
    resource_type: str

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, entry_id: UUID) -> EntryT | None:
        stmt = select(self.model).where(self.model.id == entry_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def find_by_code(self, code: str) -> EntryT | None:
        stmt = select(self.model).where(self.model.code == code)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def save(self, entry: EntryT) -> None:
        """Insert a new row.

        Raises:
            RecordConflictError: If the code is already taken.
        """
        self.session.add(
            self.model(
                id=entry.id,
                code=entry.code,
                name=entry.name,
                description=entry.description,
                created_at=entry.created_at,
                updated_at=entry.updated_at,
            )
        )
        await flush_or_conflict(
            self.session,
            resource_type=self.resource_type,
            field="code",
            code=ErrorCode.CODE_ALREADY_EXISTS,
        )

    async def update(self, entry: EntryT) -> None:
        stmt = select(self.model).where(self.model.id == entry.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.code = entry.code
        model.name = entry.name
        model.description = entry.description
        model.updated_at = entry.updated_at

        await flush_or_conflict(
            self.session,
            resource_type=self.resource_type,
            field="code",
            code=ErrorCode.CODE_ALREADY_EXISTS,
        )

    async def delete(self, entry_id: UUID) -> None:
        """Hard delete a row.

        Raises:
            RecordConflictError: If a foreign key still references the row.
        """
        await self.session.execute(delete(self.model).where(self.model.id == entry_id))
        await flush_or_conflict(
            self.session,
            resource_type=self.resource_type,
            code=ErrorCode.RESOURCE_IN_USE,
        )

    async def is_referenced(self, entry_id: UUID) -> bool:
        """Whether any task row points at this entry. Role rows never are."""
        return False

    async def search(
        self, criteria: CatalogFilter, page: PageRequest
    ) -> Page[EntryT]:
        stmt = select(self.model)
        if criteria.search:
            stmt = stmt.where(
                or_(
                    contains(self.model.code, criteria.search),
                    contains(self.model.name, criteria.search),
                )
            )

        result, total = await fetch_page(self.session, stmt, model=self.model, page=page)
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(
        self, model: RoleModel | TaskStatusModel | PriorityModel
    ) -> EntryT:
        return self.entity(
            id=model.id,
            code=model.code,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )


class RoleRepository(SqlCatalogRepository[Role]):
    """Role catalogue repository."""

    model = RoleModel
    entity = Role
    resource_type = "Role"


class TaskStatusRepository(SqlCatalogRepository[TaskStatus]):
    """Task status catalog repository.

    Statuses are referenced by tasks and by the status change history.
    """

    model = TaskStatusModel
    entity = TaskStatus
    resource_type = "TaskStatus"

    async def is_referenced(self, entry_id: UUID) -> bool:
        stmt = select(
            exists().where(TaskModel.status_id == entry_id)
            | exists().where(TaskStatusChangeModel.new_status_id == entry_id)
        )
        return bool((await self.session.execute(stmt)).scalar())


class PriorityRepository(SqlCatalogRepository[Priority]):
    """Priority catalog repository."""

    model = PriorityModel
    entity = Priority
    resource_type = "Priority"

    async def is_referenced(self, entry_id: UUID) -> bool:
        stmt = select(exists().where(TaskModel.priority_id == entry_id))
        return bool((await self.session.execute(stmt)).scalar())

"""Project and project membership repositories.

Adapter for hexagonal architecture.
Maps between domain Project/ProjectMember entities and their models.
"""

from uuid import UUID

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.domain.entities import Project, ProjectMember
from src.domain.value_objects import (
    Page,
    PageRequest,
    ProjectFilter,
    ProjectMemberFilter,
)
from src.infrastructure.persistence.models.project import (
    Project as ProjectModel,
    ProjectMember as ProjectMemberModel,
)
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
)


class ProjectRepository:
    """SQLAlchemy implementation of ProjectRepository protocol.

    Soft-deleted projects are invisible to every lookup.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find an active project by ID."""
        stmt = select(ProjectModel).where(
            ProjectModel.id == project_id,
            ProjectModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_code(self, code: str) -> Project | None:
        """Find an active project by its code."""
        stmt = select(ProjectModel).where(
            ProjectModel.code == code,
            ProjectModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, project: Project) -> None:
        """Create new project."""
        self.session.add(self._to_model(project))
        await flush_or_conflict(self.session, resource_type="Project")

    async def update(self, project: Project) -> None:
        """Persist changes to an existing project (including soft delete).

        Raises:
            NoResultFound: If the project row doesn't exist.
        """
        stmt = select(ProjectModel).where(ProjectModel.id == project.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.code = project.code
        model.name = project.name
        model.description = project.description
        model.updated_at = project.updated_at
        model.deleted_at = project.deleted_at

        await flush_or_conflict(self.session, resource_type="Project")

    async def search(
        self, criteria: ProjectFilter, page: PageRequest
    ) -> Page[Project]:
        """Filtered, paginated project list."""
        stmt = select(ProjectModel).where(ProjectModel.deleted_at.is_(None))

        if criteria.owner_id is not None:
            stmt = stmt.where(ProjectModel.owner_id == criteria.owner_id)
        if criteria.search:
            stmt = stmt.where(
                or_(
                    contains(ProjectModel.code, criteria.search),
                    contains(ProjectModel.name, criteria.search),
                    contains(ProjectModel.description, criteria.search),
                )
            )

        result, total = await fetch_page(self.session, stmt, model=ProjectModel, page=page)
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: ProjectModel) -> Project:
        return Project(
            id=model.id,
            owner_id=model.owner_id,
            code=model.code,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _to_model(self, project: Project) -> ProjectModel:
        return ProjectModel(
            id=project.id,
            owner_id=project.owner_id,
            code=project.code,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
            deleted_at=project.deleted_at,
        )


class ProjectMemberRepository:
    """SQLAlchemy implementation of ProjectMemberRepository protocol.

    Memberships are hard deleted; (project_id, user_id) is unique.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, membership_id: UUID) -> ProjectMember | None:
        stmt = select(ProjectMemberModel).where(ProjectMemberModel.id == membership_id)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def find_by_project_and_user(
        self, project_id: UUID, user_id: UUID
    ) -> ProjectMember | None:
        stmt = select(ProjectMemberModel).where(
            ProjectMemberModel.project_id == project_id,
            ProjectMemberModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def save(self, membership: ProjectMember) -> None:
        """Create new membership.

        Raises:
            RecordConflictError: If the member already belongs to the project.
        """
        self.session.add(
            ProjectMemberModel(
                id=membership.id,
                project_id=membership.project_id,
                user_id=membership.user_id,
                created_at=membership.created_at,
                updated_at=membership.updated_at,
            )
        )
        await flush_or_conflict(
            self.session,
            resource_type="ProjectMember",
            field="user_id",
            code=ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
        )

    async def delete(self, membership_id: UUID) -> None:
        stmt = delete(ProjectMemberModel).where(ProjectMemberModel.id == membership_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def search(
        self, criteria: ProjectMemberFilter, page: PageRequest
    ) -> Page[ProjectMember]:
        stmt = select(ProjectMemberModel).where(
            ProjectMemberModel.project_id == criteria.project_id
        )
        if criteria.user_id is not None:
            stmt = stmt.where(ProjectMemberModel.user_id == criteria.user_id)

        result, total = await fetch_page(
            self.session, stmt, model=ProjectMemberModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: ProjectMemberModel) -> ProjectMember:
        return ProjectMember(
            id=model.id,
            project_id=model.project_id,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

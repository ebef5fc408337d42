"""Project and project membership query handlers.

Any authenticated member may read projects. Membership lookups are scoped
to their project: a membership of another project is reported missing.
"""

from uuid import UUID

from src.application.queries.project_queries import (
    GetProject,
    GetProjectMember,
    ListProjectMembers,
    ListProjects,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Project, ProjectMember
from src.domain.errors import not_found
from src.domain.protocols import ProjectMemberRepository, ProjectRepository
from src.domain.value_objects import Page


async def load_project(
    projects: ProjectRepository, project_id: UUID
) -> Result[Project, DomainError]:
    project = await projects.find_by_id(project_id)
    if project is None:
        return Failure(
            error=not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        )
    return Success(value=project)


class GetProjectHandler:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._projects = project_repo

    async def handle(self, query: GetProject) -> Result[Project, DomainError]:
        return await load_project(self._projects, query.project_id)


class ListProjectsHandler:
    def __init__(self, project_repo: ProjectRepository) -> None:
        self._projects = project_repo

    async def handle(self, query: ListProjects) -> Result[Page[Project], DomainError]:
        return Success(value=await self._projects.search(query.criteria, query.page))


class GetProjectMemberHandler:
    def __init__(
        self,
        project_repo: ProjectRepository,
        project_member_repo: ProjectMemberRepository,
    ) -> None:
        self._projects = project_repo
        self._memberships = project_member_repo

    async def handle(
        self, query: GetProjectMember
    ) -> Result[ProjectMember, DomainError]:
        loaded = await load_project(self._projects, query.project_id)
        if isinstance(loaded, Failure):
            return loaded

        membership = await self._memberships.find_by_id(query.membership_id)
        if membership is None or membership.project_id != query.project_id:
            return Failure(
                error=not_found(
                    ErrorCode.PROJECT_MEMBER_NOT_FOUND,
                    "Project member",
                    query.membership_id,
                )
            )
        return Success(value=membership)


class ListProjectMembersHandler:
    def __init__(
        self,
        project_repo: ProjectRepository,
        project_member_repo: ProjectMemberRepository,
    ) -> None:
        self._projects = project_repo
        self._memberships = project_member_repo

    async def handle(
        self, query: ListProjectMembers
    ) -> Result[Page[ProjectMember], DomainError]:
        loaded = await load_project(self._projects, query.criteria.project_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(
            value=await self._memberships.search(query.criteria, query.page)
        )

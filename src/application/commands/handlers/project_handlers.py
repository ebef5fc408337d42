"""Project and project membership command handlers.

Rules:
- Only managers create projects; the creator becomes the owner
- Only the owner updates, deletes (soft) or manages members
- Project codes are unique among active projects
- A member belongs to a project at most once; removal is a hard delete
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.project_commands import (
    AddProjectMember,
    CreateProject,
    DeleteProject,
    RemoveProjectMember,
    UpdateProject,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Project, ProjectMember
from src.domain.errors import (
    RecordConflictError,
    already_exists,
    manager_required,
    not_found,
    not_owner,
)
from src.domain.protocols import (
    LoggerProtocol,
    MemberRepository,
    ProjectMemberRepository,
    ProjectRepository,
)


async def load_owned_project(
    projects: ProjectRepository, project_id: UUID, actor_id: UUID
) -> Result[Project, DomainError]:
    """Load an active project and check the actor owns it."""
    project = await projects.find_by_id(project_id)
    if project is None:
        return Failure(
            error=not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", project_id)
        )
    if not project.is_owned_by(actor_id):
        return Failure(error=not_owner("project"))
    return Success(value=project)


class CreateProjectHandler:
    """Create a project owned by the calling manager."""

    def __init__(self, project_repo: ProjectRepository, logger: LoggerProtocol) -> None:
        self._projects = project_repo
        self._logger = logger

    async def handle(self, cmd: CreateProject) -> Result[Project, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required("create projects"))

        if await self._projects.find_by_code(cmd.code) is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.CODE_ALREADY_EXISTS, "Project", "code", cmd.code
                )
            )

        now = datetime.now(UTC)
        project = Project(
            id=uuid7(),
            owner_id=cmd.actor_id,
            code=cmd.code,
            name=cmd.name,
            description=cmd.description,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._projects.save(project)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Project created", project_id=str(project.id), owner_id=str(cmd.actor_id)
        )
        return Success(value=project)


class UpdateProjectHandler:
    """Update a project's code, name or description (owner only)."""

    def __init__(self, project_repo: ProjectRepository, logger: LoggerProtocol) -> None:
        self._projects = project_repo
        self._logger = logger

    async def handle(self, cmd: UpdateProject) -> Result[Project, DomainError]:
        loaded = await load_owned_project(self._projects, cmd.project_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded
        project = loaded.value

        if cmd.code is not None and cmd.code != project.code:
            if await self._projects.find_by_code(cmd.code) is not None:
                return Failure(
                    error=already_exists(
                        ErrorCode.CODE_ALREADY_EXISTS, "Project", "code", cmd.code
                    )
                )

        updated = replace(
            project,
            code=cmd.code if cmd.code is not None else project.code,
            name=cmd.name if cmd.name is not None else project.name,
            description=(
                cmd.description if cmd.description is not None else project.description
            ),
            updated_at=datetime.now(UTC),
        )
        await self._projects.update(updated)

        self._logger.info("Project updated", project_id=str(project.id))
        return Success(value=updated)


class DeleteProjectHandler:
    """Soft delete a project (owner only)."""

    def __init__(self, project_repo: ProjectRepository, logger: LoggerProtocol) -> None:
        self._projects = project_repo
        self._logger = logger

    async def handle(self, cmd: DeleteProject) -> Result[None, DomainError]:
        loaded = await load_owned_project(self._projects, cmd.project_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded
        project = loaded.value

        now = datetime.now(UTC)
        await self._projects.update(replace(project, deleted_at=now, updated_at=now))

        self._logger.info("Project deleted", project_id=str(project.id))
        return Success(value=None)


class AddProjectMemberHandler:
    """Add an existing member to a project (project owner only)."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        project_member_repo: ProjectMemberRepository,
        member_repo: MemberRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._projects = project_repo
        self._memberships = project_member_repo
        self._members = member_repo
        self._logger = logger

    async def handle(self, cmd: AddProjectMember) -> Result[ProjectMember, DomainError]:
        loaded = await load_owned_project(self._projects, cmd.project_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded

        if await self._members.find_by_id(cmd.user_id) is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", cmd.user_id)
            )

        existing = await self._memberships.find_by_project_and_user(
            cmd.project_id, cmd.user_id
        )
        if existing is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
                    "Project member",
                    "user_id",
                    str(cmd.user_id),
                )
            )

        now = datetime.now(UTC)
        membership = ProjectMember(
            id=uuid7(),
            project_id=cmd.project_id,
            user_id=cmd.user_id,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._memberships.save(membership)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Project member added",
            project_id=str(cmd.project_id),
            user_id=str(cmd.user_id),
        )
        return Success(value=membership)


class RemoveProjectMemberHandler:
    """Remove a membership from a project (project owner only)."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        project_member_repo: ProjectMemberRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._projects = project_repo
        self._memberships = project_member_repo
        self._logger = logger

    async def handle(self, cmd: RemoveProjectMember) -> Result[None, DomainError]:
        loaded = await load_owned_project(self._projects, cmd.project_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded

        membership = await self._memberships.find_by_id(cmd.membership_id)
        if membership is None or membership.project_id != cmd.project_id:
            return Failure(
                error=not_found(
                    ErrorCode.PROJECT_MEMBER_NOT_FOUND,
                    "Project member",
                    cmd.membership_id,
                )
            )

        await self._memberships.delete(membership.id)

        self._logger.info(
            "Project member removed",
            project_id=str(cmd.project_id),
            user_id=str(membership.user_id),
        )
        return Success(value=None)

"""Unit tests for project and project membership handlers.

Tests cover:
- Managers create projects and become owners
- Owner-only update, delete and membership management
- Code uniqueness and duplicate memberships
- Memberships addressed under the wrong project are "not found"
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.project_handlers import (
    AddProjectMemberHandler,
    CreateProjectHandler,
    DeleteProjectHandler,
    RemoveProjectMemberHandler,
    UpdateProjectHandler,
)
from src.application.commands.project_commands import (
    AddProjectMember,
    CreateProject,
    DeleteProject,
    RemoveProjectMember,
    UpdateProject,
)
from src.application.queries.handlers.project_handlers import (
    GetProjectMemberHandler,
    ListProjectMembersHandler,
)
from src.application.queries.project_queries import (
    GetProjectMember,
    ListProjectMembers,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities import Project, ProjectMember
from src.domain.enums import MemberRole
from src.domain.value_objects import Page, PageRequest, ProjectMemberFilter


def _project(owner_id=None, code="CORE") -> Project:
    now = datetime.now(UTC)
    return Project(
        id=uuid7(),
        owner_id=owner_id or uuid7(),
        code=code,
        name="Core Platform",
        description=None,
        created_at=now,
        updated_at=now,
    )


def _membership(project_id, user_id=None) -> ProjectMember:
    now = datetime.now(UTC)
    return ProjectMember(
        id=uuid7(),
        project_id=project_id,
        user_id=user_id or uuid7(),
        created_at=now,
        updated_at=now,
    )


@pytest.mark.unit
class TestCreateProjectHandler:
    async def test_manager_becomes_owner(self):
        actor_id = uuid7()
        repo = AsyncMock()
        repo.find_by_code.return_value = None

        result = await CreateProjectHandler(repo, Mock()).handle(
            CreateProject(
                actor_id=actor_id,
                actor_role=MemberRole.PM,
                code="CORE",
                name="Core Platform",
            )
        )

        assert isinstance(result, Success)
        assert result.value.owner_id == actor_id
        assert result.value.deleted_at is None
        repo.save.assert_awaited_once()

    async def test_contributor_cannot_create(self):
        repo = AsyncMock()

        result = await CreateProjectHandler(repo, Mock()).handle(
            CreateProject(
                actor_id=uuid7(),
                actor_role=MemberRole.DESIGNER,
                code="CORE",
                name="Core",
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        repo.find_by_code.assert_not_called()

    async def test_code_taken(self):
        repo = AsyncMock()
        repo.find_by_code.return_value = _project()

        result = await CreateProjectHandler(repo, Mock()).handle(
            CreateProject(
                actor_id=uuid7(), actor_role=MemberRole.TPM, code="CORE", name="x"
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CODE_ALREADY_EXISTS


@pytest.mark.unit
class TestUpdateAndDeleteProject:
    async def test_owner_updates_description_only(self):
        project = _project()
        repo = AsyncMock()
        repo.find_by_id.return_value = project

        result = await UpdateProjectHandler(repo, Mock()).handle(
            UpdateProject(
                actor_id=project.owner_id,
                project_id=project.id,
                description="Platform services",
            )
        )

        assert isinstance(result, Success)
        assert result.value.description == "Platform services"
        assert result.value.code == project.code
        assert result.value.name == project.name

    async def test_non_owner_manager_cannot_update(self):
        project = _project()
        repo = AsyncMock()
        repo.find_by_id.return_value = project

        result = await UpdateProjectHandler(repo, Mock()).handle(
            UpdateProject(actor_id=uuid7(), project_id=project.id, name="Renamed")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED
        repo.update.assert_not_called()

    async def test_owner_soft_deletes(self):
        project = _project()
        repo = AsyncMock()
        repo.find_by_id.return_value = project

        result = await DeleteProjectHandler(repo, Mock()).handle(
            DeleteProject(actor_id=project.owner_id, project_id=project.id)
        )

        assert isinstance(result, Success)
        assert repo.update.call_args.args[0].deleted_at is not None

    async def test_delete_missing_project(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await DeleteProjectHandler(repo, Mock()).handle(
            DeleteProject(actor_id=uuid7(), project_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestProjectMembership:
    def _add_handler(self, project, member, existing=None):
        projects = AsyncMock()
        projects.find_by_id.return_value = project
        memberships = AsyncMock()
        memberships.find_by_project_and_user.return_value = existing
        members = AsyncMock()
        members.find_by_id.return_value = member
        return (
            AddProjectMemberHandler(projects, memberships, members, Mock()),
            memberships,
        )

    async def test_owner_adds_member(self, make_member):
        project = _project()
        member = make_member()
        handler, memberships = self._add_handler(project, member)

        result = await handler.handle(
            AddProjectMember(
                actor_id=project.owner_id, project_id=project.id, user_id=member.id
            )
        )

        assert isinstance(result, Success)
        assert result.value.project_id == project.id
        assert result.value.user_id == member.id
        memberships.save.assert_awaited_once()

    async def test_unknown_member(self):
        project = _project()
        handler, _ = self._add_handler(project, None)

        result = await handler.handle(
            AddProjectMember(
                actor_id=project.owner_id, project_id=project.id, user_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND

    async def test_duplicate_membership(self, make_member):
        project = _project()
        member = make_member()
        handler, memberships = self._add_handler(
            project, member, existing=_membership(project.id, member.id)
        )

        result = await handler.handle(
            AddProjectMember(
                actor_id=project.owner_id, project_id=project.id, user_id=member.id
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBERSHIP_ALREADY_EXISTS
        memberships.save.assert_not_called()

    async def test_remove_membership_of_other_project(self):
        project = _project()
        projects = AsyncMock()
        projects.find_by_id.return_value = project
        memberships = AsyncMock()
        memberships.find_by_id.return_value = _membership(uuid7())

        result = await RemoveProjectMemberHandler(projects, memberships, Mock()).handle(
            RemoveProjectMember(
                actor_id=project.owner_id,
                project_id=project.id,
                membership_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROJECT_MEMBER_NOT_FOUND
        memberships.delete.assert_not_called()

    async def test_remove_membership_is_hard_delete(self):
        project = _project()
        membership = _membership(project.id)
        projects = AsyncMock()
        projects.find_by_id.return_value = project
        memberships = AsyncMock()
        memberships.find_by_id.return_value = membership

        result = await RemoveProjectMemberHandler(projects, memberships, Mock()).handle(
            RemoveProjectMember(
                actor_id=project.owner_id,
                project_id=project.id,
                membership_id=membership.id,
            )
        )

        assert isinstance(result, Success)
        memberships.delete.assert_awaited_once_with(membership.id)

    async def test_get_membership_scoped_to_project(self):
        project = _project()
        projects = AsyncMock()
        projects.find_by_id.return_value = project
        memberships = AsyncMock()
        memberships.find_by_id.return_value = _membership(uuid7())

        result = await GetProjectMemberHandler(projects, memberships).handle(
            GetProjectMember(project_id=project.id, membership_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROJECT_MEMBER_NOT_FOUND

    async def test_list_members_of_missing_project(self):
        projects = AsyncMock()
        projects.find_by_id.return_value = None
        memberships = AsyncMock()

        result = await ListProjectMembersHandler(projects, memberships).handle(
            ListProjectMembers(
                criteria=ProjectMemberFilter(project_id=uuid7()),
                page=PageRequest(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PROJECT_NOT_FOUND
        memberships.search.assert_not_called()

    async def test_list_members(self):
        project = _project()
        projects = AsyncMock()
        projects.find_by_id.return_value = project
        memberships = AsyncMock()
        memberships.search.return_value = Page(
            items=[_membership(project.id)], total=1, page=1, limit=20
        )

        result = await ListProjectMembersHandler(projects, memberships).handle(
            ListProjectMembers(
                criteria=ProjectMemberFilter(project_id=project.id),
                page=PageRequest(),
            )
        )

        assert isinstance(result, Success)
        assert result.value.total == 1

"""Unit tests for member directory handlers.

Tests cover:
- CreateMemberHandler: managers only, duplicate email
- UpdateMemberHandler: self or manager, email uniqueness, password rehash
- DeleteMemberHandler: managers only, never self, soft delete
- GetMemberHandler / ListMembersHandler: DTO projection without password hash
"""

from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.member_handlers import (
    CreateMemberHandler,
    DeleteMemberHandler,
    UpdateMemberHandler,
)
from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    UpdateMember,
)
from src.application.dtos import MemberResult
from src.application.queries.handlers.member_handlers import (
    GetMemberHandler,
    ListMembersHandler,
)
from src.application.queries.member_queries import GetMember, ListMembers
from src.core.enums import ErrorCode
from src.core.errors import (
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from src.core.result import Failure, Success
from src.domain.enums import MemberRole
from src.domain.value_objects import MemberFilter, Page, PageRequest


def _password_service() -> Mock:
    service = Mock()
    service.hash_password.return_value = "new-hash"
    return service


@pytest.mark.unit
class TestCreateMemberHandler:
    async def test_manager_creates_member(self, mock_logger):
        repo = AsyncMock()
        repo.find_by_email.return_value = None
        handler = CreateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            CreateMember(
                actor_id=uuid7(),
                actor_role=MemberRole.TPM,
                email="QA@example.com",
                password="SecurePass123!",
                name="Quinn",
                role=MemberRole.QA,
            )
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, MemberResult)
        assert result.value.email == "qa@example.com"
        assert result.value.role == MemberRole.QA
        repo.save.assert_awaited_once()

    @pytest.mark.parametrize(
        "role", [MemberRole.DEVELOPER, MemberRole.DESIGNER, MemberRole.QA]
    )
    async def test_non_manager_is_rejected(self, role, mock_logger):
        repo = AsyncMock()
        handler = CreateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            CreateMember(
                actor_id=uuid7(),
                actor_role=role,
                email="new@example.com",
                password="SecurePass123!",
                name="New",
                role=MemberRole.QA,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        repo.save.assert_not_called()

    async def test_duplicate_email(self, make_member, mock_logger):
        repo = AsyncMock()
        repo.find_by_email.return_value = make_member()
        handler = CreateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            CreateMember(
                actor_id=uuid7(),
                actor_role=MemberRole.PM,
                email="taken@example.com",
                password="SecurePass123!",
                name="Dup",
                role=MemberRole.DEVELOPER,
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)


@pytest.mark.unit
class TestUpdateMemberHandler:
    async def test_member_updates_own_name(self, make_member, mock_logger):
        member = make_member(name="Old")
        repo = AsyncMock()
        repo.find_by_id.return_value = member
        handler = UpdateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            UpdateMember(
                actor_id=member.id,
                actor_role=member.role,
                member_id=member.id,
                name="New",
            )
        )

        assert isinstance(result, Success)
        assert result.value.name == "New"
        assert result.value.email == member.email
        updated = repo.update.call_args.args[0]
        assert updated.password_hash == member.password_hash

    async def test_other_contributor_is_rejected(self, make_member, mock_logger):
        member = make_member()
        repo = AsyncMock()
        repo.find_by_id.return_value = member
        handler = UpdateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            UpdateMember(
                actor_id=uuid7(),
                actor_role=MemberRole.DEVELOPER,
                member_id=member.id,
                name="Hijack",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        repo.update.assert_not_called()

    async def test_manager_changes_password(self, make_member, mock_logger):
        member = make_member()
        repo = AsyncMock()
        repo.find_by_id.return_value = member
        handler = UpdateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            UpdateMember(
                actor_id=uuid7(),
                actor_role=MemberRole.PMO,
                member_id=member.id,
                password="AnotherPass456!",
            )
        )

        assert isinstance(result, Success)
        assert repo.update.call_args.args[0].password_hash == "new-hash"

    async def test_email_taken_by_someone_else(self, make_member, mock_logger):
        member = make_member()
        repo = AsyncMock()
        repo.find_by_id.return_value = member
        repo.find_by_email.return_value = make_member(email="other@example.com")
        handler = UpdateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            UpdateMember(
                actor_id=member.id,
                actor_role=member.role,
                member_id=member.id,
                email="other@example.com",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.EMAIL_ALREADY_EXISTS

    async def test_missing_member(self, mock_logger):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        handler = UpdateMemberHandler(repo, _password_service(), mock_logger)

        result = await handler.handle(
            UpdateMember(
                actor_id=uuid7(), actor_role=MemberRole.TPM, member_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)


@pytest.mark.unit
class TestDeleteMemberHandler:
    async def test_manager_soft_deletes_member(self, make_member, mock_logger):
        member = make_member()
        repo = AsyncMock()
        repo.find_by_id.return_value = member
        handler = DeleteMemberHandler(repo, mock_logger)

        result = await handler.handle(
            DeleteMember(
                actor_id=uuid7(), actor_role=MemberRole.PM, member_id=member.id
            )
        )

        assert isinstance(result, Success)
        assert result.value is None
        deleted = repo.update.call_args.args[0]
        assert deleted.id == member.id
        assert deleted.deleted_at is not None

    async def test_manager_cannot_delete_self(self, mock_logger):
        actor_id = uuid7()
        repo = AsyncMock()
        handler = DeleteMemberHandler(repo, mock_logger)

        result = await handler.handle(
            DeleteMember(actor_id=actor_id, actor_role=MemberRole.TPM, member_id=actor_id)
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "member_id"
        repo.find_by_id.assert_not_called()

    async def test_contributor_cannot_delete(self, mock_logger):
        handler = DeleteMemberHandler(AsyncMock(), mock_logger)

        result = await handler.handle(
            DeleteMember(
                actor_id=uuid7(), actor_role=MemberRole.QA, member_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)


@pytest.mark.unit
class TestMemberQueries:
    async def test_get_member_hides_password_hash(self, make_member):
        member = make_member()
        repo = AsyncMock()
        repo.find_by_id.return_value = member

        result = await GetMemberHandler(repo).handle(GetMember(member_id=member.id))

        assert isinstance(result, Success)
        assert not hasattr(result.value, "password_hash")
        assert result.value.id == member.id

    async def test_get_missing_member(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetMemberHandler(repo).handle(GetMember(member_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND

    async def test_list_members_maps_page(self, make_member):
        members = [make_member(), make_member()]
        repo = AsyncMock()
        repo.search.return_value = Page(items=members, total=12, page=2, limit=2)
        criteria = MemberFilter(role=MemberRole.DEVELOPER)
        page = PageRequest(page=2, limit=2)

        result = await ListMembersHandler(repo).handle(
            ListMembers(criteria=criteria, page=page)
        )

        assert isinstance(result, Success)
        assert result.value.total == 12
        assert result.value.pages == 6
        assert [m.id for m in result.value.items] == [m.id for m in members]
        repo.search.assert_awaited_once_with(criteria, page)

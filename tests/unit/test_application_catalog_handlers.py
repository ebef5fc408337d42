"""Unit tests for catalog handlers (roles, task statuses, priorities).

One handler set serves all three catalogs; tests run each rule against the
kind whose messages they check.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.catalog_commands import (
    CreateCatalogEntry,
    DeleteCatalogEntry,
    UpdateCatalogEntry,
)
from src.application.commands.handlers.catalog_handlers import (
    PRIORITY_CATALOG,
    ROLE_CATALOG,
    TASK_STATUS_CATALOG,
    CreateCatalogEntryHandler,
    DeleteCatalogEntryHandler,
    UpdateCatalogEntryHandler,
)
from src.application.queries.catalog_queries import GetCatalogEntry
from src.application.queries.handlers.catalog_handlers import GetCatalogEntryHandler
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, ConflictError
from src.core.result import Failure, Success
from src.domain.entities import Priority, Role, TaskStatus
from src.domain.enums import MemberRole


def _status(code: str = "todo", name: str = "To Do") -> TaskStatus:
    now = datetime.now(UTC)
    return TaskStatus(
        id=uuid7(),
        code=code,
        name=name,
        description=None,
        created_at=now,
        updated_at=now,
    )


@pytest.mark.unit
class TestCreateCatalogEntryHandler:
    @pytest.mark.parametrize(
        ("kind", "entity"),
        [
            (ROLE_CATALOG, Role),
            (TASK_STATUS_CATALOG, TaskStatus),
            (PRIORITY_CATALOG, Priority),
        ],
    )
    async def test_creates_entity_of_catalog_kind(self, kind, entity):
        repo = AsyncMock()
        repo.find_by_code.return_value = None
        handler = CreateCatalogEntryHandler(repo, kind, Mock())

        result = await handler.handle(
            CreateCatalogEntry(
                actor_role=MemberRole.PM, code="high", name="High"
            )
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, entity)
        assert result.value.code == "high"
        repo.save.assert_awaited_once_with(result.value)

    async def test_contributor_is_rejected(self):
        repo = AsyncMock()
        handler = CreateCatalogEntryHandler(repo, PRIORITY_CATALOG, Mock())

        result = await handler.handle(
            CreateCatalogEntry(
                actor_role=MemberRole.DEVELOPER, code="low", name="Low"
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert "priorities" in result.error.message

    async def test_duplicate_code(self):
        repo = AsyncMock()
        repo.find_by_code.return_value = _status()
        handler = CreateCatalogEntryHandler(repo, TASK_STATUS_CATALOG, Mock())

        result = await handler.handle(
            CreateCatalogEntry(actor_role=MemberRole.TPM, code="todo", name="To Do")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.CODE_ALREADY_EXISTS
        assert result.error.resource_type == "Task status"


@pytest.mark.unit
class TestUpdateCatalogEntryHandler:
    async def test_partial_update_keeps_other_fields(self):
        entry = _status()
        repo = AsyncMock()
        repo.find_by_id.return_value = entry
        handler = UpdateCatalogEntryHandler(repo, TASK_STATUS_CATALOG, Mock())

        result = await handler.handle(
            UpdateCatalogEntry(
                actor_role=MemberRole.PMO, entry_id=entry.id, name="Backlog"
            )
        )

        assert isinstance(result, Success)
        assert result.value.name == "Backlog"
        assert result.value.code == "todo"
        repo.find_by_code.assert_not_called()

    async def test_new_code_must_be_free(self):
        entry = _status()
        repo = AsyncMock()
        repo.find_by_id.return_value = entry
        repo.find_by_code.return_value = _status(code="done", name="Done")
        handler = UpdateCatalogEntryHandler(repo, TASK_STATUS_CATALOG, Mock())

        result = await handler.handle(
            UpdateCatalogEntry(
                actor_role=MemberRole.PMO, entry_id=entry.id, code="done"
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        repo.update.assert_not_called()

    async def test_missing_entry(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        handler = UpdateCatalogEntryHandler(repo, ROLE_CATALOG, Mock())

        result = await handler.handle(
            UpdateCatalogEntry(actor_role=MemberRole.PM, entry_id=uuid7(), name="x")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ROLE_NOT_FOUND


@pytest.mark.unit
class TestDeleteCatalogEntryHandler:
    async def test_unreferenced_entry_is_deleted(self):
        entry = _status()
        repo = AsyncMock()
        repo.find_by_id.return_value = entry
        repo.is_referenced.return_value = False
        handler = DeleteCatalogEntryHandler(repo, TASK_STATUS_CATALOG, Mock())

        result = await handler.handle(
            DeleteCatalogEntry(actor_role=MemberRole.TPM, entry_id=entry.id)
        )

        assert isinstance(result, Success)
        repo.delete.assert_awaited_once_with(entry.id)

    async def test_referenced_entry_is_kept(self):
        entry = _status()
        repo = AsyncMock()
        repo.find_by_id.return_value = entry
        repo.is_referenced.return_value = True
        handler = DeleteCatalogEntryHandler(repo, TASK_STATUS_CATALOG, Mock())

        result = await handler.handle(
            DeleteCatalogEntry(actor_role=MemberRole.TPM, entry_id=entry.id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_IN_USE
        repo.delete.assert_not_called()


@pytest.mark.unit
class TestGetCatalogEntryHandler:
    async def test_missing_priority(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None

        result = await GetCatalogEntryHandler(repo, PRIORITY_CATALOG).handle(
            GetCatalogEntry(entry_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.PRIORITY_NOT_FOUND
        assert result.error.message == "Priority not found"

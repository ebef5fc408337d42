"""Catalog command handlers (roles, task statuses, priorities).

The three catalogs behave the same way, so one set of handlers serves all
of them. A CatalogKind tells a handler which entity to build and how to
name it in errors; the container wires one handler per (kind, operation).

Rules:
- Only managers write
- Codes are unique within a catalog (409)
- Rows referenced by a task cannot be deleted (409); deletion is hard
"""

from dataclasses import dataclass, replace
from datetime import UTC, datetime

from uuid_extensions import uuid7

from src.application.commands.catalog_commands import (
    CreateCatalogEntry,
    DeleteCatalogEntry,
    UpdateCatalogEntry,
)
from src.core.enums import ErrorCode
from src.core.errors import ConflictError, DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import CatalogEntry, Priority, Role, TaskStatus
from src.domain.errors import (
    RecordConflictError,
    already_exists,
    manager_required,
    not_found,
)
from src.domain.protocols import CatalogRepository, LoggerProtocol


@dataclass(frozen=True, kw_only=True)
class CatalogKind:
    """Static description of one catalog.

    Attributes:
        entity: Domain dataclass for rows of this catalog.
        resource_type: Name used in messages ("Task status").
        plural: Noun used in permission messages ("task statuses").
        not_found_code: ErrorCode reported for a missing row.
    """

    entity: type[CatalogEntry]
    resource_type: str
    plural: str
    not_found_code: ErrorCode


ROLE_CATALOG = CatalogKind(
    entity=Role,
    resource_type="Role",
    plural="roles",
    not_found_code=ErrorCode.ROLE_NOT_FOUND,
)
TASK_STATUS_CATALOG = CatalogKind(
    entity=TaskStatus,
    resource_type="Task status",
    plural="task statuses",
    not_found_code=ErrorCode.TASK_STATUS_NOT_FOUND,
)
PRIORITY_CATALOG = CatalogKind(
    entity=Priority,
    resource_type="Priority",
    plural="priorities",
    not_found_code=ErrorCode.PRIORITY_NOT_FOUND,
)


class CreateCatalogEntryHandler:
    """Add a row to a catalog."""

    def __init__(
        self,
        repo: CatalogRepository[CatalogEntry],
        kind: CatalogKind,
        logger: LoggerProtocol,
    ) -> None:
        self._repo = repo
        self._kind = kind
        self._logger = logger

    async def handle(
        self, cmd: CreateCatalogEntry
    ) -> Result[CatalogEntry, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required(f"manage {self._kind.plural}"))

        if await self._repo.find_by_code(cmd.code) is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.CODE_ALREADY_EXISTS,
                    self._kind.resource_type,
                    "code",
                    cmd.code,
                )
            )

        now = datetime.now(UTC)
        entry = self._kind.entity(
            id=uuid7(),
            code=cmd.code,
            name=cmd.name,
            description=cmd.description,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._repo.save(entry)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Catalog entry created",
            catalog=self._kind.plural,
            entry_id=str(entry.id),
            code=entry.code,
        )
        return Success(value=entry)


class UpdateCatalogEntryHandler:
    """Change code, name or description of a catalog row."""

    def __init__(
        self,
        repo: CatalogRepository[CatalogEntry],
        kind: CatalogKind,
        logger: LoggerProtocol,
    ) -> None:
        self._repo = repo
        self._kind = kind
        self._logger = logger

    async def handle(
        self, cmd: UpdateCatalogEntry
    ) -> Result[CatalogEntry, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required(f"manage {self._kind.plural}"))

        entry = await self._repo.find_by_id(cmd.entry_id)
        if entry is None:
            return Failure(
                error=not_found(
                    self._kind.not_found_code, self._kind.resource_type, cmd.entry_id
                )
            )

        if cmd.code is not None and cmd.code != entry.code:
            if await self._repo.find_by_code(cmd.code) is not None:
                return Failure(
                    error=already_exists(
                        ErrorCode.CODE_ALREADY_EXISTS,
                        self._kind.resource_type,
                        "code",
                        cmd.code,
                    )
                )

        updated = replace(
            entry,
            code=cmd.code if cmd.code is not None else entry.code,
            name=cmd.name if cmd.name is not None else entry.name,
            description=(
                cmd.description if cmd.description is not None else entry.description
            ),
            updated_at=datetime.now(UTC),
        )
        try:
            await self._repo.update(updated)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Catalog entry updated", catalog=self._kind.plural, entry_id=str(entry.id)
        )
        return Success(value=updated)


class DeleteCatalogEntryHandler:
    """Hard delete a catalog row no task references."""

    def __init__(
        self,
        repo: CatalogRepository[CatalogEntry],
        kind: CatalogKind,
        logger: LoggerProtocol,
    ) -> None:
        self._repo = repo
        self._kind = kind
        self._logger = logger

    async def handle(self, cmd: DeleteCatalogEntry) -> Result[None, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required(f"manage {self._kind.plural}"))

        entry = await self._repo.find_by_id(cmd.entry_id)
        if entry is None:
            return Failure(
                error=not_found(
                    self._kind.not_found_code, self._kind.resource_type, cmd.entry_id
                )
            )

        if await self._repo.is_referenced(entry.id):
            return Failure(
                error=ConflictError(
                    code=ErrorCode.RESOURCE_IN_USE,
                    message=f"{self._kind.resource_type} is still used by tasks",
                    resource_type=self._kind.resource_type,
                )
            )

        try:
            await self._repo.delete(entry.id)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Catalog entry deleted", catalog=self._kind.plural, entry_id=str(entry.id)
        )
        return Success(value=None)

"""Catalog handler dependency factories.

Roles, task statuses and priorities share one set of handlers. Each
factory below is built for one CatalogKind and resolves the matching
repository, so routes stay as plain FastAPI dependencies:

    handler: CreateCatalogEntryHandler = Depends(
        catalog_factories(TASK_STATUS_CATALOG).create
    )
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers.catalog_handlers import (
    PRIORITY_CATALOG,
    ROLE_CATALOG,
    TASK_STATUS_CATALOG,
    CatalogKind,
    CreateCatalogEntryHandler,
    DeleteCatalogEntryHandler,
    UpdateCatalogEntryHandler,
)
from src.application.queries.handlers.catalog_handlers import (
    GetCatalogEntryHandler,
    ListCatalogEntriesHandler,
)
from src.core.container.infrastructure import get_db_session, get_logger
from src.infrastructure.persistence.repositories import (
    PriorityRepository,
    RoleRepository,
    TaskStatusRepository,
)

_REPOSITORY_BY_KIND: dict[CatalogKind, type[Any]] = {
    ROLE_CATALOG: RoleRepository,
    TASK_STATUS_CATALOG: TaskStatusRepository,
    PRIORITY_CATALOG: PriorityRepository,
}


@dataclass(frozen=True, kw_only=True)
class CatalogFactories:
    """Request-scoped handler factories for one catalog."""

    create: Callable[..., Awaitable[CreateCatalogEntryHandler]]
    update: Callable[..., Awaitable[UpdateCatalogEntryHandler]]
    delete: Callable[..., Awaitable[DeleteCatalogEntryHandler]]
    get: Callable[..., Awaitable[GetCatalogEntryHandler]]
    list: Callable[..., Awaitable[ListCatalogEntriesHandler]]


@lru_cache()
def catalog_factories(kind: CatalogKind) -> CatalogFactories:
    """Build (once per kind) the handler factories of a catalog.

    Cached so FastAPI sees the same callables, which keeps
    app.dependency_overrides usable in tests.
    """
    repository_cls = _REPOSITORY_BY_KIND[kind]

    async def create(
        session: AsyncSession = Depends(get_db_session),
    ) -> CreateCatalogEntryHandler:
        return CreateCatalogEntryHandler(
            repo=repository_cls(session=session), kind=kind, logger=get_logger()
        )

    async def update(
        session: AsyncSession = Depends(get_db_session),
    ) -> UpdateCatalogEntryHandler:
        return UpdateCatalogEntryHandler(
            repo=repository_cls(session=session), kind=kind, logger=get_logger()
        )

    async def delete(
        session: AsyncSession = Depends(get_db_session),
    ) -> DeleteCatalogEntryHandler:
        return DeleteCatalogEntryHandler(
            repo=repository_cls(session=session), kind=kind, logger=get_logger()
        )

    async def get(
        session: AsyncSession = Depends(get_db_session),
    ) -> GetCatalogEntryHandler:
        return GetCatalogEntryHandler(repo=repository_cls(session=session), kind=kind)

    async def list_(
        session: AsyncSession = Depends(get_db_session),
    ) -> ListCatalogEntriesHandler:
        return ListCatalogEntriesHandler(repo=repository_cls(session=session))

    return CatalogFactories(
        create=create, update=update, delete=delete, get=get, list=list_
    )

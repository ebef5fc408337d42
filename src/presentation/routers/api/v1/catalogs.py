"""Catalog resource handlers (roles, task statuses, priorities).

The three catalogs share request bodies, responses and rules, so their
endpoints are built per CatalogKind by catalog_endpoints(). Each set is
registered under its own prefix in routes/registry.py:

    /roles, /task-statuses, /priorities

Handlers (per catalog):
    create  - POST   /{catalog}              (manager, 201)
    search  - PATCH  /{catalog}
    get     - GET    /{catalog}/{entry_id}
    update  - PUT    /{catalog}/{entry_id}   (manager)
    delete  - DELETE /{catalog}/{entry_id}   (manager, 204)
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from functools import lru_cache
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.catalog_commands import (
    CreateCatalogEntry,
    DeleteCatalogEntry,
    UpdateCatalogEntry,
)
from src.application.commands.handlers.catalog_handlers import (
    CatalogKind,
    CreateCatalogEntryHandler,
    DeleteCatalogEntryHandler,
    UpdateCatalogEntryHandler,
)
from src.application.queries.catalog_queries import GetCatalogEntry, ListCatalogEntries
from src.application.queries.handlers.catalog_handlers import (
    GetCatalogEntryHandler,
    ListCatalogEntriesHandler,
)
from src.core.container import catalog_factories
from src.core.result import Failure
from src.domain.value_objects import CatalogFilter
from src.domain.value_objects.filters import CATALOG_SORT_FIELDS
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    ManagerUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.catalog_schemas import (
    CatalogCreateRequest,
    CatalogResponse,
    CatalogSearchRequest,
    CatalogUpdateRequest,
)
from src.schemas.common_schemas import PageResponse

EntryIdPath = Annotated[UUID, Path(description="Catalog entry UUID")]


@dataclass(frozen=True, kw_only=True)
class CatalogEndpoints:
    """Endpoint functions of one catalog."""

    create: Callable[..., Awaitable[Any]]
    search: Callable[..., Awaitable[Any]]
    get: Callable[..., Awaitable[Any]]
    update: Callable[..., Awaitable[Any]]
    delete: Callable[..., Awaitable[Any]]


@lru_cache()
def catalog_endpoints(kind: CatalogKind) -> CatalogEndpoints:
    """Build the endpoint functions of one catalog."""
    factories = catalog_factories(kind)

    async def create(
        request: Request,
        current_user: ManagerUser,
        data: CatalogCreateRequest,
        handler: CreateCatalogEntryHandler = Depends(factories.create),
    ) -> CatalogResponse | JSONResponse:
        result = await handler.handle(
            CreateCatalogEntry(
                actor_role=current_user.role,
                code=data.code,
                name=data.name,
                description=data.description,
            )
        )
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(result.error, request)
        return CatalogResponse.model_validate(result.value)

    async def search(
        current_user: AuthenticatedUser,
        data: CatalogSearchRequest,
        handler: ListCatalogEntriesHandler = Depends(factories.list),
    ) -> PageResponse[CatalogResponse]:
        result = await handler.handle(
            ListCatalogEntries(
                criteria=CatalogFilter(search=data.search),
                page=data.page_request(CATALOG_SORT_FIELDS),
            )
        )
        return PageResponse[CatalogResponse].from_page(
            result.value, CatalogResponse.model_validate
        )

    async def get(
        request: Request,
        current_user: AuthenticatedUser,
        entry_id: EntryIdPath,
        handler: GetCatalogEntryHandler = Depends(factories.get),
    ) -> CatalogResponse | JSONResponse:
        result = await handler.handle(GetCatalogEntry(entry_id=entry_id))
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(result.error, request)
        return CatalogResponse.model_validate(result.value)

    async def update(
        request: Request,
        current_user: ManagerUser,
        entry_id: EntryIdPath,
        data: CatalogUpdateRequest,
        handler: UpdateCatalogEntryHandler = Depends(factories.update),
    ) -> CatalogResponse | JSONResponse:
        result = await handler.handle(
            UpdateCatalogEntry(
                actor_role=current_user.role,
                entry_id=entry_id,
                code=data.code,
                name=data.name,
                description=data.description,
            )
        )
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(result.error, request)
        return CatalogResponse.model_validate(result.value)

    async def delete(
        request: Request,
        current_user: ManagerUser,
        entry_id: EntryIdPath,
        handler: DeleteCatalogEntryHandler = Depends(factories.delete),
    ) -> JSONResponse | None:
        result = await handler.handle(
            DeleteCatalogEntry(actor_role=current_user.role, entry_id=entry_id)
        )
        if isinstance(result, Failure):
            return ErrorResponseBuilder.from_domain_error(result.error, request)
        return None

    return CatalogEndpoints(
        create=create, search=search, get=get, update=update, delete=delete
    )

"""Catalog query handlers (roles, task statuses, priorities)."""

from src.application.commands.handlers.catalog_handlers import CatalogKind
from src.application.queries.catalog_queries import GetCatalogEntry, ListCatalogEntries
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import CatalogEntry
from src.domain.errors import not_found
from src.domain.protocols import CatalogRepository
from src.domain.value_objects import Page


class GetCatalogEntryHandler:
    def __init__(self, repo: CatalogRepository[CatalogEntry], kind: CatalogKind) -> None:
        self._repo = repo
        self._kind = kind

    async def handle(self, query: GetCatalogEntry) -> Result[CatalogEntry, DomainError]:
        entry = await self._repo.find_by_id(query.entry_id)
        if entry is None:
            return Failure(
                error=not_found(
                    self._kind.not_found_code, self._kind.resource_type, query.entry_id
                )
            )
        return Success(value=entry)


class ListCatalogEntriesHandler:
    def __init__(self, repo: CatalogRepository[CatalogEntry]) -> None:
        self._repo = repo

    async def handle(
        self, query: ListCatalogEntries
    ) -> Result[Page[CatalogEntry], DomainError]:
        return Success(value=await self._repo.search(query.criteria, query.page))

"""CatalogRepository protocol for code/name lookup tables.

One protocol serves the role catalogue, task statuses and priorities.
"""

from typing import Protocol, TypeVar
from uuid import UUID

from src.domain.entities import CatalogEntry
from src.domain.value_objects import CatalogFilter, Page, PageRequest

EntryT = TypeVar("EntryT", bound=CatalogEntry)


class CatalogRepository(Protocol[EntryT]):
    """Catalog repository protocol (port)."""

    async def find_by_id(self, entry_id: UUID) -> EntryT | None:
        """Find a catalog entry by ID."""
        ...

    async def find_by_code(self, code: str) -> EntryT | None:
        """Find a catalog entry by its unique code."""
        ...

    async def save(self, entry: EntryT) -> None:
        """Create a new entry."""
        ...

    async def update(self, entry: EntryT) -> None:
        """Update an existing entry."""
        ...

    async def delete(self, entry_id: UUID) -> None:
        """Hard-delete an entry."""
        ...

    async def is_referenced(self, entry_id: UUID) -> bool:
        """True if any active task still points at the entry."""
        ...

    async def search(
        self, criteria: CatalogFilter, page: PageRequest
    ) -> Page[EntryT]:
        """Return one page of entries matching criteria."""
        ...

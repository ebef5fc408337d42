"""Catalog queries shared by roles, task statuses and priorities."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import CatalogFilter, PageRequest


@dataclass(frozen=True, kw_only=True)
class GetCatalogEntry:
    """Get one catalog row by ID."""

    entry_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListCatalogEntries:
    """Search a catalog by code or name."""

    criteria: CatalogFilter
    page: PageRequest

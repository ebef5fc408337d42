"""Common schemas used across multiple API endpoints.

Provides the search-body base every index (PATCH) endpoint extends and the
{pagination, data} envelope every index endpoint returns.
"""

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

from src.core.config import settings
from src.domain.value_objects import Page, PageRequest

ItemT = TypeVar("ItemT", bound=BaseModel)


class SearchRequest(BaseModel):
    """Base search body (IRequest) for PATCH index endpoints.

    Attributes:
        page: Page number (1-indexed).
        limit: Rows per page (1-100).
        sort: Sort expression, e.g. "-created_at" or "name asc".
    """

    page: int | None = Field(None, ge=1, description="Page number (1-indexed)")
    limit: int | None = Field(None, ge=1, le=100, description="Rows per page")
    sort: str | None = Field(
        None,
        description="Sort expression: field, 'field asc|desc', '-field' or '+field'",
        examples=["-created_at"],
    )

    def page_request(self, allowed_sort_fields: Iterable[str]) -> PageRequest:
        """Build the PageRequest for this body, whitelisting the sort field."""
        return PageRequest.build(
            page=self.page,
            limit=self.limit,
            sort=self.sort,
            allowed_sort_fields=allowed_sort_fields,
            default_limit=settings.default_page_limit,
            max_limit=settings.max_page_limit,
        )


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses.

    Attributes:
        current: Current page number.
        limit: Rows per page.
        records: Rows matching the search across all pages.
        pages: Total number of pages.
    """

    current: int = Field(..., description="Current page number")
    limit: int = Field(..., description="Rows per page")
    records: int = Field(..., description="Total matching rows")
    pages: int = Field(..., description="Total number of pages")


class PageResponse(BaseModel, Generic[ItemT]):
    """Paginated list envelope: {"pagination": {...}, "data": [...]}."""

    pagination: PaginationMeta
    data: list[ItemT]

    @classmethod
    def from_page(
        cls, page: Page[Any], convert: Callable[[Any], ItemT]
    ) -> "PageResponse[ItemT]":
        """Wrap a domain Page, converting each item with convert."""
        return cls(
            pagination=PaginationMeta(
                current=page.page,
                limit=page.limit,
                records=page.total,
                pages=page.pages,
            ),
            data=[convert(item) for item in page.items],
        )

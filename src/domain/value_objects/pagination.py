"""Pagination value objects.

PageRequest describes which slice of a result set to load and in what
order. Page carries one slice back together with the total row count so the
presentation layer can build the {pagination, data} envelope.

Sort expressions accepted by PageRequest.build():
    "name"              ascending by name
    "name asc"          ascending by name
    "created_at desc"   descending by created_at
    "-created_at"       descending by created_at
    "+title"            ascending by title

Fields outside the resource's whitelist fall back to the default sort
(created_at descending).

Usage:
    page_request = PageRequest.build(
        page=2,
        limit=20,
        sort="-due_date",
        allowed_sort_fields=TASK_SORT_FIELDS,
    )
    page_request.offset  # 20
"""

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
DEFAULT_SORT_FIELD = "created_at"


@dataclass(frozen=True, slots=True, kw_only=True)
class PageRequest:
    """Requested slice and ordering of a result set.

    Attributes:
        page: 1-based page number.
        limit: Maximum rows per page.
        sort_field: Column to order by (already whitelisted).
        descending: Sort direction.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT
    sort_field: str = DEFAULT_SORT_FIELD
    descending: bool = True

    @property
    def offset(self) -> int:
        """Rows to skip: (page - 1) * limit."""
        return (self.page - 1) * self.limit

    @classmethod
    def build(
        cls,
        *,
        page: int | None,
        limit: int | None,
        sort: str | None,
        allowed_sort_fields: Iterable[str],
        default_limit: int = DEFAULT_LIMIT,
        max_limit: int = MAX_LIMIT,
    ) -> "PageRequest":
        """Build a PageRequest from raw search-body values.

        Args:
            page: Requested page (None or < 1 means first page).
            limit: Requested page size (None or < 1 means default_limit).
            sort: Sort expression (see module docstring).
            allowed_sort_fields: Columns the resource may be sorted by.
            default_limit: Page size when none is requested.
            max_limit: Largest page size served; bigger requests are clamped.

        Returns:
            PageRequest with a whitelisted sort field.
        """
        field, descending = parse_sort(sort, allowed_sort_fields)
        size = limit if limit and limit > 0 else default_limit
        return cls(
            page=page if page and page > 0 else DEFAULT_PAGE,
            limit=min(size, max_limit),
            sort_field=field,
            descending=descending,
        )


def parse_sort(
    expression: str | None,
    allowed_fields: Iterable[str],
) -> tuple[str, bool]:
    """Parse a sort expression into (field, descending).

    Args:
        expression: Raw sort expression from the client.
        allowed_fields: Whitelisted field names.

    Returns:
        tuple[str, bool]: Field name and direction. Unknown fields or
            malformed expressions yield (created_at, True).

    Example:
        >>> parse_sort("name asc", {"name", "created_at"})
        ('name', False)
        >>> parse_sort("-created_at", {"name", "created_at"})
        ('created_at', True)
        >>> parse_sort("password_hash", {"name", "created_at"})
        ('created_at', True)
    """
    default = (DEFAULT_SORT_FIELD, True)
    if not expression or not expression.strip():
        return default

    parts = expression.strip().split()
    if len(parts) > 2:
        return default

    field = parts[0]
    descending = False
    if field.startswith("-"):
        field, descending = field[1:], True
    elif field.startswith("+"):
        field = field[1:]

    if len(parts) == 2:
        direction = parts[1].lower()
        if direction not in ("asc", "desc"):
            return default
        descending = direction == "desc"

    if field not in set(allowed_fields):
        return default
    return field, descending


@dataclass(frozen=True, slots=True, kw_only=True)
class Page(Generic[T]):
    """One page of results plus the total matching row count.

    Attributes:
        items: Rows on this page.
        total: Rows matching the filters across all pages.
        page: 1-based page number.
        limit: Page size used for the query.
    """

    items: list[T]
    total: int
    page: int
    limit: int

    @property
    def pages(self) -> int:
        """Total number of pages (ceil(total / limit))."""
        if self.limit <= 0:
            return 0
        return math.ceil(self.total / self.limit)

    def map(self, fn: Callable[[T], U]) -> "Page[U]":
        """Return a page with fn applied to every item."""
        return Page(
            items=[fn(item) for item in self.items],
            total=self.total,
            page=self.page,
            limit=self.limit,
        )

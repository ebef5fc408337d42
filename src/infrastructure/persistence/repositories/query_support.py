"""Query helpers shared by the SQLAlchemy repositories.

Every index endpoint filters, counts, sorts and slices the same way: the
count runs over the filtered statement wrapped as a subquery, and the page
query applies ORDER BY (with id as tie-breaker), LIMIT and OFFSET to that
same statement.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import ColumnElement, Select, func, select
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.core.errors import ConflictError
from src.domain.errors import RecordConflictError
from src.domain.value_objects import PageRequest


def contains(column: Any, value: str) -> ColumnElement[bool]:
    """Case-insensitive substring match with LIKE wildcards escaped."""
    return column.icontains(value, autoescape=True)


def within(
    column: Any, start: datetime | None, end: datetime | None
) -> list[ColumnElement[bool]]:
    """Inclusive range conditions; open ends are skipped."""
    conditions: list[ColumnElement[bool]] = []
    if start is not None:
        conditions.append(column >= start)
    if end is not None:
        conditions.append(column <= end)
    return conditions


async def fetch_page(
    session: AsyncSession,
    stmt: Select[Any],
    *,
    model: Any,
    page: PageRequest,
) -> tuple[Result[Any], int]:
    """Run the count and page queries for a filtered statement.

    Args:
        session: Active session.
        stmt: Filtered SELECT without ordering or slicing.
        model: Mapped class whose column named page.sort_field is sorted on.
        page: Requested slice and ordering.

    Returns:
        tuple: (page result, total matching rows).
    """
    count_stmt = select(func.count()).select_from(stmt.subquery())
    total = (await session.execute(count_stmt)).scalar_one()

    column = getattr(model, page.sort_field, model.created_at)
    order = column.desc() if page.descending else column.asc()
    page_stmt = stmt.order_by(order, model.id).limit(page.limit).offset(page.offset)
    return await session.execute(page_stmt), total


async def flush_or_conflict(
    session: AsyncSession,
    *,
    resource_type: str,
    field: str | None = None,
    code: ErrorCode = ErrorCode.RESOURCE_CONFLICT,
) -> None:
    """Flush pending writes, re-raising integrity errors as RecordConflictError.

    Raises:
        RecordConflictError: The flush violated a unique or foreign key
            constraint. The session is rolled back first.
    """
    try:
        await session.flush()
    except IntegrityError as exc:
        await session.rollback()
        raise RecordConflictError(
            ConflictError(
                code=code,
                message=f"{resource_type} conflicts with existing data",
                resource_type=resource_type,
                conflicting_field=field,
            )
        ) from exc

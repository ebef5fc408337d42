"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for business failures. The
presentation layer pattern-matches on the Result and turns a Failure into
an RFC 9457 error response.

Usage:
    async def handle(self, query: GetTask) -> Result[Task, DomainError]:
        task = await self._tasks.find_by_id(query.task_id)
        if task is None:
            return Failure(
                error=not_found(ErrorCode.TASK_NOT_FOUND, "Task", query.task_id)
            )
        return Success(value=task)

    match await handler.handle(query):
        case Success(value=task):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


Result: TypeAlias = Success[T] | Failure[E]

"""Exception raised by repositories when a write breaks a constraint.

Repositories catch the driver's integrity error at flush time and re-raise
it as RecordConflictError carrying a ConflictError, so handlers can turn it
into a Failure without importing SQLAlchemy.

Usage:
    try:
        await self._members.save(member)
    except RecordConflictError as exc:
        return Failure(error=exc.conflict)
"""

from src.core.errors import ConflictError


class RecordConflictError(Exception):
    """A write conflicted with existing data (unique or foreign key)."""

    def __init__(self, conflict: ConflictError) -> None:
        super().__init__(conflict.message)
        self.conflict = conflict

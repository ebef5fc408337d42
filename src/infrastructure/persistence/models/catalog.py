"""Catalog models: role catalogue, task statuses and priorities.

The three tables share the same code/name/description columns. Rows are
hard deleted; task_statuses and priorities rows referenced by a task are
protected by RESTRICT foreign keys on tasks.
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel


class CatalogColumnsMixin:
    """Columns shared by every code/name lookup table."""

    code: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Short machine code (unique)",
    )

    name: Mapped[str] = mapped_column(String(100), nullable=False)

    description: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(code={self.code!r}, name={self.name!r})>"


class Role(CatalogColumnsMixin, BaseMutableModel):
    """Role catalogue row (descriptive only; members store their role code)."""

    __tablename__ = "roles"


class TaskStatus(CatalogColumnsMixin, BaseMutableModel):
    """Workflow status a task can be in."""

    __tablename__ = "task_statuses"


class Priority(CatalogColumnsMixin, BaseMutableModel):
    """Task priority level."""

    __tablename__ = "priorities"

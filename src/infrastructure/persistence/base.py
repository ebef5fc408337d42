"""Base model and mixins for all database entities.

This module provides:
- BaseModel: Base class for ALL models (provides id, created_at)
- TimestampMixin: Adds updated_at
- SoftDeleteMixin: Adds deleted_at for rows that are hidden instead of removed
- BaseMutableModel: Base for mutable models (id, created_at, updated_at)
- BaseSoftDeleteModel: Base for mutable, soft-deletable models

Domain entities are mapped to/from these models by repositories; they never
inherit from them.

Architecture:
    BaseModel (id, created_at)
        ↑
        └── BaseMutableModel (+ updated_at)
            ├── RoleModel, TaskStatusModel, PriorityModel, ...
            └── BaseSoftDeleteModel (+ deleted_at)
                ├── MemberModel
                ├── ProjectModel, BoardModel
                └── TaskModel, TaskCommentModel, NotificationModel

The generic Uuid type keeps models portable between PostgreSQL (asyncpg)
and SQLite (aiosqlite, used by local runs and integration tests).
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.engine import Dialect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator[datetime]):
    """Timezone-aware DateTime that always round-trips as UTC.

    SQLite stores datetimes without an offset; values read back are tagged
    as UTC so domain code only ever sees aware datetimes.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(UTC)
        return value

    def process_result_value(
        self, value: datetime | None, dialect: Dialect
    ) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value


class BaseModel(DeclarativeBase):
    """Base class for all database models.

    Provides:
    - id: UUID primary key (auto-generated)
    - created_at: Timestamp when record was created (UTC)
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary (for debugging/logging)."""
        return {
            "id": str(self.id),
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }


class TimestampMixin:
    """Mixin for mutable models that track updates."""

    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime,
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend BaseModel.to_dict() with updated_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["updated_at"] = self.updated_at.isoformat() if self.updated_at else None
        return data


class SoftDeleteMixin:
    """Mixin for models that are hidden rather than removed.

    Repositories filter on deleted_at IS NULL for every lookup; a non-null
    value means the row is gone as far as the API is concerned.
    """

    deleted_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        default=None,
        index=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Extend the parent to_dict() with deleted_at."""
        data: dict[str, Any] = super().to_dict()  # type: ignore[misc]
        data["deleted_at"] = self.deleted_at.isoformat() if self.deleted_at else None
        return data


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base class for mutable database models (id, created_at, updated_at)."""

    __abstract__ = True


class BaseSoftDeleteModel(SoftDeleteMixin, BaseMutableModel):
    """Base class for mutable models with soft delete.

    Provides id, created_at, updated_at and deleted_at.
    """

    __abstract__ = True

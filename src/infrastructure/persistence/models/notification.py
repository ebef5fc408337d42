"""Notification model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseSoftDeleteModel, UTCDateTime


class Notification(BaseSoftDeleteModel):
    """Notification delivered to a single member.

    Foreign Keys:
        - recipient_id: References members(id) ON DELETE CASCADE
        - task_id: References tasks(id) ON DELETE SET NULL (nullable)

    Indexes:
        - idx_notifications_recipient_read: (recipient_id, is_read) for inbox queries
    """

    __tablename__ = "notifications"

    recipient_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )

    task_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("tasks.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    notification_type: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        comment="assignment, comment or status_change",
    )

    message: Mapped[str] = mapped_column(Text, nullable=False)

    is_read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    read_at: Mapped[datetime | None] = mapped_column(
        UTCDateTime,
        nullable=True,
        default=None,
    )

    __table_args__ = (
        Index("idx_notifications_recipient_read", "recipient_id", "is_read"),
    )

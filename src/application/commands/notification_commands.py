"""Notification commands. Only the recipient may act on a notification."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UpdateNotification:
    """Mark a notification read or unread."""

    actor_id: UUID
    notification_id: UUID
    is_read: bool


@dataclass(frozen=True, kw_only=True)
class DeleteNotification:
    """Soft delete a notification."""

    actor_id: UUID
    notification_id: UUID

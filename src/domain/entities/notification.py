"""Notification entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import NotificationType


@dataclass
class Notification:
    """Message delivered to one member about task activity.

    Business Rules:
        - Only the recipient can read, update or delete it
        - Marking read stamps read_at once; marking unread clears it

    Attributes:
        id: Unique notification identifier
        recipient_id: Member who receives the notification
        task_id: Task the notification is about (if any)
        notification_type: Kind of activity
        message: Human-readable text
        is_read: Read flag
        read_at: When the notification was marked read
        created_at: Creation timestamp
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

    id: UUID
    recipient_id: UUID
    task_id: UUID | None
    notification_type: NotificationType
    message: str
    is_read: bool
    read_at: datetime | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def mark_read(self, is_read: bool, now: datetime) -> None:
        """Set the read flag, keeping read_at consistent with it.

        Args:
            is_read: New read state.
            now: Timestamp to record when transitioning to read.
        """
        if is_read and not self.is_read:
            self.read_at = now
        elif not is_read:
            self.read_at = None
        self.is_read = is_read

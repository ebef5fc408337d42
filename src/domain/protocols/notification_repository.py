"""Notification repository protocol."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Notification
from src.domain.value_objects import NotificationFilter, Page, PageRequest


class NotificationRepository(Protocol):
    """Notification repository protocol (port).

    Lookups never return soft-deleted notifications.
    """

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        """Find an active notification by ID."""
        ...

    async def save(self, notification: Notification) -> None:
        """Create a new notification."""
        ...

    async def update(self, notification: Notification) -> None:
        """Update a notification (read flag, soft delete)."""
        ...

    async def search(
        self, criteria: NotificationFilter, page: PageRequest
    ) -> Page[Notification]:
        """Return one page of a recipient's active notifications."""
        ...

"""Notification queries. A member only ever sees their own notifications."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import NotificationFilter, PageRequest


@dataclass(frozen=True, kw_only=True)
class GetNotification:
    """Get one notification of the caller."""

    actor_id: UUID
    notification_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListNotifications:
    """List the caller's notifications (criteria.recipient_id is the caller)."""

    criteria: NotificationFilter
    page: PageRequest

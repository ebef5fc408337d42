"""Notification query handlers. Members only read their own notifications."""

from src.application.commands.handlers.notification_handlers import (
    load_received_notification,
)
from src.application.queries.notification_queries import (
    GetNotification,
    ListNotifications,
)
from src.core.errors import DomainError
from src.core.result import Result, Success
from src.domain.entities import Notification
from src.domain.protocols import NotificationRepository
from src.domain.value_objects import Page


class GetNotificationHandler:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notifications = notification_repo

    async def handle(self, query: GetNotification) -> Result[Notification, DomainError]:
        return await load_received_notification(
            self._notifications, query.notification_id, query.actor_id
        )


class ListNotificationsHandler:
    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notifications = notification_repo

    async def handle(
        self, query: ListNotifications
    ) -> Result[Page[Notification], DomainError]:
        return Success(
            value=await self._notifications.search(query.criteria, query.page)
        )

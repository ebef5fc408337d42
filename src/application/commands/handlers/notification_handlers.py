"""Notification command handlers.

Notifications are created by TaskNotifier; members only mark them read or
unread and delete them. Both operations are restricted to the recipient.
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from src.application.commands.notification_commands import (
    DeleteNotification,
    UpdateNotification,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Notification
from src.domain.errors import not_found, not_owner
from src.domain.protocols import LoggerProtocol, NotificationRepository


async def load_received_notification(
    notifications: NotificationRepository, notification_id: UUID, actor_id: UUID
) -> Result[Notification, DomainError]:
    """Load an active notification and check the actor received it."""
    notification = await notifications.find_by_id(notification_id)
    if notification is None:
        return Failure(
            error=not_found(
                ErrorCode.NOTIFICATION_NOT_FOUND, "Notification", notification_id
            )
        )
    if notification.recipient_id != actor_id:
        return Failure(error=not_owner("notification"))
    return Success(value=notification)


class UpdateNotificationHandler:
    def __init__(
        self, notification_repo: NotificationRepository, logger: LoggerProtocol
    ) -> None:
        self._notifications = notification_repo
        self._logger = logger

    async def handle(
        self, cmd: UpdateNotification
    ) -> Result[Notification, DomainError]:
        loaded = await load_received_notification(
            self._notifications, cmd.notification_id, cmd.actor_id
        )
        if isinstance(loaded, Failure):
            return loaded

        now = datetime.now(UTC)
        notification = replace(loaded.value, updated_at=now)
        notification.mark_read(cmd.is_read, now)
        await self._notifications.update(notification)

        self._logger.debug(
            "Notification updated",
            notification_id=str(notification.id),
            is_read=notification.is_read,
        )
        return Success(value=notification)


class DeleteNotificationHandler:
    def __init__(
        self, notification_repo: NotificationRepository, logger: LoggerProtocol
    ) -> None:
        self._notifications = notification_repo
        self._logger = logger

    async def handle(self, cmd: DeleteNotification) -> Result[None, DomainError]:
        loaded = await load_received_notification(
            self._notifications, cmd.notification_id, cmd.actor_id
        )
        if isinstance(loaded, Failure):
            return loaded

        now = datetime.now(UTC)
        await self._notifications.update(
            replace(loaded.value, deleted_at=now, updated_at=now)
        )

        self._logger.info("Notification deleted", notification_id=str(cmd.notification_id))
        return Success(value=None)

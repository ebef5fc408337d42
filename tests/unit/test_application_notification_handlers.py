"""Unit tests for notification handlers.

Only the recipient reads, marks or deletes a notification; anyone else gets
an authorization error.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.notification_handlers import (
    DeleteNotificationHandler,
    UpdateNotificationHandler,
)
from src.application.commands.notification_commands import (
    DeleteNotification,
    UpdateNotification,
)
from src.application.queries.handlers.notification_handlers import (
    GetNotificationHandler,
    ListNotificationsHandler,
)
from src.application.queries.notification_queries import (
    GetNotification,
    ListNotifications,
)
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Success
from src.domain.entities import Notification
from src.domain.enums import NotificationType
from src.domain.value_objects import NotificationFilter, Page, PageRequest


def _notification(recipient_id=None, is_read=False) -> Notification:
    now = datetime.now(UTC)
    return Notification(
        id=uuid7(),
        recipient_id=recipient_id or uuid7(),
        task_id=uuid7(),
        notification_type=NotificationType.COMMENT,
        message="New comment on task 'Fix login bug'",
        is_read=is_read,
        read_at=now if is_read else None,
        created_at=now,
        updated_at=now,
    )


def _repo(notification) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = notification
    return repo


@pytest.mark.unit
class TestNotificationHandlers:
    async def test_recipient_marks_read(self):
        notification = _notification()
        repo = _repo(notification)

        result = await UpdateNotificationHandler(repo, Mock()).handle(
            UpdateNotification(
                actor_id=notification.recipient_id,
                notification_id=notification.id,
                is_read=True,
            )
        )

        assert isinstance(result, Success)
        assert result.value.is_read is True
        assert result.value.read_at is not None
        repo.update.assert_awaited_once()

    async def test_recipient_marks_unread(self):
        notification = _notification(is_read=True)

        result = await UpdateNotificationHandler(_repo(notification), Mock()).handle(
            UpdateNotification(
                actor_id=notification.recipient_id,
                notification_id=notification.id,
                is_read=False,
            )
        )

        assert isinstance(result, Success)
        assert result.value.read_at is None

    async def test_other_member_is_forbidden(self):
        notification = _notification()
        repo = _repo(notification)

        result = await UpdateNotificationHandler(repo, Mock()).handle(
            UpdateNotification(
                actor_id=uuid7(), notification_id=notification.id, is_read=True
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        repo.update.assert_not_called()

    async def test_get_missing(self):
        result = await GetNotificationHandler(_repo(None)).handle(
            GetNotification(actor_id=uuid7(), notification_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.NOTIFICATION_NOT_FOUND

    async def test_delete_is_soft(self):
        notification = _notification()
        repo = _repo(notification)

        result = await DeleteNotificationHandler(repo, Mock()).handle(
            DeleteNotification(
                actor_id=notification.recipient_id, notification_id=notification.id
            )
        )

        assert isinstance(result, Success)
        assert repo.update.call_args.args[0].deleted_at is not None

    async def test_list_is_scoped_to_recipient(self):
        recipient_id = uuid7()
        repo = AsyncMock()
        repo.search.return_value = Page(
            items=[_notification(recipient_id)], total=1, page=1, limit=20
        )
        criteria = NotificationFilter(recipient_id=recipient_id, is_read=False)

        result = await ListNotificationsHandler(repo).handle(
            ListNotifications(criteria=criteria, page=PageRequest())
        )

        assert isinstance(result, Success)
        assert repo.search.call_args.args[0].recipient_id == recipient_id

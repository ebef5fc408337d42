"""Task notification service.

Creates the notifications raised by task activity:
    - assignment: sent to the assignee
    - comment: sent to the task creator when someone else comments
    - status_change: sent to the task creator when someone else moves it

Architecture:
    - Application service shared by the activity handlers
    - Writes through NotificationRepository inside the caller's session, so
      the notification commits together with the activity that raised it
"""

from datetime import datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities import Notification, Task
from src.domain.enums import NotificationType
from src.domain.protocols import NotificationRepository


class TaskNotifier:
    """Raise notifications about activity on a task.

    Usage:
        notifier = TaskNotifier(notification_repo)
        await notifier.assigned(task, assignee_id=member.id, now=now)
    """

    def __init__(self, notification_repo: NotificationRepository) -> None:
        self._notifications = notification_repo

    async def assigned(self, task: Task, *, assignee_id: UUID, now: datetime) -> Notification:
        return await self._send(
            recipient_id=assignee_id,
            task=task,
            notification_type=NotificationType.ASSIGNMENT,
            message=f"You have been assigned to task '{task.title}'",
            now=now,
        )

    async def commented(
        self, task: Task, *, commenter_id: UUID, now: datetime
    ) -> Notification | None:
        """Notify the task creator of a comment; None if they wrote it."""
        if task.is_created_by(commenter_id):
            return None
        return await self._send(
            recipient_id=task.creator_id,
            task=task,
            notification_type=NotificationType.COMMENT,
            message=f"New comment on task '{task.title}'",
            now=now,
        )

    async def status_changed(
        self, task: Task, *, changed_by_id: UUID, status_name: str, now: datetime
    ) -> Notification | None:
        """Notify the task creator of a status move; None if they made it."""
        if task.is_created_by(changed_by_id):
            return None
        return await self._send(
            recipient_id=task.creator_id,
            task=task,
            notification_type=NotificationType.STATUS_CHANGE,
            message=f"Task '{task.title}' moved to {status_name}",
            now=now,
        )

    async def _send(
        self,
        *,
        recipient_id: UUID,
        task: Task,
        notification_type: NotificationType,
        message: str,
        now: datetime,
    ) -> Notification:
        notification = Notification(
            id=uuid7(),
            recipient_id=recipient_id,
            task_id=task.id,
            notification_type=notification_type,
            message=message,
            is_read=False,
            read_at=None,
            created_at=now,
            updated_at=now,
        )
        await self._notifications.save(notification)
        return notification

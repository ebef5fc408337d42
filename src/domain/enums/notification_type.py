"""Notification types emitted by task activity."""

from enum import Enum


class NotificationType(str, Enum):
    """Kinds of notifications a member can receive.

    ASSIGNMENT: The member was assigned to a task.
    COMMENT: Someone commented on a task the member created.
    STATUS_CHANGE: Someone moved a task the member created to a new status.
    """

    ASSIGNMENT = "assignment"
    COMMENT = "comment"
    STATUS_CHANGE = "status_change"

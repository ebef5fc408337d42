"""Search filters for list (index) operations.

Each filter is an immutable set of optional criteria. A None criterion is
not applied. Text criteria match case-insensitive substrings. Date ranges
are inclusive on both ends.

The *_SORT_FIELDS constants are the columns each resource may be ordered
by; anything else falls back to created_at descending.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import MemberRole, NotificationType

MEMBER_SORT_FIELDS = frozenset({"name", "email", "role", "created_at", "updated_at"})
CATALOG_SORT_FIELDS = frozenset({"code", "name", "created_at", "updated_at"})
PROJECT_SORT_FIELDS = frozenset({"code", "name", "created_at", "updated_at"})
MEMBERSHIP_SORT_FIELDS = frozenset({"created_at", "updated_at"})
BOARD_SORT_FIELDS = frozenset({"code", "name", "created_at", "updated_at"})
TASK_SORT_FIELDS = frozenset({"title", "due_date", "created_at", "updated_at"})
ASSIGNMENT_SORT_FIELDS = frozenset({"assigned_at", "created_at", "updated_at"})
COMMENT_SORT_FIELDS = frozenset({"created_at", "updated_at"})
STATUS_CHANGE_SORT_FIELDS = frozenset({"changed_at", "created_at", "updated_at"})
NOTIFICATION_SORT_FIELDS = frozenset({"created_at", "updated_at", "read_at"})


@dataclass(frozen=True, slots=True, kw_only=True)
class MemberFilter:
    """Member directory criteria."""

    role: MemberRole | None = None
    name: str | None = None
    email: str | None = None
    created_at_from: datetime | None = None
    created_at_to: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogFilter:
    """Catalog criteria; search matches code or name."""

    search: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectFilter:
    """Project criteria; search matches code, name or description."""

    search: str | None = None
    owner_id: UUID | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ProjectMemberFilter:
    """Project membership criteria."""

    project_id: UUID
    user_id: UUID | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BoardFilter:
    """Board criteria within one project."""

    project_id: UUID
    search: str | None = None
    owner_id: UUID | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class BoardMemberFilter:
    """Board membership criteria; search matches member name or email."""

    board_id: UUID
    search: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class TaskFilter:
    """Task criteria; search matches title or description."""

    status_id: UUID | None = None
    priority_id: UUID | None = None
    creator_id: UUID | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None
    search: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AssignmentFilter:
    """Assignment criteria within one task."""

    task_id: UUID
    assignee_id: UUID | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class CommentFilter:
    """Comment criteria within one task."""

    task_id: UUID
    commenter_id: UUID | None = None
    comment_body: str | None = None
    created_at_from: datetime | None = None
    created_at_to: datetime | None = None
    updated_at_from: datetime | None = None
    updated_at_to: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class StatusChangeFilter:
    """Status change criteria within one task."""

    task_id: UUID
    new_status_id: UUID | None = None
    changed_at_from: datetime | None = None
    changed_at_to: datetime | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotificationFilter:
    """Notification criteria for one recipient."""

    recipient_id: UUID
    notification_type: NotificationType | None = None
    is_read: bool | None = None

"""Domain value objects (immutable, no identity)."""

from src.domain.value_objects.filters import (
    AssignmentFilter,
    BoardFilter,
    BoardMemberFilter,
    CatalogFilter,
    CommentFilter,
    MemberFilter,
    NotificationFilter,
    ProjectFilter,
    ProjectMemberFilter,
    StatusChangeFilter,
    TaskFilter,
)
from src.domain.value_objects.pagination import Page, PageRequest, parse_sort

__all__ = [
    "AssignmentFilter",
    "BoardFilter",
    "BoardMemberFilter",
    "CatalogFilter",
    "CommentFilter",
    "MemberFilter",
    "NotificationFilter",
    "Page",
    "PageRequest",
    "ProjectFilter",
    "ProjectMemberFilter",
    "StatusChangeFilter",
    "TaskFilter",
    "parse_sort",
]

"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetTask, ListMembers).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.board_queries import (
    GetBoard,
    GetBoardMember,
    ListBoardMembers,
    ListBoards,
)
from src.application.queries.catalog_queries import GetCatalogEntry, ListCatalogEntries
from src.application.queries.member_queries import GetMember, ListMembers
from src.application.queries.notification_queries import (
    GetNotification,
    ListNotifications,
)
from src.application.queries.project_queries import (
    GetProject,
    GetProjectMember,
    ListProjectMembers,
    ListProjects,
)
from src.application.queries.task_queries import (
    GetAssignment,
    GetComment,
    GetStatusChange,
    GetTask,
    ListAssignments,
    ListComments,
    ListStatusChanges,
    ListTasks,
)

__all__ = [
    "GetBoard",
    "GetBoardMember",
    "ListBoardMembers",
    "ListBoards",
    "GetCatalogEntry",
    "ListCatalogEntries",
    "GetMember",
    "ListMembers",
    "GetNotification",
    "ListNotifications",
    "GetProject",
    "GetProjectMember",
    "ListProjectMembers",
    "ListProjects",
    "GetAssignment",
    "GetComment",
    "GetStatusChange",
    "GetTask",
    "ListAssignments",
    "ListComments",
    "ListStatusChanges",
    "ListTasks",
]

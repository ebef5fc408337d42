"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.board import Board, BoardMember
from src.domain.entities.catalog import CatalogEntry, Priority, Role, TaskStatus
from src.domain.entities.member import Member
from src.domain.entities.notification import Notification
from src.domain.entities.project import Project, ProjectMember
from src.domain.entities.task import (
    Task,
    TaskAssignment,
    TaskComment,
    TaskStatusChange,
    TaskSummary,
)

__all__ = [
    "Board",
    "BoardMember",
    "CatalogEntry",
    "Member",
    "Notification",
    "Priority",
    "Project",
    "ProjectMember",
    "Role",
    "Task",
    "TaskAssignment",
    "TaskComment",
    "TaskStatus",
    "TaskStatusChange",
    "TaskSummary",
]

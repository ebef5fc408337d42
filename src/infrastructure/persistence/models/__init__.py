"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - member.py: Member model (all roles, one table)
    - catalog.py: Role catalogue, task statuses and priorities
    - project.py: Projects and project memberships
    - board.py: Boards and board memberships
    - task.py: Tasks, assignments, comments and status changes
    - notification.py: Notifications

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.board import Board, BoardMember
from src.infrastructure.persistence.models.catalog import Priority, Role, TaskStatus
from src.infrastructure.persistence.models.member import Member
from src.infrastructure.persistence.models.notification import Notification
from src.infrastructure.persistence.models.project import Project, ProjectMember
from src.infrastructure.persistence.models.task import (
    Task,
    TaskAssignment,
    TaskComment,
    TaskStatusChange,
)

__all__ = [
    "Board",
    "BoardMember",
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
]

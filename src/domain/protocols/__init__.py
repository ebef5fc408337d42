"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import PasswordHashingProtocol, TokenGenerationProtocol
    from src.domain.protocols import MemberRepository, TaskRepository
"""

# Service protocols
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from src.domain.protocols.token_generation_protocol import (
    TokenGenerationProtocol,
    TokenPair,
    TokenPayload,
)

# Repository protocols
from src.domain.protocols.board_repository import (
    BoardMemberRepository,
    BoardRepository,
)
from src.domain.protocols.catalog_repository import CatalogRepository
from src.domain.protocols.member_repository import MemberRepository
from src.domain.protocols.notification_repository import NotificationRepository
from src.domain.protocols.project_repository import (
    ProjectMemberRepository,
    ProjectRepository,
)
from src.domain.protocols.task_activity_repository import (
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskStatusChangeRepository,
)
from src.domain.protocols.task_repository import TaskRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "TokenGenerationProtocol",
    "TokenPair",
    "TokenPayload",
    # Repository protocols
    "BoardMemberRepository",
    "BoardRepository",
    "CatalogRepository",
    "MemberRepository",
    "NotificationRepository",
    "ProjectMemberRepository",
    "ProjectRepository",
    "TaskAssignmentRepository",
    "TaskCommentRepository",
    "TaskRepository",
    "TaskStatusChangeRepository",
]

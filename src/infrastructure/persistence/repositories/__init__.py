"""Repository implementations (adapters).

SQLAlchemy implementations of the domain repository protocols. Each
repository takes the request-scoped AsyncSession and maps models to domain
entities.
"""

from src.infrastructure.persistence.repositories.board_repository import (
    BoardMemberRepository,
    BoardRepository,
)
from src.infrastructure.persistence.repositories.catalog_repository import (
    PriorityRepository,
    RoleRepository,
    TaskStatusRepository,
)
from src.infrastructure.persistence.repositories.member_repository import (
    MemberRepository,
)
from src.infrastructure.persistence.repositories.notification_repository import (
    NotificationRepository,
)
from src.infrastructure.persistence.repositories.project_repository import (
    ProjectMemberRepository,
    ProjectRepository,
)
from src.infrastructure.persistence.repositories.task_activity_repository import (
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskStatusChangeRepository,
)
from src.infrastructure.persistence.repositories.task_repository import (
    TaskRepository,
)

__all__ = [
    "BoardMemberRepository",
    "BoardRepository",
    "MemberRepository",
    "NotificationRepository",
    "PriorityRepository",
    "ProjectMemberRepository",
    "ProjectRepository",
    "RoleRepository",
    "TaskAssignmentRepository",
    "TaskCommentRepository",
    "TaskRepository",
    "TaskStatusChangeRepository",
    "TaskStatusRepository",
]

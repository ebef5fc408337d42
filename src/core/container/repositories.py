"""Repository dependency factories.

Request-scoped repository instances. Every factory depends on
get_db_session, which FastAPI resolves once per request, so all
repositories of one request write through the same unit of work.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session
from src.infrastructure.persistence.repositories import (
    BoardMemberRepository,
    BoardRepository,
    MemberRepository,
    NotificationRepository,
    PriorityRepository,
    ProjectMemberRepository,
    ProjectRepository,
    RoleRepository,
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskRepository,
    TaskStatusChangeRepository,
    TaskStatusRepository,
)


async def get_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> MemberRepository:
    """Get member repository (request-scoped).

    Usage:
        @router.get("/members/{member_id}")
        async def get_member(
            member_repo: MemberRepository = Depends(get_member_repository),
        ): ...
    """
    return MemberRepository(session=session)


async def get_role_repository(
    session: AsyncSession = Depends(get_db_session),
) -> RoleRepository:
    return RoleRepository(session=session)


async def get_task_status_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TaskStatusRepository:
    return TaskStatusRepository(session=session)


async def get_priority_repository(
    session: AsyncSession = Depends(get_db_session),
) -> PriorityRepository:
    return PriorityRepository(session=session)


async def get_project_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ProjectRepository:
    return ProjectRepository(session=session)


async def get_project_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ProjectMemberRepository:
    return ProjectMemberRepository(session=session)


async def get_board_repository(
    session: AsyncSession = Depends(get_db_session),
) -> BoardRepository:
    return BoardRepository(session=session)


async def get_board_member_repository(
    session: AsyncSession = Depends(get_db_session),
) -> BoardMemberRepository:
    return BoardMemberRepository(session=session)


async def get_task_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TaskRepository:
    return TaskRepository(session=session)


async def get_task_assignment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TaskAssignmentRepository:
    return TaskAssignmentRepository(session=session)


async def get_task_comment_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TaskCommentRepository:
    return TaskCommentRepository(session=session)


async def get_task_status_change_repository(
    session: AsyncSession = Depends(get_db_session),
) -> TaskStatusChangeRepository:
    return TaskStatusChangeRepository(session=session)


async def get_notification_repository(
    session: AsyncSession = Depends(get_db_session),
) -> NotificationRepository:
    """Get notification repository (request-scoped).

    Task activity handlers and TaskNotifier share it, so notifications
    commit together with the activity that raised them.
    """
    return NotificationRepository(session=session)

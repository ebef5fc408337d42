"""Task, task activity and notification handler dependency factories.

Activity handlers get a TaskNotifier built on the request's notification
repository, so a notification commits with the activity that raised it.
"""

from fastapi import Depends

from src.application.commands.handlers.notification_handlers import (
    DeleteNotificationHandler,
    UpdateNotificationHandler,
)
from src.application.commands.handlers.task_activity_handlers import (
    AssignTaskHandler,
    CreateCommentHandler,
    DeleteCommentHandler,
    DeleteStatusChangeHandler,
    RecordStatusChangeHandler,
    UnassignTaskHandler,
    UpdateCommentHandler,
    UpdateStatusChangeHandler,
)
from src.application.commands.handlers.task_handlers import (
    CreateTaskHandler,
    DeleteTaskHandler,
    TaskReferences,
    UpdateTaskHandler,
)
from src.application.queries.handlers.notification_handlers import (
    GetNotificationHandler,
    ListNotificationsHandler,
)
from src.application.queries.handlers.task_handlers import (
    GetAssignmentHandler,
    GetCommentHandler,
    GetStatusChangeHandler,
    GetTaskHandler,
    ListAssignmentsHandler,
    ListCommentsHandler,
    ListStatusChangesHandler,
    ListTasksHandler,
)
from src.application.services import TaskNotifier
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_board_repository,
    get_member_repository,
    get_notification_repository,
    get_priority_repository,
    get_project_repository,
    get_task_assignment_repository,
    get_task_comment_repository,
    get_task_repository,
    get_task_status_change_repository,
    get_task_status_repository,
)
from src.infrastructure.persistence.repositories import (
    BoardRepository,
    MemberRepository,
    NotificationRepository,
    PriorityRepository,
    ProjectRepository,
    TaskAssignmentRepository,
    TaskCommentRepository,
    TaskRepository,
    TaskStatusChangeRepository,
    TaskStatusRepository,
)


async def get_task_references(
    status_repo: TaskStatusRepository = Depends(get_task_status_repository),
    priority_repo: PriorityRepository = Depends(get_priority_repository),
    project_repo: ProjectRepository = Depends(get_project_repository),
    board_repo: BoardRepository = Depends(get_board_repository),
) -> TaskReferences:
    return TaskReferences(
        status_repo=status_repo,
        priority_repo=priority_repo,
        project_repo=project_repo,
        board_repo=board_repo,
    )


async def get_task_notifier(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> TaskNotifier:
    return TaskNotifier(notification_repo=notification_repo)


# ============================================================================
# Tasks
# ============================================================================


async def get_create_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    references: TaskReferences = Depends(get_task_references),
) -> CreateTaskHandler:
    return CreateTaskHandler(
        task_repo=task_repo, references=references, logger=get_logger()
    )


async def get_update_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    references: TaskReferences = Depends(get_task_references),
) -> UpdateTaskHandler:
    return UpdateTaskHandler(
        task_repo=task_repo, references=references, logger=get_logger()
    )


async def get_delete_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> DeleteTaskHandler:
    return DeleteTaskHandler(task_repo=task_repo, logger=get_logger())


async def get_get_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> GetTaskHandler:
    return GetTaskHandler(task_repo=task_repo)


async def get_list_tasks_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
) -> ListTasksHandler:
    return ListTasksHandler(task_repo=task_repo)


# ============================================================================
# Assignments
# ============================================================================


async def get_assign_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    assignment_repo: TaskAssignmentRepository = Depends(
        get_task_assignment_repository
    ),
    member_repo: MemberRepository = Depends(get_member_repository),
    notifier: TaskNotifier = Depends(get_task_notifier),
) -> AssignTaskHandler:
    return AssignTaskHandler(
        task_repo=task_repo,
        assignment_repo=assignment_repo,
        member_repo=member_repo,
        notifier=notifier,
        logger=get_logger(),
    )


async def get_unassign_task_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    assignment_repo: TaskAssignmentRepository = Depends(
        get_task_assignment_repository
    ),
) -> UnassignTaskHandler:
    return UnassignTaskHandler(
        task_repo=task_repo, assignment_repo=assignment_repo, logger=get_logger()
    )


async def get_get_assignment_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    assignment_repo: TaskAssignmentRepository = Depends(
        get_task_assignment_repository
    ),
) -> GetAssignmentHandler:
    return GetAssignmentHandler(task_repo=task_repo, assignment_repo=assignment_repo)


async def get_list_assignments_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    assignment_repo: TaskAssignmentRepository = Depends(
        get_task_assignment_repository
    ),
) -> ListAssignmentsHandler:
    return ListAssignmentsHandler(
        task_repo=task_repo, assignment_repo=assignment_repo
    )


# ============================================================================
# Comments
# ============================================================================


async def get_create_comment_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    comment_repo: TaskCommentRepository = Depends(get_task_comment_repository),
    notifier: TaskNotifier = Depends(get_task_notifier),
) -> CreateCommentHandler:
    return CreateCommentHandler(
        task_repo=task_repo,
        comment_repo=comment_repo,
        notifier=notifier,
        logger=get_logger(),
    )


async def get_update_comment_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    comment_repo: TaskCommentRepository = Depends(get_task_comment_repository),
) -> UpdateCommentHandler:
    return UpdateCommentHandler(
        task_repo=task_repo, comment_repo=comment_repo, logger=get_logger()
    )


async def get_delete_comment_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    comment_repo: TaskCommentRepository = Depends(get_task_comment_repository),
) -> DeleteCommentHandler:
    return DeleteCommentHandler(
        task_repo=task_repo, comment_repo=comment_repo, logger=get_logger()
    )


async def get_get_comment_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    comment_repo: TaskCommentRepository = Depends(get_task_comment_repository),
) -> GetCommentHandler:
    return GetCommentHandler(task_repo=task_repo, comment_repo=comment_repo)


async def get_list_comments_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    comment_repo: TaskCommentRepository = Depends(get_task_comment_repository),
) -> ListCommentsHandler:
    return ListCommentsHandler(task_repo=task_repo, comment_repo=comment_repo)


# ============================================================================
# Status changes
# ============================================================================


async def get_record_status_change_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    status_repo: TaskStatusRepository = Depends(get_task_status_repository),
    status_change_repo: TaskStatusChangeRepository = Depends(
        get_task_status_change_repository
    ),
    notifier: TaskNotifier = Depends(get_task_notifier),
) -> RecordStatusChangeHandler:
    return RecordStatusChangeHandler(
        task_repo=task_repo,
        status_repo=status_repo,
        status_change_repo=status_change_repo,
        notifier=notifier,
        logger=get_logger(),
    )


async def get_update_status_change_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    status_repo: TaskStatusRepository = Depends(get_task_status_repository),
    status_change_repo: TaskStatusChangeRepository = Depends(
        get_task_status_change_repository
    ),
) -> UpdateStatusChangeHandler:
    return UpdateStatusChangeHandler(
        task_repo=task_repo,
        status_repo=status_repo,
        status_change_repo=status_change_repo,
        logger=get_logger(),
    )


async def get_delete_status_change_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    status_change_repo: TaskStatusChangeRepository = Depends(
        get_task_status_change_repository
    ),
) -> DeleteStatusChangeHandler:
    return DeleteStatusChangeHandler(
        task_repo=task_repo,
        status_change_repo=status_change_repo,
        logger=get_logger(),
    )


async def get_get_status_change_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    status_change_repo: TaskStatusChangeRepository = Depends(
        get_task_status_change_repository
    ),
) -> GetStatusChangeHandler:
    return GetStatusChangeHandler(
        task_repo=task_repo, status_change_repo=status_change_repo
    )


async def get_list_status_changes_handler(
    task_repo: TaskRepository = Depends(get_task_repository),
    status_change_repo: TaskStatusChangeRepository = Depends(
        get_task_status_change_repository
    ),
) -> ListStatusChangesHandler:
    return ListStatusChangesHandler(
        task_repo=task_repo, status_change_repo=status_change_repo
    )


# ============================================================================
# Notifications
# ============================================================================


async def get_update_notification_handler(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> UpdateNotificationHandler:
    return UpdateNotificationHandler(
        notification_repo=notification_repo, logger=get_logger()
    )


async def get_delete_notification_handler(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> DeleteNotificationHandler:
    return DeleteNotificationHandler(
        notification_repo=notification_repo, logger=get_logger()
    )


async def get_get_notification_handler(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> GetNotificationHandler:
    return GetNotificationHandler(notification_repo=notification_repo)


async def get_list_notifications_handler(
    notification_repo: NotificationRepository = Depends(get_notification_repository),
) -> ListNotificationsHandler:
    return ListNotificationsHandler(notification_repo=notification_repo)

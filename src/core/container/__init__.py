"""Container module - Centralized dependency injection.

All factory functions are re-exported here:

    from src.core.container import get_logger, get_create_task_handler

The container is organized into modules by concern:
- infrastructure: Core services (database, session, security, logging)
- repositories: Repository factories (request-scoped)
- identity_handlers: Join/login/refresh and member directory handlers
- catalog_handlers: Role, task status and priority handlers
- workspace_handlers: Project and board handlers
- task_handlers: Task, task activity and notification handlers
"""

# Infrastructure services
from src.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_password_service,
    get_token_service,
    get_logger,
)

# Repositories
from src.core.container.repositories import (
    get_member_repository,
    get_role_repository,
    get_task_status_repository,
    get_priority_repository,
    get_project_repository,
    get_project_member_repository,
    get_board_repository,
    get_board_member_repository,
    get_task_repository,
    get_task_assignment_repository,
    get_task_comment_repository,
    get_task_status_change_repository,
    get_notification_repository,
)

# Identity handlers
from src.core.container.identity_handlers import (
    get_join_member_handler,
    get_login_member_handler,
    get_refresh_member_token_handler,
    get_create_member_handler,
    get_update_member_handler,
    get_delete_member_handler,
    get_get_member_handler,
    get_list_members_handler,
)

# Catalog handlers
from src.core.container.catalog_handlers import CatalogFactories, catalog_factories

# Project and board handlers
from src.core.container.workspace_handlers import (
    get_create_project_handler,
    get_update_project_handler,
    get_delete_project_handler,
    get_get_project_handler,
    get_list_projects_handler,
    get_add_project_member_handler,
    get_remove_project_member_handler,
    get_get_project_member_handler,
    get_list_project_members_handler,
    get_create_board_handler,
    get_update_board_handler,
    get_delete_board_handler,
    get_get_board_handler,
    get_list_boards_handler,
    get_add_board_member_handler,
    get_remove_board_member_handler,
    get_get_board_member_handler,
    get_list_board_members_handler,
)

# Task handlers
from src.core.container.task_handlers import (
    get_task_references,
    get_task_notifier,
    get_create_task_handler,
    get_update_task_handler,
    get_delete_task_handler,
    get_get_task_handler,
    get_list_tasks_handler,
    get_assign_task_handler,
    get_unassign_task_handler,
    get_get_assignment_handler,
    get_list_assignments_handler,
    get_create_comment_handler,
    get_update_comment_handler,
    get_delete_comment_handler,
    get_get_comment_handler,
    get_list_comments_handler,
    get_record_status_change_handler,
    get_update_status_change_handler,
    get_delete_status_change_handler,
    get_get_status_change_handler,
    get_list_status_changes_handler,
    get_update_notification_handler,
    get_delete_notification_handler,
    get_get_notification_handler,
    get_list_notifications_handler,
)

__all__ = [
    "CatalogFactories",
    "catalog_factories",
    "get_add_board_member_handler",
    "get_add_project_member_handler",
    "get_assign_task_handler",
    "get_board_member_repository",
    "get_board_repository",
    "get_create_board_handler",
    "get_create_comment_handler",
    "get_create_member_handler",
    "get_create_project_handler",
    "get_create_task_handler",
    "get_database",
    "get_db_session",
    "get_delete_board_handler",
    "get_delete_comment_handler",
    "get_delete_member_handler",
    "get_delete_notification_handler",
    "get_delete_project_handler",
    "get_delete_status_change_handler",
    "get_delete_task_handler",
    "get_get_assignment_handler",
    "get_get_board_handler",
    "get_get_board_member_handler",
    "get_get_comment_handler",
    "get_get_member_handler",
    "get_get_notification_handler",
    "get_get_project_handler",
    "get_get_project_member_handler",
    "get_get_status_change_handler",
    "get_get_task_handler",
    "get_join_member_handler",
    "get_list_assignments_handler",
    "get_list_board_members_handler",
    "get_list_boards_handler",
    "get_list_comments_handler",
    "get_list_members_handler",
    "get_list_notifications_handler",
    "get_list_project_members_handler",
    "get_list_projects_handler",
    "get_list_status_changes_handler",
    "get_list_tasks_handler",
    "get_logger",
    "get_login_member_handler",
    "get_member_repository",
    "get_notification_repository",
    "get_password_service",
    "get_priority_repository",
    "get_project_member_repository",
    "get_project_repository",
    "get_record_status_change_handler",
    "get_refresh_member_token_handler",
    "get_remove_board_member_handler",
    "get_remove_project_member_handler",
    "get_role_repository",
    "get_task_assignment_repository",
    "get_task_comment_repository",
    "get_task_notifier",
    "get_task_references",
    "get_task_repository",
    "get_task_status_change_repository",
    "get_task_status_repository",
    "get_token_service",
    "get_unassign_task_handler",
    "get_update_board_handler",
    "get_update_comment_handler",
    "get_update_member_handler",
    "get_update_notification_handler",
    "get_update_project_handler",
    "get_update_status_change_handler",
    "get_update_task_handler",
]

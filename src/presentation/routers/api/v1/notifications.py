"""Notification resource handlers.

Notifications are created by task activity; members only read, mark and
remove their own.

Handlers:
    search_notifications  - PATCH  /notifications
    get_notification      - GET    /notifications/{notification_id}
    update_notification   - PUT    /notifications/{notification_id}
    delete_notification   - DELETE /notifications/{notification_id}  (204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.notification_handlers import (
    DeleteNotificationHandler,
    UpdateNotificationHandler,
)
from src.application.commands.notification_commands import (
    DeleteNotification,
    UpdateNotification,
)
from src.application.queries.handlers.notification_handlers import (
    GetNotificationHandler,
    ListNotificationsHandler,
)
from src.application.queries.notification_queries import (
    GetNotification,
    ListNotifications,
)
from src.core.container import (
    get_delete_notification_handler,
    get_get_notification_handler,
    get_list_notifications_handler,
    get_update_notification_handler,
)
from src.core.result import Failure
from src.domain.value_objects import NotificationFilter
from src.domain.value_objects.filters import NOTIFICATION_SORT_FIELDS
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.notification_schemas import (
    NotificationResponse,
    NotificationSearchRequest,
    NotificationUpdateRequest,
)

NotificationIdPath = Annotated[UUID, Path(description="Notification UUID")]


async def search_notifications(
    current_user: AuthenticatedUser,
    data: NotificationSearchRequest,
    handler: ListNotificationsHandler = Depends(get_list_notifications_handler),
) -> PageResponse[NotificationResponse]:
    """List the caller's notifications.

    PATCH /api/v1/notifications → 200 OK
    """
    result = await handler.handle(
        ListNotifications(
            criteria=NotificationFilter(
                recipient_id=current_user.user_id,
                notification_type=data.notification_type,
                is_read=data.is_read,
            ),
            page=data.page_request(NOTIFICATION_SORT_FIELDS),
        )
    )
    return PageResponse[NotificationResponse].from_page(
        result.value, NotificationResponse.model_validate
    )


async def get_notification(
    request: Request,
    current_user: AuthenticatedUser,
    notification_id: NotificationIdPath,
    handler: GetNotificationHandler = Depends(get_get_notification_handler),
) -> NotificationResponse | JSONResponse:
    """GET /api/v1/notifications/{notification_id} → 200 OK"""
    result = await handler.handle(
        GetNotification(
            actor_id=current_user.user_id, notification_id=notification_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return NotificationResponse.model_validate(result.value)


async def update_notification(
    request: Request,
    current_user: AuthenticatedUser,
    notification_id: NotificationIdPath,
    data: NotificationUpdateRequest,
    handler: UpdateNotificationHandler = Depends(get_update_notification_handler),
) -> NotificationResponse | JSONResponse:
    """Mark a notification read or unread.

    PUT /api/v1/notifications/{notification_id} → 200 OK

    Marking read stamps read_at; marking unread clears it.
    """
    result = await handler.handle(
        UpdateNotification(
            actor_id=current_user.user_id,
            notification_id=notification_id,
            is_read=data.is_read,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return NotificationResponse.model_validate(result.value)


async def delete_notification(
    request: Request,
    current_user: AuthenticatedUser,
    notification_id: NotificationIdPath,
    handler: DeleteNotificationHandler = Depends(get_delete_notification_handler),
) -> JSONResponse | None:
    """DELETE /api/v1/notifications/{notification_id} → 204 No Content"""
    result = await handler.handle(
        DeleteNotification(
            actor_id=current_user.user_id, notification_id=notification_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

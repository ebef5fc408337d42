"""Notification request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.enums import NotificationType
from src.schemas.common_schemas import SearchRequest


class NotificationUpdateRequest(BaseModel):
    """PUT /api/v1/notifications/{notification_id}."""

    is_read: bool = Field(..., description="Mark read (true) or unread (false)")


class NotificationSearchRequest(SearchRequest):
    notification_type: NotificationType | None = None
    is_read: bool | None = None


class NotificationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    recipient_id: UUID
    task_id: UUID | None
    notification_type: NotificationType
    message: str
    is_read: bool
    read_at: datetime | None
    created_at: datetime
    updated_at: datetime

"""NotificationRepository - SQLAlchemy implementation of NotificationRepository.

Adapter for hexagonal architecture.
Maps between domain Notification entities and database NotificationModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Notification
from src.domain.enums import NotificationType
from src.domain.value_objects import NotificationFilter, Page, PageRequest
from src.infrastructure.persistence.models.notification import (
    Notification as NotificationModel,
)
from src.infrastructure.persistence.repositories.query_support import fetch_page


class NotificationRepository:
    """SQLAlchemy implementation of NotificationRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        """Find an active notification by ID."""
        stmt = select(NotificationModel).where(
            NotificationModel.id == notification_id,
            NotificationModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, notification: Notification) -> None:
        self.session.add(self._to_model(notification))
        await self.session.flush()

    async def update(self, notification: Notification) -> None:
        """Persist read state and soft delete.

        Raises:
            NoResultFound: If the notification row doesn't exist.
        """
        stmt = select(NotificationModel).where(NotificationModel.id == notification.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.is_read = notification.is_read
        model.read_at = notification.read_at
        model.updated_at = notification.updated_at
        model.deleted_at = notification.deleted_at

        await self.session.flush()

    async def search(
        self, criteria: NotificationFilter, page: PageRequest
    ) -> Page[Notification]:
        """One recipient's notifications, optionally by type and read flag."""
        stmt = select(NotificationModel).where(
            NotificationModel.recipient_id == criteria.recipient_id,
            NotificationModel.deleted_at.is_(None),
        )
        if criteria.notification_type is not None:
            stmt = stmt.where(
                NotificationModel.notification_type == criteria.notification_type.value
            )
        if criteria.is_read is not None:
            stmt = stmt.where(NotificationModel.is_read == criteria.is_read)

        result, total = await fetch_page(
            self.session, stmt, model=NotificationModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            recipient_id=model.recipient_id,
            task_id=model.task_id,
            notification_type=NotificationType(model.notification_type),
            message=model.message,
            is_read=model.is_read,
            read_at=model.read_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _to_model(self, notification: Notification) -> NotificationModel:
        return NotificationModel(
            id=notification.id,
            recipient_id=notification.recipient_id,
            task_id=notification.task_id,
            notification_type=notification.notification_type.value,
            message=notification.message,
            is_read=notification.is_read,
            read_at=notification.read_at,
            created_at=notification.created_at,
            updated_at=notification.updated_at,
            deleted_at=notification.deleted_at,
        )

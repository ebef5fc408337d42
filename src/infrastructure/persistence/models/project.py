"""Project and project membership models."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseMutableModel, BaseSoftDeleteModel


class Project(BaseSoftDeleteModel):
    """Project owned by the manager who created it.

    Foreign Keys:
        - owner_id: References members(id)

    Note:
        code is indexed but not unique at the database level; uniqueness is
        enforced among active projects so a soft-deleted project's code can
        be reused.
    """

    __tablename__ = "projects"

    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id"),
        nullable=False,
        index=True,
        comment="Manager who created and owns the project",
    )

    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)


class ProjectMember(BaseMutableModel):
    """Membership of a member in a project (hard deleted).

    Foreign Keys:
        - project_id: References projects(id) ON DELETE CASCADE
        - user_id: References members(id) ON DELETE CASCADE
    """

    __tablename__ = "project_members"

    project_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_members_project_user"),
    )

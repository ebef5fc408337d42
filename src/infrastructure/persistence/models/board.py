"""Board and board membership models."""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseSoftDeleteModel


class Board(BaseSoftDeleteModel):
    """Board inside a project, owned by the manager who created it.

    Foreign Keys:
        - project_id: References projects(id)
        - owner_id: References members(id)
    """

    __tablename__ = "boards"

    project_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id"),
        nullable=False,
        index=True,
    )

    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id"),
        nullable=False,
        index=True,
    )

    code: Mapped[str] = mapped_column(String(50), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)

    __table_args__ = (
        # Code lookups are always scoped to a project
        Index("idx_boards_project_code", "project_id", "code"),
    )


class BoardMember(BaseSoftDeleteModel):
    """Membership of a member in a board (soft deleted)."""

    __tablename__ = "board_members"

    board_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("boards.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

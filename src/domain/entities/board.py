"""Board and board membership entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Board:
    """Board inside a project.

    Business Rules:
        - Code is unique within its project
        - Only the board owner may update or delete it
        - Deletion is soft (deleted_at)

    Attributes:
        id: Unique board identifier
        project_id: Parent project FK
        owner_id: Member who owns the board
        code: Short code, unique per project
        name: Board name
        description: Optional description
        created_at: Creation timestamp
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

    id: UUID
    project_id: UUID
    owner_id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def is_owned_by(self, member_id: UUID) -> bool:
        """True if member_id owns this board."""
        return self.owner_id == member_id


@dataclass
class BoardMember:
    """Membership of a member on a board (soft-deletable).

    Attributes:
        id: Unique membership identifier
        board_id: Board FK
        user_id: Member FK
        created_at: When the member was added
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

    id: UUID
    board_id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

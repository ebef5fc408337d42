"""Project and project membership entities."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Project:
    """Project owned by a manager.

    Business Rules:
        - Code is unique across projects
        - Only the owner may update or delete the project
        - Deletion is soft (deleted_at)

    Attributes:
        id: Unique project identifier
        owner_id: Member who created and owns the project
        code: Short unique project code
        name: Project name
        description: Optional description
        created_at: Creation timestamp
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

    id: UUID
    owner_id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    def is_owned_by(self, member_id: UUID) -> bool:
        """True if member_id owns this project."""
        return self.owner_id == member_id


@dataclass
class ProjectMember:
    """Membership of a member in a project.

    Attributes:
        id: Unique membership identifier
        project_id: Project FK
        user_id: Member FK
        created_at: When the member joined the project
        updated_at: Last update timestamp
    """

    id: UUID
    project_id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime

"""Project and project membership repository protocols."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Project, ProjectMember
from src.domain.value_objects import (
    Page,
    PageRequest,
    ProjectFilter,
    ProjectMemberFilter,
)


class ProjectRepository(Protocol):
    """Project repository protocol (port).

    Lookups never return soft-deleted projects.
    """

    async def find_by_id(self, project_id: UUID) -> Project | None:
        """Find an active project by ID."""
        ...

    async def find_by_code(self, code: str) -> Project | None:
        """Find a project by code (soft-deleted included, codes stay unique)."""
        ...

    async def save(self, project: Project) -> None:
        """Create a new project."""
        ...

    async def update(self, project: Project) -> None:
        """Update an existing project (including soft delete)."""
        ...

    async def search(
        self, criteria: ProjectFilter, page: PageRequest
    ) -> Page[Project]:
        """Return one page of active projects matching criteria."""
        ...


class ProjectMemberRepository(Protocol):
    """Project membership repository protocol (port)."""

    async def find_by_id(self, membership_id: UUID) -> ProjectMember | None:
        """Find a membership by ID."""
        ...

    async def find_by_project_and_user(
        self, project_id: UUID, user_id: UUID
    ) -> ProjectMember | None:
        """Find the membership of user_id in project_id."""
        ...

    async def save(self, membership: ProjectMember) -> None:
        """Create a new membership."""
        ...

    async def delete(self, membership_id: UUID) -> None:
        """Hard-delete a membership."""
        ...

    async def search(
        self, criteria: ProjectMemberFilter, page: PageRequest
    ) -> Page[ProjectMember]:
        """Return one page of memberships for a project."""
        ...

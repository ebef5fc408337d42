"""Project and project membership queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import PageRequest, ProjectFilter, ProjectMemberFilter


@dataclass(frozen=True, kw_only=True)
class GetProject:
    """Get one active project."""

    project_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProjects:
    """Search projects by text or owner."""

    criteria: ProjectFilter
    page: PageRequest


@dataclass(frozen=True, kw_only=True)
class GetProjectMember:
    """Get one membership of a project."""

    project_id: UUID
    membership_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListProjectMembers:
    """List memberships of a project (criteria.project_id must exist)."""

    criteria: ProjectMemberFilter
    page: PageRequest

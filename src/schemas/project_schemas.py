"""Project and board request/response schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common_schemas import SearchRequest

# =============================================================================
# Projects
# =============================================================================


class ProjectCreateRequest(BaseModel):
    """POST /api/v1/projects (manager)."""

    code: str = Field(..., min_length=1, max_length=50, examples=["APOLLO"])
    name: str = Field(..., min_length=1, max_length=200, examples=["Apollo"])
    description: str | None = None


class ProjectUpdateRequest(BaseModel):
    """PUT /api/v1/projects/{project_id} (owner). Omitted fields are unchanged."""

    code: str | None = Field(None, min_length=1, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None


class ProjectSearchRequest(SearchRequest):
    search: str | None = Field(None, description="Substring of code, name or description")
    owner_id: UUID | None = None


class ProjectResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    owner_id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class MembershipCreateRequest(BaseModel):
    """Body for adding a member to a project or board."""

    user_id: UUID = Field(..., description="Member to add")


class ProjectMemberSearchRequest(SearchRequest):
    user_id: UUID | None = None


class ProjectMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Boards
# =============================================================================


class BoardCreateRequest(BaseModel):
    """POST /api/v1/projects/{project_id}/boards (manager)."""

    code: str = Field(..., min_length=1, max_length=50, examples=["SPRINT-1"])
    name: str = Field(..., min_length=1, max_length=200, examples=["Sprint 1"])
    description: str | None = None


class BoardUpdateRequest(BaseModel):
    code: str | None = Field(None, min_length=1, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None


class BoardSearchRequest(SearchRequest):
    search: str | None = Field(None, description="Substring of code, name or description")
    owner_id: UUID | None = None


class BoardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    project_id: UUID
    owner_id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class BoardMemberSearchRequest(SearchRequest):
    search: str | None = Field(None, description="Substring of member name or email")


class BoardMemberResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    board_id: UUID
    user_id: UUID
    created_at: datetime
    updated_at: datetime

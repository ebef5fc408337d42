"""Catalog request/response schemas (roles, task statuses, priorities)."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common_schemas import SearchRequest


class CatalogCreateRequest(BaseModel):
    code: str = Field(..., min_length=1, max_length=50, examples=["in_progress"])
    name: str = Field(..., min_length=1, max_length=100, examples=["In Progress"])
    description: str | None = None


class CatalogUpdateRequest(BaseModel):
    """Omitted fields are left unchanged."""

    code: str | None = Field(None, min_length=1, max_length=50)
    name: str | None = Field(None, min_length=1, max_length=100)
    description: str | None = None


class CatalogSearchRequest(SearchRequest):
    search: str | None = Field(None, description="Substring of code or name")


class CatalogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    code: str
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime

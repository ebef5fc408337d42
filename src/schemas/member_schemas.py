"""Authentication and member directory request/response schemas.

Endpoints:
    POST   /api/v1/auth/{role}/join       - Join (register) as role
    POST   /api/v1/auth/{role}/login      - Login as role
    POST   /api/v1/auth/{role}/refresh    - Refresh tokens
    POST   /api/v1/members                - Create member (manager)
    PATCH  /api/v1/members                - Search members
    GET    /api/v1/members/{member_id}    - Get member
    PUT    /api/v1/members/{member_id}    - Update member
    DELETE /api/v1/members/{member_id}    - Delete member (manager)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.application.dtos import AuthorizedResult, MemberResult
from src.domain.enums import MemberRole
from src.schemas.common_schemas import SearchRequest


# =============================================================================
# Authentication
# =============================================================================


class JoinRequest(BaseModel):
    """Request schema for joining as a role.

    POST /api/v1/auth/{role}/join
    Returns: 201 Created
    """

    email: EmailStr = Field(
        ..., description="Member's email address", examples=["ana@example.com"]
    )
    password: str = Field(
        ...,
        min_length=8,
        max_length=128,
        description="Password (8-128 chars)",
        examples=["SecurePass123!"],
    )
    name: str = Field(
        ..., min_length=1, max_length=100, description="Display name", examples=["Ana"]
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ana@example.com",
                "password": "SecurePass123!",
                "name": "Ana",
            }
        }
    )


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/{role}/login
    """

    email: EmailStr = Field(..., description="Member's email address")
    password: str = Field(
        ..., min_length=1, max_length=128, description="Member's password"
    )


class RefreshRequest(BaseModel):
    """Request schema for token refresh.

    POST /api/v1/auth/{role}/refresh
    """

    refresh_token: str = Field(..., min_length=1, description="Refresh JWT")


class TokenResponse(BaseModel):
    """Issued token pair."""

    access: str = Field(..., description="Access JWT (Authorization: Bearer)")
    refresh: str = Field(..., description="Refresh JWT")
    expired_at: datetime = Field(..., description="Access token expiry")
    refreshable_until: datetime = Field(..., description="Refresh token expiry")


# =============================================================================
# Members
# =============================================================================


class MemberResponse(BaseModel):
    """Public member representation (never includes the password hash)."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    name: str
    role: MemberRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_dto(cls, dto: MemberResult) -> "MemberResponse":
        return cls.model_validate(dto)


class AuthorizedResponse(MemberResponse):
    """Member plus token pair, returned by join, login and refresh."""

    token: TokenResponse

    @classmethod
    def from_result(cls, result: AuthorizedResult) -> "AuthorizedResponse":
        member = result.member
        return cls(
            id=member.id,
            email=member.email,
            name=member.name,
            role=member.role,
            created_at=member.created_at,
            updated_at=member.updated_at,
            token=TokenResponse(
                access=result.token.access,
                refresh=result.token.refresh,
                expired_at=result.token.expired_at,
                refreshable_until=result.token.refreshable_until,
            ),
        )


class MemberCreateRequest(JoinRequest):
    """Request schema for a manager creating a member of any role.

    POST /api/v1/members
    """

    role: MemberRole = Field(..., description="Role of the new member")


class MemberUpdateRequest(BaseModel):
    """Request schema for updating a member. Omitted fields are unchanged.

    PUT /api/v1/members/{member_id}
    """

    name: str | None = Field(None, min_length=1, max_length=100)
    email: EmailStr | None = None
    password: str | None = Field(None, min_length=8, max_length=128)


class MemberSearchRequest(SearchRequest):
    """Search body for PATCH /api/v1/members."""

    role: MemberRole | None = None
    name: str | None = Field(None, description="Name substring")
    email: str | None = Field(None, description="Email substring")
    created_at_from: datetime | None = None
    created_at_to: datetime | None = None

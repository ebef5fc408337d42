"""Member and authentication DTOs (Data Transfer Objects).

Result dataclasses returned by member and auth handlers. MemberResult never
carries the password hash.

DTOs:
    - MemberResult: Public view of a member
    - AuthorizedResult: Member plus issued token pair (join, login, refresh)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.entities import Member
from src.domain.enums import MemberRole
from src.domain.protocols import TokenPair


@dataclass(frozen=True, kw_only=True)
class MemberResult:
    """Public member data.

    Attributes:
        id: Member identifier.
        email: Email address.
        name: Display name.
        role: Member role.
        created_at: Registration timestamp.
        updated_at: Last update timestamp.
    """

    id: UUID
    email: str
    name: str
    role: MemberRole
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, member: Member) -> "MemberResult":
        """Project a Member entity, dropping the password hash."""
        return cls(
            id=member.id,
            email=member.email,
            name=member.name,
            role=member.role,
            created_at=member.created_at,
            updated_at=member.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class AuthorizedResult:
    """Response from join, login and refresh.

    Attributes:
        member: The authenticated member.
        token: Access/refresh pair with expiry instants.
    """

    member: MemberResult
    token: TokenPair

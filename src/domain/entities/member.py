"""Member domain entity.

A member is any person who can sign in: managers (tpm, pm, pmo) and
contributors (developer, designer, qa).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.enums import MemberRole


@dataclass
class Member:
    """Member domain entity with authentication data.

    Business Rules:
        - Email is unique across all roles
        - A member signs in only through the auth path of their own role
        - Soft-deleted members cannot sign in or be found

    Attributes:
        id: Unique member identifier
        email: Email address (unique)
        password_hash: Bcrypt hashed password (never plaintext)
        name: Display name
        role: The member's role
        created_at: Timestamp when member was created
        updated_at: Timestamp when member was last updated
        deleted_at: Soft delete timestamp (None while active)

    Example:
        >>> member = Member(
        ...     id=uuid7(),
        ...     email="dev@example.com",
        ...     password_hash="$2b$12$...",
        ...     name="Dana Dev",
        ...     role=MemberRole.DEVELOPER,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> member.can_login_as(MemberRole.DEVELOPER)
        True
    """

    id: UUID
    email: str
    password_hash: str
    name: str
    role: MemberRole
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        """True once the member has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def is_manager(self) -> bool:
        """True for tpm, pm and pmo members."""
        return self.role.is_manager

    def can_login_as(self, role: MemberRole) -> bool:
        """Check the member may authenticate through the given role's endpoint.

        Args:
            role: Role segment of the auth path.

        Returns:
            bool: True if the member is active and holds that role.
        """
        return not self.is_deleted and self.role == role

"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
- Field formats (email syntax, password length) are validated by the
  request schemas before a command is built
"""

from dataclasses import dataclass

from src.domain.enums import MemberRole


@dataclass(frozen=True, kw_only=True)
class JoinMember:
    """Register a new member under the role of the auth path.

    Attributes:
        role: Role segment of the path (/auth/{role}/join).
        email: Email address (normalized to lowercase).
        password: Plain text password (will be hashed).
        name: Display name.

    Example:
        >>> command = JoinMember(
        ...     role=MemberRole.DEVELOPER,
        ...     email="dev@example.com",
        ...     password="SecurePass123!",
        ...     name="Dana Dev",
        ... )
        >>> result = await handler.handle(command)
    """

    role: MemberRole
    email: str
    password: str
    name: str


@dataclass(frozen=True, kw_only=True)
class LoginMember:
    """Authenticate a member through the auth path of their role.

    Attributes:
        role: Role segment of the path (/auth/{role}/login).
        email: Email address.
        password: Plain text password.
    """

    role: MemberRole
    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshMemberToken:
    """Exchange a refresh token for a new token pair.

    Attributes:
        role: Role segment of the path; must match the token's type claim.
        refresh_token: Refresh JWT issued by join, login or refresh.
    """

    role: MemberRole
    refresh_token: str

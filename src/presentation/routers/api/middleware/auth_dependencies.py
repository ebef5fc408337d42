"""JWT authentication dependencies.

The decoded access token is the caller's identity. Routes trust it as-is;
ownership and role rules are enforced by the command handlers.

Usage:
    async def create_project(
        current_user: AuthenticatedUser,
        ...
    ): ...

    async def create_role(
        current_user: ManagerUser,
        ...
    ): ...
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.core.container import get_token_service
from src.core.result import Failure, Success
from src.domain.enums import MemberRole
from src.domain.protocols import TokenGenerationProtocol, TokenPayload

# Missing credentials are rejected in get_current_user with a 401
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Authenticated member extracted from an access token.

    Attributes:
        user_id: Member ID (JWT 'sub' claim).
        email: Member email (JWT 'email' claim).
        role: Member role (JWT 'type' claim).
        roles: Roles claim as issued (JWT 'roles' claim).
        token_jti: JWT unique identifier.
    """

    user_id: UUID
    email: str
    role: MemberRole
    roles: list[str]
    token_jti: str | None = None

    @property
    def is_manager(self) -> bool:
        return self.role.is_manager


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def _current_user_from_payload(payload: TokenPayload) -> CurrentUser:
    roles_raw = payload.get("roles", [])
    roles = [str(r) for r in roles_raw] if isinstance(roles_raw, list) else []
    jti = payload.get("jti")
    return CurrentUser(
        user_id=UUID(str(payload["sub"])),
        email=str(payload["email"]),
        role=MemberRole(str(payload["type"])),
        roles=roles,
        token_jti=str(jti) if jti else None,
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Validate the bearer access token and return the caller.

    Raises:
        HTTPException 401: Token missing, malformed, expired, a refresh
            token, or carrying an unknown role.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.validate_access_token(credentials.credentials):
        case Success(value=payload):
            try:
                return _current_user_from_payload(payload)
            except (KeyError, ValueError) as e:
                raise _unauthorized("Invalid token payload") from e
        case Failure(error=error):
            raise _unauthorized(error)


async def require_manager(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> CurrentUser:
    """Admit tpm, pm and pmo members only (403 otherwise)."""
    if not current_user.is_manager:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized: manager role required",
        )
    return current_user


# Type aliases for cleaner route signatures
AuthenticatedUser = Annotated[CurrentUser, Depends(get_current_user)]
ManagerUser = Annotated[CurrentUser, Depends(require_manager)]

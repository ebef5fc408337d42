"""Token generation protocol (port).

Defines how the application issues and validates the access/refresh token
pair returned by join, login and refresh.

Token claims:
    sub: member id
    email: member email
    roles: [role]
    type: member role (tpm, pm, ...)
    token_type: "access" or "refresh"
    iss, iat, exp, jti: standard registered claims
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.enums import MemberRole

TokenPayload = dict[str, str | int | list[str]]


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPair:
    """Access and refresh tokens issued together.

    Attributes:
        access: Short-lived bearer token for API calls.
        refresh: Long-lived token accepted only by the refresh endpoint.
        expired_at: When the access token expires.
        refreshable_until: When the refresh token expires.
    """

    access: str
    refresh: str
    expired_at: datetime
    refreshable_until: datetime


class TokenGenerationProtocol(Protocol):
    """Token issuing and validation interface.

    Usage:
        pair = token_service.generate_token_pair(
            member_id=member.id,
            email=member.email,
            role=member.role,
        )
        match token_service.validate_access_token(pair.access):
            case Success(value=payload):
                member_id = payload["sub"]
            case Failure(error=error):
                ...
    """

    def generate_token_pair(
        self,
        member_id: UUID,
        email: str,
        role: MemberRole,
    ) -> TokenPair:
        """Issue a new access/refresh token pair for a member."""
        ...

    def validate_access_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate an access token and return its claims.

        Returns:
            Success(payload) for a valid, unexpired access token.
            Failure(message) for anything else, including refresh tokens.
        """
        ...

    def validate_refresh_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate a refresh token and return its claims.

        Returns:
            Success(payload) for a valid, unexpired refresh token.
            Failure(message) for anything else, including access tokens.
        """
        ...

"""JWT token service (adapter).

This service implements the TokenGenerationProtocol using PyJWT with
HMAC-SHA256. Join, login and refresh all receive a pair of tokens: a
short-lived access token for API calls and a longer-lived refresh token
accepted only by the refresh endpoint of the member's role.

Architecture:
    - Implements TokenGenerationProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Security:
    - HMAC-SHA256 (HS256) algorithm
    - 256-bit secret key minimum
    - Issuer claim checked on every decode
    - token_type claim keeps refresh tokens out of API calls (and vice versa)
    - Unique JWT ID (jti, UUIDv7) per token
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from src.core.result import Failure, Result, Success
from src.domain.enums import MemberRole
from src.domain.errors import TokenError
from src.domain.protocols import TokenPair, TokenPayload

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTService:
    """JWT token pair generation and validation service.

    Usage:
        from src.core.container import get_token_service

        token_service = get_token_service()
        pair = token_service.generate_token_pair(
            member_id=member.id,
            email=member.email,
            role=member.role,
        )
        result = token_service.validate_access_token(pair.access)
    """

    def __init__(
        self,
        secret_key: str,
        access_expiration_minutes: int = 60,
        refresh_expiration_days: int = 7,
        issuer: str = "autobe",
        algorithm: str = "HS256",
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing.
                MUST be at least 256 bits (32 bytes) for security.
            access_expiration_minutes: Access token lifetime.
            refresh_expiration_days: Refresh token lifetime.
            issuer: Value of the iss claim.
            algorithm: JWS algorithm (HS256).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._access_ttl = timedelta(minutes=access_expiration_minutes)
        self._refresh_ttl = timedelta(days=refresh_expiration_days)
        self._issuer = issuer
        self._algorithm = algorithm

    def generate_token_pair(
        self,
        member_id: UUID,
        email: str,
        role: MemberRole,
    ) -> TokenPair:
        """Generate an access/refresh token pair for a member.

        Args:
            member_id: Member's unique identifier (sub claim).
            email: Member's email address.
            role: Member's role (type claim and single-entry roles claim).

        Returns:
            TokenPair with both tokens and their expiry instants.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> pair = service.generate_token_pair(
            ...     member_id=uuid7(),
            ...     email="pm@example.com",
            ...     role=MemberRole.PM,
            ... )
            >>> pair.refreshable_until > pair.expired_at
            True
        """
        now = datetime.now(UTC)
        expired_at = now + self._access_ttl
        refreshable_until = now + self._refresh_ttl

        access = self._encode(member_id, email, role, ACCESS_TOKEN_TYPE, now, expired_at)
        refresh = self._encode(
            member_id, email, role, REFRESH_TOKEN_TYPE, now, refreshable_until
        )

        return TokenPair(
            access=access,
            refresh=refresh,
            expired_at=expired_at,
            refreshable_until=refreshable_until,
        )

    def validate_access_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate an access token and extract its payload.

        Returns:
            Success(payload) or Failure with a TokenError message.
        """
        return self._decode(token, ACCESS_TOKEN_TYPE)

    def validate_refresh_token(self, token: str) -> Result[TokenPayload, str]:
        """Validate a refresh token and extract its payload.

        Returns:
            Success(payload) or Failure with a TokenError message.
        """
        return self._decode(token, REFRESH_TOKEN_TYPE)

    def _encode(
        self,
        member_id: UUID,
        email: str,
        role: MemberRole,
        token_type: str,
        issued_at: datetime,
        expires_at: datetime,
    ) -> str:
        payload = {
            "sub": str(member_id),
            "email": email,
            "roles": [role.value],
            "type": role.value,
            "token_type": token_type,
            "iss": self._issuer,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode(self, token: str, expected_type: str) -> Result[TokenPayload, str]:
        try:
            # PyJWT validates signature, exp and iss
            payload: TokenPayload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                options={"require": ["sub", "exp", "iat", "iss"]},
            )
        except ExpiredSignatureError:
            return Failure(error=TokenError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=TokenError.INVALID_TOKEN)

        if payload.get("token_type") != expected_type:
            return Failure(error=TokenError.WRONG_TOKEN_TYPE)

        return Success(value=payload)

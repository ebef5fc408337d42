"""Integration tests for JWT token service.

Tests the JWTService implementation with real cryptographic operations
(PyJWT, HS256).

Architecture:
- No mocking: real signing and validation
- Verifies Result type error handling
- Tests security properties (token type separation, expiry, tampering)
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from src.core.result import Failure, Success
from src.domain.enums import MemberRole
from src.domain.errors import TokenError
from src.infrastructure.security.jwt_service import JWTService

SECRET = "x" * 32


@pytest.mark.integration
class TestJWTServiceGeneration:
    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(secret_key="short")

    def test_pair_carries_member_claims(self):
        service = JWTService(secret_key=SECRET)
        member_id = uuid7()

        pair = service.generate_token_pair(
            member_id=member_id, email="pm@example.com", role=MemberRole.PM
        )
        result = service.validate_access_token(pair.access)

        assert isinstance(result, Success)
        payload = result.value
        assert payload["sub"] == str(member_id)
        assert payload["email"] == "pm@example.com"
        assert payload["type"] == "pm"
        assert payload["roles"] == ["pm"]
        assert payload["token_type"] == "access"
        assert payload["iss"] == "autobe"
        assert payload["jti"]

    @freeze_time("2026-03-01 12:00:00")
    def test_expiry_instants(self):
        service = JWTService(
            secret_key=SECRET, access_expiration_minutes=30, refresh_expiration_days=14
        )

        pair = service.generate_token_pair(
            member_id=uuid7(), email="qa@example.com", role=MemberRole.QA
        )

        now = datetime(2026, 3, 1, 12, 0, tzinfo=UTC)
        assert pair.expired_at == now + timedelta(minutes=30)
        assert pair.refreshable_until == now + timedelta(days=14)

    def test_tokens_are_unique(self):
        service = JWTService(secret_key=SECRET)
        member_id = uuid7()

        first = service.generate_token_pair(
            member_id=member_id, email="a@example.com", role=MemberRole.DEVELOPER
        )
        second = service.generate_token_pair(
            member_id=member_id, email="a@example.com", role=MemberRole.DEVELOPER
        )

        assert first.access != second.access
        assert first.access != first.refresh


@pytest.mark.integration
class TestJWTServiceValidation:
    def test_refresh_token_is_not_an_access_token(self):
        service = JWTService(secret_key=SECRET)
        pair = service.generate_token_pair(
            member_id=uuid7(), email="a@example.com", role=MemberRole.DESIGNER
        )

        assert service.validate_access_token(pair.refresh) == Failure(
            error=TokenError.WRONG_TOKEN_TYPE
        )
        assert service.validate_refresh_token(pair.access) == Failure(
            error=TokenError.WRONG_TOKEN_TYPE
        )
        assert isinstance(service.validate_refresh_token(pair.refresh), Success)

    def test_expired_access_token(self):
        service = JWTService(secret_key=SECRET, access_expiration_minutes=15)
        with freeze_time("2026-03-01 12:00:00"):
            pair = service.generate_token_pair(
                member_id=uuid7(), email="a@example.com", role=MemberRole.TPM
            )

        with freeze_time("2026-03-01 12:16:00"):
            assert service.validate_access_token(pair.access) == Failure(
                error=TokenError.EXPIRED_TOKEN
            )
            assert isinstance(service.validate_refresh_token(pair.refresh), Success)

    def test_wrong_secret(self):
        pair = JWTService(secret_key=SECRET).generate_token_pair(
            member_id=uuid7(), email="a@example.com", role=MemberRole.PMO
        )

        result = JWTService(secret_key="y" * 32).validate_access_token(pair.access)

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_wrong_issuer(self):
        pair = JWTService(secret_key=SECRET, issuer="elsewhere").generate_token_pair(
            member_id=uuid7(), email="a@example.com", role=MemberRole.PMO
        )

        result = JWTService(secret_key=SECRET).validate_access_token(pair.access)

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_garbage_token(self):
        result = JWTService(secret_key=SECRET).validate_access_token("not.a.jwt")

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_token_without_required_claims(self):
        token = jwt.encode({"email": "a@example.com"}, SECRET, algorithm="HS256")

        result = JWTService(secret_key=SECRET).validate_access_token(token)

        assert result == Failure(error=TokenError.INVALID_TOKEN)

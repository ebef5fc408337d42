"""Integration tests for BcryptPasswordService (real bcrypt, low cost factor)."""

import pytest

from src.infrastructure.security.bcrypt_password_service import BcryptPasswordService


@pytest.fixture
def service() -> BcryptPasswordService:
    return BcryptPasswordService(cost_factor=4)


@pytest.mark.integration
class TestBcryptPasswordService:
    @pytest.mark.parametrize("cost", [3, 32])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)

    def test_hash_format(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$04$")
        assert len(password_hash) == 60

    def test_hashes_are_salted(self, service):
        assert service.hash_password("pw") != service.hash_password("pw")

    def test_verify(self, service):
        password_hash = service.hash_password("SecurePass123!")

        assert service.verify_password("SecurePass123!", password_hash)
        assert not service.verify_password("securepass123!", password_hash)

    def test_malformed_hash_is_false(self, service):
        assert service.verify_password("pw", "not-a-bcrypt-hash") is False

    def test_long_password_truncated_to_72_bytes(self, service):
        base = "a" * 72
        password_hash = service.hash_password(base + "tail-one")

        assert service.verify_password(base + "tail-two", password_hash)

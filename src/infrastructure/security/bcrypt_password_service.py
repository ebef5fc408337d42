"""Bcrypt password hashing service (adapter).

This service implements the PasswordHashingProtocol using bcrypt. The cost
factor comes from settings.bcrypt_rounds (12 by default; test runs lower it
to keep hashing fast).

Architecture:
    - Implements PasswordHashingProtocol (no inheritance required)
    - Structural typing via Protocol
    - Injected via dependency container

Performance:
    Cost factor is logarithmic: each +1 doubles computation time.
    - 4 = ~1ms (tests only)
    - 12 = ~250ms (default)
"""

import bcrypt

# bcrypt only reads the first 72 bytes of a password
BCRYPT_MAX_PASSWORD_BYTES = 72


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from src.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("SecurePass123!")
        is_valid = password_service.verify_password("SecurePass123!", password_hash)
    """

    def __init__(self, cost_factor: int = 12) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (log2 rounds, 4-31).

        Raises:
            ValueError: If cost_factor is outside what bcrypt accepts.
        """
        if cost_factor < 4:
            msg = "Cost factor must be at least 4"
            raise ValueError(msg)
        if cost_factor > 31:
            msg = "Cost factor must be at most 31"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Args:
            password: Plaintext password to hash.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService(cost_factor=4)
            >>> service.hash_password("pw") != service.hash_password("pw")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(self._encode(password), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise (including for a
            malformed hash).
        """
        try:
            return bcrypt.checkpw(self._encode(password), password_hash.encode("utf-8"))
        except (ValueError, AttributeError):
            return False

    @staticmethod
    def _encode(password: str) -> bytes:
        return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]

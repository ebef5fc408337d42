"""Password hashing protocol (port).

Join and login handlers depend on this protocol; the bcrypt adapter in the
infrastructure layer satisfies it structurally.
"""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Password hashing and verification interface.

    Usage:
        password_hash = password_service.hash_password("SecurePass123!")
        password_service.verify_password("SecurePass123!", password_hash)  # True
    """

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password.

        Args:
            password: Plaintext password to hash.

        Returns:
            Salted one-way hash suitable for storage.
        """
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a stored hash.

        Returns:
            True if password matches hash, False otherwise (including for a
            malformed hash).
        """
        ...

"""Member database model.

One table holds every member regardless of role; the role column decides
which auth path they may sign in through and whether they are a manager.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - email keeps its unique constraint after soft delete, so a deleted
      member's address cannot be re-registered
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseSoftDeleteModel


class Member(BaseSoftDeleteModel):
    """Member model for authentication and the member directory.

    Fields:
        id, created_at, updated_at, deleted_at: From BaseSoftDeleteModel
        email: Unique email address (lowercase, indexed)
        password_hash: Bcrypt hashed password
        name: Display name
        role: One of tpm, pm, pmo, developer, designer, qa
    """

    __tablename__ = "members"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Member email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Member role (tpm, pm, pmo, developer, designer, qa)",
    )

    def __repr__(self) -> str:
        return f"<Member(id={self.id}, email={self.email!r}, role={self.role})>"

"""MemberRepository - SQLAlchemy implementation of MemberRepository protocol.

Adapter for hexagonal architecture.
Maps between domain Member entities and database MemberModel.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.enums import ErrorCode
from src.domain.entities import Member
from src.domain.enums import MemberRole
from src.domain.value_objects import MemberFilter, Page, PageRequest
from src.infrastructure.persistence.models.member import Member as MemberModel
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
    within,
)


class MemberRepository:
    """SQLAlchemy implementation of MemberRepository protocol.

    This class does NOT inherit from MemberRepository protocol (Protocol uses
    structural typing). Writes only flush; the request-scoped session owns
    the commit.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with db.get_session() as session:
        ...     repo = MemberRepository(session)
        ...     member = await repo.find_by_email("dev@example.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, member_id: UUID) -> Member | None:
        """Find an active member by ID.

        Args:
            member_id: Member's unique identifier.

        Returns:
            Domain Member entity if found and not soft-deleted, None otherwise.
        """
        stmt = select(MemberModel).where(
            MemberModel.id == member_id,
            MemberModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        member_model = result.scalar_one_or_none()

        if member_model is None:
            return None

        return self._to_domain(member_model)

    async def find_by_email(self, email: str) -> Member | None:
        """Find a member by email address, soft-deleted members included.

        Email comparison is case-insensitive.

        Args:
            email: Member's email address.

        Returns:
            Domain Member entity if found, None otherwise.
        """
        stmt = select(MemberModel).where(MemberModel.email.ilike(email))
        result = await self.session.execute(stmt)
        member_model = result.scalar_one_or_none()

        if member_model is None:
            return None

        return self._to_domain(member_model)

    async def save(self, member: Member) -> None:
        """Create new member.

        Raises:
            RecordConflictError: If the email is already taken.
        """
        self.session.add(self._to_model(member))
        await flush_or_conflict(
            self.session,
            resource_type="Member",
            field="email",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )

    async def update(self, member: Member) -> None:
        """Persist changes to an existing member (including soft delete).

        Raises:
            NoResultFound: If the member row doesn't exist.
            RecordConflictError: If the new email is already taken.
        """
        stmt = select(MemberModel).where(MemberModel.id == member.id)
        result = await self.session.execute(stmt)
        member_model = result.scalar_one()

        member_model.email = member.email
        member_model.password_hash = member.password_hash
        member_model.name = member.name
        member_model.role = member.role.value
        member_model.updated_at = member.updated_at
        member_model.deleted_at = member.deleted_at

        await flush_or_conflict(
            self.session,
            resource_type="Member",
            field="email",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
        )

    async def search(self, criteria: MemberFilter, page: PageRequest) -> Page[Member]:
        """Filtered, paginated member directory (active members only).

        Args:
            criteria: Role, name/email substrings and created_at range.
            page: Requested slice and ordering.

        Returns:
            Page of Member entities.
        """
        stmt = select(MemberModel).where(MemberModel.deleted_at.is_(None))

        if criteria.role is not None:
            stmt = stmt.where(MemberModel.role == criteria.role.value)
        if criteria.name:
            stmt = stmt.where(contains(MemberModel.name, criteria.name))
        if criteria.email:
            stmt = stmt.where(contains(MemberModel.email, criteria.email))
        stmt = stmt.where(
            *within(MemberModel.created_at, criteria.created_at_from, criteria.created_at_to)
        )

        result, total = await fetch_page(self.session, stmt, model=MemberModel, page=page)
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, member_model: MemberModel) -> Member:
        """Convert database model to domain entity."""
        return Member(
            id=member_model.id,
            email=member_model.email,
            password_hash=member_model.password_hash,
            name=member_model.name,
            role=MemberRole(member_model.role),
            created_at=member_model.created_at,
            updated_at=member_model.updated_at,
            deleted_at=member_model.deleted_at,
        )

    def _to_model(self, member: Member) -> MemberModel:
        """Convert domain entity to database model."""
        return MemberModel(
            id=member.id,
            email=member.email,
            password_hash=member.password_hash,
            name=member.name,
            role=member.role.value,
            created_at=member.created_at,
            updated_at=member.updated_at,
            deleted_at=member.deleted_at,
        )

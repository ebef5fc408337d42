"""Board and board membership repositories."""

from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Board, BoardMember
from src.domain.value_objects import BoardFilter, BoardMemberFilter, Page, PageRequest
from src.infrastructure.persistence.models.board import (
    Board as BoardModel,
    BoardMember as BoardMemberModel,
)
from src.infrastructure.persistence.models.member import Member as MemberModel
from src.infrastructure.persistence.repositories.query_support import (
    contains,
    fetch_page,
    flush_or_conflict,
)


class BoardRepository:
    """SQLAlchemy implementation of BoardRepository protocol.

    Soft-deleted boards are invisible to every lookup. Codes are unique per
    project among active boards.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, board_id: UUID) -> Board | None:
        stmt = select(BoardModel).where(
            BoardModel.id == board_id,
            BoardModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_code(self, project_id: UUID, code: str) -> Board | None:
        """Find an active board by code within a project."""
        stmt = select(BoardModel).where(
            BoardModel.project_id == project_id,
            BoardModel.code == code,
            BoardModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, board: Board) -> None:
        self.session.add(self._to_model(board))
        await flush_or_conflict(self.session, resource_type="Board")

    async def update(self, board: Board) -> None:
        """Persist changes to an existing board (including soft delete).

        Raises:
            NoResultFound: If the board row doesn't exist.
        """
        stmt = select(BoardModel).where(BoardModel.id == board.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.code = board.code
        model.name = board.name
        model.description = board.description
        model.updated_at = board.updated_at
        model.deleted_at = board.deleted_at

        await flush_or_conflict(self.session, resource_type="Board")

    async def search(self, criteria: BoardFilter, page: PageRequest) -> Page[Board]:
        """Filtered, paginated boards of one project."""
        stmt = select(BoardModel).where(
            BoardModel.project_id == criteria.project_id,
            BoardModel.deleted_at.is_(None),
        )
        if criteria.owner_id is not None:
            stmt = stmt.where(BoardModel.owner_id == criteria.owner_id)
        if criteria.search:
            stmt = stmt.where(
                or_(
                    contains(BoardModel.code, criteria.search),
                    contains(BoardModel.name, criteria.search),
                    contains(BoardModel.description, criteria.search),
                )
            )

        result, total = await fetch_page(self.session, stmt, model=BoardModel, page=page)
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: BoardModel) -> Board:
        return Board(
            id=model.id,
            project_id=model.project_id,
            owner_id=model.owner_id,
            code=model.code,
            name=model.name,
            description=model.description,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

    def _to_model(self, board: Board) -> BoardModel:
        return BoardModel(
            id=board.id,
            project_id=board.project_id,
            owner_id=board.owner_id,
            code=board.code,
            name=board.name,
            description=board.description,
            created_at=board.created_at,
            updated_at=board.updated_at,
            deleted_at=board.deleted_at,
        )


class BoardMemberRepository:
    """SQLAlchemy implementation of BoardMemberRepository protocol.

    Memberships are soft deleted, so a member may be re-added later.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, membership_id: UUID) -> BoardMember | None:
        stmt = select(BoardMemberModel).where(
            BoardMemberModel.id == membership_id,
            BoardMemberModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return None if model is None else self._to_domain(model)

    async def find_by_board_and_user(
        self, board_id: UUID, user_id: UUID
    ) -> BoardMember | None:
        """Find the active membership of a member in a board."""
        stmt = select(BoardMemberModel).where(
            BoardMemberModel.board_id == board_id,
            BoardMemberModel.user_id == user_id,
            BoardMemberModel.deleted_at.is_(None),
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return None if model is None else self._to_domain(model)

    async def save(self, membership: BoardMember) -> None:
        self.session.add(
            BoardMemberModel(
                id=membership.id,
                board_id=membership.board_id,
                user_id=membership.user_id,
                created_at=membership.created_at,
                updated_at=membership.updated_at,
                deleted_at=membership.deleted_at,
            )
        )
        await flush_or_conflict(self.session, resource_type="BoardMember")

    async def update(self, membership: BoardMember) -> None:
        stmt = select(BoardMemberModel).where(BoardMemberModel.id == membership.id)
        result = await self.session.execute(stmt)
        model = result.scalar_one()

        model.updated_at = membership.updated_at
        model.deleted_at = membership.deleted_at

        await self.session.flush()

    async def search(
        self, criteria: BoardMemberFilter, page: PageRequest
    ) -> Page[BoardMember]:
        """Active memberships of a board; search matches member name or email."""
        stmt = select(BoardMemberModel).where(
            BoardMemberModel.board_id == criteria.board_id,
            BoardMemberModel.deleted_at.is_(None),
        )
        if criteria.search:
            stmt = stmt.join(MemberModel, MemberModel.id == BoardMemberModel.user_id).where(
                or_(
                    contains(MemberModel.name, criteria.search),
                    contains(MemberModel.email, criteria.search),
                )
            )

        result, total = await fetch_page(
            self.session, stmt, model=BoardMemberModel, page=page
        )
        return Page(
            items=[self._to_domain(m) for m in result.scalars().all()],
            total=total,
            page=page.page,
            limit=page.limit,
        )

    def _to_domain(self, model: BoardMemberModel) -> BoardMember:
        return BoardMember(
            id=model.id,
            board_id=model.board_id,
            user_id=model.user_id,
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )

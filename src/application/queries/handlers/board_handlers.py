"""Board and board membership query handlers.

Boards are addressed under their project and memberships under their
board. A child that belongs to a different parent is reported missing.
"""

from uuid import UUID

from src.application.queries.board_queries import (
    GetBoard,
    GetBoardMember,
    ListBoardMembers,
    ListBoards,
)
from src.application.queries.handlers.project_handlers import load_project
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Board, BoardMember
from src.domain.errors import not_found
from src.domain.protocols import (
    BoardMemberRepository,
    BoardRepository,
    ProjectRepository,
)
from src.domain.value_objects import Page


async def load_board(
    boards: BoardRepository, board_id: UUID, project_id: UUID | None = None
) -> Result[Board, DomainError]:
    board = await boards.find_by_id(board_id)
    if board is None or (project_id is not None and board.project_id != project_id):
        return Failure(error=not_found(ErrorCode.BOARD_NOT_FOUND, "Board", board_id))
    return Success(value=board)


class GetBoardHandler:
    def __init__(self, board_repo: BoardRepository) -> None:
        self._boards = board_repo

    async def handle(self, query: GetBoard) -> Result[Board, DomainError]:
        return await load_board(self._boards, query.board_id, query.project_id)


class ListBoardsHandler:
    def __init__(
        self, project_repo: ProjectRepository, board_repo: BoardRepository
    ) -> None:
        self._projects = project_repo
        self._boards = board_repo

    async def handle(self, query: ListBoards) -> Result[Page[Board], DomainError]:
        loaded = await load_project(self._projects, query.criteria.project_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(value=await self._boards.search(query.criteria, query.page))


class GetBoardMemberHandler:
    def __init__(
        self, board_repo: BoardRepository, board_member_repo: BoardMemberRepository
    ) -> None:
        self._boards = board_repo
        self._memberships = board_member_repo

    async def handle(self, query: GetBoardMember) -> Result[BoardMember, DomainError]:
        loaded = await load_board(self._boards, query.board_id)
        if isinstance(loaded, Failure):
            return loaded

        membership = await self._memberships.find_by_id(query.membership_id)
        if membership is None or membership.board_id != query.board_id:
            return Failure(
                error=not_found(
                    ErrorCode.BOARD_MEMBER_NOT_FOUND,
                    "Board member",
                    query.membership_id,
                )
            )
        return Success(value=membership)


class ListBoardMembersHandler:
    def __init__(
        self, board_repo: BoardRepository, board_member_repo: BoardMemberRepository
    ) -> None:
        self._boards = board_repo
        self._memberships = board_member_repo

    async def handle(
        self, query: ListBoardMembers
    ) -> Result[Page[BoardMember], DomainError]:
        loaded = await load_board(self._boards, query.criteria.board_id)
        if isinstance(loaded, Failure):
            return loaded
        return Success(
            value=await self._memberships.search(query.criteria, query.page)
        )

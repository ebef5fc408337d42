"""Board and board membership command handlers.

Rules:
- Only managers create boards, inside an existing project
- The creator owns the board; only the owner updates, deletes or manages
  members
- Board codes are unique within their project
- A board addressed under another project is "not found"
- Board memberships are soft deleted
"""

from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.board_commands import (
    AddBoardMember,
    CreateBoard,
    DeleteBoard,
    RemoveBoardMember,
    UpdateBoard,
)
from src.core.enums import ErrorCode
from src.core.errors import DomainError
from src.core.result import Failure, Result, Success
from src.domain.entities import Board, BoardMember
from src.domain.errors import (
    RecordConflictError,
    already_exists,
    manager_required,
    not_found,
    not_owner,
)
from src.domain.protocols import (
    BoardMemberRepository,
    BoardRepository,
    LoggerProtocol,
    MemberRepository,
    ProjectRepository,
)


async def load_owned_board(
    boards: BoardRepository,
    board_id: UUID,
    actor_id: UUID,
    project_id: UUID | None = None,
) -> Result[Board, DomainError]:
    """Load an active board and check the actor owns it.

    When project_id is given, a board belonging to another project is
    reported as not found.
    """
    board = await boards.find_by_id(board_id)
    if board is None or (project_id is not None and board.project_id != project_id):
        return Failure(error=not_found(ErrorCode.BOARD_NOT_FOUND, "Board", board_id))
    if not board.is_owned_by(actor_id):
        return Failure(error=not_owner("board"))
    return Success(value=board)


class CreateBoardHandler:
    """Create a board in a project (managers only)."""

    def __init__(
        self,
        project_repo: ProjectRepository,
        board_repo: BoardRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._projects = project_repo
        self._boards = board_repo
        self._logger = logger

    async def handle(self, cmd: CreateBoard) -> Result[Board, DomainError]:
        if not cmd.actor_role.is_manager:
            return Failure(error=manager_required("create boards"))

        if await self._projects.find_by_id(cmd.project_id) is None:
            return Failure(
                error=not_found(ErrorCode.PROJECT_NOT_FOUND, "Project", cmd.project_id)
            )

        if await self._boards.find_by_code(cmd.project_id, cmd.code) is not None:
            return Failure(
                error=already_exists(
                    ErrorCode.CODE_ALREADY_EXISTS, "Board", "code", cmd.code
                )
            )

        now = datetime.now(UTC)
        board = Board(
            id=uuid7(),
            project_id=cmd.project_id,
            owner_id=cmd.actor_id,
            code=cmd.code,
            name=cmd.name,
            description=cmd.description,
            created_at=now,
            updated_at=now,
        )
        try:
            await self._boards.save(board)
        except RecordConflictError as exc:
            return Failure(error=exc.conflict)

        self._logger.info(
            "Board created",
            board_id=str(board.id),
            project_id=str(board.project_id),
            owner_id=str(cmd.actor_id),
        )
        return Success(value=board)


class UpdateBoardHandler:
    """Update a board (board owner only)."""

    def __init__(self, board_repo: BoardRepository, logger: LoggerProtocol) -> None:
        self._boards = board_repo
        self._logger = logger

    async def handle(self, cmd: UpdateBoard) -> Result[Board, DomainError]:
        loaded = await load_owned_board(
            self._boards, cmd.board_id, cmd.actor_id, project_id=cmd.project_id
        )
        if isinstance(loaded, Failure):
            return loaded
        board = loaded.value

        if cmd.code is not None and cmd.code != board.code:
            if await self._boards.find_by_code(board.project_id, cmd.code) is not None:
                return Failure(
                    error=already_exists(
                        ErrorCode.CODE_ALREADY_EXISTS, "Board", "code", cmd.code
                    )
                )

        updated = replace(
            board,
            code=cmd.code if cmd.code is not None else board.code,
            name=cmd.name if cmd.name is not None else board.name,
            description=(
                cmd.description if cmd.description is not None else board.description
            ),
            updated_at=datetime.now(UTC),
        )
        await self._boards.update(updated)

        self._logger.info("Board updated", board_id=str(board.id))
        return Success(value=updated)


class DeleteBoardHandler:
    """Soft delete a board (board owner only)."""

    def __init__(self, board_repo: BoardRepository, logger: LoggerProtocol) -> None:
        self._boards = board_repo
        self._logger = logger

    async def handle(self, cmd: DeleteBoard) -> Result[None, DomainError]:
        loaded = await load_owned_board(
            self._boards, cmd.board_id, cmd.actor_id, project_id=cmd.project_id
        )
        if isinstance(loaded, Failure):
            return loaded
        board = loaded.value

        now = datetime.now(UTC)
        await self._boards.update(replace(board, deleted_at=now, updated_at=now))

        self._logger.info("Board deleted", board_id=str(board.id))
        return Success(value=None)


class AddBoardMemberHandler:
    """Add a member to a board (board owner only)."""

    def __init__(
        self,
        board_repo: BoardRepository,
        board_member_repo: BoardMemberRepository,
        member_repo: MemberRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._boards = board_repo
        self._memberships = board_member_repo
        self._members = member_repo
        self._logger = logger

    async def handle(self, cmd: AddBoardMember) -> Result[BoardMember, DomainError]:
        loaded = await load_owned_board(self._boards, cmd.board_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded

        if await self._members.find_by_id(cmd.user_id) is None:
            return Failure(
                error=not_found(ErrorCode.MEMBER_NOT_FOUND, "Member", cmd.user_id)
            )

        if await self._memberships.find_by_board_and_user(cmd.board_id, cmd.user_id):
            return Failure(
                error=already_exists(
                    ErrorCode.MEMBERSHIP_ALREADY_EXISTS,
                    "Board member",
                    "user_id",
                    str(cmd.user_id),
                )
            )

        now = datetime.now(UTC)
        membership = BoardMember(
            id=uuid7(),
            board_id=cmd.board_id,
            user_id=cmd.user_id,
            created_at=now,
            updated_at=now,
        )
        await self._memberships.save(membership)

        self._logger.info(
            "Board member added", board_id=str(cmd.board_id), user_id=str(cmd.user_id)
        )
        return Success(value=membership)


class RemoveBoardMemberHandler:
    """Soft delete a board membership (board owner only)."""

    def __init__(
        self,
        board_repo: BoardRepository,
        board_member_repo: BoardMemberRepository,
        logger: LoggerProtocol,
    ) -> None:
        self._boards = board_repo
        self._memberships = board_member_repo
        self._logger = logger

    async def handle(self, cmd: RemoveBoardMember) -> Result[None, DomainError]:
        loaded = await load_owned_board(self._boards, cmd.board_id, cmd.actor_id)
        if isinstance(loaded, Failure):
            return loaded

        membership = await self._memberships.find_by_id(cmd.membership_id)
        if membership is None or membership.board_id != cmd.board_id:
            return Failure(
                error=not_found(
                    ErrorCode.BOARD_MEMBER_NOT_FOUND, "Board member", cmd.membership_id
                )
            )

        now = datetime.now(UTC)
        await self._memberships.update(replace(membership, deleted_at=now, updated_at=now))

        self._logger.info(
            "Board member removed",
            board_id=str(cmd.board_id),
            user_id=str(membership.user_id),
        )
        return Success(value=None)

"""Board and board membership queries."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects import BoardFilter, BoardMemberFilter, PageRequest


@dataclass(frozen=True, kw_only=True)
class GetBoard:
    """Get one board, addressed under its project."""

    project_id: UUID
    board_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListBoards:
    """Search boards of one project."""

    criteria: BoardFilter
    page: PageRequest


@dataclass(frozen=True, kw_only=True)
class GetBoardMember:
    """Get one membership of a board."""

    board_id: UUID
    membership_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListBoardMembers:
    """Search memberships of a board by member name or email."""

    criteria: BoardMemberFilter
    page: PageRequest

"""Board and board membership repository protocols."""

from typing import Protocol
from uuid import UUID

from src.domain.entities import Board, BoardMember
from src.domain.value_objects import BoardFilter, BoardMemberFilter, Page, PageRequest


class BoardRepository(Protocol):
    """Board repository protocol (port).

    Lookups never return soft-deleted boards.
    """

    async def find_by_id(self, board_id: UUID) -> Board | None:
        """Find an active board by ID."""
        ...

    async def find_by_code(self, project_id: UUID, code: str) -> Board | None:
        """Find a board by code within a project (soft-deleted included)."""
        ...

    async def save(self, board: Board) -> None:
        """Create a new board."""
        ...

    async def update(self, board: Board) -> None:
        """Update an existing board (including soft delete)."""
        ...

    async def search(self, criteria: BoardFilter, page: PageRequest) -> Page[Board]:
        """Return one page of active boards in a project."""
        ...


class BoardMemberRepository(Protocol):
    """Board membership repository protocol (port).

    Lookups never return soft-deleted memberships.
    """

    async def find_by_id(self, membership_id: UUID) -> BoardMember | None:
        """Find an active membership by ID."""
        ...

    async def find_by_board_and_user(
        self, board_id: UUID, user_id: UUID
    ) -> BoardMember | None:
        """Find the active membership of user_id on board_id."""
        ...

    async def save(self, membership: BoardMember) -> None:
        """Create a new membership."""
        ...

    async def update(self, membership: BoardMember) -> None:
        """Update a membership (including soft delete)."""
        ...

    async def search(
        self, criteria: BoardMemberFilter, page: PageRequest
    ) -> Page[BoardMember]:
        """Return one page of active memberships on a board."""
        ...

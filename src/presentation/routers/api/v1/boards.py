"""Board resource handlers.

Boards are addressed under their project; board memberships are
addressed under the board alone.

Handlers:
    create_board          - POST   /projects/{project_id}/boards            (manager, 201)
    search_boards         - PATCH  /projects/{project_id}/boards
    get_board             - GET    /projects/{project_id}/boards/{board_id}
    update_board          - PUT    /projects/{project_id}/boards/{board_id} (owner)
    delete_board          - DELETE /projects/{project_id}/boards/{board_id} (owner, 204)
    add_board_member      - POST   /boards/{board_id}/members               (owner, 201)
    search_board_members  - PATCH  /boards/{board_id}/members
    get_board_member      - GET    /boards/{board_id}/members/{member_id}
    remove_board_member   - DELETE /boards/{board_id}/members/{member_id}   (owner, 204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.board_commands import (
    AddBoardMember,
    CreateBoard,
    DeleteBoard,
    RemoveBoardMember,
    UpdateBoard,
)
from src.application.commands.handlers.board_handlers import (
    AddBoardMemberHandler,
    CreateBoardHandler,
    DeleteBoardHandler,
    RemoveBoardMemberHandler,
    UpdateBoardHandler,
)
from src.application.queries.board_queries import (
    GetBoard,
    GetBoardMember,
    ListBoardMembers,
    ListBoards,
)
from src.application.queries.handlers.board_handlers import (
    GetBoardHandler,
    GetBoardMemberHandler,
    ListBoardMembersHandler,
    ListBoardsHandler,
)
from src.core.container import (
    get_add_board_member_handler,
    get_create_board_handler,
    get_delete_board_handler,
    get_get_board_handler,
    get_get_board_member_handler,
    get_list_board_members_handler,
    get_list_boards_handler,
    get_remove_board_member_handler,
    get_update_board_handler,
)
from src.core.result import Failure
from src.domain.value_objects import BoardFilter, BoardMemberFilter
from src.domain.value_objects.filters import BOARD_SORT_FIELDS, MEMBERSHIP_SORT_FIELDS
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    ManagerUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.project_schemas import (
    BoardCreateRequest,
    BoardMemberResponse,
    BoardMemberSearchRequest,
    BoardResponse,
    BoardSearchRequest,
    BoardUpdateRequest,
    MembershipCreateRequest,
)

ProjectIdPath = Annotated[UUID, Path(description="Project UUID")]
BoardIdPath = Annotated[UUID, Path(description="Board UUID")]
MembershipIdPath = Annotated[UUID, Path(description="Board membership UUID")]


async def create_board(
    request: Request,
    current_user: ManagerUser,
    project_id: ProjectIdPath,
    data: BoardCreateRequest,
    handler: CreateBoardHandler = Depends(get_create_board_handler),
) -> BoardResponse | JSONResponse:
    """Create a board in a project, owned by the caller.

    POST /api/v1/projects/{project_id}/boards → 201 Created
    """
    result = await handler.handle(
        CreateBoard(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            project_id=project_id,
            code=data.code,
            name=data.name,
            description=data.description,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return BoardResponse.model_validate(result.value)


async def search_boards(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    data: BoardSearchRequest,
    handler: ListBoardsHandler = Depends(get_list_boards_handler),
) -> PageResponse[BoardResponse] | JSONResponse:
    """PATCH /api/v1/projects/{project_id}/boards → 200 OK"""
    result = await handler.handle(
        ListBoards(
            criteria=BoardFilter(
                project_id=project_id, search=data.search, owner_id=data.owner_id
            ),
            page=data.page_request(BOARD_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[BoardResponse].from_page(
        result.value, BoardResponse.model_validate
    )


async def get_board(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    board_id: BoardIdPath,
    handler: GetBoardHandler = Depends(get_get_board_handler),
) -> BoardResponse | JSONResponse:
    """GET /api/v1/projects/{project_id}/boards/{board_id} → 200 OK

    A board of another project answers 404.
    """
    result = await handler.handle(GetBoard(project_id=project_id, board_id=board_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return BoardResponse.model_validate(result.value)


async def update_board(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    board_id: BoardIdPath,
    data: BoardUpdateRequest,
    handler: UpdateBoardHandler = Depends(get_update_board_handler),
) -> BoardResponse | JSONResponse:
    """PUT /api/v1/projects/{project_id}/boards/{board_id} → 200 OK"""
    result = await handler.handle(
        UpdateBoard(
            actor_id=current_user.user_id,
            project_id=project_id,
            board_id=board_id,
            code=data.code,
            name=data.name,
            description=data.description,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return BoardResponse.model_validate(result.value)


async def delete_board(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    board_id: BoardIdPath,
    handler: DeleteBoardHandler = Depends(get_delete_board_handler),
) -> JSONResponse | None:
    """DELETE /api/v1/projects/{project_id}/boards/{board_id} → 204 No Content"""
    result = await handler.handle(
        DeleteBoard(
            actor_id=current_user.user_id, project_id=project_id, board_id=board_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None


async def add_board_member(
    request: Request,
    current_user: AuthenticatedUser,
    board_id: BoardIdPath,
    data: MembershipCreateRequest,
    handler: AddBoardMemberHandler = Depends(get_add_board_member_handler),
) -> BoardMemberResponse | JSONResponse:
    """Add a member to a board the caller owns.

    POST /api/v1/boards/{board_id}/members → 201 Created
    """
    result = await handler.handle(
        AddBoardMember(
            actor_id=current_user.user_id, board_id=board_id, user_id=data.user_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return BoardMemberResponse.model_validate(result.value)


async def search_board_members(
    request: Request,
    current_user: AuthenticatedUser,
    board_id: BoardIdPath,
    data: BoardMemberSearchRequest,
    handler: ListBoardMembersHandler = Depends(get_list_board_members_handler),
) -> PageResponse[BoardMemberResponse] | JSONResponse:
    """Search members of a board by member name or email.

    PATCH /api/v1/boards/{board_id}/members → 200 OK
    """
    result = await handler.handle(
        ListBoardMembers(
            criteria=BoardMemberFilter(board_id=board_id, search=data.search),
            page=data.page_request(MEMBERSHIP_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[BoardMemberResponse].from_page(
        result.value, BoardMemberResponse.model_validate
    )


async def get_board_member(
    request: Request,
    current_user: AuthenticatedUser,
    board_id: BoardIdPath,
    member_id: MembershipIdPath,
    handler: GetBoardMemberHandler = Depends(get_get_board_member_handler),
) -> BoardMemberResponse | JSONResponse:
    """GET /api/v1/boards/{board_id}/members/{member_id} → 200 OK"""
    result = await handler.handle(
        GetBoardMember(board_id=board_id, membership_id=member_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return BoardMemberResponse.model_validate(result.value)


async def remove_board_member(
    request: Request,
    current_user: AuthenticatedUser,
    board_id: BoardIdPath,
    member_id: MembershipIdPath,
    handler: RemoveBoardMemberHandler = Depends(get_remove_board_member_handler),
) -> JSONResponse | None:
    """Soft delete a board membership.

    DELETE /api/v1/boards/{board_id}/members/{member_id} → 204 No Content
    """
    result = await handler.handle(
        RemoveBoardMember(
            actor_id=current_user.user_id, board_id=board_id, membership_id=member_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

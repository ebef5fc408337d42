"""Member directory resource handlers.

Handlers:
    create_member   - POST   /members               (manager, 201)
    search_members  - PATCH  /members
    get_member      - GET    /members/{member_id}
    update_member   - PUT    /members/{member_id}   (the member or a manager)
    delete_member   - DELETE /members/{member_id}   (manager, 204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.member_handlers import (
    CreateMemberHandler,
    DeleteMemberHandler,
    UpdateMemberHandler,
)
from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    UpdateMember,
)
from src.application.queries.handlers.member_handlers import (
    GetMemberHandler,
    ListMembersHandler,
)
from src.application.queries.member_queries import GetMember, ListMembers
from src.core.container import (
    get_create_member_handler,
    get_delete_member_handler,
    get_get_member_handler,
    get_list_members_handler,
    get_update_member_handler,
)
from src.core.result import Failure
from src.domain.value_objects import MemberFilter
from src.domain.value_objects.filters import MEMBER_SORT_FIELDS
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    ManagerUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.member_schemas import (
    MemberCreateRequest,
    MemberResponse,
    MemberSearchRequest,
    MemberUpdateRequest,
)

MemberIdPath = Annotated[UUID, Path(description="Member UUID")]


async def create_member(
    request: Request,
    current_user: ManagerUser,
    data: MemberCreateRequest,
    handler: CreateMemberHandler = Depends(get_create_member_handler),
) -> MemberResponse | JSONResponse:
    """Create a member of any role.

    POST /api/v1/members → 201 Created
    """
    result = await handler.handle(
        CreateMember(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            email=data.email,
            password=data.password,
            name=data.name,
            role=data.role,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MemberResponse.from_dto(result.value)


async def search_members(
    current_user: AuthenticatedUser,
    data: MemberSearchRequest,
    handler: ListMembersHandler = Depends(get_list_members_handler),
) -> PageResponse[MemberResponse]:
    """Search the member directory.

    PATCH /api/v1/members → 200 OK
    """
    result = await handler.handle(
        ListMembers(
            criteria=MemberFilter(
                role=data.role,
                name=data.name,
                email=data.email,
                created_at_from=data.created_at_from,
                created_at_to=data.created_at_to,
            ),
            page=data.page_request(MEMBER_SORT_FIELDS),
        )
    )
    # Listing has no failure path
    return PageResponse[MemberResponse].from_page(
        result.value, MemberResponse.from_dto
    )


async def get_member(
    request: Request,
    current_user: AuthenticatedUser,
    member_id: MemberIdPath,
    handler: GetMemberHandler = Depends(get_get_member_handler),
) -> MemberResponse | JSONResponse:
    """GET /api/v1/members/{member_id} → 200 OK"""
    result = await handler.handle(GetMember(member_id=member_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MemberResponse.from_dto(result.value)


async def update_member(
    request: Request,
    current_user: AuthenticatedUser,
    member_id: MemberIdPath,
    data: MemberUpdateRequest,
    handler: UpdateMemberHandler = Depends(get_update_member_handler),
) -> MemberResponse | JSONResponse:
    """Update name, email or password.

    PUT /api/v1/members/{member_id} → 200 OK
    """
    result = await handler.handle(
        UpdateMember(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            member_id=member_id,
            name=data.name,
            email=data.email,
            password=data.password,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return MemberResponse.from_dto(result.value)


async def delete_member(
    request: Request,
    current_user: ManagerUser,
    member_id: MemberIdPath,
    handler: DeleteMemberHandler = Depends(get_delete_member_handler),
) -> JSONResponse | None:
    """Soft delete a member.

    DELETE /api/v1/members/{member_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteMember(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            member_id=member_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

"""Authentication resource handlers.

Handler functions for the role-scoped auth endpoints. The role in the path
is the role the caller joins as, logs in as, or refreshes for.
Routes are registered via ROUTE_REGISTRY in routes/registry.py.

Handlers:
    join_member     - POST /auth/{role}/join     (201)
    login_member    - POST /auth/{role}/login
    refresh_member  - POST /auth/{role}/refresh
"""

from typing import Annotated

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.auth_commands import (
    JoinMember,
    LoginMember,
    RefreshMemberToken,
)
from src.application.commands.handlers.auth_handlers import (
    JoinMemberHandler,
    LoginMemberHandler,
    RefreshMemberTokenHandler,
)
from src.core.container import (
    get_join_member_handler,
    get_login_member_handler,
    get_refresh_member_token_handler,
)
from src.core.result import Failure
from src.domain.enums import MemberRole
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.member_schemas import (
    AuthorizedResponse,
    JoinRequest,
    LoginRequest,
    RefreshRequest,
)

RolePath = Annotated[MemberRole, Path(description="Member role")]


async def join_member(
    request: Request,
    role: RolePath,
    data: JoinRequest,
    handler: JoinMemberHandler = Depends(get_join_member_handler),
) -> AuthorizedResponse | JSONResponse:
    """Register a member with the path role and issue tokens.

    POST /api/v1/auth/{role}/join → 201 Created

    Returns:
        AuthorizedResponse with member data and token pair.
        JSONResponse 409 if the email is taken.
    """
    result = await handler.handle(
        JoinMember(role=role, email=data.email, password=data.password, name=data.name)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthorizedResponse.from_result(result.value)


async def login_member(
    request: Request,
    role: RolePath,
    data: LoginRequest,
    handler: LoginMemberHandler = Depends(get_login_member_handler),
) -> AuthorizedResponse | JSONResponse:
    """Authenticate a member of the path role.

    POST /api/v1/auth/{role}/login → 200 OK

    Unknown email, wrong role, deleted member and wrong password all answer
    401 "Invalid credentials".
    """
    result = await handler.handle(
        LoginMember(role=role, email=data.email, password=data.password)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthorizedResponse.from_result(result.value)


async def refresh_member(
    request: Request,
    role: RolePath,
    data: RefreshRequest,
    handler: RefreshMemberTokenHandler = Depends(get_refresh_member_token_handler),
) -> AuthorizedResponse | JSONResponse:
    """Exchange a refresh token for a new token pair.

    POST /api/v1/auth/{role}/refresh → 200 OK
    """
    result = await handler.handle(
        RefreshMemberToken(role=role, refresh_token=data.refresh_token)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AuthorizedResponse.from_result(result.value)

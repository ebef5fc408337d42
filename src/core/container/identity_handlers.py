"""Identity handler dependency factories.

Request-scoped handlers for join/login/refresh and the member directory.
Repositories arrive through Depends; services are app-scoped singletons.
"""

from fastapi import Depends

from src.application.commands.handlers.auth_handlers import (
    JoinMemberHandler,
    LoginMemberHandler,
    RefreshMemberTokenHandler,
)
from src.application.commands.handlers.member_handlers import (
    CreateMemberHandler,
    DeleteMemberHandler,
    UpdateMemberHandler,
)
from src.application.queries.handlers.member_handlers import (
    GetMemberHandler,
    ListMembersHandler,
)
from src.core.container.infrastructure import (
    get_logger,
    get_password_service,
    get_token_service,
)
from src.core.container.repositories import get_member_repository
from src.infrastructure.persistence.repositories import MemberRepository


async def get_join_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> JoinMemberHandler:
    """Get JoinMember command handler (request-scoped).

    Usage:
        @router.post("/auth/{role}/join")
        async def join(
            handler: JoinMemberHandler = Depends(get_join_member_handler),
        ):
            result = await handler.handle(command)
    """
    return JoinMemberHandler(
        member_repo=member_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_login_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> LoginMemberHandler:
    return LoginMemberHandler(
        member_repo=member_repo,
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_refresh_member_token_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> RefreshMemberTokenHandler:
    return RefreshMemberTokenHandler(
        member_repo=member_repo,
        token_service=get_token_service(),
        logger=get_logger(),
    )


async def get_create_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> CreateMemberHandler:
    return CreateMemberHandler(
        member_repo=member_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_update_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> UpdateMemberHandler:
    return UpdateMemberHandler(
        member_repo=member_repo,
        password_service=get_password_service(),
        logger=get_logger(),
    )


async def get_delete_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> DeleteMemberHandler:
    return DeleteMemberHandler(member_repo=member_repo, logger=get_logger())


async def get_get_member_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> GetMemberHandler:
    return GetMemberHandler(member_repo=member_repo)


async def get_list_members_handler(
    member_repo: MemberRepository = Depends(get_member_repository),
) -> ListMembersHandler:
    return ListMembersHandler(member_repo=member_repo)

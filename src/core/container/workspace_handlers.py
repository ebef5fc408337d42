"""Project and board handler dependency factories."""

from fastapi import Depends

from src.application.commands.handlers.board_handlers import (
    AddBoardMemberHandler,
    CreateBoardHandler,
    DeleteBoardHandler,
    RemoveBoardMemberHandler,
    UpdateBoardHandler,
)
from src.application.commands.handlers.project_handlers import (
    AddProjectMemberHandler,
    CreateProjectHandler,
    DeleteProjectHandler,
    RemoveProjectMemberHandler,
    UpdateProjectHandler,
)
from src.application.queries.handlers.board_handlers import (
    GetBoardHandler,
    GetBoardMemberHandler,
    ListBoardMembersHandler,
    ListBoardsHandler,
)
from src.application.queries.handlers.project_handlers import (
    GetProjectHandler,
    GetProjectMemberHandler,
    ListProjectMembersHandler,
    ListProjectsHandler,
)
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_board_member_repository,
    get_board_repository,
    get_member_repository,
    get_project_member_repository,
    get_project_repository,
)
from src.infrastructure.persistence.repositories import (
    BoardMemberRepository,
    BoardRepository,
    MemberRepository,
    ProjectMemberRepository,
    ProjectRepository,
)

# ============================================================================
# Projects
# ============================================================================


async def get_create_project_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> CreateProjectHandler:
    return CreateProjectHandler(project_repo=project_repo, logger=get_logger())


async def get_update_project_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> UpdateProjectHandler:
    return UpdateProjectHandler(project_repo=project_repo, logger=get_logger())


async def get_delete_project_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> DeleteProjectHandler:
    return DeleteProjectHandler(project_repo=project_repo, logger=get_logger())


async def get_get_project_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> GetProjectHandler:
    return GetProjectHandler(project_repo=project_repo)


async def get_list_projects_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
) -> ListProjectsHandler:
    return ListProjectsHandler(project_repo=project_repo)


async def get_add_project_member_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    project_member_repo: ProjectMemberRepository = Depends(
        get_project_member_repository
    ),
    member_repo: MemberRepository = Depends(get_member_repository),
) -> AddProjectMemberHandler:
    return AddProjectMemberHandler(
        project_repo=project_repo,
        project_member_repo=project_member_repo,
        member_repo=member_repo,
        logger=get_logger(),
    )


async def get_remove_project_member_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    project_member_repo: ProjectMemberRepository = Depends(
        get_project_member_repository
    ),
) -> RemoveProjectMemberHandler:
    return RemoveProjectMemberHandler(
        project_repo=project_repo,
        project_member_repo=project_member_repo,
        logger=get_logger(),
    )


async def get_get_project_member_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    project_member_repo: ProjectMemberRepository = Depends(
        get_project_member_repository
    ),
) -> GetProjectMemberHandler:
    return GetProjectMemberHandler(
        project_repo=project_repo, project_member_repo=project_member_repo
    )


async def get_list_project_members_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    project_member_repo: ProjectMemberRepository = Depends(
        get_project_member_repository
    ),
) -> ListProjectMembersHandler:
    return ListProjectMembersHandler(
        project_repo=project_repo, project_member_repo=project_member_repo
    )


# ============================================================================
# Boards
# ============================================================================


async def get_create_board_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    board_repo: BoardRepository = Depends(get_board_repository),
) -> CreateBoardHandler:
    return CreateBoardHandler(
        project_repo=project_repo, board_repo=board_repo, logger=get_logger()
    )


async def get_update_board_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
) -> UpdateBoardHandler:
    return UpdateBoardHandler(board_repo=board_repo, logger=get_logger())


async def get_delete_board_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
) -> DeleteBoardHandler:
    return DeleteBoardHandler(board_repo=board_repo, logger=get_logger())


async def get_get_board_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
) -> GetBoardHandler:
    return GetBoardHandler(board_repo=board_repo)


async def get_list_boards_handler(
    project_repo: ProjectRepository = Depends(get_project_repository),
    board_repo: BoardRepository = Depends(get_board_repository),
) -> ListBoardsHandler:
    return ListBoardsHandler(project_repo=project_repo, board_repo=board_repo)


async def get_add_board_member_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
    board_member_repo: BoardMemberRepository = Depends(get_board_member_repository),
    member_repo: MemberRepository = Depends(get_member_repository),
) -> AddBoardMemberHandler:
    return AddBoardMemberHandler(
        board_repo=board_repo,
        board_member_repo=board_member_repo,
        member_repo=member_repo,
        logger=get_logger(),
    )


async def get_remove_board_member_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
    board_member_repo: BoardMemberRepository = Depends(get_board_member_repository),
) -> RemoveBoardMemberHandler:
    return RemoveBoardMemberHandler(
        board_repo=board_repo,
        board_member_repo=board_member_repo,
        logger=get_logger(),
    )


async def get_get_board_member_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
    board_member_repo: BoardMemberRepository = Depends(get_board_member_repository),
) -> GetBoardMemberHandler:
    return GetBoardMemberHandler(
        board_repo=board_repo, board_member_repo=board_member_repo
    )


async def get_list_board_members_handler(
    board_repo: BoardRepository = Depends(get_board_repository),
    board_member_repo: BoardMemberRepository = Depends(get_board_member_repository),
) -> ListBoardMembersHandler:
    return ListBoardMembersHandler(
        board_repo=board_repo, board_member_repo=board_member_repo
    )

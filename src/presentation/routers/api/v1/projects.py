"""Project resource handlers.

Handlers:
    create_project          - POST   /projects                 (manager, 201)
    search_projects         - PATCH  /projects
    get_project             - GET    /projects/{project_id}
    update_project          - PUT    /projects/{project_id}    (owner)
    delete_project          - DELETE /projects/{project_id}    (owner, 204)
    add_project_member      - POST   /projects/{project_id}/members (owner, 201)
    search_project_members  - PATCH  /projects/{project_id}/members
    get_project_member      - GET    /projects/{project_id}/members/{member_id}
    remove_project_member   - DELETE /projects/{project_id}/members/{member_id}
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.project_handlers import (
    AddProjectMemberHandler,
    CreateProjectHandler,
    DeleteProjectHandler,
    RemoveProjectMemberHandler,
    UpdateProjectHandler,
)
from src.application.commands.project_commands import (
    AddProjectMember,
    CreateProject,
    DeleteProject,
    RemoveProjectMember,
    UpdateProject,
)
from src.application.queries.handlers.project_handlers import (
    GetProjectHandler,
    GetProjectMemberHandler,
    ListProjectMembersHandler,
    ListProjectsHandler,
)
from src.application.queries.project_queries import (
    GetProject,
    GetProjectMember,
    ListProjectMembers,
    ListProjects,
)
from src.core.container import (
    get_add_project_member_handler,
    get_create_project_handler,
    get_delete_project_handler,
    get_get_project_handler,
    get_get_project_member_handler,
    get_list_project_members_handler,
    get_list_projects_handler,
    get_remove_project_member_handler,
    get_update_project_handler,
)
from src.core.result import Failure
from src.domain.value_objects import ProjectFilter, ProjectMemberFilter
from src.domain.value_objects.filters import (
    MEMBERSHIP_SORT_FIELDS,
    PROJECT_SORT_FIELDS,
)
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
    ManagerUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.project_schemas import (
    MembershipCreateRequest,
    ProjectCreateRequest,
    ProjectMemberResponse,
    ProjectMemberSearchRequest,
    ProjectResponse,
    ProjectSearchRequest,
    ProjectUpdateRequest,
)

ProjectIdPath = Annotated[UUID, Path(description="Project UUID")]
MembershipIdPath = Annotated[UUID, Path(description="Project membership UUID")]


# =============================================================================
# Projects
# =============================================================================


async def create_project(
    request: Request,
    current_user: ManagerUser,
    data: ProjectCreateRequest,
    handler: CreateProjectHandler = Depends(get_create_project_handler),
) -> ProjectResponse | JSONResponse:
    """Create a project owned by the caller.

    POST /api/v1/projects → 201 Created

    Returns:
        ProjectResponse on success.
        JSONResponse 409 if an active project already uses the code.
    """
    result = await handler.handle(
        CreateProject(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            code=data.code,
            name=data.name,
            description=data.description,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return ProjectResponse.model_validate(result.value)


async def search_projects(
    current_user: AuthenticatedUser,
    data: ProjectSearchRequest,
    handler: ListProjectsHandler = Depends(get_list_projects_handler),
) -> PageResponse[ProjectResponse]:
    """PATCH /api/v1/projects → 200 OK"""
    result = await handler.handle(
        ListProjects(
            criteria=ProjectFilter(search=data.search, owner_id=data.owner_id),
            page=data.page_request(PROJECT_SORT_FIELDS),
        )
    )
    return PageResponse[ProjectResponse].from_page(
        result.value, ProjectResponse.model_validate
    )


async def get_project(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    handler: GetProjectHandler = Depends(get_get_project_handler),
) -> ProjectResponse | JSONResponse:
    """GET /api/v1/projects/{project_id} → 200 OK"""
    result = await handler.handle(GetProject(project_id=project_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return ProjectResponse.model_validate(result.value)


async def update_project(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    data: ProjectUpdateRequest,
    handler: UpdateProjectHandler = Depends(get_update_project_handler),
) -> ProjectResponse | JSONResponse:
    """Update a project the caller owns.

    PUT /api/v1/projects/{project_id} → 200 OK
    """
    result = await handler.handle(
        UpdateProject(
            actor_id=current_user.user_id,
            project_id=project_id,
            code=data.code,
            name=data.name,
            description=data.description,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return ProjectResponse.model_validate(result.value)


async def delete_project(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    handler: DeleteProjectHandler = Depends(get_delete_project_handler),
) -> JSONResponse | None:
    """Soft delete a project the caller owns.

    DELETE /api/v1/projects/{project_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteProject(actor_id=current_user.user_id, project_id=project_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None


# =============================================================================
# Project members
# =============================================================================


async def add_project_member(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    data: MembershipCreateRequest,
    handler: AddProjectMemberHandler = Depends(get_add_project_member_handler),
) -> ProjectMemberResponse | JSONResponse:
    """Add a member to a project the caller owns.

    POST /api/v1/projects/{project_id}/members → 201 Created

    Returns:
        ProjectMemberResponse on success.
        JSONResponse 404 if the project or the member is missing.
        JSONResponse 409 if the member already belongs to the project.
    """
    result = await handler.handle(
        AddProjectMember(
            actor_id=current_user.user_id,
            project_id=project_id,
            user_id=data.user_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return ProjectMemberResponse.model_validate(result.value)


async def search_project_members(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    data: ProjectMemberSearchRequest,
    handler: ListProjectMembersHandler = Depends(get_list_project_members_handler),
) -> PageResponse[ProjectMemberResponse] | JSONResponse:
    """PATCH /api/v1/projects/{project_id}/members → 200 OK"""
    result = await handler.handle(
        ListProjectMembers(
            criteria=ProjectMemberFilter(project_id=project_id, user_id=data.user_id),
            page=data.page_request(MEMBERSHIP_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[ProjectMemberResponse].from_page(
        result.value, ProjectMemberResponse.model_validate
    )


async def get_project_member(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    member_id: MembershipIdPath,
    handler: GetProjectMemberHandler = Depends(get_get_project_member_handler),
) -> ProjectMemberResponse | JSONResponse:
    """GET /api/v1/projects/{project_id}/members/{member_id} → 200 OK"""
    result = await handler.handle(
        GetProjectMember(project_id=project_id, membership_id=member_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return ProjectMemberResponse.model_validate(result.value)


async def remove_project_member(
    request: Request,
    current_user: AuthenticatedUser,
    project_id: ProjectIdPath,
    member_id: MembershipIdPath,
    handler: RemoveProjectMemberHandler = Depends(get_remove_project_member_handler),
) -> JSONResponse | None:
    """Remove a membership (hard delete).

    DELETE /api/v1/projects/{project_id}/members/{member_id} → 204 No Content
    """
    result = await handler.handle(
        RemoveProjectMember(
            actor_id=current_user.user_id,
            project_id=project_id,
            membership_id=member_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

"""API Route Registry - Single Source of Truth for all routes.

ROUTE_REGISTRY is the authoritative list of all v1 endpoints. It is used to
generate FastAPI routes, auth dependencies and OpenAPI metadata at
application startup.

Registry structure:
    - Each entry is a RouteMetadata instance describing one endpoint
    - Handlers reference actual functions from router modules
    - Auth policies explicitly declared (PUBLIC, AUTHENTICATED, MANAGER)
    - Index endpoints are PATCH with a search body
    - The three catalogs (roles, task statuses, priorities) share one
      endpoint set, expanded by _catalog_routes()

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(router, ROUTE_REGISTRY)
"""

from src.application.commands.handlers.catalog_handlers import (
    PRIORITY_CATALOG,
    ROLE_CATALOG,
    TASK_STATUS_CATALOG,
    CatalogKind,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    HTTPMethod,
    IdempotencyLevel,
    RouteMetadata,
)

# Import handlers from router modules
from src.presentation.routers.api.v1.auth import (
    join_member,
    login_member,
    refresh_member,
)
from src.presentation.routers.api.v1.boards import (
    add_board_member,
    create_board,
    delete_board,
    get_board,
    get_board_member,
    remove_board_member,
    search_board_members,
    search_boards,
    update_board,
)
from src.presentation.routers.api.v1.catalogs import catalog_endpoints
from src.presentation.routers.api.v1.members import (
    create_member,
    delete_member,
    get_member,
    search_members,
    update_member,
)
from src.presentation.routers.api.v1.notifications import (
    delete_notification,
    get_notification,
    search_notifications,
    update_notification,
)
from src.presentation.routers.api.v1.projects import (
    add_project_member,
    create_project,
    delete_project,
    get_project,
    get_project_member,
    remove_project_member,
    search_project_members,
    search_projects,
    update_project,
)
from src.presentation.routers.api.v1.task_activity import (
    assign_task,
    create_comment,
    delete_comment,
    delete_status_change,
    get_assignment,
    get_comment,
    get_status_change,
    record_status_change,
    search_assignments,
    search_comments,
    search_status_changes,
    unassign_task,
    update_comment,
    update_status_change,
)
from src.presentation.routers.api.v1.tasks import (
    create_task,
    delete_task,
    get_task,
    search_tasks,
    update_task,
)
from src.schemas.catalog_schemas import CatalogResponse
from src.schemas.common_schemas import PageResponse
from src.schemas.member_schemas import AuthorizedResponse, MemberResponse
from src.schemas.notification_schemas import NotificationResponse
from src.schemas.project_schemas import (
    BoardMemberResponse,
    BoardResponse,
    ProjectMemberResponse,
    ProjectResponse,
)
from src.schemas.task_schemas import (
    AssignmentResponse,
    CommentResponse,
    StatusChangeResponse,
    TaskResponse,
    TaskSummaryResponse,
)

PUBLIC = AuthPolicy(level=AuthLevel.PUBLIC)
AUTHENTICATED = AuthPolicy(level=AuthLevel.AUTHENTICATED)
MANAGER = AuthPolicy(level=AuthLevel.MANAGER)

NOT_AUTHENTICATED = ErrorSpec(status=401, description="Not authenticated")
NOT_MANAGER = ErrorSpec(status=403, description="Manager role required")


def _catalog_routes(
    kind: CatalogKind, *, path: str, tag: str, singular: str
) -> list[RouteMetadata]:
    """Expand the five catalog endpoints for one catalog.

    Args:
        kind: Catalog the endpoints serve.
        path: Collection path ("/task-statuses").
        tag: OpenAPI tag ("Task Statuses").
        singular: Snake-case noun used in operation IDs ("task_status").
    """
    endpoints = catalog_endpoints(kind)
    resource = path.strip("/")
    item_path = f"{path}/{{entry_id}}"
    not_found = ErrorSpec(status=404, description=f"{kind.resource_type} not found")
    return [
        RouteMetadata(
            method=HTTPMethod.POST,
            path=path,
            handler=endpoints.create,
            resource=resource,
            tags=[tag],
            summary=f"Create {kind.resource_type.lower()}",
            operation_id=f"create_{singular}",
            response_model=CatalogResponse,
            status_code=201,
            errors=[
                NOT_AUTHENTICATED,
                NOT_MANAGER,
                ErrorSpec(status=409, description="Code already exists"),
            ],
            idempotency=IdempotencyLevel.NON_IDEMPOTENT,
            auth_policy=MANAGER,
        ),
        RouteMetadata(
            method=HTTPMethod.PATCH,
            path=path,
            handler=endpoints.search,
            resource=resource,
            tags=[tag],
            summary=f"Search {kind.plural}",
            description="Page through entries; search matches code or name.",
            operation_id=f"search_{resource.replace('-', '_')}",
            response_model=PageResponse[CatalogResponse],
            errors=[NOT_AUTHENTICATED],
            idempotency=IdempotencyLevel.SAFE,
            auth_policy=AUTHENTICATED,
        ),
        RouteMetadata(
            method=HTTPMethod.GET,
            path=item_path,
            handler=endpoints.get,
            resource=resource,
            tags=[tag],
            summary=f"Get {kind.resource_type.lower()}",
            operation_id=f"get_{singular}",
            response_model=CatalogResponse,
            errors=[NOT_AUTHENTICATED, not_found],
            idempotency=IdempotencyLevel.SAFE,
            auth_policy=AUTHENTICATED,
        ),
        RouteMetadata(
            method=HTTPMethod.PUT,
            path=item_path,
            handler=endpoints.update,
            resource=resource,
            tags=[tag],
            summary=f"Update {kind.resource_type.lower()}",
            operation_id=f"update_{singular}",
            response_model=CatalogResponse,
            errors=[
                NOT_AUTHENTICATED,
                NOT_MANAGER,
                not_found,
                ErrorSpec(status=409, description="Code already exists"),
            ],
            idempotency=IdempotencyLevel.IDEMPOTENT,
            auth_policy=MANAGER,
        ),
        RouteMetadata(
            method=HTTPMethod.DELETE,
            path=item_path,
            handler=endpoints.delete,
            resource=resource,
            tags=[tag],
            summary=f"Delete {kind.resource_type.lower()}",
            description="Hard delete. Entries still referenced cannot be deleted.",
            operation_id=f"delete_{singular}",
            status_code=204,
            errors=[
                NOT_AUTHENTICATED,
                NOT_MANAGER,
                not_found,
                ErrorSpec(status=409, description="Entry is still referenced"),
            ],
            idempotency=IdempotencyLevel.IDEMPOTENT,
            auth_policy=MANAGER,
        ),
    ]


# =============================================================================
# ROUTE_REGISTRY - Single Source of Truth
# =============================================================================

ROUTE_REGISTRY: list[RouteMetadata] = [
    # =========================================================================
    # Auth Resource (3 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/{role}/join",
        handler=join_member,
        resource="auth",
        tags=["Auth"],
        summary="Join",
        description="Register a member with the path role and issue tokens.",
        operation_id="join_member",
        response_model=AuthorizedResponse,
        status_code=201,
        errors=[ErrorSpec(status=409, description="Email already registered")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/{role}/login",
        handler=login_member,
        resource="auth",
        tags=["Auth"],
        summary="Login",
        description="Authenticate with email and password for the path role.",
        operation_id="login_member",
        response_model=AuthorizedResponse,
        errors=[ErrorSpec(status=401, description="Invalid credentials")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/auth/{role}/refresh",
        handler=refresh_member,
        resource="auth",
        tags=["Auth"],
        summary="Refresh tokens",
        description="Exchange a refresh token for a new access/refresh pair.",
        operation_id="refresh_member",
        response_model=AuthorizedResponse,
        errors=[ErrorSpec(status=401, description="Invalid or expired refresh token")],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=PUBLIC,
    ),
    # =========================================================================
    # Members Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/members",
        handler=create_member,
        resource="members",
        tags=["Members"],
        summary="Create member",
        description="Create a member of any role.",
        operation_id="create_member",
        response_model=MemberResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            NOT_MANAGER,
            ErrorSpec(status=409, description="Email already registered"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=MANAGER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/members",
        handler=search_members,
        resource="members",
        tags=["Members"],
        summary="Search members",
        operation_id="search_members",
        response_model=PageResponse[MemberResponse],
        errors=[NOT_AUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/members/{member_id}",
        handler=get_member,
        resource="members",
        tags=["Members"],
        summary="Get member",
        operation_id="get_member",
        response_model=MemberResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Member not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/members/{member_id}",
        handler=update_member,
        resource="members",
        tags=["Members"],
        summary="Update member",
        description="Change name, email or password. The member or a manager.",
        operation_id="update_member",
        response_model=MemberResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the member or a manager"),
            ErrorSpec(status=404, description="Member not found"),
            ErrorSpec(status=409, description="Email already registered"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/members/{member_id}",
        handler=delete_member,
        resource="members",
        tags=["Members"],
        summary="Delete member",
        description="Soft delete. Managers cannot delete themselves.",
        operation_id="delete_member",
        status_code=204,
        errors=[
            ErrorSpec(status=400, description="Cannot delete yourself"),
            NOT_AUTHENTICATED,
            NOT_MANAGER,
            ErrorSpec(status=404, description="Member not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=MANAGER,
    ),
    # =========================================================================
    # Catalog Resources (5 endpoints each)
    # =========================================================================
    *_catalog_routes(ROLE_CATALOG, path="/roles", tag="Roles", singular="role"),
    *_catalog_routes(
        TASK_STATUS_CATALOG,
        path="/task-statuses",
        tag="Task Statuses",
        singular="task_status",
    ),
    *_catalog_routes(
        PRIORITY_CATALOG, path="/priorities", tag="Priorities", singular="priority"
    ),
    # =========================================================================
    # Projects Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects",
        handler=create_project,
        resource="projects",
        tags=["Projects"],
        summary="Create project",
        description="Create a project owned by the caller.",
        operation_id="create_project",
        response_model=ProjectResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            NOT_MANAGER,
            ErrorSpec(status=409, description="Project code already exists"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=MANAGER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/projects",
        handler=search_projects,
        resource="projects",
        tags=["Projects"],
        summary="Search projects",
        operation_id="search_projects",
        response_model=PageResponse[ProjectResponse],
        errors=[NOT_AUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/{project_id}",
        handler=get_project,
        resource="projects",
        tags=["Projects"],
        summary="Get project",
        operation_id="get_project",
        response_model=ProjectResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Project not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/projects/{project_id}",
        handler=update_project,
        resource="projects",
        tags=["Projects"],
        summary="Update project",
        operation_id="update_project",
        response_model=ProjectResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the project owner"),
            ErrorSpec(status=404, description="Project not found"),
            ErrorSpec(status=409, description="Project code already exists"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/projects/{project_id}",
        handler=delete_project,
        resource="projects",
        tags=["Projects"],
        summary="Delete project",
        description="Soft delete a project the caller owns.",
        operation_id="delete_project",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the project owner"),
            ErrorSpec(status=404, description="Project not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Project Members Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects/{project_id}/members",
        handler=add_project_member,
        resource="project-members",
        tags=["Projects"],
        summary="Add project member",
        operation_id="add_project_member",
        response_model=ProjectMemberResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the project owner"),
            ErrorSpec(status=404, description="Project or member not found"),
            ErrorSpec(status=409, description="Already a project member"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/projects/{project_id}/members",
        handler=search_project_members,
        resource="project-members",
        tags=["Projects"],
        summary="Search project members",
        operation_id="search_project_members",
        response_model=PageResponse[ProjectMemberResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Project not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/{project_id}/members/{member_id}",
        handler=get_project_member,
        resource="project-members",
        tags=["Projects"],
        summary="Get project member",
        operation_id="get_project_member",
        response_model=ProjectMemberResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Project member not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/projects/{project_id}/members/{member_id}",
        handler=remove_project_member,
        resource="project-members",
        tags=["Projects"],
        summary="Remove project member",
        operation_id="remove_project_member",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the project owner"),
            ErrorSpec(status=404, description="Project member not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Boards Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects/{project_id}/boards",
        handler=create_board,
        resource="boards",
        tags=["Boards"],
        summary="Create board",
        description="Create a board in a project, owned by the caller.",
        operation_id="create_board",
        response_model=BoardResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            NOT_MANAGER,
            ErrorSpec(status=404, description="Project not found"),
            ErrorSpec(status=409, description="Board code already exists"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=MANAGER,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/projects/{project_id}/boards",
        handler=search_boards,
        resource="boards",
        tags=["Boards"],
        summary="Search boards",
        operation_id="search_boards",
        response_model=PageResponse[BoardResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Project not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/projects/{project_id}/boards/{board_id}",
        handler=get_board,
        resource="boards",
        tags=["Boards"],
        summary="Get board",
        operation_id="get_board",
        response_model=BoardResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Board not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/projects/{project_id}/boards/{board_id}",
        handler=update_board,
        resource="boards",
        tags=["Boards"],
        summary="Update board",
        operation_id="update_board",
        response_model=BoardResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the board owner"),
            ErrorSpec(status=404, description="Board not found"),
            ErrorSpec(status=409, description="Board code already exists"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/projects/{project_id}/boards/{board_id}",
        handler=delete_board,
        resource="boards",
        tags=["Boards"],
        summary="Delete board",
        operation_id="delete_board",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the board owner"),
            ErrorSpec(status=404, description="Board not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Board Members Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/boards/{board_id}/members",
        handler=add_board_member,
        resource="board-members",
        tags=["Boards"],
        summary="Add board member",
        operation_id="add_board_member",
        response_model=BoardMemberResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the board owner"),
            ErrorSpec(status=404, description="Board or member not found"),
            ErrorSpec(status=409, description="Already a board member"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/boards/{board_id}/members",
        handler=search_board_members,
        resource="board-members",
        tags=["Boards"],
        summary="Search board members",
        description="Search matches member name or email.",
        operation_id="search_board_members",
        response_model=PageResponse[BoardMemberResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Board not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/boards/{board_id}/members/{member_id}",
        handler=get_board_member,
        resource="board-members",
        tags=["Boards"],
        summary="Get board member",
        operation_id="get_board_member",
        response_model=BoardMemberResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Board member not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/boards/{board_id}/members/{member_id}",
        handler=remove_board_member,
        resource="board-members",
        tags=["Boards"],
        summary="Remove board member",
        operation_id="remove_board_member",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the board owner"),
            ErrorSpec(status=404, description="Board member not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Tasks Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/tasks",
        handler=create_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Create task",
        operation_id="create_task",
        response_model=TaskResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(
                status=404, description="Status, priority, project or board not found"
            ),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/tasks",
        handler=search_tasks,
        resource="tasks",
        tags=["Tasks"],
        summary="Search tasks",
        description="Task summaries carry their status and priority names.",
        operation_id="search_tasks",
        response_model=PageResponse[TaskSummaryResponse],
        errors=[NOT_AUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tasks/{task_id}",
        handler=get_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Get task",
        operation_id="get_task",
        response_model=TaskResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/tasks/{task_id}",
        handler=update_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Update task",
        operation_id="update_task",
        response_model=TaskResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the task creator or a manager"),
            ErrorSpec(status=404, description="Task or referenced row not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/tasks/{task_id}",
        handler=delete_task,
        resource="tasks",
        tags=["Tasks"],
        summary="Delete task",
        operation_id="delete_task",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the task creator or a manager"),
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Task Assignments Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/tasks/{task_id}/assignments",
        handler=assign_task,
        resource="task-assignments",
        tags=["Task Assignments"],
        summary="Assign task",
        description="Assign a member and send them an assignment notification.",
        operation_id="assign_task",
        response_model=AssignmentResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the task creator or a manager"),
            ErrorSpec(status=404, description="Task or member not found"),
            ErrorSpec(status=409, description="Member already assigned"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/tasks/{task_id}/assignments",
        handler=search_assignments,
        resource="task-assignments",
        tags=["Task Assignments"],
        summary="Search assignments",
        operation_id="search_assignments",
        response_model=PageResponse[AssignmentResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tasks/{task_id}/assignments/{assignment_id}",
        handler=get_assignment,
        resource="task-assignments",
        tags=["Task Assignments"],
        summary="Get assignment",
        operation_id="get_assignment",
        response_model=AssignmentResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task or assignment not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/tasks/{task_id}/assignments/{assignment_id}",
        handler=unassign_task,
        resource="task-assignments",
        tags=["Task Assignments"],
        summary="Unassign task",
        operation_id="unassign_task",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the task creator or a manager"),
            ErrorSpec(status=404, description="Task or assignment not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Task Comments Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/tasks/{task_id}/comments",
        handler=create_comment,
        resource="task-comments",
        tags=["Task Comments"],
        summary="Create comment",
        operation_id="create_comment",
        response_model=CommentResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/tasks/{task_id}/comments",
        handler=search_comments,
        resource="task-comments",
        tags=["Task Comments"],
        summary="Search comments",
        operation_id="search_comments",
        response_model=PageResponse[CommentResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tasks/{task_id}/comments/{comment_id}",
        handler=get_comment,
        resource="task-comments",
        tags=["Task Comments"],
        summary="Get comment",
        operation_id="get_comment",
        response_model=CommentResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task or comment not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/tasks/{task_id}/comments/{comment_id}",
        handler=update_comment,
        resource="task-comments",
        tags=["Task Comments"],
        summary="Update comment",
        operation_id="update_comment",
        response_model=CommentResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the commenter"),
            ErrorSpec(status=404, description="Task or comment not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/tasks/{task_id}/comments/{comment_id}",
        handler=delete_comment,
        resource="task-comments",
        tags=["Task Comments"],
        summary="Delete comment",
        operation_id="delete_comment",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the commenter"),
            ErrorSpec(status=404, description="Task or comment not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Task Status Changes Resource (5 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.POST,
        path="/tasks/{task_id}/status-changes",
        handler=record_status_change,
        resource="task-status-changes",
        tags=["Task Status Changes"],
        summary="Record status change",
        description="Move the task to a new status and record who moved it.",
        operation_id="record_status_change",
        response_model=StatusChangeResponse,
        status_code=201,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task or status not found"),
        ],
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/tasks/{task_id}/status-changes",
        handler=search_status_changes,
        resource="task-status-changes",
        tags=["Task Status Changes"],
        summary="Search status changes",
        operation_id="search_status_changes",
        response_model=PageResponse[StatusChangeResponse],
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/tasks/{task_id}/status-changes/{status_change_id}",
        handler=get_status_change,
        resource="task-status-changes",
        tags=["Task Status Changes"],
        summary="Get status change",
        operation_id="get_status_change",
        response_model=StatusChangeResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=404, description="Task or status change not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/tasks/{task_id}/status-changes/{status_change_id}",
        handler=update_status_change,
        resource="task-status-changes",
        tags=["Task Status Changes"],
        summary="Update status change",
        operation_id="update_status_change",
        response_model=StatusChangeResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the author or a manager"),
            ErrorSpec(status=404, description="Task, status or change not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/tasks/{task_id}/status-changes/{status_change_id}",
        handler=delete_status_change,
        resource="task-status-changes",
        tags=["Task Status Changes"],
        summary="Delete status change",
        operation_id="delete_status_change",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the author or a manager"),
            ErrorSpec(status=404, description="Task or status change not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    # =========================================================================
    # Notifications Resource (4 endpoints)
    # =========================================================================
    RouteMetadata(
        method=HTTPMethod.PATCH,
        path="/notifications",
        handler=search_notifications,
        resource="notifications",
        tags=["Notifications"],
        summary="Search notifications",
        description="Only the caller's own notifications are returned.",
        operation_id="search_notifications",
        response_model=PageResponse[NotificationResponse],
        errors=[NOT_AUTHENTICATED],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.GET,
        path="/notifications/{notification_id}",
        handler=get_notification,
        resource="notifications",
        tags=["Notifications"],
        summary="Get notification",
        operation_id="get_notification",
        response_model=NotificationResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the recipient"),
            ErrorSpec(status=404, description="Notification not found"),
        ],
        idempotency=IdempotencyLevel.SAFE,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.PUT,
        path="/notifications/{notification_id}",
        handler=update_notification,
        resource="notifications",
        tags=["Notifications"],
        summary="Update notification",
        description="Mark read (stamps read_at) or unread.",
        operation_id="update_notification",
        response_model=NotificationResponse,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the recipient"),
            ErrorSpec(status=404, description="Notification not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
    RouteMetadata(
        method=HTTPMethod.DELETE,
        path="/notifications/{notification_id}",
        handler=delete_notification,
        resource="notifications",
        tags=["Notifications"],
        summary="Delete notification",
        operation_id="delete_notification",
        status_code=204,
        errors=[
            NOT_AUTHENTICATED,
            ErrorSpec(status=403, description="Not the recipient"),
            ErrorSpec(status=404, description="Notification not found"),
        ],
        idempotency=IdempotencyLevel.IDEMPOTENT,
        auth_policy=AUTHENTICATED,
    ),
]

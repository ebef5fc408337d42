"""Task activity resource handlers: assignments, comments, status changes.

Every record is addressed under its task; a record of another task
answers 404.

Handlers:
    assign_task            - POST   /tasks/{task_id}/assignments                   (201)
    search_assignments     - PATCH  /tasks/{task_id}/assignments
    get_assignment         - GET    /tasks/{task_id}/assignments/{assignment_id}
    unassign_task          - DELETE /tasks/{task_id}/assignments/{assignment_id}   (204)
    create_comment         - POST   /tasks/{task_id}/comments                      (201)
    search_comments        - PATCH  /tasks/{task_id}/comments
    get_comment            - GET    /tasks/{task_id}/comments/{comment_id}
    update_comment         - PUT    /tasks/{task_id}/comments/{comment_id}
    delete_comment         - DELETE /tasks/{task_id}/comments/{comment_id}         (204)
    record_status_change   - POST   /tasks/{task_id}/status-changes                (201)
    search_status_changes  - PATCH  /tasks/{task_id}/status-changes
    get_status_change      - GET    /tasks/{task_id}/status-changes/{status_change_id}
    update_status_change   - PUT    /tasks/{task_id}/status-changes/{status_change_id}
    delete_status_change   - DELETE /tasks/{task_id}/status-changes/{status_change_id} (204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.task_activity_handlers import (
    AssignTaskHandler,
    CreateCommentHandler,
    DeleteCommentHandler,
    DeleteStatusChangeHandler,
    RecordStatusChangeHandler,
    UnassignTaskHandler,
    UpdateCommentHandler,
    UpdateStatusChangeHandler,
)
from src.application.commands.task_activity_commands import (
    AssignTask,
    CreateComment,
    DeleteComment,
    DeleteStatusChange,
    RecordStatusChange,
    UnassignTask,
    UpdateComment,
    UpdateStatusChange,
)
from src.application.queries.handlers.task_handlers import (
    GetAssignmentHandler,
    GetCommentHandler,
    GetStatusChangeHandler,
    ListAssignmentsHandler,
    ListCommentsHandler,
    ListStatusChangesHandler,
)
from src.application.queries.task_queries import (
    GetAssignment,
    GetComment,
    GetStatusChange,
    ListAssignments,
    ListComments,
    ListStatusChanges,
)
from src.core.container import (
    get_assign_task_handler,
    get_create_comment_handler,
    get_delete_comment_handler,
    get_delete_status_change_handler,
    get_get_assignment_handler,
    get_get_comment_handler,
    get_get_status_change_handler,
    get_list_assignments_handler,
    get_list_comments_handler,
    get_list_status_changes_handler,
    get_record_status_change_handler,
    get_unassign_task_handler,
    get_update_comment_handler,
    get_update_status_change_handler,
)
from src.core.result import Failure
from src.domain.value_objects import (
    AssignmentFilter,
    CommentFilter,
    StatusChangeFilter,
)
from src.domain.value_objects.filters import (
    ASSIGNMENT_SORT_FIELDS,
    COMMENT_SORT_FIELDS,
    STATUS_CHANGE_SORT_FIELDS,
)
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.task_schemas import (
    AssignmentCreateRequest,
    AssignmentResponse,
    AssignmentSearchRequest,
    CommentCreateRequest,
    CommentResponse,
    CommentSearchRequest,
    CommentUpdateRequest,
    StatusChangeCreateRequest,
    StatusChangeResponse,
    StatusChangeSearchRequest,
    StatusChangeUpdateRequest,
)

TaskIdPath = Annotated[UUID, Path(description="Task UUID")]
AssignmentIdPath = Annotated[UUID, Path(description="Assignment UUID")]
CommentIdPath = Annotated[UUID, Path(description="Comment UUID")]
StatusChangeIdPath = Annotated[UUID, Path(description="Status change UUID")]


# =============================================================================
# Assignments
# =============================================================================


async def assign_task(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: AssignmentCreateRequest,
    handler: AssignTaskHandler = Depends(get_assign_task_handler),
) -> AssignmentResponse | JSONResponse:
    """Assign a member to a task and notify them.

    POST /api/v1/tasks/{task_id}/assignments → 201 Created

    Returns:
        AssignmentResponse on success.
        JSONResponse 403 unless the caller is the task creator or a manager.
        JSONResponse 409 if the member is already assigned.
    """
    result = await handler.handle(
        AssignTask(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
            assignee_id=data.assignee_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AssignmentResponse.model_validate(result.value)


async def search_assignments(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: AssignmentSearchRequest,
    handler: ListAssignmentsHandler = Depends(get_list_assignments_handler),
) -> PageResponse[AssignmentResponse] | JSONResponse:
    """PATCH /api/v1/tasks/{task_id}/assignments → 200 OK"""
    result = await handler.handle(
        ListAssignments(
            criteria=AssignmentFilter(task_id=task_id, assignee_id=data.assignee_id),
            page=data.page_request(ASSIGNMENT_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[AssignmentResponse].from_page(
        result.value, AssignmentResponse.model_validate
    )


async def get_assignment(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    assignment_id: AssignmentIdPath,
    handler: GetAssignmentHandler = Depends(get_get_assignment_handler),
) -> AssignmentResponse | JSONResponse:
    """GET /api/v1/tasks/{task_id}/assignments/{assignment_id} → 200 OK"""
    result = await handler.handle(
        GetAssignment(task_id=task_id, assignment_id=assignment_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return AssignmentResponse.model_validate(result.value)


async def unassign_task(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    assignment_id: AssignmentIdPath,
    handler: UnassignTaskHandler = Depends(get_unassign_task_handler),
) -> JSONResponse | None:
    """DELETE /api/v1/tasks/{task_id}/assignments/{assignment_id} → 204 No Content"""
    result = await handler.handle(
        UnassignTask(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
            assignment_id=assignment_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None


# =============================================================================
# Comments
# =============================================================================


async def create_comment(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: CommentCreateRequest,
    handler: CreateCommentHandler = Depends(get_create_comment_handler),
) -> CommentResponse | JSONResponse:
    """Comment on a task. The task creator is notified unless they wrote it.

    POST /api/v1/tasks/{task_id}/comments → 201 Created
    """
    result = await handler.handle(
        CreateComment(
            actor_id=current_user.user_id,
            task_id=task_id,
            comment_body=data.comment_body,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return CommentResponse.model_validate(result.value)


async def search_comments(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: CommentSearchRequest,
    handler: ListCommentsHandler = Depends(get_list_comments_handler),
) -> PageResponse[CommentResponse] | JSONResponse:
    """PATCH /api/v1/tasks/{task_id}/comments → 200 OK"""
    result = await handler.handle(
        ListComments(
            criteria=CommentFilter(
                task_id=task_id,
                commenter_id=data.commenter_id,
                comment_body=data.comment_body,
                created_at_from=data.created_at_from,
                created_at_to=data.created_at_to,
                updated_at_from=data.updated_at_from,
                updated_at_to=data.updated_at_to,
            ),
            page=data.page_request(COMMENT_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[CommentResponse].from_page(
        result.value, CommentResponse.model_validate
    )


async def get_comment(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    comment_id: CommentIdPath,
    handler: GetCommentHandler = Depends(get_get_comment_handler),
) -> CommentResponse | JSONResponse:
    """GET /api/v1/tasks/{task_id}/comments/{comment_id} → 200 OK"""
    result = await handler.handle(GetComment(task_id=task_id, comment_id=comment_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return CommentResponse.model_validate(result.value)


async def update_comment(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    comment_id: CommentIdPath,
    data: CommentUpdateRequest,
    handler: UpdateCommentHandler = Depends(get_update_comment_handler),
) -> CommentResponse | JSONResponse:
    """Edit a comment (commenter only).

    PUT /api/v1/tasks/{task_id}/comments/{comment_id} → 200 OK
    """
    result = await handler.handle(
        UpdateComment(
            actor_id=current_user.user_id,
            task_id=task_id,
            comment_id=comment_id,
            comment_body=data.comment_body,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return CommentResponse.model_validate(result.value)


async def delete_comment(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    comment_id: CommentIdPath,
    handler: DeleteCommentHandler = Depends(get_delete_comment_handler),
) -> JSONResponse | None:
    """Soft delete a comment (commenter only).

    DELETE /api/v1/tasks/{task_id}/comments/{comment_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteComment(
            actor_id=current_user.user_id, task_id=task_id, comment_id=comment_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None


# =============================================================================
# Status changes
# =============================================================================


async def record_status_change(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: StatusChangeCreateRequest,
    handler: RecordStatusChangeHandler = Depends(get_record_status_change_handler),
) -> StatusChangeResponse | JSONResponse:
    """Move a task to a new status and record the change.

    POST /api/v1/tasks/{task_id}/status-changes → 201 Created

    The task's status_id is updated in the same transaction. The task
    creator is notified unless they made the change.
    """
    result = await handler.handle(
        RecordStatusChange(
            actor_id=current_user.user_id,
            task_id=task_id,
            new_status_id=data.new_status_id,
            comment=data.comment,
            changed_at=data.changed_at,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return StatusChangeResponse.model_validate(result.value)


async def search_status_changes(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: StatusChangeSearchRequest,
    handler: ListStatusChangesHandler = Depends(get_list_status_changes_handler),
) -> PageResponse[StatusChangeResponse] | JSONResponse:
    """PATCH /api/v1/tasks/{task_id}/status-changes → 200 OK"""
    result = await handler.handle(
        ListStatusChanges(
            criteria=StatusChangeFilter(
                task_id=task_id,
                new_status_id=data.new_status_id,
                changed_at_from=data.changed_at_from,
                changed_at_to=data.changed_at_to,
            ),
            page=data.page_request(STATUS_CHANGE_SORT_FIELDS),
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return PageResponse[StatusChangeResponse].from_page(
        result.value, StatusChangeResponse.model_validate
    )


async def get_status_change(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    status_change_id: StatusChangeIdPath,
    handler: GetStatusChangeHandler = Depends(get_get_status_change_handler),
) -> StatusChangeResponse | JSONResponse:
    """GET /api/v1/tasks/{task_id}/status-changes/{status_change_id} → 200 OK"""
    result = await handler.handle(
        GetStatusChange(task_id=task_id, status_change_id=status_change_id)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return StatusChangeResponse.model_validate(result.value)


async def update_status_change(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    status_change_id: StatusChangeIdPath,
    data: StatusChangeUpdateRequest,
    handler: UpdateStatusChangeHandler = Depends(get_update_status_change_handler),
) -> StatusChangeResponse | JSONResponse:
    """Correct a recorded change (author or manager).

    PUT /api/v1/tasks/{task_id}/status-changes/{status_change_id} → 200 OK
    """
    result = await handler.handle(
        UpdateStatusChange(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
            status_change_id=status_change_id,
            new_status_id=data.new_status_id,
            comment=data.comment,
            changed_at=data.changed_at,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return StatusChangeResponse.model_validate(result.value)


async def delete_status_change(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    status_change_id: StatusChangeIdPath,
    handler: DeleteStatusChangeHandler = Depends(get_delete_status_change_handler),
) -> JSONResponse | None:
    """DELETE /api/v1/tasks/{task_id}/status-changes/{status_change_id} → 204 No Content"""
    result = await handler.handle(
        DeleteStatusChange(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
            status_change_id=status_change_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

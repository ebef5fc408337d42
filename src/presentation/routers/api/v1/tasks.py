"""Task resource handlers.

Handlers:
    create_task   - POST   /tasks             (201)
    search_tasks  - PATCH  /tasks             (summaries with status/priority names)
    get_task      - GET    /tasks/{task_id}
    update_task   - PUT    /tasks/{task_id}   (creator or manager)
    delete_task   - DELETE /tasks/{task_id}   (creator or manager, 204)
"""

from typing import Annotated
from uuid import UUID

from fastapi import Depends, Path, Request
from fastapi.responses import JSONResponse

from src.application.commands.handlers.task_handlers import (
    CreateTaskHandler,
    DeleteTaskHandler,
    UpdateTaskHandler,
)
from src.application.commands.task_commands import CreateTask, DeleteTask, UpdateTask
from src.application.queries.handlers.task_handlers import (
    GetTaskHandler,
    ListTasksHandler,
)
from src.application.queries.task_queries import GetTask, ListTasks
from src.core.container import (
    get_create_task_handler,
    get_delete_task_handler,
    get_get_task_handler,
    get_list_tasks_handler,
    get_update_task_handler,
)
from src.core.result import Failure
from src.domain.value_objects import TaskFilter
from src.domain.value_objects.filters import TASK_SORT_FIELDS
from src.presentation.routers.api.middleware.auth_dependencies import (
    AuthenticatedUser,
)
from src.presentation.routers.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import PageResponse
from src.schemas.task_schemas import (
    TaskCreateRequest,
    TaskResponse,
    TaskSearchRequest,
    TaskSummaryResponse,
    TaskUpdateRequest,
)

TaskIdPath = Annotated[UUID, Path(description="Task UUID")]


async def create_task(
    request: Request,
    current_user: AuthenticatedUser,
    data: TaskCreateRequest,
    handler: CreateTaskHandler = Depends(get_create_task_handler),
) -> TaskResponse | JSONResponse:
    """Create a task; the caller becomes its creator.

    POST /api/v1/tasks → 201 Created

    Returns:
        TaskResponse on success.
        JSONResponse 404 if the status, priority, project or board is missing.
    """
    result = await handler.handle(
        CreateTask(
            actor_id=current_user.user_id,
            status_id=data.status_id,
            priority_id=data.priority_id,
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            project_id=data.project_id,
            board_id=data.board_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return TaskResponse.model_validate(result.value)


async def search_tasks(
    current_user: AuthenticatedUser,
    data: TaskSearchRequest,
    handler: ListTasksHandler = Depends(get_list_tasks_handler),
) -> PageResponse[TaskSummaryResponse]:
    """PATCH /api/v1/tasks → 200 OK"""
    result = await handler.handle(
        ListTasks(
            criteria=TaskFilter(
                status_id=data.status_id,
                priority_id=data.priority_id,
                creator_id=data.creator_id,
                project_id=data.project_id,
                board_id=data.board_id,
                search=data.search,
            ),
            page=data.page_request(TASK_SORT_FIELDS),
        )
    )
    return PageResponse[TaskSummaryResponse].from_page(
        result.value, TaskSummaryResponse.from_summary
    )


async def get_task(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    handler: GetTaskHandler = Depends(get_get_task_handler),
) -> TaskResponse | JSONResponse:
    """GET /api/v1/tasks/{task_id} → 200 OK"""
    result = await handler.handle(GetTask(task_id=task_id))
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return TaskResponse.model_validate(result.value)


async def update_task(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    data: TaskUpdateRequest,
    handler: UpdateTaskHandler = Depends(get_update_task_handler),
) -> TaskResponse | JSONResponse:
    """PUT /api/v1/tasks/{task_id} → 200 OK"""
    result = await handler.handle(
        UpdateTask(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
            status_id=data.status_id,
            priority_id=data.priority_id,
            title=data.title,
            description=data.description,
            due_date=data.due_date,
            project_id=data.project_id,
            board_id=data.board_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return TaskResponse.model_validate(result.value)


async def delete_task(
    request: Request,
    current_user: AuthenticatedUser,
    task_id: TaskIdPath,
    handler: DeleteTaskHandler = Depends(get_delete_task_handler),
) -> JSONResponse | None:
    """Soft delete a task.

    DELETE /api/v1/tasks/{task_id} → 204 No Content
    """
    result = await handler.handle(
        DeleteTask(
            actor_id=current_user.user_id,
            actor_role=current_user.role,
            task_id=task_id,
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error, request)
    return None

"""Task and task activity request/response schemas.

Endpoints:
    /api/v1/tasks                                          - Tasks
    /api/v1/tasks/{task_id}/assignments                    - Assignments
    /api/v1/tasks/{task_id}/comments                       - Comments
    /api/v1/tasks/{task_id}/status-changes                 - Status history
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import TaskSummary
from src.schemas.common_schemas import SearchRequest

# =============================================================================
# Tasks
# =============================================================================


class TaskCreateRequest(BaseModel):
    """POST /api/v1/tasks. The caller becomes the creator."""

    status_id: UUID
    priority_id: UUID
    title: str = Field(..., min_length=1, max_length=200, examples=["Fix login bug"])
    description: str | None = None
    due_date: datetime | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None


class TaskUpdateRequest(BaseModel):
    """PUT /api/v1/tasks/{task_id}. Omitted fields are unchanged."""

    status_id: UUID | None = None
    priority_id: UUID | None = None
    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    due_date: datetime | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None


class TaskSearchRequest(SearchRequest):
    status_id: UUID | None = None
    priority_id: UUID | None = None
    creator_id: UUID | None = None
    project_id: UUID | None = None
    board_id: UUID | None = None
    search: str | None = Field(None, description="Substring of title or description")


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    status_id: UUID
    priority_id: UUID
    creator_id: UUID
    project_id: UUID | None
    board_id: UUID | None
    title: str
    description: str | None
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime


class TaskSummaryResponse(BaseModel):
    """Task row of an index page, with status and priority names."""

    id: UUID
    title: str
    status_id: UUID
    status_name: str | None
    priority_id: UUID
    priority_name: str | None
    creator_id: UUID
    project_id: UUID | None
    board_id: UUID | None
    due_date: datetime | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_summary(cls, summary: TaskSummary) -> "TaskSummaryResponse":
        task = summary.task
        return cls(
            id=task.id,
            title=task.title,
            status_id=task.status_id,
            status_name=summary.status_name,
            priority_id=task.priority_id,
            priority_name=summary.priority_name,
            creator_id=task.creator_id,
            project_id=task.project_id,
            board_id=task.board_id,
            due_date=task.due_date,
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


# =============================================================================
# Assignments
# =============================================================================


class AssignmentCreateRequest(BaseModel):
    assignee_id: UUID = Field(..., description="Member to assign")


class AssignmentSearchRequest(SearchRequest):
    assignee_id: UUID | None = None


class AssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    assignee_id: UUID
    assigned_at: datetime
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Comments
# =============================================================================


class CommentCreateRequest(BaseModel):
    comment_body: str = Field(..., min_length=1, examples=["Reproduced on staging"])


class CommentUpdateRequest(BaseModel):
    comment_body: str = Field(..., min_length=1)


class CommentSearchRequest(SearchRequest):
    commenter_id: UUID | None = None
    comment_body: str | None = Field(None, description="Substring of the body")
    created_at_from: datetime | None = None
    created_at_to: datetime | None = None
    updated_at_from: datetime | None = None
    updated_at_to: datetime | None = None


class CommentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    commenter_id: UUID
    comment_body: str
    created_at: datetime
    updated_at: datetime


# =============================================================================
# Status changes
# =============================================================================


class StatusChangeCreateRequest(BaseModel):
    """Moves the task to new_status_id. changed_at defaults to now."""

    new_status_id: UUID
    comment: str | None = None
    changed_at: datetime | None = None


class StatusChangeUpdateRequest(BaseModel):
    new_status_id: UUID | None = None
    comment: str | None = None
    changed_at: datetime | None = None


class StatusChangeSearchRequest(SearchRequest):
    new_status_id: UUID | None = None
    changed_at_from: datetime | None = None
    changed_at_to: datetime | None = None


class StatusChangeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    task_id: UUID
    new_status_id: UUID
    changed_by_id: UUID
    changed_at: datetime
    comment: str | None
    created_at: datetime
    updated_at: datetime

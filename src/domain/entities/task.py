"""Task entity and its activity records.

Activity hanging off a task:
    TaskAssignment: who works on the task
    TaskComment: discussion
    TaskStatusChange: history of workflow transitions
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Task:
    """Unit of work tracked on a board.

    Business Rules:
        - Status and priority must reference existing catalog rows
        - Project and board are optional; when given they must exist
        - Creator or a manager may update and delete
        - Deletion is soft (deleted_at)

    Attributes:
        id: Unique task identifier
        status_id: Current TaskStatus FK
        priority_id: Priority FK
        creator_id: Member who created the task
        project_id: Optional project FK
        board_id: Optional board FK
        title: Short title
        description: Optional body
        due_date: Optional due date
        created_at: Creation timestamp
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

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
    deleted_at: datetime | None = None

    def is_created_by(self, member_id: UUID) -> bool:
        """True if member_id created this task."""
        return self.creator_id == member_id


@dataclass
class TaskSummary:
    """Task row joined with its status and priority names (list views)."""

    task: Task
    status_name: str | None
    priority_name: str | None


@dataclass
class TaskAssignment:
    """Assignment of a member to a task.

    Attributes:
        id: Unique assignment identifier
        task_id: Task FK
        assignee_id: Assigned member FK
        assigned_at: When the assignment was made
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: UUID
    task_id: UUID
    assignee_id: UUID
    assigned_at: datetime
    created_at: datetime
    updated_at: datetime


@dataclass
class TaskComment:
    """Comment on a task. Only the commenter may edit or delete it.

    Attributes:
        id: Unique comment identifier
        task_id: Task FK
        commenter_id: Author FK
        comment_body: Comment text
        created_at: Creation timestamp
        updated_at: Last update timestamp
        deleted_at: Soft delete timestamp
    """

    id: UUID
    task_id: UUID
    commenter_id: UUID
    comment_body: str
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None


@dataclass
class TaskStatusChange:
    """Historical record of a task moving to a new status.

    Attributes:
        id: Unique record identifier
        task_id: Task FK
        new_status_id: Status the task moved to
        changed_by_id: Member who made the change
        changed_at: When the change happened
        comment: Optional note
        created_at: Creation timestamp
        updated_at: Last update timestamp
    """

    id: UUID
    task_id: UUID
    new_status_id: UUID
    changed_by_id: UUID
    changed_at: datetime
    comment: str | None
    created_at: datetime
    updated_at: datetime

"""Commands - Write operations that change state.

Commands represent user intent to perform an action. They are immutable
dataclasses with imperative names (JoinMember, AssignTask).

Each command has a corresponding handler that contains the business logic
to execute the command.
"""

from src.application.commands.auth_commands import (
    JoinMember,
    LoginMember,
    RefreshMemberToken,
)
from src.application.commands.board_commands import (
    AddBoardMember,
    CreateBoard,
    DeleteBoard,
    RemoveBoardMember,
    UpdateBoard,
)
from src.application.commands.catalog_commands import (
    CreateCatalogEntry,
    DeleteCatalogEntry,
    UpdateCatalogEntry,
)
from src.application.commands.member_commands import (
    CreateMember,
    DeleteMember,
    UpdateMember,
)
from src.application.commands.notification_commands import (
    DeleteNotification,
    UpdateNotification,
)
from src.application.commands.project_commands import (
    AddProjectMember,
    CreateProject,
    DeleteProject,
    RemoveProjectMember,
    UpdateProject,
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
from src.application.commands.task_commands import CreateTask, DeleteTask, UpdateTask

__all__ = [
    # Auth
    "JoinMember",
    "LoginMember",
    "RefreshMemberToken",
    # Members
    "CreateMember",
    "DeleteMember",
    "UpdateMember",
    # Catalogs
    "CreateCatalogEntry",
    "DeleteCatalogEntry",
    "UpdateCatalogEntry",
    # Projects
    "AddProjectMember",
    "CreateProject",
    "DeleteProject",
    "RemoveProjectMember",
    "UpdateProject",
    # Boards
    "AddBoardMember",
    "CreateBoard",
    "DeleteBoard",
    "RemoveBoardMember",
    "UpdateBoard",
    # Tasks
    "CreateTask",
    "DeleteTask",
    "UpdateTask",
    "AssignTask",
    "UnassignTask",
    "CreateComment",
    "DeleteComment",
    "UpdateComment",
    "DeleteStatusChange",
    "RecordStatusChange",
    "UpdateStatusChange",
    # Notifications
    "DeleteNotification",
    "UpdateNotification",
]

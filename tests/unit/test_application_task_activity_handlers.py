"""Unit tests for task activity handlers (assignments, comments, status changes).

Tests cover:
- Assigning notifies the assignee and rejects duplicates
- Only the task creator or a manager assigns and unassigns
- Commenting notifies the task creator; only the commenter edits
- Recording a status change moves the task and notifies its creator
- Child rows addressed under another task are "not found"
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

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
from src.application.queries.handlers.task_handlers import GetCommentHandler
from src.application.queries.task_queries import GetComment
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.domain.entities import (
    TaskAssignment,
    TaskComment,
    TaskStatus,
    TaskStatusChange,
)
from src.domain.enums import MemberRole


def _now() -> datetime:
    return datetime.now(UTC)


def _assignment(task_id, assignee_id=None) -> TaskAssignment:
    now = _now()
    return TaskAssignment(
        id=uuid7(),
        task_id=task_id,
        assignee_id=assignee_id or uuid7(),
        assigned_at=now,
        created_at=now,
        updated_at=now,
    )


def _comment(task_id, commenter_id=None) -> TaskComment:
    now = _now()
    return TaskComment(
        id=uuid7(),
        task_id=task_id,
        commenter_id=commenter_id or uuid7(),
        comment_body="Looks good",
        created_at=now,
        updated_at=now,
    )


def _status_change(task_id, changed_by_id=None) -> TaskStatusChange:
    now = _now()
    return TaskStatusChange(
        id=uuid7(),
        task_id=task_id,
        new_status_id=uuid7(),
        changed_by_id=changed_by_id or uuid7(),
        changed_at=now,
        comment=None,
        created_at=now,
        updated_at=now,
    )


def _task_repo(task) -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_id.return_value = task
    return repo


@pytest.mark.unit
class TestAssignTaskHandler:
    def _handler(self, task, member, existing=None):
        assignments = AsyncMock()
        assignments.find_by_task_and_assignee.return_value = existing
        members = AsyncMock()
        members.find_by_id.return_value = member
        notifier = AsyncMock()
        handler = AssignTaskHandler(
            _task_repo(task), assignments, members, notifier, Mock()
        )
        return handler, assignments, notifier

    async def test_creator_assigns_and_assignee_is_notified(
        self, make_task, make_member
    ):
        task = make_task()
        member = make_member()
        handler, assignments, notifier = self._handler(task, member)

        result = await handler.handle(
            AssignTask(
                actor_id=task.creator_id,
                actor_role=MemberRole.DEVELOPER,
                task_id=task.id,
                assignee_id=member.id,
            )
        )

        assert isinstance(result, Success)
        assert result.value.assignee_id == member.id
        assignments.save.assert_awaited_once()
        notifier.assigned.assert_awaited_once()
        assert notifier.assigned.call_args.kwargs["assignee_id"] == member.id

    async def test_other_contributor_cannot_assign(self, make_task, make_member):
        task = make_task()
        handler, assignments, notifier = self._handler(task, make_member())

        result = await handler.handle(
            AssignTask(
                actor_id=uuid7(),
                actor_role=MemberRole.QA,
                task_id=task.id,
                assignee_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED
        notifier.assigned.assert_not_called()

    async def test_duplicate_assignment(self, make_task, make_member):
        task = make_task()
        member = make_member()
        handler, assignments, notifier = self._handler(
            task, member, existing=_assignment(task.id, member.id)
        )

        result = await handler.handle(
            AssignTask(
                actor_id=uuid7(),
                actor_role=MemberRole.PM,
                task_id=task.id,
                assignee_id=member.id,
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ASSIGNMENT_ALREADY_EXISTS
        assignments.save.assert_not_called()

    async def test_unknown_assignee(self, make_task):
        task = make_task()
        handler, _, _ = self._handler(task, None)

        result = await handler.handle(
            AssignTask(
                actor_id=task.creator_id,
                actor_role=MemberRole.DEVELOPER,
                task_id=task.id,
                assignee_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.MEMBER_NOT_FOUND


@pytest.mark.unit
class TestUnassignTaskHandler:
    async def test_assignment_of_other_task(self, make_task):
        task = make_task()
        assignments = AsyncMock()
        assignments.find_by_id.return_value = _assignment(uuid7())

        result = await UnassignTaskHandler(_task_repo(task), assignments, Mock()).handle(
            UnassignTask(
                actor_id=task.creator_id,
                actor_role=MemberRole.DEVELOPER,
                task_id=task.id,
                assignment_id=uuid7(),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ASSIGNMENT_NOT_FOUND
        assignments.delete.assert_not_called()

    async def test_manager_unassigns(self, make_task):
        task = make_task()
        assignment = _assignment(task.id)
        assignments = AsyncMock()
        assignments.find_by_id.return_value = assignment

        result = await UnassignTaskHandler(_task_repo(task), assignments, Mock()).handle(
            UnassignTask(
                actor_id=uuid7(),
                actor_role=MemberRole.TPM,
                task_id=task.id,
                assignment_id=assignment.id,
            )
        )

        assert isinstance(result, Success)
        assignments.delete.assert_awaited_once_with(assignment.id)


@pytest.mark.unit
class TestCommentHandlers:
    async def test_comment_notifies_creator(self, make_task):
        task = make_task()
        comments = AsyncMock()
        notifier = AsyncMock()
        commenter_id = uuid7()

        result = await CreateCommentHandler(
            _task_repo(task), comments, notifier, Mock()
        ).handle(
            CreateComment(
                actor_id=commenter_id, task_id=task.id, comment_body="Reproduced"
            )
        )

        assert isinstance(result, Success)
        assert result.value.commenter_id == commenter_id
        comments.save.assert_awaited_once()
        notifier.commented.assert_awaited_once()

    async def test_comment_on_missing_task(self):
        comments = AsyncMock()

        result = await CreateCommentHandler(
            _task_repo(None), comments, AsyncMock(), Mock()
        ).handle(CreateComment(actor_id=uuid7(), task_id=uuid7(), comment_body="?"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TASK_NOT_FOUND
        comments.save.assert_not_called()

    async def test_only_commenter_edits(self, make_task):
        task = make_task()
        comment = _comment(task.id)
        comments = AsyncMock()
        comments.find_by_id.return_value = comment

        result = await UpdateCommentHandler(_task_repo(task), comments, Mock()).handle(
            UpdateComment(
                actor_id=task.creator_id,
                task_id=task.id,
                comment_id=comment.id,
                comment_body="Edited",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED

    async def test_commenter_edits_body(self, make_task):
        task = make_task()
        comment = _comment(task.id)
        comments = AsyncMock()
        comments.find_by_id.return_value = comment

        result = await UpdateCommentHandler(_task_repo(task), comments, Mock()).handle(
            UpdateComment(
                actor_id=comment.commenter_id,
                task_id=task.id,
                comment_id=comment.id,
                comment_body="Edited",
            )
        )

        assert isinstance(result, Success)
        assert result.value.comment_body == "Edited"

    async def test_delete_is_soft(self, make_task):
        task = make_task()
        comment = _comment(task.id)
        comments = AsyncMock()
        comments.find_by_id.return_value = comment

        result = await DeleteCommentHandler(_task_repo(task), comments, Mock()).handle(
            DeleteComment(
                actor_id=comment.commenter_id, task_id=task.id, comment_id=comment.id
            )
        )

        assert isinstance(result, Success)
        assert comments.update.call_args.args[0].deleted_at is not None

    async def test_get_comment_of_other_task(self, make_task):
        task = make_task()
        comments = AsyncMock()
        comments.find_by_id.return_value = _comment(uuid7())

        result = await GetCommentHandler(_task_repo(task), comments).handle(
            GetComment(task_id=task.id, comment_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.COMMENT_NOT_FOUND


@pytest.mark.unit
class TestStatusChangeHandlers:
    async def test_record_moves_task_and_notifies(self, make_task):
        task = make_task()
        now = _now()
        done = TaskStatus(
            id=uuid7(),
            code="done",
            name="Done",
            description=None,
            created_at=now,
            updated_at=now,
        )
        tasks = _task_repo(task)
        statuses = AsyncMock()
        statuses.find_by_id.return_value = done
        status_changes = AsyncMock()
        notifier = AsyncMock()
        actor_id = uuid7()

        result = await RecordStatusChangeHandler(
            tasks, statuses, status_changes, notifier, Mock()
        ).handle(
            RecordStatusChange(
                actor_id=actor_id,
                task_id=task.id,
                new_status_id=done.id,
                comment="Released",
            )
        )

        assert isinstance(result, Success)
        assert result.value.new_status_id == done.id
        assert result.value.changed_by_id == actor_id
        assert result.value.changed_at is not None
        status_changes.save.assert_awaited_once()
        assert tasks.update.call_args.args[0].status_id == done.id
        assert notifier.status_changed.call_args.kwargs["status_name"] == "Done"

    async def test_record_unknown_status(self, make_task):
        task = make_task()
        statuses = AsyncMock()
        statuses.find_by_id.return_value = None
        tasks = _task_repo(task)

        result = await RecordStatusChangeHandler(
            tasks, statuses, AsyncMock(), AsyncMock(), Mock()
        ).handle(
            RecordStatusChange(actor_id=uuid7(), task_id=task.id, new_status_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TASK_STATUS_NOT_FOUND
        tasks.update.assert_not_called()

    async def test_other_contributor_cannot_edit(self, make_task):
        task = make_task()
        status_changes = AsyncMock()
        status_changes.find_by_id.return_value = _status_change(task.id)

        result = await UpdateStatusChangeHandler(
            _task_repo(task), AsyncMock(), status_changes, Mock()
        ).handle(
            UpdateStatusChange(
                actor_id=uuid7(),
                actor_role=MemberRole.DEVELOPER,
                task_id=task.id,
                status_change_id=uuid7(),
                comment="Rewritten",
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.RESOURCE_NOT_OWNED

    async def test_author_edits_comment(self, make_task):
        task = make_task()
        change = _status_change(task.id)
        status_changes = AsyncMock()
        status_changes.find_by_id.return_value = change

        result = await UpdateStatusChangeHandler(
            _task_repo(task), AsyncMock(), status_changes, Mock()
        ).handle(
            UpdateStatusChange(
                actor_id=change.changed_by_id,
                actor_role=MemberRole.QA,
                task_id=task.id,
                status_change_id=change.id,
                comment="Verified on staging",
            )
        )

        assert isinstance(result, Success)
        assert result.value.comment == "Verified on staging"
        assert result.value.new_status_id == change.new_status_id

    async def test_editing_newest_change_moves_task(self, make_task):
        task = make_task()
        change = _status_change(task.id, changed_by_id=task.creator_id)
        tasks = _task_repo(task)
        status_changes = AsyncMock()
        status_changes.find_by_id.return_value = change
        status_changes.find_latest.return_value = change
        corrected_status_id = uuid7()

        result = await UpdateStatusChangeHandler(
            tasks, AsyncMock(), status_changes, Mock()
        ).handle(
            UpdateStatusChange(
                actor_id=change.changed_by_id,
                actor_role=MemberRole.DEVELOPER,
                task_id=task.id,
                status_change_id=change.id,
                new_status_id=corrected_status_id,
            )
        )

        assert isinstance(result, Success)
        status_changes.find_latest.assert_awaited_once_with(task.id)
        assert tasks.update.call_args.args[0].status_id == corrected_status_id

    async def test_editing_older_change_leaves_task_alone(self, make_task):
        task = make_task()
        change = _status_change(task.id)
        tasks = _task_repo(task)
        status_changes = AsyncMock()
        status_changes.find_by_id.return_value = change
        status_changes.find_latest.return_value = _status_change(task.id)

        result = await UpdateStatusChangeHandler(
            tasks, AsyncMock(), status_changes, Mock()
        ).handle(
            UpdateStatusChange(
                actor_id=uuid7(),
                actor_role=MemberRole.PM,
                task_id=task.id,
                status_change_id=change.id,
                new_status_id=uuid7(),
            )
        )

        assert isinstance(result, Success)
        tasks.update.assert_not_called()

    async def test_manager_deletes(self, make_task):
        task = make_task()
        change = _status_change(task.id)
        status_changes = AsyncMock()
        status_changes.find_by_id.return_value = change

        result = await DeleteStatusChangeHandler(
            _task_repo(task), status_changes, Mock()
        ).handle(
            DeleteStatusChange(
                actor_id=uuid7(),
                actor_role=MemberRole.PMO,
                task_id=task.id,
                status_change_id=change.id,
            )
        )

        assert isinstance(result, Success)
        status_changes.delete.assert_awaited_once_with(change.id)

"""Integration tests for the SQLAlchemy repositories on SQLite.

Tests cover:
- Entity <-> model mapping
- Soft-deleted rows hidden from lookups and searches
- Unique constraints surfacing as RecordConflictError
- Filtering, sorting and pagination through fetch_page
- Task summaries joined with catalog names
"""

from dataclasses import replace
from datetime import UTC, datetime, timedelta

import pytest
from uuid_extensions import uuid7

from src.domain.entities import (
    Notification,
    Priority,
    Project,
    Task,
    TaskComment,
    TaskStatus,
    TaskStatusChange,
)
from src.domain.enums import MemberRole, NotificationType
from src.domain.errors import RecordConflictError
from src.domain.value_objects import (
    CatalogFilter,
    CommentFilter,
    MemberFilter,
    NotificationFilter,
    PageRequest,
    ProjectFilter,
    StatusChangeFilter,
    TaskFilter,
)
from src.infrastructure.persistence.repositories import (
    MemberRepository,
    NotificationRepository,
    PriorityRepository,
    ProjectRepository,
    TaskCommentRepository,
    TaskRepository,
    TaskStatusChangeRepository,
    TaskStatusRepository,
)


def _status(code: str, name: str) -> TaskStatus:
    now = datetime.now(UTC)
    return TaskStatus(
        id=uuid7(), code=code, name=name, description=None, created_at=now, updated_at=now
    )


@pytest.mark.integration
class TestMemberRepository:
    async def test_save_and_find(self, database, make_member):
        member = make_member(email="dana@example.com", role=MemberRole.QA)
        async with database.get_session() as session:
            await MemberRepository(session).save(member)

        async with database.get_session() as session:
            repo = MemberRepository(session)
            by_id = await repo.find_by_id(member.id)
            by_email = await repo.find_by_email("DANA@example.com")

        assert by_id is not None
        assert by_id.email == "dana@example.com"
        assert by_id.created_at == member.created_at
        assert by_email is not None
        assert by_email.role == MemberRole.QA

    async def test_soft_deleted_member(self, database, make_member):
        member = make_member()
        async with database.get_session() as session:
            repo = MemberRepository(session)
            await repo.save(member)
            await repo.update(replace(member, deleted_at=datetime.now(UTC)))

        async with database.get_session() as session:
            repo = MemberRepository(session)
            assert await repo.find_by_id(member.id) is None
            # Email stays reserved after deletion
            assert await repo.find_by_email(member.email) is not None
            page = await repo.search(MemberFilter(), PageRequest())
        assert page.total == 0

    async def test_duplicate_email_conflict(self, database, make_member):
        async with database.get_session() as session:
            await MemberRepository(session).save(make_member(email="dup@example.com"))

        with pytest.raises(RecordConflictError) as exc_info:
            async with database.get_session() as session:
                await MemberRepository(session).save(make_member(email="dup@example.com"))

        assert exc_info.value.conflict.conflicting_field == "email"

    async def test_search_filters_sort_and_paginate(self, database, make_member):
        base = datetime(2026, 1, 1, tzinfo=UTC)
        members = [
            make_member(
                name=name,
                role=role,
                created_at=base + timedelta(days=i),
                updated_at=base + timedelta(days=i),
            )
            for i, (name, role) in enumerate(
                [
                    ("Alice", MemberRole.DEVELOPER),
                    ("Bob", MemberRole.DEVELOPER),
                    ("Carol", MemberRole.DEVELOPER),
                    ("Dave", MemberRole.PM),
                ]
            )
        ]
        async with database.get_session() as session:
            repo = MemberRepository(session)
            for member in members:
                await repo.save(member)

        async with database.get_session() as session:
            repo = MemberRepository(session)
            developers = await repo.search(
                MemberFilter(role=MemberRole.DEVELOPER),
                PageRequest(page=1, limit=2, sort_field="name", descending=False),
            )
            second_page = await repo.search(
                MemberFilter(role=MemberRole.DEVELOPER),
                PageRequest(page=2, limit=2, sort_field="name", descending=False),
            )
            by_name = await repo.search(MemberFilter(name="car"), PageRequest())
            in_range = await repo.search(
                MemberFilter(
                    created_at_from=base + timedelta(days=1),
                    created_at_to=base + timedelta(days=2),
                ),
                PageRequest(),
            )

        assert developers.total == 3
        assert developers.pages == 2
        assert [m.name for m in developers.items] == ["Alice", "Bob"]
        assert [m.name for m in second_page.items] == ["Carol"]
        assert [m.name for m in by_name.items] == ["Carol"]
        # Default sort is created_at descending
        assert [m.name for m in in_range.items] == ["Carol", "Bob"]


@pytest.mark.integration
class TestCatalogRepository:
    async def test_search_and_code_conflict(self, database):
        async with database.get_session() as session:
            repo = TaskStatusRepository(session)
            await repo.save(_status("todo", "To Do"))
            await repo.save(_status("in_progress", "In Progress"))

        async with database.get_session() as session:
            page = await TaskStatusRepository(session).search(
                CatalogFilter(search="progress"), PageRequest()
            )
        assert [s.code for s in page.items] == ["in_progress"]
        assert isinstance(page.items[0], TaskStatus)

        with pytest.raises(RecordConflictError):
            async with database.get_session() as session:
                await TaskStatusRepository(session).save(_status("todo", "Again"))

    async def test_referenced_status(self, database, make_task):
        status = _status("todo", "To Do")
        async with database.get_session() as session:
            await TaskStatusRepository(session).save(status)
            await TaskRepository(session).save(make_task(status_id=status.id))

        async with database.get_session() as session:
            repo = TaskStatusRepository(session)
            assert await repo.is_referenced(status.id) is True
            assert await repo.is_referenced(uuid7()) is False

    async def test_delete_is_hard(self, database):
        status = _status("done", "Done")
        async with database.get_session() as session:
            await TaskStatusRepository(session).save(status)
        async with database.get_session() as session:
            await TaskStatusRepository(session).delete(status.id)
        async with database.get_session() as session:
            assert await TaskStatusRepository(session).find_by_id(status.id) is None


@pytest.mark.integration
class TestProjectRepository:
    async def test_code_lookup_ignores_deleted(self, database):
        now = datetime.now(UTC)
        project = Project(
            id=uuid7(),
            owner_id=uuid7(),
            code="CORE",
            name="Core",
            description="Platform",
            created_at=now,
            updated_at=now,
        )
        async with database.get_session() as session:
            repo = ProjectRepository(session)
            await repo.save(project)
            assert await repo.find_by_code("CORE") is not None
            await repo.update(replace(project, deleted_at=now))

        async with database.get_session() as session:
            repo = ProjectRepository(session)
            assert await repo.find_by_code("CORE") is None
            page = await repo.search(ProjectFilter(search="plat"), PageRequest())
        assert page.total == 0


@pytest.mark.integration
class TestTaskRepository:
    async def test_search_returns_catalog_names(self, database, make_task):
        status = _status("todo", "To Do")
        now = datetime.now(UTC)
        priority = Priority(
            id=uuid7(), code="high", name="High", description=None, created_at=now, updated_at=now
        )
        async with database.get_session() as session:
            await TaskStatusRepository(session).save(status)
            await PriorityRepository(session).save(priority)
            tasks = TaskRepository(session)
            await tasks.save(
                make_task(
                    status_id=status.id,
                    priority_id=priority.id,
                    title="Fix login bug",
                )
            )
            await tasks.save(make_task(status_id=status.id, title="Write docs"))

        async with database.get_session() as session:
            page = await TaskRepository(session).search(
                TaskFilter(search="LOGIN"), PageRequest()
            )

        assert page.total == 1
        summary = page.items[0]
        assert isinstance(summary.task, Task)
        assert summary.status_name == "To Do"
        assert summary.priority_name == "High"

    async def test_soft_deleted_task_hidden(self, database, make_task):
        task = make_task()
        async with database.get_session() as session:
            repo = TaskRepository(session)
            await repo.save(task)
            await repo.update(replace(task, deleted_at=datetime.now(UTC)))

        async with database.get_session() as session:
            repo = TaskRepository(session)
            assert await repo.find_by_id(task.id) is None
            assert (await repo.search(TaskFilter(), PageRequest())).total == 0

    async def test_update_persists_fields(self, database, make_task):
        task = make_task()
        due = datetime(2026, 11, 30, 17, 0, tzinfo=UTC)
        async with database.get_session() as session:
            await TaskRepository(session).save(task)
        async with database.get_session() as session:
            await TaskRepository(session).update(
                replace(task, title="Renamed", due_date=due)
            )
        async with database.get_session() as session:
            stored = await TaskRepository(session).find_by_id(task.id)

        assert stored is not None
        assert stored.title == "Renamed"
        assert stored.due_date == due


@pytest.mark.integration
class TestNotificationRepository:
    async def test_search_scoped_to_recipient_and_read_flag(self, database):
        recipient_id = uuid7()
        now = datetime.now(UTC)

        def _notification(recipient, is_read):
            return Notification(
                id=uuid7(),
                recipient_id=recipient,
                task_id=None,
                notification_type=NotificationType.ASSIGNMENT,
                message="You have been assigned to task 'X'",
                is_read=is_read,
                read_at=now if is_read else None,
                created_at=now,
                updated_at=now,
            )

        async with database.get_session() as session:
            repo = NotificationRepository(session)
            await repo.save(_notification(recipient_id, False))
            await repo.save(_notification(recipient_id, True))
            await repo.save(_notification(uuid7(), False))

        async with database.get_session() as session:
            repo = NotificationRepository(session)
            mine = await repo.search(
                NotificationFilter(recipient_id=recipient_id), PageRequest()
            )
            unread = await repo.search(
                NotificationFilter(recipient_id=recipient_id, is_read=False),
                PageRequest(),
            )

        assert mine.total == 2
        assert unread.total == 1
        assert unread.items[0].is_read is False


@pytest.mark.integration
class TestTaskCommentRepository:
    async def test_search_filters(self, database):
        task_id = uuid7()
        author_id = uuid7()
        base = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)

        def _comment(body, commenter_id, day, edited_day=None):
            created = base + timedelta(days=day)
            return TaskComment(
                id=uuid7(),
                task_id=task_id,
                commenter_id=commenter_id,
                comment_body=body,
                created_at=created,
                updated_at=base + timedelta(days=edited_day or day),
            )

        async with database.get_session() as session:
            repo = TaskCommentRepository(session)
            await repo.save(_comment("Reproduced on staging", author_id, 0))
            await repo.save(_comment("Fixed in build 42", author_id, 2, edited_day=5))
            await repo.save(_comment("Staging looks fine now", uuid7(), 4))
            await repo.save(
                TaskComment(
                    id=uuid7(),
                    task_id=uuid7(),
                    commenter_id=author_id,
                    comment_body="Staging on another task",
                    created_at=base,
                    updated_at=base,
                )
            )

        async with database.get_session() as session:
            repo = TaskCommentRepository(session)

            async def total(**criteria):
                page = await repo.search(
                    CommentFilter(task_id=task_id, **criteria), PageRequest()
                )
                return page.total

            assert await total() == 3
            assert await total(commenter_id=author_id) == 2
            assert await total(comment_body="staging") == 2
            assert await total(created_at_from=base + timedelta(days=1)) == 2
            assert (
                await total(
                    created_at_from=base + timedelta(days=1),
                    created_at_to=base + timedelta(days=3),
                )
                == 1
            )
            assert await total(updated_at_from=base + timedelta(days=5)) == 1
            assert await total(updated_at_to=base + timedelta(days=4)) == 2

    async def test_soft_deleted_comment_hidden(self, database):
        now = datetime.now(UTC)
        comment = TaskComment(
            id=uuid7(),
            task_id=uuid7(),
            commenter_id=uuid7(),
            comment_body="Duplicate",
            created_at=now,
            updated_at=now,
        )
        async with database.get_session() as session:
            repo = TaskCommentRepository(session)
            await repo.save(comment)
            await repo.update(replace(comment, deleted_at=now))

        async with database.get_session() as session:
            repo = TaskCommentRepository(session)
            assert await repo.find_by_id(comment.id) is None
            page = await repo.search(
                CommentFilter(task_id=comment.task_id), PageRequest()
            )
        assert page.total == 0


@pytest.mark.integration
class TestTaskStatusChangeRepository:
    @staticmethod
    def _change(task_id, status_id, changed_at):
        return TaskStatusChange(
            id=uuid7(),
            task_id=task_id,
            new_status_id=status_id,
            changed_by_id=uuid7(),
            changed_at=changed_at,
            comment=None,
            created_at=changed_at,
            updated_at=changed_at,
        )

    async def test_search_filters(self, database):
        task_id = uuid7()
        todo_id, done_id = uuid7(), uuid7()
        base = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)
        async with database.get_session() as session:
            repo = TaskStatusChangeRepository(session)
            await repo.save(self._change(task_id, todo_id, base))
            await repo.save(self._change(task_id, done_id, base + timedelta(days=2)))
            await repo.save(self._change(task_id, todo_id, base + timedelta(days=4)))
            await repo.save(self._change(uuid7(), done_id, base))

        async with database.get_session() as session:
            repo = TaskStatusChangeRepository(session)

            async def search(**criteria):
                return await repo.search(
                    StatusChangeFilter(task_id=task_id, **criteria),
                    PageRequest(sort_field="changed_at", descending=False),
                )

            everything = await search()
            done = await search(new_status_id=done_id)
            window = await search(
                changed_at_from=base + timedelta(days=1),
                changed_at_to=base + timedelta(days=3),
            )
            recent = await search(changed_at_from=base + timedelta(days=2))

        assert everything.total == 3
        assert [c.changed_at for c in everything.items] == [
            base,
            base + timedelta(days=2),
            base + timedelta(days=4),
        ]
        assert done.total == 1
        assert window.total == 1
        assert window.items[0].new_status_id == done_id
        assert recent.total == 2

    async def test_find_latest_uses_changed_at(self, database):
        task_id = uuid7()
        base = datetime(2026, 10, 1, 9, 0, tzinfo=UTC)
        older = self._change(task_id, uuid7(), base)
        newer = self._change(task_id, uuid7(), base + timedelta(hours=1))
        async with database.get_session() as session:
            repo = TaskStatusChangeRepository(session)
            await repo.save(newer)
            await repo.save(older)

        async with database.get_session() as session:
            repo = TaskStatusChangeRepository(session)
            latest = await repo.find_latest(task_id)
            missing = await repo.find_latest(uuid7())

        assert latest is not None
        assert latest.id == newer.id
        assert missing is None

    async def test_delete_is_hard(self, database):
        change = self._change(uuid7(), uuid7(), datetime.now(UTC))
        async with database.get_session() as session:
            repo = TaskStatusChangeRepository(session)
            await repo.save(change)
            await repo.delete(change.id)

        async with database.get_session() as session:
            assert await TaskStatusChangeRepository(session).find_by_id(change.id) is None

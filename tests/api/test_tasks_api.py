"""API tests for tasks, their activity and the notifications it raises.

Covers:
- Task create/search/get/update/delete with reference checks
- Assignments, comments and status changes under /tasks/{task_id}
- Notifications delivered to assignees and task creators
"""

import pytest
from uuid_extensions import uuid7

from tests.api.helpers import API, bearer


@pytest.fixture
def creator(join):
    return join("developer", name="Creator")


@pytest.fixture
def task(client, creator, catalogs):
    response = client.post(
        f"{API}/tasks",
        json={
            "title": "Fix login bug",
            "description": "Users get logged out",
            "status_id": catalogs["todo"]["id"],
            "priority_id": catalogs["high"]["id"],
            "due_date": "2026-11-30T17:00:00Z",
        },
        headers=bearer(creator),
    )
    assert response.status_code == 201, response.text
    return response.json()


def _notifications(client, member, **body):
    response = client.patch(f"{API}/notifications", json=body, headers=bearer(member))
    assert response.status_code == 200
    return response.json()


@pytest.mark.api
class TestTasks:
    def test_create_records_creator(self, task, creator):
        assert task["creator_id"] == creator["id"]
        assert task["due_date"].startswith("2026-11-30T17:00:00")

    def test_create_with_unknown_status(self, client, creator, catalogs):
        response = client.post(
            f"{API}/tasks",
            json={
                "title": "Orphan",
                "status_id": str(uuid7()),
                "priority_id": catalogs["high"]["id"],
            },
            headers=bearer(creator),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Task status not found"

    def test_search_returns_summaries(self, client, task, join):
        response = client.patch(
            f"{API}/tasks", json={"search": "login"}, headers=bearer(join("qa"))
        )

        assert response.status_code == 200
        [summary] = response.json()["data"]
        assert summary["id"] == task["id"]
        assert summary["status_name"] == "To Do"
        assert summary["priority_name"] == "High"

    def test_only_creator_or_manager_updates(self, client, task, creator, join):
        path = f"{API}/tasks/{task['id']}"

        stranger = client.put(path, json={"title": "Nope"}, headers=bearer(join("qa")))
        manager = client.put(path, json={"title": "By manager"}, headers=bearer(join("pm")))
        own = client.put(path, json={"title": "By creator"}, headers=bearer(creator))

        assert stranger.status_code == 403
        assert manager.status_code == 200
        assert own.json()["title"] == "By creator"
        assert own.json()["description"] == "Users get logged out"

    def test_delete_hides_task(self, client, task, creator):
        path = f"{API}/tasks/{task['id']}"

        assert client.delete(path, headers=bearer(creator)).status_code == 204
        assert client.get(path, headers=bearer(creator)).status_code == 404

    def test_board_must_belong_to_project(self, client, creator, catalogs, join):
        pm = join("pm")
        projects = [
            client.post(
                f"{API}/projects", json={"code": code, "name": code}, headers=bearer(pm)
            ).json()
            for code in ("APOLLO", "GEMINI")
        ]
        board = client.post(
            f"{API}/projects/{projects[1]['id']}/boards",
            json={"code": "SPRINT-1", "name": "Sprint 1"},
            headers=bearer(pm),
        ).json()
        body = {
            "title": "Wire up telemetry",
            "status_id": catalogs["todo"]["id"],
            "priority_id": catalogs["high"]["id"],
            "board_id": board["id"],
        }

        mismatched = client.post(
            f"{API}/tasks",
            json={**body, "project_id": projects[0]["id"]},
            headers=bearer(creator),
        )
        matched = client.post(
            f"{API}/tasks",
            json={**body, "project_id": projects[1]["id"]},
            headers=bearer(creator),
        )

        assert mismatched.status_code == 404
        assert mismatched.json()["detail"] == "Board not found"
        assert matched.status_code == 201
        assert matched.json()["board_id"] == board["id"]


@pytest.mark.api
class TestAssignments:
    def test_assign_notifies_assignee(self, client, task, creator, join):
        assignee = join("designer")
        path = f"{API}/tasks/{task['id']}/assignments"

        assigned = client.post(
            path, json={"assignee_id": assignee["id"]}, headers=bearer(creator)
        )
        again = client.post(
            path, json={"assignee_id": assignee["id"]}, headers=bearer(creator)
        )
        inbox = _notifications(client, assignee)

        assert assigned.status_code == 201
        assert again.status_code == 409
        [notification] = inbox["data"]
        assert notification["notification_type"] == "assignment"
        assert notification["message"] == "You have been assigned to task 'Fix login bug'"
        assert notification["task_id"] == task["id"]
        assert notification["is_read"] is False

    def test_unassign(self, client, task, creator, join):
        assignee = join("designer")
        path = f"{API}/tasks/{task['id']}/assignments"
        assignment = client.post(
            path, json={"assignee_id": assignee["id"]}, headers=bearer(creator)
        ).json()

        removed = client.delete(f"{path}/{assignment['id']}", headers=bearer(creator))
        listed = client.patch(path, json={}, headers=bearer(creator))

        assert removed.status_code == 204
        assert listed.json()["pagination"]["records"] == 0


@pytest.mark.api
class TestComments:
    def test_comment_notifies_creator_not_self(self, client, task, creator, join):
        reviewer = join("qa")
        path = f"{API}/tasks/{task['id']}/comments"

        own = client.post(path, json={"comment_body": "Looking"}, headers=bearer(creator))
        other = client.post(
            path, json={"comment_body": "Reproduced on staging"}, headers=bearer(reviewer)
        )
        inbox = _notifications(client, creator, notification_type="comment")

        assert own.status_code == 201
        assert other.status_code == 201
        assert other.json()["commenter_id"] == reviewer["id"]
        assert [n["message"] for n in inbox["data"]] == [
            "New comment on task 'Fix login bug'"
        ]

    def test_only_commenter_edits(self, client, task, creator, join):
        reviewer = join("qa")
        path = f"{API}/tasks/{task['id']}/comments"
        comment = client.post(
            path, json={"comment_body": "First"}, headers=bearer(reviewer)
        ).json()

        denied = client.put(
            f"{path}/{comment['id']}", json={"comment_body": "Edited"}, headers=bearer(creator)
        )
        edited = client.put(
            f"{path}/{comment['id']}", json={"comment_body": "Edited"}, headers=bearer(reviewer)
        )

        assert denied.status_code == 403
        assert edited.json()["comment_body"] == "Edited"

    def test_comment_on_wrong_task_not_found(self, client, task, creator):
        comment = client.post(
            f"{API}/tasks/{task['id']}/comments",
            json={"comment_body": "Hi"},
            headers=bearer(creator),
        ).json()

        response = client.get(
            f"{API}/tasks/{uuid7()}/comments/{comment['id']}", headers=bearer(creator)
        )

        assert response.status_code == 404

    def test_second_delete_is_not_found(self, client, task, creator):
        path = f"{API}/tasks/{task['id']}/comments"
        comment = client.post(
            path, json={"comment_body": "Duplicate of #12"}, headers=bearer(creator)
        ).json()

        first = client.delete(f"{path}/{comment['id']}", headers=bearer(creator))
        second = client.delete(f"{path}/{comment['id']}", headers=bearer(creator))
        listed = client.patch(path, json={}, headers=bearer(creator))

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json()["detail"] == "Comment not found"
        assert listed.json()["pagination"]["records"] == 0


@pytest.mark.api
class TestStatusChanges:
    def test_status_change_moves_task_and_notifies(
        self, client, task, creator, catalogs, join
    ):
        qa = join("qa")

        response = client.post(
            f"{API}/tasks/{task['id']}/status-changes",
            json={"new_status_id": catalogs["done"]["id"], "comment": "Verified"},
            headers=bearer(qa),
        )
        moved = client.get(f"{API}/tasks/{task['id']}", headers=bearer(qa))
        history = client.patch(
            f"{API}/tasks/{task['id']}/status-changes", json={}, headers=bearer(qa)
        )
        inbox = _notifications(client, creator, notification_type="status_change")

        assert response.status_code == 201
        assert response.json()["changed_by_id"] == qa["id"]
        assert moved.json()["status_id"] == catalogs["done"]["id"]
        assert history.json()["pagination"]["records"] == 1
        assert inbox["data"][0]["message"] == "Task 'Fix login bug' moved to Done"

    def test_correcting_latest_change_moves_task_back(
        self, client, task, catalogs, join
    ):
        qa = join("qa")
        path = f"{API}/tasks/{task['id']}/status-changes"
        change = client.post(
            path, json={"new_status_id": catalogs["done"]["id"]}, headers=bearer(qa)
        ).json()

        corrected = client.put(
            f"{path}/{change['id']}",
            json={"new_status_id": catalogs["todo"]["id"], "comment": "Misclick"},
            headers=bearer(qa),
        )
        current = client.get(f"{API}/tasks/{task['id']}", headers=bearer(qa))

        assert corrected.status_code == 200
        assert corrected.json()["new_status_id"] == catalogs["todo"]["id"]
        assert current.json()["status_id"] == catalogs["todo"]["id"]

    def test_second_delete_is_not_found(self, client, task, catalogs, join):
        qa = join("qa")
        path = f"{API}/tasks/{task['id']}/status-changes"
        change = client.post(
            path, json={"new_status_id": catalogs["done"]["id"]}, headers=bearer(qa)
        ).json()

        first = client.delete(f"{path}/{change['id']}", headers=bearer(qa))
        second = client.delete(f"{path}/{change['id']}", headers=bearer(qa))

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.json()["detail"] == "Status change not found"


@pytest.mark.api
class TestNotifications:
    @pytest.fixture
    def notification(self, client, task, creator, join):
        assignee = join("designer")
        client.post(
            f"{API}/tasks/{task['id']}/assignments",
            json={"assignee_id": assignee["id"]},
            headers=bearer(creator),
        )
        return assignee, _notifications(client, assignee)["data"][0]

    def test_mark_read_and_unread(self, client, notification):
        assignee, item = notification
        path = f"{API}/notifications/{item['id']}"

        read = client.put(path, json={"is_read": True}, headers=bearer(assignee))
        unread = client.put(path, json={"is_read": False}, headers=bearer(assignee))

        assert read.json()["is_read"] is True
        assert read.json()["read_at"] is not None
        assert unread.json()["is_read"] is False
        assert unread.json()["read_at"] is None

    def test_other_members_cannot_touch(self, client, notification, creator):
        _, item = notification
        path = f"{API}/notifications/{item['id']}"

        assert client.get(path, headers=bearer(creator)).status_code == 403
        assert client.delete(path, headers=bearer(creator)).status_code == 403

    def test_delete(self, client, notification):
        assignee, item = notification
        path = f"{API}/notifications/{item['id']}"

        assert client.delete(path, headers=bearer(assignee)).status_code == 204
        assert client.get(path, headers=bearer(assignee)).status_code == 404
        assert _notifications(client, assignee)["pagination"]["records"] == 0

"""API tests for the member directory.

Covers create (manager only), search with pagination envelope, get,
update (self or manager) and delete (manager only, never self).
"""

import pytest
from uuid_extensions import uuid7

from tests.api.helpers import API, PASSWORD, bearer


@pytest.mark.api
class TestCreateMember:
    def test_manager_creates_member_of_any_role(self, client, join):
        response = client.post(
            f"{API}/members",
            json={
                "email": "qa@example.com",
                "password": PASSWORD,
                "name": "Quinn",
                "role": "qa",
            },
            headers=bearer(join("pmo")),
        )

        assert response.status_code == 201
        assert response.json()["role"] == "qa"
        assert "token" not in response.json()

    def test_contributor_cannot_create(self, client, join):
        response = client.post(
            f"{API}/members",
            json={
                "email": "qa@example.com",
                "password": PASSWORD,
                "name": "Quinn",
                "role": "qa",
            },
            headers=bearer(join("developer")),
        )

        assert response.status_code == 403


@pytest.mark.api
class TestSearchMembers:
    def test_envelope_and_filters(self, client, join):
        viewer = join("developer", name="Viewer")
        join("qa", name="Quinn")
        join("qa", name="Quincy")

        response = client.patch(
            f"{API}/members",
            json={"role": "qa", "limit": 1, "sort": "name asc"},
            headers=bearer(viewer),
        )

        assert response.status_code == 200
        body = response.json()
        assert body["pagination"] == {"current": 1, "limit": 1, "records": 2, "pages": 2}
        assert [m["name"] for m in body["data"]] == ["Quincy"]

    def test_limit_above_maximum_rejected(self, client, join):
        response = client.patch(
            f"{API}/members", json={"limit": 500}, headers=bearer(join("qa"))
        )
        assert response.status_code == 422


@pytest.mark.api
class TestGetUpdateDelete:
    def test_get_unknown_member(self, client, join):
        response = client.get(f"{API}/members/{uuid7()}", headers=bearer(join("qa")))

        assert response.status_code == 404
        assert response.json()["detail"] == "Member not found"

    def test_member_updates_self(self, client, join):
        member = join("designer", name="Old")

        response = client.put(
            f"{API}/members/{member['id']}",
            json={"name": "New"},
            headers=bearer(member),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "New"
        assert response.json()["email"] == member["email"]

    def test_contributor_cannot_update_others(self, client, join):
        target = join("designer")

        response = client.put(
            f"{API}/members/{target['id']}",
            json={"name": "Hijacked"},
            headers=bearer(join("developer")),
        )

        assert response.status_code == 403

    def test_manager_deletes_member(self, client, join):
        manager = join("tpm")
        target = join("developer")

        deleted = client.delete(f"{API}/members/{target['id']}", headers=bearer(manager))
        fetched = client.get(f"{API}/members/{target['id']}", headers=bearer(manager))

        assert deleted.status_code == 204
        assert deleted.content == b""
        assert fetched.status_code == 404

    def test_manager_cannot_delete_self(self, client, join):
        manager = join("tpm")

        response = client.delete(
            f"{API}/members/{manager['id']}", headers=bearer(manager)
        )

        assert response.status_code == 400

    def test_deleted_member_cannot_log_in(self, client, join):
        target = join("developer", email="gone@example.com")
        client.delete(f"{API}/members/{target['id']}", headers=bearer(join("pm")))

        response = client.post(
            f"{API}/auth/developer/login",
            json={"email": "gone@example.com", "password": PASSWORD},
        )

        assert response.status_code == 401

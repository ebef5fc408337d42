"""API test fixtures.

The client runs the real application (lifespan included) against the
SQLite database configured in tests/conftest.py. Tables are dropped and
recreated for every test so each one starts from an empty schema.
"""

from collections.abc import Callable, Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_database
from src.main import app
from tests.api.helpers import API, PASSWORD, bearer


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        database = get_database()
        test_client.portal.call(database.drop_all)
        test_client.portal.call(database.create_all)
        yield test_client


@pytest.fixture
def join(client: TestClient) -> Callable[..., dict[str, Any]]:
    """Join as a role and return the response body (member plus token).

    Usage:
        pm = join("pm")
        headers = bearer(pm)
    """

    def _join(
        role: str, *, name: str | None = None, email: str | None = None
    ) -> dict[str, Any]:
        email = email or f"{role}-{uuid7().hex[-10:]}@example.com"
        response = client.post(
            f"{API}/auth/{role}/join",
            json={"email": email, "password": PASSWORD, "name": name or role.upper()},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _join


@pytest.fixture
def catalogs(client: TestClient, join) -> dict[str, dict[str, Any]]:
    """Seed two task statuses and one priority as a pm."""
    headers = bearer(join("pm"))

    def _create(path: str, code: str, name: str) -> dict[str, Any]:
        response = client.post(
            f"{API}/{path}", json={"code": code, "name": name}, headers=headers
        )
        assert response.status_code == 201, response.text
        return response.json()

    return {
        "todo": _create("task-statuses", "todo", "To Do"),
        "done": _create("task-statuses", "done", "Done"),
        "high": _create("priorities", "high", "High"),
    }

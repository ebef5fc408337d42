"""API tests for RFC 9457 error responses using dependency overrides.

Handlers are replaced with stubs so each test controls exactly which
domain error (or exception) the endpoint sees.
"""

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from src.core.container import get_get_task_handler, get_update_task_handler
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure
from src.domain.enums import MemberRole
from src.domain.errors import not_found, not_owner
from src.main import app
from src.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from tests.api.helpers import API


class StubHandler:
    """Handler double returning a fixed result or raising."""

    def __init__(self, result: Any = None, exc: Exception | None = None) -> None:
        self._result = result
        self._exc = exc

    async def handle(self, _: Any) -> Any:
        if self._exc is not None:
            raise self._exc
        return self._result


@pytest.fixture
def current_user() -> CurrentUser:
    return CurrentUser(
        user_id=uuid7(),
        email="dev@example.com",
        role=MemberRole.DEVELOPER,
        roles=["developer"],
    )


@pytest.fixture
def stub_client(current_user) -> Iterator[TestClient]:
    app.dependency_overrides[get_current_user] = lambda: current_user
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()


@pytest.mark.api
class TestDomainErrorMapping:
    def test_not_found(self, stub_client):
        task_id = uuid7()
        app.dependency_overrides[get_get_task_handler] = lambda: StubHandler(
            Failure(error=not_found(ErrorCode.TASK_NOT_FOUND, "Task", task_id))
        )

        response = stub_client.get(f"{API}/tasks/{task_id}")

        assert response.status_code == 404
        data = response.json()
        assert data["detail"] == "Task not found"
        assert data["type"].endswith("/errors/not_found")
        assert data["instance"] == f"/api/v1/tasks/{task_id}"

    def test_not_owner(self, stub_client):
        app.dependency_overrides[get_update_task_handler] = lambda: StubHandler(
            Failure(error=not_owner("task"))
        )

        response = stub_client.put(f"{API}/tasks/{uuid7()}", json={"title": "X"})

        assert response.status_code == 403
        assert response.json()["detail"] == "Unauthorized: not the task owner"

    def test_validation_error_lists_field(self, stub_client):
        app.dependency_overrides[get_update_task_handler] = lambda: StubHandler(
            Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message="Board belongs to another project",
                    field="board_id",
                )
            )
        )

        response = stub_client.put(f"{API}/tasks/{uuid7()}", json={"title": "X"})

        assert response.status_code == 400
        [error] = response.json()["errors"]
        assert error["field"] == "board_id"

    def test_unhandled_exception_is_500(self, stub_client):
        app.dependency_overrides[get_get_task_handler] = lambda: StubHandler(
            exc=RuntimeError("database exploded")
        )

        response = stub_client.get(f"{API}/tasks/{uuid7()}")

        assert response.status_code == 500
        assert "exploded" not in response.text
        assert response.json()["title"] == "Internal Server Error"

    def test_malformed_uuid_is_422(self, stub_client):
        response = stub_client.get(f"{API}/tasks/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "path.task_id"

"""Pytest configuration shared by unit, integration and API tests.

Environment defaults are set before anything under src/ is imported so the
cached Settings pick them up:
1. A throwaway SQLite database (aiosqlite) for the application engine
2. A 32+ character signing key
3. Cheap bcrypt rounds
"""

import asyncio
import os
import tempfile
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="task-api-tests-"))

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DB_DIR / 'app.db'}"
)
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from uuid_extensions import uuid7  # noqa: E402

from src.domain.entities import Member, Task  # noqa: E402
from src.domain.enums import MemberRole  # noqa: E402


# =============================================================================
# Entity factories
# =============================================================================


@pytest.fixture
def make_member() -> Callable[..., Member]:
    """Build Member entities with sensible defaults.

    Usage:
        pm = make_member(role=MemberRole.PM)
        gone = make_member(deleted_at=datetime.now(UTC))
    """

    def _make(**overrides: Any) -> Member:
        now = datetime.now(UTC)
        values: dict[str, Any] = {
            "id": uuid7(),
            "email": f"member-{uuid7().hex[-12:]}@example.com",
            "password_hash": "hashed",
            "name": "Test Member",
            "role": MemberRole.DEVELOPER,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return Member(**values)

    return _make


@pytest.fixture
def make_task() -> Callable[..., Task]:
    """Build Task entities with sensible defaults."""

    def _make(**overrides: Any) -> Task:
        now = datetime.now(UTC)
        values: dict[str, Any] = {
            "id": uuid7(),
            "status_id": uuid7(),
            "priority_id": uuid7(),
            "creator_id": uuid7(),
            "project_id": None,
            "board_id": None,
            "title": "Fix login bug",
            "description": None,
            "due_date": None,
            "created_at": now,
            "updated_at": now,
        }
        values.update(overrides)
        return Task(**values)

    return _make


@pytest.fixture
def mock_logger() -> Mock:
    """Logger double accepting any structured call."""
    return Mock()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with a real (SQLite) database"
    )
    config.addinivalue_line("markers", "api: HTTP tests through the FastAPI app")


# Test execution configuration
def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions.

    This ensures all async tests are properly marked even if
    the developer forgets to add @pytest.mark.asyncio.
    """
    for item in items:
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

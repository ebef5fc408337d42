"""Fixtures for integration tests against a throwaway SQLite database."""

from collections.abc import AsyncGenerator

import pytest

from src.infrastructure.persistence.database import Database


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """Fresh schema per test (aiosqlite file under tmp_path)."""
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'integration.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()

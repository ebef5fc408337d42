"""Shared constants and helpers for API tests."""

from typing import Any

API = "/api/v1"
PASSWORD = "SecurePass123!"


def bearer(member: dict[str, Any]) -> dict[str, str]:
    """Authorization header for a joined member's access token."""
    return {"Authorization": f"Bearer {member['token']['access']}"}

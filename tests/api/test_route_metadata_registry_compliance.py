"""Registry compliance tests - prevent drift and ensure completeness.

These tests ensure the Route Metadata Registry remains the single source of truth
by validating that:
1. All FastAPI routes are registered in the registry (no orphans)
2. All registry entries generate actual routes (no dead entries)
3. Auth policies match the handler signatures
4. REST conventions (status codes, PATCH search endpoints) are followed

If these tests fail, it means the registry has drifted from actual implementation.
"""

import inspect

import pytest

from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    HTTPMethod,
    IdempotencyLevel,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY


def _annotations(entry) -> list[str]:
    sig = inspect.signature(entry.handler)
    return [str(param.annotation) for param in sig.parameters.values()]


# =============================================================================
# Test Class 1: Route Completeness
# =============================================================================


@pytest.mark.api
class TestRegistryCompleteness:
    """Verify registry and FastAPI routes are in sync."""

    def test_all_routes_are_registered(self):
        """Every FastAPI route must have a registry entry and vice versa."""
        actual_routes = set()
        for route in v1_router.routes:
            if hasattr(route, "methods") and hasattr(route, "path"):
                for method in route.methods:
                    if method in {"HEAD", "OPTIONS"}:
                        continue
                    actual_routes.add(f"{method} {route.path}")

        expected_routes = {
            f"{entry.method.value} /api/v1{entry.path}" for entry in ROUTE_REGISTRY
        }

        assert actual_routes - expected_routes == set(), (
            "Routes exist in FastAPI but not in ROUTE_REGISTRY"
        )
        assert expected_routes - actual_routes == set(), (
            "Routes exist in ROUTE_REGISTRY but not in FastAPI"
        )

    def test_registry_size(self):
        """Auth (3), members (5), three catalogs (15), projects (9),
        boards (9), tasks (5), task activity (14) and notifications (4)."""
        assert len(ROUTE_REGISTRY) == 64

    def test_method_and_path_pairs_are_unique(self):
        keys = [(entry.method, entry.path) for entry in ROUTE_REGISTRY]
        assert len(keys) == len(set(keys))

    def test_operation_ids_are_unique(self):
        """Duplicate operation_ids break the OpenAPI document."""
        operation_ids = [entry.operation_id for entry in ROUTE_REGISTRY]
        duplicates = {op for op in operation_ids if operation_ids.count(op) > 1}

        assert not duplicates, f"Duplicate operation_ids found: {duplicates}"

    def test_every_entry_is_documented(self):
        for entry in ROUTE_REGISTRY:
            route = f"{entry.method.value} {entry.path}"
            assert callable(entry.handler), route
            assert entry.tags, f"{route} has no tags"
            assert entry.operation_id, f"{route} has no operation_id"
            assert entry.resource, f"{route} has no resource name"
            assert entry.summary, f"{route} has no summary"


# =============================================================================
# Test Class 2: Auth Policy Enforcement
# =============================================================================


@pytest.mark.api
class TestAuthPolicyEnforcement:
    """Verify auth policies agree with handler signatures."""

    def test_public_routes_are_the_auth_routes(self):
        public = {
            entry.path
            for entry in ROUTE_REGISTRY
            if entry.auth_policy.level == AuthLevel.PUBLIC
        }
        assert public == {
            "/auth/{role}/join",
            "/auth/{role}/login",
            "/auth/{role}/refresh",
        }

    def test_public_routes_have_no_auth_dependencies(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == AuthLevel.PUBLIC:
                assert not any("CurrentUser" in a for a in _annotations(entry)), (
                    f"PUBLIC route '{entry.method.value} {entry.path}' "
                    "takes a CurrentUser"
                )

    def test_protected_routes_take_current_user(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level != AuthLevel.PUBLIC:
                assert any("CurrentUser" in a for a in _annotations(entry)), (
                    f"'{entry.method.value} {entry.path}' has no CurrentUser "
                    "parameter"
                )

    def test_manager_routes_use_manager_dependency(self):
        for entry in ROUTE_REGISTRY:
            if entry.auth_policy.level == AuthLevel.MANAGER:
                assert any("require_manager" in a for a in _annotations(entry)), (
                    f"MANAGER route '{entry.method.value} {entry.path}' "
                    "does not depend on require_manager"
                )

    @pytest.mark.parametrize(
        "method,path",
        [
            (HTTPMethod.POST, "/members"),
            (HTTPMethod.DELETE, "/members/{member_id}"),
            (HTTPMethod.POST, "/roles"),
            (HTTPMethod.PUT, "/task-statuses/{entry_id}"),
            (HTTPMethod.DELETE, "/priorities/{entry_id}"),
            (HTTPMethod.POST, "/projects"),
            (HTTPMethod.POST, "/projects/{project_id}/boards"),
        ],
    )
    def test_manager_only_writes(self, method, path):
        entry = next(
            e for e in ROUTE_REGISTRY if e.method == method and e.path == path
        )
        assert entry.auth_policy.level == AuthLevel.MANAGER


# =============================================================================
# Test Class 3: REST conventions
# =============================================================================


@pytest.mark.api
class TestRestConventions:
    def test_create_routes_return_201(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.POST and not entry.path.endswith(
                ("/login", "/refresh")
            ):
                assert entry.status_code == 201, entry.path

    def test_delete_routes_return_204(self):
        for entry in ROUTE_REGISTRY:
            if entry.method == HTTPMethod.DELETE:
                assert entry.status_code == 204, entry.path

    def test_search_routes_are_safe_patch_on_collections(self):
        patch_entries = [e for e in ROUTE_REGISTRY if e.method == HTTPMethod.PATCH]

        assert patch_entries
        for entry in patch_entries:
            assert not entry.path.endswith("}"), entry.path
            assert entry.idempotency == IdempotencyLevel.SAFE

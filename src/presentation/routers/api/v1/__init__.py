"""API v1 routers.

All routes are generated from the Route Metadata Registry at startup.
See src/presentation/routers/api/v1/routes/registry.py for the complete
route catalog. Index endpoints are PATCH with a search body.

Resources:
    /api/v1/auth/{role}                          - Join, login, refresh
    /api/v1/members                              - Member directory
    /api/v1/roles                                - Role catalog
    /api/v1/task-statuses                        - Task status catalog
    /api/v1/priorities                           - Priority catalog
    /api/v1/projects                             - Projects and project members
    /api/v1/projects/{project_id}/boards         - Boards
    /api/v1/boards/{board_id}/members            - Board members
    /api/v1/tasks                                - Tasks
    /api/v1/tasks/{task_id}/assignments          - Task assignments
    /api/v1/tasks/{task_id}/comments             - Task comments
    /api/v1/tasks/{task_id}/status-changes       - Task status history
    /api/v1/notifications                        - The caller's notifications
"""

from fastapi import APIRouter

from src.core.config import settings
from src.presentation.routers.api.v1.routes.generator import (
    register_routes_from_registry,
)
from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY

# Create v1 router and generate all routes from registry
v1_router = APIRouter(prefix=settings.api_v1_prefix)
register_routes_from_registry(v1_router, ROUTE_REGISTRY)

__all__ = [
    "v1_router",
]

"""Route generator for the API Route Registry.

register_routes_from_registry() turns RouteMetadata entries into FastAPI
routes at application startup.

Functions:
    register_routes_from_registry: Generate all routes from registry
    _build_dependencies: Build FastAPI dependencies from auth policy
    _build_responses: Build OpenAPI responses dict from error specs

Usage:
    from src.presentation.routers.api.v1.routes.registry import ROUTE_REGISTRY
    from src.presentation.routers.api.v1.routes.generator import register_routes_from_registry

    v1_router = APIRouter(prefix="/api/v1")
    register_routes_from_registry(v1_router, ROUTE_REGISTRY)
"""

from typing import Any

from fastapi import APIRouter, Depends

from src.presentation.routers.api.middleware.auth_dependencies import (
    get_current_user,
    require_manager,
)
from src.presentation.routers.api.v1.routes.metadata import (
    AuthLevel,
    AuthPolicy,
    ErrorSpec,
    RouteMetadata,
)


def register_routes_from_registry(
    router: APIRouter,
    registry: list[RouteMetadata],
) -> None:
    """Generate FastAPI routes from registry metadata.

    Handles method and path, handler, response model, status code, OpenAPI
    documentation, error responses and auth dependencies.

    Args:
        router: FastAPI APIRouter to register routes on
        registry: List of RouteMetadata entries to convert into routes
    """
    for metadata in registry:
        dependencies = _build_dependencies(metadata.auth_policy)
        responses = _build_responses(metadata.errors) if metadata.errors else None

        router.add_api_route(
            path=metadata.path,
            endpoint=metadata.handler,
            methods=[metadata.method.value],
            response_model=metadata.response_model,
            status_code=metadata.status_code,
            tags=list(metadata.tags),
            summary=metadata.summary,
            description=metadata.description,
            operation_id=metadata.operation_id,
            responses=responses,
            dependencies=dependencies,
            deprecated=metadata.deprecated,
        )


def _build_dependencies(auth_policy: AuthPolicy) -> list[Any]:
    """Build FastAPI dependencies from auth policy.

    Auth policy mapping:
        PUBLIC: No dependencies
        AUTHENTICATED: Depends(get_current_user)
        MANAGER: Depends(require_manager), which itself resolves the user

    FastAPI caches dependencies per request, so a handler that also takes
    AuthenticatedUser or ManagerUser does not decode the token twice.

    Examples:
        >>> _build_dependencies(AuthPolicy(level=AuthLevel.PUBLIC))
        []
        >>> _build_dependencies(AuthPolicy(level=AuthLevel.MANAGER))
        [Depends(require_manager)]
    """
    match auth_policy.level:
        case AuthLevel.PUBLIC:
            return []

        case AuthLevel.AUTHENTICATED:
            return [Depends(get_current_user)]

        case AuthLevel.MANAGER:
            return [Depends(require_manager)]

        case _:
            # Unknown auth level - fail closed
            msg = f"Unknown auth level: {auth_policy.level}"
            raise ValueError(msg)


def _build_responses(errors: list[ErrorSpec]) -> dict[int | str, dict[str, Any]]:
    """Build OpenAPI responses dict from the declared error entries.

    Example:
        >>> _build_responses([ErrorSpec(status=404, description="Task not found")])
        {404: {"description": "Task not found"}}
    """
    return {error.status: {"description": error.description} for error in errors}

"""Route metadata types for the API Route Registry.

The registry is the single source of truth for all API routes: FastAPI
routes, auth dependencies and OpenAPI metadata are generated from it.

Core types:
    RouteMetadata: Complete route definition (method, path, handler, auth, errors)
    HTTPMethod: HTTP method enum (GET, POST, PATCH, PUT, DELETE)
    AuthPolicy: Authentication policy (PUBLIC, AUTHENTICATED, MANAGER)
    ErrorSpec: Error response description for OpenAPI
    IdempotencyLevel: HTTP idempotency classification

Usage:
    from src.presentation.routers.api.v1.routes.metadata import RouteMetadata, HTTPMethod

    metadata = RouteMetadata(
        method=HTTPMethod.POST,
        path="/projects",
        handler=create_project,
        resource="projects",
        tags=["Projects"],
        summary="Create project",
        response_model=ProjectResponse,
        status_code=201,
        idempotency=IdempotencyLevel.NON_IDEMPOTENT,
        auth_policy=AuthPolicy(level=AuthLevel.MANAGER),
    )
"""

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel


# =============================================================================
# HTTP Method Enum
# =============================================================================


class HTTPMethod(str, Enum):
    """HTTP methods for API routes.

    PATCH is used for index (search) endpoints, which take a search body.
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"


# =============================================================================
# Authentication Policy
# =============================================================================


class AuthLevel(str, Enum):
    """Authentication levels for routes.

    Attributes:
        PUBLIC: No authentication required (join, login, refresh)
        AUTHENTICATED: Requires a valid access JWT
        MANAGER: Requires a valid access JWT with a tpm, pm or pmo role
    """

    PUBLIC = "public"
    AUTHENTICATED = "authenticated"
    MANAGER = "manager"


@dataclass(frozen=True, kw_only=True)
class AuthPolicy:
    """Authentication policy for a route.

    Attributes:
        level: Authentication level.
        rationale: Optional note on why the level was chosen.

    Examples:
        >>> AuthPolicy(level=AuthLevel.PUBLIC)
        >>> AuthPolicy(level=AuthLevel.MANAGER)
    """

    level: AuthLevel
    rationale: str | None = None


# =============================================================================
# Idempotency Level
# =============================================================================


class IdempotencyLevel(str, Enum):
    """HTTP idempotency classification.

    Attributes:
        SAFE: No side effects (GET) - cacheable
        IDEMPOTENT: Side effects, but repeatable (PUT, DELETE) - safe to retry
        NON_IDEMPOTENT: Side effects, not repeatable (POST) - do not retry

    Index endpoints use PATCH but only read, so they are declared SAFE.

    Reference:
        - RFC 9110 Section 9.2 (HTTP Semantics)
    """

    SAFE = "safe"
    IDEMPOTENT = "idempotent"
    NON_IDEMPOTENT = "non_idempotent"


# =============================================================================
# Error Declarations
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class ErrorSpec:
    """Error response entry for OpenAPI documentation.

    Attributes:
        status: HTTP status code (e.g., 400, 404, 409)
        description: Human-readable error description
        model: Optional Pydantic model for response (defaults to ProblemDetails)

    Examples:
        >>> ErrorSpec(status=404, description="Task not found")
        >>> ErrorSpec(status=409, description="Email already registered")
    """

    status: int
    description: str
    model: type[BaseModel] | None = None


# =============================================================================
# Route Metadata (SSOT)
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class RouteMetadata:
    """Complete definition of an API route (Single Source of Truth).

    Identity fields:
        method: HTTP method (GET, POST, etc.)
        path: URL path relative to /api/v1 (e.g., "/tasks/{task_id}")
        handler: Async function that implements the endpoint

    Grouping fields:
        resource: Resource category (e.g., "tasks", "projects")
        tags: OpenAPI tags (e.g., ["Tasks"])
        version: API version (e.g., "v1")

    OpenAPI documentation:
        summary: Short endpoint description (appears in OpenAPI UI)
        description: Detailed endpoint description (markdown supported)
        operation_id: Stable operation ID for client generation

    Request/Response:
        response_model: Pydantic model for success response
        status_code: Expected success status (e.g., 200, 201, 204)
        errors: List of possible error responses for OpenAPI

    Behavior:
        idempotency: HTTP idempotency level (safe, idempotent, non_idempotent)
        auth_policy: Authentication policy (public, authenticated, manager)

    Deprecation:
        deprecated: Whether endpoint is deprecated
        replacement: Optional replacement endpoint path
    """

    # Identity
    method: HTTPMethod
    path: str
    handler: Callable[..., Awaitable[Any]]

    # Grouping
    resource: str
    tags: Sequence[str]
    version: str = "v1"

    # OpenAPI documentation
    summary: str
    description: str | None = None
    operation_id: str | None = None

    # Request/Response
    response_model: Any = None
    status_code: int = 200
    errors: list[ErrorSpec] | None = None

    # Behavior
    idempotency: IdempotencyLevel
    auth_policy: AuthPolicy

    # Deprecation
    deprecated: bool = False
    replacement: str | None = None

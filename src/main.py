"""
Main FastAPI application entry point.

Builds the application: lifespan (schema bootstrap, engine disposal), CORS
and trace middleware, RFC 9457 exception handlers, the registry-generated
v1 router and the root/health endpoints.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.core.config import settings
from src.core.container import get_database, get_logger
from src.presentation.routers.api.middleware.trace_middleware import (
    TRACE_HEADER,
    TraceMiddleware,
)
from src.presentation.routers.api.v1 import v1_router
from src.presentation.routers.api.v1.errors import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Startup: create tables outside production (production schemas are
    managed by the database owner).
    Shutdown: dispose of the engine's connection pool.
    """
    logger = get_logger()
    database = get_database()

    if not settings.is_production:
        await database.create_all()

    logger.info(
        "Application started",
        environment=settings.environment.value,
        version=settings.app_version,
    )

    yield

    await database.close()
    logger.info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Task management API: members, projects, boards and tasks",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials="*" not in settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[TRACE_HEADER],
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 9457 error responses)
register_exception_handlers(app)

# Include API v1 routers
app.include_router(v1_router)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint - basic status.

    Returns:
        dict: Welcome message with API status.
    """
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@app.get("/health")
async def health() -> JSONResponse:
    """
    Health check endpoint for monitoring and load balancers.

    Returns:
        JSONResponse: 200 when the database answers, 503 otherwise.
    """
    if await get_database().check_connection():
        return JSONResponse(content={"status": "healthy", "database": "up"})
    return JSONResponse(
        status_code=503,
        content={"status": "unhealthy", "database": "down"},
    )

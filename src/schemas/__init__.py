"""Request/response schemas for API endpoints.

All Pydantic models for HTTP request validation and response serialization.
Schemas are kept separate from domain entities (HTTP-layer concerns only).

Usage:
    from src.schemas.task_schemas import TaskCreateRequest, TaskResponse
    from src.schemas.common_schemas import PageResponse
"""

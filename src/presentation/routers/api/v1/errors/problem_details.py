"""RFC 9457 Problem Details models.

Every error response of the API uses this shape.

Exports:
    ErrorDetail: Individual field-specific error
    ProblemDetails: Error response body
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One field-level error inside a validation failure."""

    field: str = Field(..., description="Field name")
    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")


class ProblemDetails(BaseModel):
    """RFC 9457 Problem Details body.

    Examples:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/not_found",
        ...     title="Resource Not Found",
        ...     status=404,
        ...     detail="Task not found",
        ...     instance="/api/v1/tasks/0190f1c2-...",
        ...     trace_id="550e8400-e29b-41d4-a716-446655440000",
        ... )
    """

    type: str = Field(
        ...,
        description="URI reference identifying the problem type",
        examples=["http://localhost:8000/errors/conflict"],
    )
    title: str = Field(
        ..., description="Short, human-readable summary", examples=["Resource Conflict"]
    )
    status: int = Field(..., description="HTTP status code", examples=[409])
    detail: str = Field(
        ...,
        description="Human-readable explanation",
        examples=["Member with email 'ana@example.com' already exists"],
    )
    instance: str = Field(
        ...,
        description="URI reference identifying this occurrence",
        examples=["/api/v1/auth/developer/join"],
    )
    errors: list[ErrorDetail] | None = Field(
        None, description="List of field-specific errors"
    )
    trace_id: str | None = Field(None, description="Request trace ID for debugging")

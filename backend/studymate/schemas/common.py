"""
StudyMate Backend — Shared Response Schemas
=============================================

What:  Pydantic models for the fixed-shape responses of the API.
Why:   Partner and request documents are schemaless and returned as stored;
       only acknowledgements, errors and the health report have a fixed shape,
       and those drive the OpenAPI docs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class OkResponse(BaseModel):
    """Acknowledgement returned by DELETE endpoints."""
    ok: bool = Field(default=True)


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"message": "Server error", "detail": "localhost:27017: [Errno 111] Connection refused"}
    """
    message: str = Field(description="Human-readable error description")
    detail: Optional[str] = Field(default=None, description="Underlying failure text, when any")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

"""
StudyMate Backend — Partner Request/Response Schemas
=====================================================

Partner fields are free-form, so create/update bodies stay plain JSON objects.
The only typed body is the one for POST /api/partners/{id}/request.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PartnerRequestPayload(BaseModel):
    """
    Body of POST /api/partners/{id}/request.

    `requesterEmail` is optional at the schema level; the service rejects a
    missing or empty value with 400 so the error body matches every other
    validation failure.
    """
    requesterEmail: Optional[str] = Field(default=None, description="Email of the requesting student")

    model_config = ConfigDict(extra="allow")


class PartnerRequestResponse(BaseModel):
    """Returned after a request is recorded: the partner with its new counter."""
    ok: bool = Field(default=True)
    partner: Dict[str, Any] = Field(description="Partner document after the increment")

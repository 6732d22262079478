"""
Pydantic schemas for the problems API.

Problem and work-note records are upstream-defined and passed through
as free-form objects, so field values are not constrained here.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class CreateProblemRequest(BaseModel):
    """Request schema for creating a problem.

    Extra fields are accepted and carried along; the create use case
    decides which of them are forwarded upstream.
    """

    model_config = ConfigDict(extra="allow")

    short_description: Any = Field(default=None, description="One-line summary")
    description: Any = Field(default=None, description="Full description")
    priority: Any = Field(default=None, description="Upstream priority value")


class ProblemDetailResponse(BaseModel):
    """Response schema for a single problem with its work notes."""

    model_config = ConfigDict(populate_by_name=True)

    problem: dict[str, Any]
    work_notes: list[dict[str, Any]] = Field(alias="workNotes")


class MessageResponse(BaseModel):
    """Response schema for confirmations and errors."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str

"""Response models for the selector endpoints."""

from pydantic import BaseModel


class BuildResponse(BaseModel):
    """Response body for the POST /selectors endpoint."""

    selector: str


class ErrorResponse(BaseModel):
    """Body returned when the described selector violates the chain rules."""

    error: str
    detail: str

"""Pydantic v2 response schemas."""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Structured error information."""

    code: str
    message: str
    detail: str | None = None


class ShiftResponse(BaseModel):
    """Response body for a successful timing shift."""

    filename: str
    start_index: int
    end_index: int
    shift_seconds: float
    shifted_count: int
    message: str
    content: str

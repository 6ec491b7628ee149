"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body returned for every domain failure."""

    detail: str = Field(..., description="Human-readable description of the failure.")
    code: str = Field(..., description="Error kind, e.g. 'Forbidden' or 'NoUnread'.")

"""
Pydantic schemas for the citizens endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class CitizensResponse(BaseModel):
    success: bool = True
    # Records are passed through exactly as NocoDB returns them.
    citizens: list[dict[str, Any]] = Field(default_factory=list)
    total: int = 0
    timestamp: str


class ErrorResponse(BaseModel):
    error: str
    message: str | None = None
    status: int | None = None

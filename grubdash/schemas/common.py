"""
GrubDash — Shared request/response schemas
"""
from typing import Any
from pydantic import BaseModel, Field


class RequestBody(BaseModel):
    """`{"data": {...}}` envelope shared by every write endpoint."""

    data: dict[str, Any] = Field(default_factory=dict)


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
    collections: dict[str, int]

"""Pydantic models for the health check response."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Service and database status."""

    status: Literal["healthy", "unhealthy"]
    timestamp: str = Field(..., description="ISO-8601 check time (UTC)")
    environment: str
    database: Literal["connected", "disconnected"]
    version: str

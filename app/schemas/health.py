"""Pydantic schemas for health check responses."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Liveness payload: process uptime plus database reachability."""

    status: Literal["ok"] = "ok"
    environment: str = Field(description="dev or prod")
    timestamp: datetime
    uptime_seconds: float = Field(ge=0)
    database: Literal["connected", "disconnected"]

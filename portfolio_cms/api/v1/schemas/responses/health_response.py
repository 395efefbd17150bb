"""Health check response schemas."""

from datetime import datetime
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field


class ComponentHealth(BaseModel):
    """Status of one dependency of the site."""

    status: str = Field(..., examples=["healthy", "unhealthy", "disabled"])
    details: Optional[Dict[str, Any]] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    """
    Overall health of the site.

    ``status`` is ``unhealthy`` when the database is down, or when Redis is
    down while the settings cache is enabled.
    """

    status: Literal["healthy", "unhealthy"]
    timestamp: datetime
    version: str = Field(..., examples=["0.1.0"])
    environment: str = Field(..., examples=["development"])
    cache_enabled: bool = Field(
        ..., description="Whether settings reads go through Redis"
    )
    components: Dict[str, ComponentHealth] = Field(default_factory=dict)

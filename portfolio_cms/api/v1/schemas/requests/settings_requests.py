"""Settings request schemas."""

from typing import Any, Dict

from pydantic import BaseModel, Field


class SettingUpdateRequest(BaseModel):
    """Request payload for replacing one settings blob."""

    value: Dict[str, Any] = Field(
        ..., description="New JSON value, validated against the setting's schema"
    )

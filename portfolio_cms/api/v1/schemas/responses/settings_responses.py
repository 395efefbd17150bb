"""Settings response schemas."""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class SettingResponse(BaseModel):
    """One stored settings blob."""

    setting_key: str = Field(..., description="Setting key", examples=["hero"])
    setting_value: Optional[Any] = Field(
        None, description="Stored JSON value; null when the key has never been saved"
    )
    updated_at: Optional[datetime] = Field(
        None, description="Timestamp of the last persisted change"
    )


class SettingsListResponse(BaseModel):
    settings: Dict[str, SettingResponse] = Field(
        default_factory=dict, description="Stored settings keyed by setting key"
    )

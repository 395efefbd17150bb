"""Settings converters."""

from typing import Dict, Optional

from portfolio_cms.api.v1.schemas.responses import (
    SettingResponse,
    SettingsListResponse,
)
from portfolio_cms.services.settings_service import SettingData


def convert_setting_to_response(
    key: str, data: Optional[SettingData]
) -> SettingResponse:
    """Convert a stored setting, or its absence, to an API response."""
    if data is None:
        return SettingResponse(setting_key=key)
    return SettingResponse(
        setting_key=data.setting_key,
        setting_value=data.setting_value,
        updated_at=data.updated_at,
    )


def convert_settings_to_response(
    records: Dict[str, SettingData],
) -> SettingsListResponse:
    return SettingsListResponse(
        settings={
            key: convert_setting_to_response(key, data)
            for key, data in records.items()
        }
    )

"""
Admin Settings API

Read and replace the named settings blobs.
"""

from fastapi import APIRouter, Depends

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.converters import (
    convert_setting_to_response,
    convert_settings_to_response,
)
from portfolio_cms.api.v1.schemas.requests import SettingUpdateRequest
from portfolio_cms.api.v1.schemas.responses import (
    SettingResponse,
    SettingsListResponse,
)
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.settings_service import SettingsService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/admin/settings",
    tags=["admin-settings"],
    dependencies=[Depends(require_admin)],
)


@router.get("", response_model=SettingsListResponse)
def list_settings() -> SettingsListResponse:
    return convert_settings_to_response(SettingsService().list_records())


@router.get("/{key}", response_model=SettingResponse)
def get_setting(key: str) -> SettingResponse:
    """Stored blob for ``key``; ``setting_value`` is null when never saved."""
    return convert_setting_to_response(key, SettingsService().get_record(key))


@router.put("/{key}", response_model=SettingResponse)
async def update_setting(key: str, request: SettingUpdateRequest) -> SettingResponse:
    """
    Validate and store a settings blob.

    Raises:
        ValidationException: For unknown keys (404) or values not matching
            the schema (400)
    """
    logger.info("API: Updating setting '%s'", key)
    data = await SettingsService().save(key, request.value)
    return convert_setting_to_response(key, data)


__all__ = ["router"]

"""
Settings Service

Read and write access to the named settings blobs.

Reads never raise: a missing row and a failed read both come back as ``None``
and the caller falls back to its defaults. Each ``fetch`` performs at most
one store read and is never retried. Writes validate the blob against its
schema, upsert it, and drop the cached copy.
"""

from __future__ import annotations

import asyncio
from datetime import datetime
from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel, Field, ValidationError

from portfolio_cms.core.error_codes import ValidationErrorCode
from portfolio_cms.core.exceptions import ApplicationException, ValidationException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.models.settings_blobs import (
    SETTING_SCHEMAS,
    SettingsBlob,
    load_setting_with_defaults,
)
from portfolio_cms.services.settings_cache import (
    MISS,
    SettingsCache,
    get_settings_cache,
)
from portfolio_cms.stores.site_settings_store import SiteSettingsStore

logger = get_logger(__name__)


class SettingData(BaseModel):
    """Service layer representation of a stored setting."""

    setting_key: str = Field(..., description="Setting key")
    setting_value: Any = Field(None, description="Stored JSON value")
    updated_at: Optional[datetime] = Field(
        None, description="Timestamp of the last persisted change"
    )


class SettingsService:
    """Settings fetcher and writer shared by the public site and the admin."""

    def __init__(
        self,
        store: Optional[SiteSettingsStore] = None,
        cache: Optional[SettingsCache] = None,
    ) -> None:
        self.store = store or SiteSettingsStore()
        self.cache = cache or get_settings_cache()

    async def fetch(self, key: str) -> Optional[Any]:
        """
        Stored value for ``key``.

        Returns:
            The JSON value, or None when the key is unset or the read fails
        """
        cached = await self.cache.get(key)
        if cached is not MISS:
            return cached

        try:
            record = await asyncio.to_thread(self.store.get_setting, key)
        except ApplicationException as e:
            logger.warning("Setting '%s' unavailable: %s", key, e.message)
            return None

        value = record.setting_value if record is not None else None
        await self.cache.set(key, value)
        return value

    async def fetch_many(self, keys: Iterable[str]) -> Dict[str, Optional[Any]]:
        """Independent concurrent fetches; one failing key does not affect others."""
        keys = list(keys)
        values = await asyncio.gather(*(self.fetch(key) for key in keys))
        return dict(zip(keys, values))

    async def fetch_all(self) -> Dict[str, Any]:
        """Every stored setting in one read; empty when the read fails."""
        try:
            records = await asyncio.to_thread(self.store.list_settings)
        except ApplicationException as e:
            logger.warning("Settings unavailable: %s", e.message)
            return {}
        return {record.setting_key: record.setting_value for record in records}

    async def get_typed(self, key: str) -> SettingsBlob:
        """Fetch ``key`` and parse it, falling back to the schema defaults."""
        return load_setting_with_defaults(key, await self.fetch(key))

    def get_record(self, key: str) -> Optional[SettingData]:
        """Raw stored row for the admin; read errors propagate."""
        record = self.store.get_setting(key)
        if record is None:
            return None
        return SettingData(
            setting_key=record.setting_key,
            setting_value=record.setting_value,
            updated_at=record.updated_at,
        )

    def list_records(self) -> Dict[str, SettingData]:
        return {
            record.setting_key: SettingData(
                setting_key=record.setting_key,
                setting_value=record.setting_value,
                updated_at=record.updated_at,
            )
            for record in self.store.list_settings()
        }

    def validate(self, key: str, value: Any) -> Dict[str, Any]:
        """
        Check ``value`` against the schema of ``key``.

        Returns:
            The normalized value to persist

        Raises:
            ValidationException: For unknown keys or values not matching the schema
        """
        schema = SETTING_SCHEMAS.get(key)
        if schema is None:
            raise ValidationException(
                f"Unknown setting: {key}",
                ValidationErrorCode.UNKNOWN_SETTING,
                details={"setting_key": key, "known_keys": sorted(SETTING_SCHEMAS)},
            )
        if not isinstance(value, dict):
            raise ValidationException(
                f"Setting '{key}' must be a JSON object",
                ValidationErrorCode.INVALID_FORMAT,
                details={"setting_key": key},
            )
        try:
            return schema.model_validate(value).to_storage()
        except ValidationError as e:
            raise ValidationException(
                f"Invalid value for setting '{key}'",
                ValidationErrorCode.INVALID_INPUT,
                details={"setting_key": key, "errors": e.errors(include_url=False)},
            ) from e

    async def save(self, key: str, value: Any) -> SettingData:
        """
        Validate and upsert a setting, then invalidate its cached copy.

        Raises:
            ValidationException: If the value does not match the schema
            DatabaseException: If the write fails
        """
        normalized = self.validate(key, value)
        record = await asyncio.to_thread(self.store.upsert_setting, key, normalized)
        await self.cache.invalidate(key)
        logger.info("Setting '%s' saved", key)
        return SettingData(
            setting_key=record.setting_key,
            setting_value=record.setting_value,
            updated_at=record.updated_at,
        )


__all__ = ["SettingData", "SettingsService"]

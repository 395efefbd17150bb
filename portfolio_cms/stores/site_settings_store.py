"""Store for site settings persisted as named JSON blobs."""

from __future__ import annotations

from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from portfolio_cms.core.error_codes import DatabaseErrorCode
from portfolio_cms.core.exceptions import DatabaseException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.models import SiteSetting
from portfolio_cms.stores.database import database_session

logger = get_logger(__name__)


class SiteSettingsStore:
    """Read and upsert rows of ``site_settings``."""

    def get_setting(self, key: str) -> Optional[SiteSetting]:
        """Return a stored setting by key, or None when not yet configured."""
        try:
            with database_session() as db:
                return (
                    db.query(SiteSetting)
                    .filter(SiteSetting.setting_key == key)
                    .first()
                )
        except (SQLAlchemyError, DatabaseException) as exc:
            logger.error("Failed to load setting %s: %s", key, exc)
            raise DatabaseException(
                f"Failed to load setting: {key}", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def list_settings(self) -> List[SiteSetting]:
        """Return every stored setting."""
        try:
            with database_session() as db:
                return db.query(SiteSetting).order_by(SiteSetting.setting_key).all()
        except (SQLAlchemyError, DatabaseException) as exc:
            logger.error("Failed to list settings: %s", exc)
            raise DatabaseException(
                "Failed to list settings", DatabaseErrorCode.QUERY_FAILED
            ) from exc

    def upsert_setting(self, key: str, value: Any) -> SiteSetting:
        """Update the row for ``key`` if it exists, insert it otherwise."""
        try:
            with database_session() as db:
                setting = (
                    db.query(SiteSetting)
                    .filter(SiteSetting.setting_key == key)
                    .first()
                )
                if setting is None:
                    setting = SiteSetting(setting_key=key, setting_value=value)
                    db.add(setting)
                else:
                    setting.setting_value = value
                db.commit()
                db.refresh(setting)
                logger.info("Persisted setting '%s'", key)
                return setting
        except (SQLAlchemyError, DatabaseException) as exc:
            logger.error("Failed to persist setting %s: %s", key, exc)
            raise DatabaseException(
                f"Failed to persist setting: {key}", DatabaseErrorCode.QUERY_FAILED
            ) from exc


__all__ = ["SiteSettingsStore"]

"""Site setting SQLAlchemy model."""

from __future__ import annotations

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseDBModel


class SiteSetting(BaseDBModel):
    """One named JSON blob per configurable area of the site."""

    __tablename__ = "site_settings"

    setting_key: Mapped[str] = mapped_column(
        String(100), unique=True, index=True, nullable=False
    )
    setting_value: Mapped[Any] = mapped_column(JSON, nullable=False, default=dict)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<SiteSetting(setting_key='{self.setting_key}')>"


__all__ = ["SiteSetting"]

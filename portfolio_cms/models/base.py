"""
Base Models

Base classes and common model utilities for portfolio-cms.
"""

import uuid
from datetime import datetime, timezone
from typing import Any, Dict

from sqlalchemy import Boolean, DateTime, Integer, String, inspect
from sqlalchemy.orm import Mapped, mapped_column

from portfolio_cms.stores.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_id() -> str:
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin for models that need created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )


class OrderedMixin:
    """Admin-controlled manual sort position."""

    display_order: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class VisibleMixin:
    """Public visibility toggle."""

    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)


class BaseDBModel(Base, TimestampMixin):
    """Base model class with a generated string id."""

    __abstract__ = True

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_id)

    def to_dict(self) -> Dict[str, Any]:
        """Column values keyed by attribute name."""
        return {
            attr.key: getattr(self, attr.key)
            for attr in inspect(self).mapper.column_attrs
        }


__all__ = [
    "Base",
    "BaseDBModel",
    "OrderedMixin",
    "TimestampMixin",
    "VisibleMixin",
    "new_id",
    "utcnow",
]

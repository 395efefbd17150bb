"""
Content Service

Business logic for the content collections: public listings, admin CRUD,
slug generation, publishing timestamps and manual reordering.
"""

import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import ValidationError

from portfolio_cms.core.error_codes import ContentErrorCode, ValidationErrorCode
from portfolio_cms.core.exceptions import NotFoundException, ValidationException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.content_collections import (
    DISPLAY_ORDER,
    Collection,
    get_collection,
)
from portfolio_cms.stores.content_store import ContentStore

logger = get_logger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def generate_slug(text: str) -> str:
    """Lowercase ``text``, turn every run of non-alphanumerics into ``-``, trim dashes."""
    return _NON_ALNUM.sub("-", text.lower()).strip("-")


class ContentService:
    """Service class for content collection operations."""

    def __init__(self) -> None:
        self._stores: Dict[str, ContentStore] = {}

    def store_for(self, collection: Collection) -> ContentStore:
        store = self._stores.get(collection.name)
        if store is None:
            store = ContentStore(collection.model)
            self._stores[collection.name] = store
        return store

    # Public reads

    def list_public(
        self, collection_name: str, limit: Optional[int] = None, **filters: Any
    ) -> List[Dict[str, Any]]:
        """Visible or published rows in public order."""
        collection = get_collection(collection_name)
        records = self.store_for(collection).list(
            filters={collection.public_flag: True, **filters},
            order_by=collection.public_order_by,
            limit=limit,
        )
        return [record.to_dict() for record in records]

    def get_public_by_slug(self, collection_name: str, slug: str) -> Dict[str, Any]:
        """
        Published row with ``slug``.

        Raises:
            NotFoundException: When no published row has that slug
        """
        collection = get_collection(collection_name)
        record = self.store_for(collection).get_by_field(
            "slug", slug, filters={collection.public_flag: True}
        )
        if record is None:
            raise NotFoundException(
                f"No published {collection.label} with slug '{slug}'",
                ContentErrorCode.NOT_FOUND,
                details={"collection": collection.name, "slug": slug},
            )
        return record.to_dict()

    # Admin

    def list_admin(self, collection_name: str) -> List[Dict[str, Any]]:
        collection = get_collection(collection_name)
        records = self.store_for(collection).list(order_by=collection.admin_order_by)
        return [record.to_dict() for record in records]

    def get(self, collection_name: str, record_id: str) -> Dict[str, Any]:
        collection = get_collection(collection_name)
        record = self.store_for(collection).get_by_id(record_id)
        if record is None:
            raise self._not_found(collection, record_id)
        return record.to_dict()

    def create(self, collection_name: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate and insert a row.

        Raises:
            ValidationException: If required fields are missing or invalid
            DatabaseException: If the insert fails
        """
        collection = get_collection(collection_name)
        store = self.store_for(collection)
        values = self._validate(collection, data)

        if values.get("display_order") is None:
            values["display_order"] = store.max_display_order() + 1
        self._prepare_slug(collection, values, record_id=None)
        self._prepare_published_at(collection, values, previous=None)

        record = store.create(values)
        logger.info("Created %s item %s", collection.name, record.id)
        return record.to_dict()

    def update(
        self, collection_name: str, record_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Merge ``data`` over the stored row, validate the result and save it.

        Raises:
            NotFoundException: If the row does not exist
            ValidationException: If the merged row is invalid
        """
        collection = get_collection(collection_name)
        store = self.store_for(collection)
        existing = store.get_by_id(record_id)
        if existing is None:
            raise self._not_found(collection, record_id)

        current = existing.to_dict()
        editable = set(collection.payload.model_fields)
        merged = {k: v for k, v in current.items() if k in editable}
        merged.update(data)
        values = self._validate(collection, merged)

        if values.get("display_order") is None:
            values["display_order"] = current["display_order"]
        self._prepare_slug(collection, values, record_id=record_id)
        self._prepare_published_at(collection, values, previous=current)

        record = store.update(record_id, values)
        if record is None:
            raise self._not_found(collection, record_id)
        logger.info("Updated %s item %s", collection.name, record_id)
        return record.to_dict()

    def delete(self, collection_name: str, record_id: str) -> None:
        collection = get_collection(collection_name)
        if not self.store_for(collection).delete(record_id):
            raise self._not_found(collection, record_id)
        logger.info("Deleted %s item %s", collection.name, record_id)

    def reorder(
        self,
        collection_name: str,
        record_id: str,
        direction: Literal["up", "down"],
    ) -> List[Dict[str, Any]]:
        """
        Swap a row with its neighbour in display order.

        The whole collection is renumbered 0..n-1 so rows sharing a position
        still move.

        Raises:
            NotFoundException: If the row does not exist
            ValidationException: If the row is already first (up) or last (down)
        """
        collection = get_collection(collection_name)
        store = self.store_for(collection)
        records = store.list(order_by=DISPLAY_ORDER)
        ids = [record.id for record in records]
        if record_id not in ids:
            raise self._not_found(collection, record_id)

        index = ids.index(record_id)
        neighbour = index - 1 if direction == "up" else index + 1
        if neighbour < 0 or neighbour >= len(ids):
            raise ValidationException(
                f"Cannot move {collection.label} item {direction}",
                ContentErrorCode.REORDER_OUT_OF_RANGE,
                details={"id": record_id, "direction": direction},
            )

        ids[index], ids[neighbour] = ids[neighbour], ids[index]
        store.set_display_orders({item_id: pos for pos, item_id in enumerate(ids)})
        return self.list_admin(collection_name)

    def count(self, collection_name: str) -> int:
        return self.store_for(get_collection(collection_name)).count()

    # Helpers

    def _validate(self, collection: Collection, data: Dict[str, Any]) -> Dict[str, Any]:
        try:
            payload = collection.payload.model_validate(data)
        except ValidationError as e:
            missing = [
                ".".join(str(p) for p in err["loc"])
                for err in e.errors()
                if err["type"] in ("missing", "string_too_short")
            ]
            raise ValidationException(
                f"Invalid {collection.label} item",
                ValidationErrorCode.MISSING_FIELD
                if missing
                else ValidationErrorCode.INVALID_INPUT,
                details={
                    "collection": collection.name,
                    "missing_fields": missing,
                    "errors": e.errors(include_url=False),
                },
            ) from e
        return payload.model_dump(mode="python")

    def _prepare_slug(
        self, collection: Collection, values: Dict[str, Any], record_id: Optional[str]
    ) -> None:
        if collection.slug_source is None:
            return
        slug = generate_slug(values.get("slug") or values[collection.slug_source])
        if not slug:
            raise ValidationException(
                f"Cannot derive a slug for this {collection.label} item",
                ValidationErrorCode.INVALID_FORMAT,
                details={"collection": collection.name},
            )
        clash = self.store_for(collection).get_by_field("slug", slug)
        if clash is not None and clash.id != record_id:
            raise ValidationException(
                f"Slug '{slug}' is already used",
                ContentErrorCode.DUPLICATE_SLUG,
                details={"collection": collection.name, "slug": slug},
            )
        values["slug"] = slug

    def _prepare_published_at(
        self,
        collection: Collection,
        values: Dict[str, Any],
        previous: Optional[Dict[str, Any]],
    ) -> None:
        if "published_at" not in collection.payload.model_fields:
            return
        if not values.get("is_published"):
            values["published_at"] = None
            return
        if values.get("published_at") is None:
            was_published = previous is not None and previous.get("is_published")
            values["published_at"] = (
                previous.get("published_at") if was_published else None
            ) or datetime.now(timezone.utc)

    @staticmethod
    def _not_found(collection: Collection, record_id: str) -> NotFoundException:
        return NotFoundException(
            f"{collection.label.capitalize()} item not found: {record_id}",
            ContentErrorCode.NOT_FOUND,
            details={"collection": collection.name, "id": record_id},
        )


__all__ = ["ContentService", "generate_slug"]

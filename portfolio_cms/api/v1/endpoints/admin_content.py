"""
Admin Content API

CRUD and manual ordering for every content collection.
"""

from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Response, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.schemas.requests import ReorderRequest
from portfolio_cms.api.v1.schemas.responses import ContentListResponse
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.content_service import ContentService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/admin/content",
    tags=["admin-content"],
    dependencies=[Depends(require_admin)],
)
content_service = ContentService()


@router.get("/{collection}", response_model=ContentListResponse)
def list_items(collection: str) -> ContentListResponse:
    """Every row of ``collection``, hidden and unpublished ones included."""
    items = content_service.list_admin(collection)
    return ContentListResponse(collection=collection, items=items, total=len(items))


@router.get("/{collection}/{item_id}")
def get_item(collection: str, item_id: str) -> Dict[str, Any]:
    return content_service.get(collection, item_id)


@router.post("/{collection}", status_code=status.HTTP_201_CREATED)
def create_item(
    collection: str, payload: Dict[str, Any] = Body(...)
) -> Dict[str, Any]:
    logger.info("API: Creating %s item", collection)
    return content_service.create(collection, payload)


@router.patch("/{collection}/{item_id}")
def update_item(
    collection: str, item_id: str, payload: Dict[str, Any] = Body(...)
) -> Dict[str, Any]:
    """Partial update: fields left out keep their stored values."""
    logger.info("API: Updating %s item %s", collection, item_id)
    return content_service.update(collection, item_id, payload)


@router.delete("/{collection}/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_item(collection: str, item_id: str) -> Response:
    content_service.delete(collection, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{collection}/{item_id}/reorder", response_model=ContentListResponse)
def reorder_item(
    collection: str, item_id: str, request: ReorderRequest
) -> ContentListResponse:
    """Swap an item with its neighbour and return the reordered collection."""
    items = content_service.reorder(collection, item_id, request.direction)
    return ContentListResponse(collection=collection, items=items, total=len(items))


__all__ = ["router"]

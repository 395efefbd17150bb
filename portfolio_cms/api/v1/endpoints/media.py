"""
Admin Media API

Media library uploads and the favicon upload.
"""

import asyncio
from typing import Any, Dict

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from portfolio_cms.api.dependencies import require_admin
from portfolio_cms.api.v1.schemas.requests import MediaUpdateRequest
from portfolio_cms.api.v1.schemas.responses import FaviconUploadResponse
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.media_service import MediaService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/admin/media",
    tags=["admin-media"],
    dependencies=[Depends(require_admin)],
)


@router.post("", status_code=status.HTTP_201_CREATED)
async def upload_media(file: UploadFile = File(...)) -> Dict[str, Any]:
    """Store a file and add it to the media library."""
    data = await file.read()
    logger.info("API: Uploading media '%s' (%d bytes)", file.filename, len(data))
    return await asyncio.to_thread(
        MediaService().upload, file.filename or "upload", data, file.content_type
    )


@router.patch("/{media_id}")
def update_media(media_id: str, request: MediaUpdateRequest) -> Dict[str, Any]:
    return MediaService().update_alt_text(media_id, request.alt_text)


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_media(media_id: str) -> Response:
    """Remove the stored file and its library entry."""
    MediaService().delete(media_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/favicon", response_model=FaviconUploadResponse)
async def upload_favicon(file: UploadFile = File(...)) -> FaviconUploadResponse:
    """
    Store a favicon image and return its URL.

    The URL is not saved; the client writes it into the ``favicon`` setting.
    """
    data = await file.read()
    url = await asyncio.to_thread(
        MediaService().upload_favicon,
        file.filename or "favicon",
        data,
        file.content_type,
    )
    return FaviconUploadResponse(favicon_url=url)


__all__ = ["router"]

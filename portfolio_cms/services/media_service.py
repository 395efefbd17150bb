"""
Media Service

Uploads into the media library and the favicon upload used by the settings
screen. Files go to ``FileStorage``; library rows go to the ``media``
collection.
"""

import secrets
import time
from pathlib import PurePosixPath
from typing import Any, Dict, Optional

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import StorageErrorCode
from portfolio_cms.core.exceptions import StorageException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.services.content_service import ContentService
from portfolio_cms.stores.file_storage import FileStorage, get_file_storage

logger = get_logger(__name__)

MEDIA_COLLECTION = "media"
MEDIA_PREFIX = "media"

FAVICON_CONTENT_TYPES = frozenset(
    {
        "image/x-icon",
        "image/png",
        "image/jpeg",
        "image/svg+xml",
        "image/ico",
        "image/vnd.microsoft.icon",
    }
)


def classify_file(content_type: Optional[str]) -> str:
    """``image``, ``video`` or ``other`` from a MIME type."""
    content_type = content_type or ""
    if content_type.startswith("video/"):
        return "video"
    if content_type.startswith("image/"):
        return "image"
    return "other"


def file_extension(filename: str) -> str:
    """Text after the last dot, or the whole name when there is none."""
    return PurePosixPath(filename).name.rsplit(".", 1)[-1].lower()


def _timestamp_ms() -> int:
    return int(time.time() * 1000)


class MediaService:
    """Service class for uploaded files."""

    def __init__(
        self,
        storage: Optional[FileStorage] = None,
        content_service: Optional[ContentService] = None,
    ) -> None:
        self.storage = storage or get_file_storage()
        self.content_service = content_service or ContentService()

    def upload(
        self, filename: str, data: bytes, content_type: Optional[str] = None
    ) -> Dict[str, Any]:
        """
        Store an upload and add it to the media library.

        Returns:
            The new media row

        Raises:
            StorageException: If the file is too large or cannot be written
        """
        if len(data) > settings.storage__max_upload_size:
            raise StorageException(
                f"File too large: {filename}",
                StorageErrorCode.FILE_TOO_LARGE,
                details={
                    "size": len(data),
                    "max_size": settings.storage__max_upload_size,
                },
            )

        stored_name = (
            f"{_timestamp_ms()}-{secrets.token_hex(3)}.{file_extension(filename)}"
        )
        url = self.storage.upload(f"{MEDIA_PREFIX}/{stored_name}", data, content_type)
        return self.content_service.create(
            MEDIA_COLLECTION,
            {
                "file_name": filename,
                "file_url": url,
                "file_type": classify_file(content_type),
                "file_size": len(data),
                "alt_text": "",
            },
        )

    def update_alt_text(self, media_id: str, alt_text: str) -> Dict[str, Any]:
        return self.content_service.update(
            MEDIA_COLLECTION, media_id, {"alt_text": alt_text}
        )

    def delete(self, media_id: str) -> None:
        """Remove the stored file, then the library row."""
        item = self.content_service.get(MEDIA_COLLECTION, media_id)
        path = self.storage.path_from_url(item["file_url"])
        if path is not None:
            self.storage.delete(path)
        else:
            logger.warning(
                "Media %s points outside storage, keeping %s",
                media_id,
                item["file_url"],
            )
        self.content_service.delete(MEDIA_COLLECTION, media_id)

    def upload_favicon(
        self, filename: str, data: bytes, content_type: Optional[str] = None
    ) -> str:
        """
        Store a favicon image.

        Returns:
            Public URL of the stored file; the caller saves it into the
            ``favicon`` setting

        Raises:
            StorageException: For unsupported types or files over the favicon limit
        """
        if (
            content_type not in FAVICON_CONTENT_TYPES
            and not filename.lower().endswith(".ico")
        ):
            raise StorageException(
                "Please upload an ICO, PNG, JPG, or SVG file",
                StorageErrorCode.UNSUPPORTED_TYPE,
                details={"content_type": content_type, "filename": filename},
            )
        if len(data) > settings.storage__favicon_max_size:
            raise StorageException(
                "Favicon should be less than "
                f"{settings.storage__favicon_max_size // 1024}KB",
                StorageErrorCode.FILE_TOO_LARGE,
                details={
                    "size": len(data),
                    "max_size": settings.storage__favicon_max_size,
                },
            )

        path = f"favicon-{_timestamp_ms()}.{file_extension(filename)}"
        url = self.storage.upload(path, data, content_type)
        logger.info("Favicon uploaded: %s", url)
        return url


__all__ = [
    "FAVICON_CONTENT_TYPES",
    "MediaService",
    "classify_file",
    "file_extension",
]

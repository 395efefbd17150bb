"""
File Storage

Local-filesystem storage for uploaded files. Files live under
``storage__root`` and are served by the API under ``storage__public_base_url``.
"""

from pathlib import Path, PurePosixPath
from typing import Optional

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import StorageErrorCode
from portfolio_cms.core.exceptions import StorageException
from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)


class FileStorage:
    """Stores bytes under relative paths and hands back public URLs."""

    def __init__(
        self, root: Optional[str] = None, public_base_url: Optional[str] = None
    ) -> None:
        self.root = Path(root or settings.storage__root).resolve()
        self.public_base_url = (
            public_base_url or settings.storage__public_base_url
        ).rstrip("/")

    def _resolve(self, path: str) -> Path:
        """Absolute location of ``path`` inside the storage root."""
        relative = PurePosixPath(path)
        if not path or relative.is_absolute() or ".." in relative.parts:
            raise StorageException(
                f"Invalid storage path: {path!r}",
                StorageErrorCode.INVALID_PATH,
                details={"path": path},
            )
        target = (self.root / relative).resolve()
        if not target.is_relative_to(self.root):
            raise StorageException(
                f"Invalid storage path: {path!r}",
                StorageErrorCode.INVALID_PATH,
                details={"path": path},
            )
        return target

    def public_url(self, path: str) -> str:
        return f"{self.public_base_url}/{PurePosixPath(path).as_posix()}"

    def upload(self, path: str, data: bytes, content_type: Optional[str] = None) -> str:
        """
        Write ``data`` to ``path``, replacing any existing file.

        Returns:
            str: Public URL of the stored file

        Raises:
            StorageException: If the path is invalid or the write fails
        """
        target = self._resolve(path)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(data)
        except OSError as e:
            logger.error("Failed to store %s: %s", path, e)
            raise StorageException(
                f"Failed to store file: {path}",
                StorageErrorCode.UPLOAD_FAILED,
                details={"path": path},
            ) from e

        logger.info(
            "Stored %s (%d bytes, %s)", path, len(data), content_type or "unknown"
        )
        return self.public_url(path)

    def delete(self, path: str) -> bool:
        """Remove a stored file; False when it was already gone."""
        target = self._resolve(path)
        if not target.exists():
            return False
        try:
            target.unlink()
        except OSError as e:
            logger.error("Failed to delete %s: %s", path, e)
            raise StorageException(
                f"Failed to delete file: {path}",
                StorageErrorCode.DELETE_FAILED,
                details={"path": path},
            ) from e
        logger.info("Deleted stored file %s", path)
        return True

    def path_from_url(self, url: str) -> Optional[str]:
        """Storage path of a URL produced by ``upload``; None for foreign URLs."""
        prefix = f"{self.public_base_url}/"
        if not url or not url.startswith(prefix):
            return None
        return url[len(prefix):] or None


_storage: Optional[FileStorage] = None


def get_file_storage() -> FileStorage:
    global _storage
    if _storage is None:
        _storage = FileStorage()
    return _storage


__all__ = ["FileStorage", "get_file_storage"]

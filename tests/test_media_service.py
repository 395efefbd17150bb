import pytest

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import StorageErrorCode
from portfolio_cms.core.exceptions import StorageException
from portfolio_cms.services.content_service import ContentService
from portfolio_cms.services.media_service import (
    MediaService,
    classify_file,
    file_extension,
)
from portfolio_cms.stores.file_storage import FileStorage


@pytest.fixture
def storage(tmp_path):
    return FileStorage(root=str(tmp_path), public_base_url="/files/")


@pytest.fixture
def media_service(storage):
    return MediaService(storage=storage, content_service=ContentService())


@pytest.mark.parametrize(
    "content_type,expected",
    [("image/png", "image"), ("video/mp4", "video"), ("application/pdf", "other"), (None, "other")],
)
def test_classify_file(content_type, expected):
    assert classify_file(content_type) == expected


def test_file_extension():
    assert file_extension("Photo.JPG") == "jpg"
    assert file_extension("archive.tar.gz") == "gz"


def test_upload_stores_file_and_library_row(media_service, storage, tmp_path):
    item = media_service.upload("cover.png", b"\x89PNG data", "image/png")

    assert item["file_name"] == "cover.png"
    assert item["file_type"] == "image"
    assert item["file_size"] == 9
    assert item["file_url"].startswith("/files/media/")
    assert item["file_url"].endswith(".png")

    path = storage.path_from_url(item["file_url"])
    assert (tmp_path / path).read_bytes() == b"\x89PNG data"


def test_delete_removes_file_and_row(media_service, storage, tmp_path):
    item = media_service.upload("clip.mp4", b"frames", "video/mp4")
    path = tmp_path / storage.path_from_url(item["file_url"])

    media_service.delete(item["id"])

    assert not path.exists()
    assert ContentService().list_admin("media") == []


def test_update_alt_text(media_service):
    item = media_service.upload("cover.png", b"data", "image/png")

    updated = media_service.update_alt_text(item["id"], "Book cover")

    assert updated["alt_text"] == "Book cover"
    assert updated["file_url"] == item["file_url"]


def test_upload_over_limit_is_rejected(media_service, monkeypatch):
    monkeypatch.setattr(settings, "storage__max_upload_size", 4)

    with pytest.raises(StorageException) as exc_info:
        media_service.upload("big.png", b"12345", "image/png")

    assert exc_info.value.error_code == StorageErrorCode.FILE_TOO_LARGE


def test_favicon_upload_returns_url(media_service, storage, tmp_path):
    url = media_service.upload_favicon("icon.png", b"png", "image/png")

    assert url.startswith("/files/favicon-")
    assert url.endswith(".png")
    assert (tmp_path / storage.path_from_url(url)).read_bytes() == b"png"


def test_ico_accepted_by_extension(media_service):
    url = media_service.upload_favicon("favicon.ico", b"ico", "application/octet-stream")
    assert url.endswith(".ico")


def test_favicon_wrong_type_is_rejected(media_service):
    with pytest.raises(StorageException) as exc_info:
        media_service.upload_favicon("notes.txt", b"text", "text/plain")

    assert exc_info.value.error_code == StorageErrorCode.UNSUPPORTED_TYPE
    assert exc_info.value.http_status == 415


def test_favicon_too_large_is_rejected(media_service, monkeypatch):
    monkeypatch.setattr(settings, "storage__favicon_max_size", 2)

    with pytest.raises(StorageException) as exc_info:
        media_service.upload_favicon("icon.png", b"png", "image/png")

    assert exc_info.value.error_code == StorageErrorCode.FILE_TOO_LARGE


def test_storage_rejects_paths_outside_root(storage):
    with pytest.raises(StorageException) as exc_info:
        storage.upload("../escape.txt", b"x")

    assert exc_info.value.error_code == StorageErrorCode.INVALID_PATH


def test_favicon_endpoint(admin_client):
    response = admin_client.post(
        "/api/v1/admin/media/favicon",
        files={"file": ("icon.svg", b"<svg></svg>", "image/svg+xml")},
    )

    assert response.status_code == 200
    url = response.json()["favicon_url"]
    assert url.startswith("/uploads/favicon-")
    assert admin_client.get(url).content == b"<svg></svg>"

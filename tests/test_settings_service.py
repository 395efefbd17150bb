from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from portfolio_cms.core.error_codes import ValidationErrorCode
from portfolio_cms.core.exceptions import DatabaseException, ValidationException
from portfolio_cms.services.settings_cache import MISS, SettingsCache
from portfolio_cms.services.settings_service import SettingsService


def _record(key, value):
    return SimpleNamespace(
        setting_key=key,
        setting_value=value,
        updated_at=datetime.now(timezone.utc),
    )


class FakeStore:
    def __init__(self, rows=None, fail_keys=()):
        self.rows = dict(rows or {})
        self.fail_keys = set(fail_keys)
        self.reads = []

    def get_setting(self, key):
        self.reads.append(key)
        if key in self.fail_keys:
            raise DatabaseException("boom")
        value = self.rows.get(key)
        return None if value is None else _record(key, value)

    def list_settings(self):
        if "*" in self.fail_keys:
            raise DatabaseException("boom")
        return [_record(k, v) for k, v in self.rows.items()]

    def upsert_setting(self, key, value):
        self.rows[key] = value
        return _record(key, value)


class FakeRedis:
    def __init__(self):
        self.data = {}

    async def get_json(self, key):
        return self.data.get(key)

    async def set_json(self, key, value, ex=None):
        self.data[key] = value
        return True

    async def delete(self, *keys):
        for key in keys:
            self.data.pop(key, None)
        return len(keys)


class BrokenRedis:
    async def get_json(self, key):
        raise ConnectionError("redis down")

    async def set_json(self, key, value, ex=None):
        raise ConnectionError("redis down")

    async def delete(self, *keys):
        raise ConnectionError("redis down")


def _service(store, cache=None):
    return SettingsService(store=store, cache=cache or SettingsCache(enabled=False))


@pytest.mark.asyncio
async def test_fetch_returns_stored_value():
    service = _service(FakeStore({"hero": {"name": "Ann"}}))
    assert await service.fetch("hero") == {"name": "Ann"}


@pytest.mark.asyncio
async def test_fetch_absent_key_is_none():
    assert await _service(FakeStore()).fetch("hero") is None


@pytest.mark.asyncio
async def test_fetch_failure_is_none_and_not_retried():
    store = FakeStore(fail_keys={"seo_settings"})
    service = _service(store)

    assert await service.fetch("seo_settings") is None
    assert store.reads == ["seo_settings"]


@pytest.mark.asyncio
async def test_fetch_many_isolates_failures():
    store = FakeStore(
        {"favicon": {"favicon_url": "/f.ico"}, "custom_code": {"head_code": "x"}},
        fail_keys={"seo_settings"},
    )
    values = await _service(store).fetch_many(["seo_settings", "favicon", "custom_code"])

    assert values == {
        "seo_settings": None,
        "favicon": {"favicon_url": "/f.ico"},
        "custom_code": {"head_code": "x"},
    }


@pytest.mark.asyncio
async def test_fetch_all_failure_is_empty():
    assert await _service(FakeStore(fail_keys={"*"})).fetch_all() == {}


def test_validate_unknown_key():
    with pytest.raises(ValidationException) as exc_info:
        _service(FakeStore()).validate("nope", {})
    assert exc_info.value.error_code == ValidationErrorCode.UNKNOWN_SETTING
    assert exc_info.value.http_status == 404


def test_validate_rejects_non_objects():
    with pytest.raises(ValidationException) as exc_info:
        _service(FakeStore()).validate("hero", ["a"])
    assert exc_info.value.error_code == ValidationErrorCode.INVALID_FORMAT


def test_validate_rejects_wrong_types():
    with pytest.raises(ValidationException) as exc_info:
        _service(FakeStore()).validate("sections", {"blog": "maybe"})
    assert exc_info.value.error_code == ValidationErrorCode.INVALID_INPUT


def test_validate_fills_defaults():
    value = _service(FakeStore()).validate("hero", {"name": "Ann"})
    assert value["name"] == "Ann"
    assert value["cta_primary"] == "View My Work"


@pytest.mark.asyncio
async def test_cached_value_served_without_store_read():
    store = FakeStore({"hero": {"name": "Ann"}})
    cache = SettingsCache(client=FakeRedis(), enabled=True, ttl_seconds=60)
    service = _service(store, cache)

    await service.fetch("hero")
    await service.fetch("hero")

    assert store.reads == ["hero"]


@pytest.mark.asyncio
async def test_absent_key_is_cached_as_none():
    store = FakeStore()
    cache = SettingsCache(client=FakeRedis(), enabled=True)
    service = _service(store, cache)

    assert await service.fetch("about") is None
    assert await cache.get("about") is None
    assert await service.fetch("about") is None
    assert store.reads == ["about"]


@pytest.mark.asyncio
async def test_save_invalidates_cache():
    store = FakeStore({"hero": {"name": "Old"}})
    cache = SettingsCache(client=FakeRedis(), enabled=True)
    service = _service(store, cache)

    await service.fetch("hero")
    saved = await service.save("hero", {"name": "New"})

    assert saved.setting_value["name"] == "New"
    assert await cache.get("hero") is MISS
    assert (await service.fetch("hero"))["name"] == "New"


@pytest.mark.asyncio
async def test_broken_cache_falls_through_to_store():
    store = FakeStore({"hero": {"name": "Ann"}})
    service = _service(store, SettingsCache(client=BrokenRedis(), enabled=True))

    assert await service.fetch("hero") == {"name": "Ann"}
    await service.save("hero", {"name": "Bea"})
    assert store.rows["hero"]["name"] == "Bea"

"""
Settings Cache

Process-wide cache of settings blobs keyed by ``setting_key``, stored in Redis.
The cache is off unless ``cache__enabled`` is set; when off every call is a
no-op. Redis problems are logged and treated as cache misses, so a broken
cache never breaks a page.
"""

from typing import Any, Optional

from redis.exceptions import RedisError

from portfolio_cms.core.config import settings
from portfolio_cms.core.exceptions import RedisException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.stores.redis_client import RedisClient, get_redis_client

logger = get_logger(__name__)

# Cached value for keys that have no row yet
_ABSENT = {"__absent__": True}


class CacheMiss:
    """Marker returned by ``SettingsCache.get`` when nothing usable is cached."""

    def __repr__(self) -> str:
        return "MISS"


MISS = CacheMiss()


class SettingsCache:
    """Redis-backed cache for settings blobs."""

    def __init__(
        self,
        client: Optional[RedisClient] = None,
        enabled: Optional[bool] = None,
        ttl_seconds: Optional[int] = None,
        key_prefix: Optional[str] = None,
    ) -> None:
        self.enabled = settings.cache__enabled if enabled is None else enabled
        self.ttl_seconds = ttl_seconds or settings.cache__ttl_seconds
        self.key_prefix = key_prefix or settings.cache__key_prefix
        self._client = client

    @property
    def client(self) -> RedisClient:
        if self._client is None:
            self._client = get_redis_client()
        return self._client

    def _key(self, setting_key: str) -> str:
        return f"{self.key_prefix}{setting_key}"

    async def get(self, setting_key: str) -> Any:
        """
        Cached value for ``setting_key``.

        Returns:
            The cached value, ``None`` for a key cached as absent, or ``MISS``
        """
        if not self.enabled:
            return MISS
        try:
            cached = await self.client.get_json(self._key(setting_key))
        except (RedisException, RedisError, OSError) as e:
            logger.warning("Settings cache read failed for %s: %s", setting_key, e)
            return MISS
        if cached is None:
            return MISS
        if cached == _ABSENT:
            return None
        return cached

    async def set(self, setting_key: str, value: Any) -> None:
        """Cache ``value``; ``None`` records that the key has no row."""
        if not self.enabled:
            return
        payload = _ABSENT if value is None else value
        try:
            await self.client.set_json(
                self._key(setting_key), payload, ex=self.ttl_seconds
            )
        except (RedisException, RedisError, OSError) as e:
            logger.warning("Settings cache write failed for %s: %s", setting_key, e)

    async def invalidate(self, setting_key: str) -> None:
        if not self.enabled:
            return
        try:
            await self.client.delete(self._key(setting_key))
            logger.info("Settings cache invalidated for %s", setting_key)
        except (RedisException, RedisError, OSError) as e:
            logger.warning(
                "Settings cache invalidation failed for %s: %s", setting_key, e
            )


_cache: Optional[SettingsCache] = None


def get_settings_cache() -> SettingsCache:
    global _cache
    if _cache is None:
        _cache = SettingsCache()
    return _cache


__all__ = ["MISS", "SettingsCache", "get_settings_cache"]

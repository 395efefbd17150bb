"""
Redis Client

Async Redis connection behind the settings cache. The connection is opened
on first use, so a site running without Redis never touches it.
"""

import asyncio
import json
import time
from typing import Any, Dict, Optional
from urllib.parse import quote

import redis.asyncio as redis
from redis.asyncio import ConnectionPool
from redis.exceptions import RedisError

from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import RedisErrorCode
from portfolio_cms.core.exceptions import RedisException
from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)


def redis_url() -> str:
    scheme = "rediss" if settings.redis__ssl else "redis"
    auth = f":{quote(settings.redis__password)}@" if settings.redis__password else ""
    return (
        f"{scheme}://{auth}{settings.redis__host}:"
        f"{settings.redis__port}/{settings.redis__db}"
    )


class RedisClient:
    """String and JSON values over a lazily created connection pool."""

    def __init__(self, url: Optional[str] = None) -> None:
        self.url = url or redis_url()
        self._pool: Optional[ConnectionPool] = None
        self._client: Optional[redis.Redis] = None
        self._lock = asyncio.Lock()

    async def _connection(self) -> redis.Redis:
        """
        Connected client, opening the pool on first call.

        Raises:
            RedisException: If Redis cannot be reached
        """
        if self._client is not None:
            return self._client

        async with self._lock:
            if self._client is None:
                options: Dict[str, Any] = {
                    "decode_responses": True,
                    "socket_connect_timeout": settings.redis__connect_timeout,
                    "socket_timeout": settings.redis__socket_timeout,
                }
                if settings.redis__ssl:
                    options["ssl_cert_reqs"] = None
                pool = ConnectionPool.from_url(self.url, **options)
                client = redis.Redis(connection_pool=pool)
                try:
                    await client.ping()
                except (RedisError, OSError) as e:
                    await pool.disconnect()
                    logger.error("Failed to connect to Redis: %s", e)
                    raise RedisException(
                        f"Redis connection failed: {e}",
                        RedisErrorCode.CONNECTION_FAILED,
                        details={"host": settings.redis__host},
                    ) from e
                self._pool, self._client = pool, client
                logger.info("Redis connection established")
        return self._client

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
        if self._pool is not None:
            await self._pool.disconnect()
            self._pool = None
            logger.info("Redis connection closed")

    async def get(self, key: str) -> Optional[str]:
        client = await self._connection()
        return await client.get(key)

    async def set(self, key: str, value: str, ex: Optional[int] = None) -> bool:
        """Store ``value``; ``ex`` is the expiry in seconds."""
        client = await self._connection()
        return bool(await client.set(key, value, ex=ex))

    async def delete(self, *keys: str) -> int:
        client = await self._connection()
        return int(await client.delete(*keys))

    async def get_json(self, key: str) -> Optional[Any]:
        """Decoded JSON under ``key``; None when missing or not valid JSON."""
        raw = await self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except ValueError:
            logger.warning("Discarding undecodable cached value for %s", key)
            return None

    async def set_json(self, key: str, data: Any, ex: Optional[int] = None) -> bool:
        return await self.set(key, json.dumps(data, ensure_ascii=False), ex=ex)

    async def health_check(self) -> Dict[str, Any]:
        try:
            client = await self._connection()
            started = time.perf_counter()
            await client.ping()
            elapsed = time.perf_counter() - started
            info = await client.info("server")
        except (RedisException, RedisError, OSError) as e:
            return {"status": "unhealthy", "error": str(e)}
        return {
            "status": "healthy",
            "ping_time_ms": round(elapsed * 1000, 2),
            "redis_version": info.get("redis_version"),
        }


_client: Optional[RedisClient] = None


def get_redis_client() -> RedisClient:
    """Shared client; not connected until first used."""
    global _client
    if _client is None:
        _client = RedisClient()
    return _client


async def close_redis_client() -> None:
    global _client
    if _client is not None:
        await _client.close()
        _client = None


async def test_redis_connection() -> Dict[str, Any]:
    """Ping Redis and return the health report."""
    result = await get_redis_client().health_check()
    if result["status"] == "healthy":
        logger.info("Redis connection test successful")
    else:
        logger.warning("Redis connection test failed: %s", result.get("error"))
    return result

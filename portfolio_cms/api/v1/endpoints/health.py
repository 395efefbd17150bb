"""
API Health Check Endpoint

Reports the database and Redis status.
"""

import asyncio
from datetime import datetime, timezone

from fastapi import APIRouter

from portfolio_cms import __version__
from portfolio_cms.api.v1.schemas.responses import ComponentHealth, HealthResponse
from portfolio_cms.core.config import settings
from portfolio_cms.core.exceptions import ApplicationException
from portfolio_cms.core.logger import get_logger
from portfolio_cms.stores.database import test_connection
from portfolio_cms.stores.redis_client import test_redis_connection

logger = get_logger(__name__)

router = APIRouter()


async def check_database_health() -> ComponentHealth:
    try:
        pool = await asyncio.to_thread(test_connection)
    except ApplicationException as e:
        logger.warning("Database health check failed: %s", e.message)
        return ComponentHealth(status="unhealthy", error=e.message)
    return ComponentHealth(status="healthy", details=pool)


async def check_redis_health() -> ComponentHealth:
    result = await test_redis_connection()
    status = result.pop("status", "unknown")
    return ComponentHealth(status=status, error=result.pop("error", None), details=result)


@router.get("/health", response_model=HealthResponse, summary="Site health check")
async def health_check() -> HealthResponse:
    """
    Database and Redis status.

    A Redis outage only counts against overall health while the settings
    cache is enabled; page rendering does not depend on it otherwise.
    """
    components = {}
    healthy = True

    if settings.health__check_database:
        components["database"] = await check_database_health()
        healthy = components["database"].status == "healthy"

    if settings.health__check_redis:
        components["redis"] = await check_redis_health()
        if settings.cache__enabled and components["redis"].status != "healthy":
            healthy = False

    return HealthResponse(
        status="healthy" if healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc),
        version=__version__,
        environment=settings.environment,
        cache_enabled=settings.cache__enabled,
        components=components,
    )


__all__ = ["router"]

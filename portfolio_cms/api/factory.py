"""
API Factory

Centralized API setup with middleware, CORS, uploads and monitoring
configuration.
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.staticfiles import StaticFiles

from portfolio_cms.api.errors import register_exception_handlers
from portfolio_cms.api.middleware import (
    RequestIDMiddleware,
    RequestLoggingMiddleware,
)
from portfolio_cms.api.router import router
from portfolio_cms.core.config import settings
from portfolio_cms.core.logfire_config import initialize_logfire
from portfolio_cms.core.logger import get_logger
from portfolio_cms.stores.database import dispose_engine
from portfolio_cms.stores.redis_client import close_redis_client

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Release the database pool and the Redis connection on shutdown."""
    yield
    await close_redis_client()
    dispose_engine()
    logger.info("API shutdown complete")


def setup_cors(app: FastAPI) -> None:
    """
    Setup CORS middleware with configurable origins.

    Args:
        app: FastAPI application instance
    """
    cors_origins = settings.cors_allow_origins_list

    if cors_origins and cors_origins != [""]:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=cors_origins,
            allow_credentials=settings.cors__allow_credentials,
            allow_methods=settings.cors_allow_methods_list,
            allow_headers=settings.cors_allow_headers_list,
        )
        logger.info("CORS middleware configured for origins: %s", cors_origins)
    else:
        logger.info("CORS middleware skipped (no origins configured)")


def setup_compression(app: FastAPI) -> None:
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    logger.info("GZip compression middleware configured")


def setup_logging_middleware(app: FastAPI) -> None:
    """
    Setup request logging and ID middleware.

    The request id middleware is added last so it runs first and every log
    line of the request carries the id.
    """
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    logger.info("Request logging and ID middleware configured")


def setup_exception_handlers(app: FastAPI) -> None:
    register_exception_handlers(app)
    logger.info("Global exception handlers configured")


def setup_uploads(app: FastAPI) -> None:
    """Serve stored files under ``storage__public_base_url``."""
    root = Path(settings.storage__root)
    root.mkdir(parents=True, exist_ok=True)
    app.mount(
        settings.storage__public_base_url.rstrip("/"),
        StaticFiles(directory=str(root)),
        name="uploads",
    )
    logger.info(
        "Uploads served from %s at %s", root, settings.storage__public_base_url
    )


def setup_logfire_instrumentation(app: FastAPI) -> None:
    """
    Setup Logfire configuration and instrumentation.

    Args:
        app: FastAPI application instance
    """
    results = initialize_logfire(app)

    if results["configured"]:
        enabled_instruments = [
            name for name, enabled in results["instrumentation"].items() if enabled
        ]
        if enabled_instruments:
            logger.info(
                "Logfire instrumentation enabled for: %s",
                ", ".join(enabled_instruments),
            )
        else:
            logger.debug("No Logfire instrumentation enabled")
    else:
        logger.debug("Logfire initialization skipped (disabled)")


def create_api(
    title: str = "portfolio-cms API",
    description: str = "Portfolio site and content-management API",
    version: str = "1.0.0",
    docs_url: str = "/docs",
    redoc_url: str = "/redoc",
    enable_cors: bool = True,
    enable_compression: bool = True,
    mount_prefix: str = "",
) -> FastAPI:
    """
    Create and configure FastAPI application with all middleware.

    Args:
        title: API title
        description: API description
        version: API version
        docs_url: URL path for API documentation (Swagger UI)
        redoc_url: URL path for ReDoc documentation
        enable_cors: Whether to enable CORS middleware
        enable_compression: Whether to enable GZip compression
        mount_prefix: Prefix for mounting the router

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        docs_url=docs_url,
        redoc_url=redoc_url,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Last added runs first
    if enable_compression:
        setup_compression(app)

    if enable_cors:
        setup_cors(app)

    setup_logging_middleware(app)
    setup_exception_handlers(app)
    setup_logfire_instrumentation(app)
    setup_uploads(app)

    app.include_router(router, prefix=mount_prefix)

    logger.info("API factory created: %s v%s", title, version)
    return app

"""
Logfire Configuration Module

Optional Logfire tracing for the site. Off unless ``logfire__enabled`` is
set; ``initialize_logfire`` can be called on every app creation and only
configures and instruments once per process.
"""

import logging
from typing import Any, Dict, Optional

import logfire
from fastapi import FastAPI, Request
from starlette.websockets import WebSocket

from portfolio_cms.core.config import settings
from portfolio_cms.core.logger import setup_logfire_handler

logger = logging.getLogger("portfolio_cms.logfire")

_REDACTED_FIELDS = {"password", "token", "secret", "authorization", "cookie"}

_configured = False
_instrumented: Dict[str, bool] = {}


def request_attributes_mapper(
    request: Request | WebSocket, attributes: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """
    Request attributes recorded on each FastAPI span.

    Login passwords and tokens are redacted; uploads are reduced to their
    name, type and size.
    """
    recorded: Dict[str, Any] = {
        "endpoint": request.url.path,
        "method": getattr(request, "method", "WebSocket"),
        "request_id": request.headers.get("x-request-id"),
    }
    if attributes.get("errors"):
        recorded["errors"] = attributes["errors"]
        return recorded

    values: Dict[str, Any] = {}
    for key, value in (attributes.get("values") or {}).items():
        if key.lower() in _REDACTED_FIELDS:
            values[key] = "[REDACTED]"
        elif hasattr(value, "filename"):
            values[key] = {
                "filename": value.filename,
                "content_type": getattr(value, "content_type", None),
                "size": getattr(value, "size", None),
            }
        else:
            values[key] = value
    recorded["values"] = values
    return recorded


def setup_logfire() -> bool:
    """Configure Logfire once; True when it is active."""
    global _configured
    if _configured or not settings.logfire__enabled:
        return _configured

    options: Dict[str, Any] = {
        "service_name": settings.logfire__service_name,
        "environment": settings.logfire__environment,
    }
    if settings.logfire__token:
        options["token"] = settings.logfire__token.get_secret_value()

    try:
        logfire.configure(**options)
    except Exception as e:
        logger.error("Failed to initialize Logfire: %s", e)
        return False

    setup_logfire_handler()
    _configured = True
    logger.info("Logfire initialized for %s", settings.logfire__service_name)
    return True


def _instrument(name: str, enabled: bool, instrument) -> None:
    if not enabled or name in _instrumented:
        return
    try:
        instrument()
        _instrumented[name] = True
        logger.info("Logfire %s instrumentation enabled", name)
    except Exception as e:
        _instrumented[name] = False
        logger.warning("Failed to instrument %s with Logfire: %s", name, e)


def initialize_logfire(app: Optional[FastAPI] = None) -> Dict[str, Any]:
    """
    Configure Logfire and instrument SQLAlchemy, Redis and ``app``.

    Returns:
        ``{"configured": bool, "instrumentation": {name: bool}}``
    """
    if not setup_logfire():
        return {"configured": False, "instrumentation": {}}

    from portfolio_cms.stores.database import engine

    _instrument(
        "sqlalchemy",
        settings.logfire__instrument__sqlalchemy,
        lambda: logfire.instrument_sqlalchemy(engine=engine),
    )
    _instrument("redis", settings.logfire__instrument__redis, logfire.instrument_redis)

    instrumentation = dict(_instrumented)
    if app is not None and settings.logfire__instrument__fastapi:
        try:
            logfire.instrument_fastapi(
                app, request_attributes_mapper=request_attributes_mapper
            )
            instrumentation["fastapi"] = True
        except Exception as e:
            logger.error("Failed to instrument FastAPI with Logfire: %s", e)
            instrumentation["fastapi"] = False

    return {"configured": True, "instrumentation": instrumentation}

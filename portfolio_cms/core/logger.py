"""
Core Logger Module

Logging for portfolio-cms: console and rotating file handlers configured
through ``logging.config``, plus an optional Logfire handler that tags each
record with the id of the request being served.
"""

import logging
import logging.config
import sys
from contextvars import ContextVar
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import logfire

from portfolio_cms.core.config import settings

LOGGER_NAMESPACE = "portfolio_cms"

# Attributes every LogRecord has; anything else came in through ``extra=``
_RECORD_FIELDS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}
_REDACTED_WORDS = ("password", "secret", "token", "cookie", "authorization")

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def set_request_id(request_id: str) -> None:
    _request_id.set(request_id)


def get_request_id() -> Optional[str]:
    return _request_id.get()


def clear_request_id() -> None:
    _request_id.set(None)


def _extra_attributes(record: logging.LogRecord) -> Dict[str, Any]:
    """``extra=`` values of a record, with credentials redacted."""
    attributes: Dict[str, Any] = {}
    for key, value in vars(record).items():
        if key in _RECORD_FIELDS:
            continue
        if any(word in key.lower() for word in _REDACTED_WORDS):
            attributes[key] = "<redacted>"
        elif isinstance(value, (str, int, float, bool)) or value is None:
            attributes[key] = value
        else:
            attributes[key] = repr(value)
    return attributes


class RequestAwareLogfireHandler(logging.Handler):
    """Forwards records to Logfire, tagged ``rid:<request id>`` inside requests."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            request_id = get_request_id()
            target = logfire.with_tags(f"rid:{request_id}") if request_id else logfire
            attributes = _extra_attributes(record)
            attributes.update(
                {
                    "code.filepath": record.pathname,
                    "code.lineno": record.lineno,
                    "code.function": record.funcName,
                }
            )
            target.log(
                level=record.levelname.lower(),
                msg_template=record.getMessage(),
                attributes=attributes,
                exc_info=record.exc_info,
            )
        except Exception:
            self.handleError(record)


def get_logging_config() -> Dict[str, Any]:
    """``dictConfig`` for the console and file handlers."""
    level = settings.log_level.upper()

    log_file = settings.log__file_path
    if log_file is None:
        log_dir = Path(settings.log__dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = str(log_dir / "portfolio_cms.log")

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "%(asctime)s %(levelname)-7s %(name)s: %(message)s",
                "datefmt": "%H:%M:%S",
            },
            "file": {
                "format": (
                    "%(asctime)s %(levelname)-7s %(name)s "
                    "[%(module)s:%(lineno)d] %(message)s"
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "console",
                "stream": sys.stdout,
            },
            "file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": settings.log__file_level.upper(),
                "formatter": "file",
                "filename": log_file,
                "maxBytes": settings.log__file_max_bytes,
                "backupCount": settings.log__file_backup_count,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            LOGGER_NAMESPACE: {
                "level": level,
                "handlers": ["console", "file"],
                "propagate": False,
            },
            "uvicorn.access": {"level": "WARNING"},
            "sqlalchemy.engine": {"level": "WARNING"},
        },
        "root": {"level": "WARNING", "handlers": ["console"]},
    }


def setup_logfire_handler() -> None:
    """
    Attach the Logfire handler to the application logger.

    Runs after ``logfire.configure()``; a second call is a no-op.
    """
    if not settings.logfire__enabled:
        return

    app_logger = logging.getLogger(LOGGER_NAMESPACE)
    if any(isinstance(h, RequestAwareLogfireHandler) for h in app_logger.handlers):
        return
    app_logger.addHandler(
        RequestAwareLogfireHandler(level=settings.log_level.upper())
    )
    app_logger.info("Logfire logging handler attached")


@lru_cache(maxsize=1)
def setup_logging() -> None:
    """Apply the logging config once per process."""
    logging.config.dictConfig(get_logging_config())
    logging.getLogger(f"{LOGGER_NAMESPACE}.startup").info(
        "Logging initialized (environment=%s, level=%s, logfire=%s)",
        settings.environment,
        settings.log_level,
        settings.logfire__enabled,
    )


def get_logger(name: str) -> logging.Logger:
    """
    Logger under the ``portfolio_cms`` namespace.

    Example:
        logger = get_logger(__name__)
        logger.info("Setting '%s' saved", key)
    """
    setup_logging()
    if not name.startswith(LOGGER_NAMESPACE):
        name = f"{LOGGER_NAMESPACE}.{name}"
    return logging.getLogger(name)

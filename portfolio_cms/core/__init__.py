"""
Core Package

Configuration, logging, and error handling shared by every layer.
"""

# ruff: noqa: F401  # All imports are re-exported via __all__

from .config import Settings, settings  # noqa: F401
from .error_codes import (  # noqa: F401
    ERROR_CODE_MAP,
    APIErrorCode,
    AuthErrorCode,
    ContentErrorCode,
    DatabaseErrorCode,
    RedisErrorCode,
    StorageErrorCode,
    ValidationErrorCode,
    get_http_status_code,
)
from .exceptions import (  # noqa: F401
    ApplicationException,
    AuthException,
    DatabaseException,
    NotFoundException,
    RedisException,
    StorageException,
    ValidationException,
)
from .logger import get_logger  # noqa: F401

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Error codes
    "ERROR_CODE_MAP",
    "APIErrorCode",
    "AuthErrorCode",
    "ContentErrorCode",
    "DatabaseErrorCode",
    "RedisErrorCode",
    "StorageErrorCode",
    "ValidationErrorCode",
    "get_http_status_code",
    # Exceptions
    "ApplicationException",
    "AuthException",
    "DatabaseException",
    "NotFoundException",
    "RedisException",
    "StorageException",
    "ValidationException",
    # Logger
    "get_logger",
]

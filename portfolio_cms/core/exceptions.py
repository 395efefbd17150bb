"""
Custom Exceptions

Application-specific exception classes.

Each subclass carries the error code it falls back to when none is given, so
``NotFoundException("Blog post not found")`` already maps to HTTP 404.
"""

import json
from typing import TYPE_CHECKING, Any, ClassVar, Dict, Optional

from portfolio_cms.core.error_codes import (
    AuthErrorCode,
    ContentErrorCode,
    DatabaseErrorCode,
    RedisErrorCode,
    StorageErrorCode,
    ValidationErrorCode,
    get_http_status_code,
)

if TYPE_CHECKING:
    from portfolio_cms.core.error_codes import ErrorCode


def _safe_serialize(obj: Any) -> Any:
    """Safely serialize an object for JSON, using repr() for non-serializable objects."""
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return repr(obj)


class ApplicationException(Exception):
    """Base exception for portfolio-cms errors."""

    default_error_code: ClassVar[Optional["ErrorCode"]] = None

    def __init__(
        self,
        message: str,
        error_code: Optional["ErrorCode | str"] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        self.cause = cause

    @property
    def code_value(self) -> Optional[str]:
        if self.error_code is None:
            return None
        return getattr(self.error_code, "value", self.error_code)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for serialization with safe handling."""
        result = {
            "message": self.message,
            "code": self.code_value,
            "details": {k: _safe_serialize(v) for k, v in self.details.items()},
        }

        # custom cause > __cause__ > __context__
        cause = self.cause or self.__cause__ or self.__context__
        if cause:
            result["cause"] = {"type": cause.__class__.__name__, "message": str(cause)}

        return result

    def __str__(self) -> str:
        parts = [self.message]
        if self.error_code:
            parts.append(f"[{self.code_value}]")
        if self.details:
            parts.append(f"Details: {self.details}")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r}, "
            f"cause={self.cause!r})"
        )

    @property
    def http_status(self) -> int:
        """HTTP status code for this exception."""
        if self.error_code:
            return get_http_status_code(self.error_code)
        return 500


class DatabaseException(ApplicationException):
    """Raised for database errors."""

    default_error_code = DatabaseErrorCode.QUERY_FAILED


class RedisException(ApplicationException):
    """Raised for Redis errors."""

    default_error_code = RedisErrorCode.OPERATION_FAILED


class ValidationException(ApplicationException):
    """Raised when input fails business validation."""

    default_error_code = ValidationErrorCode.INVALID_INPUT


class AuthException(ApplicationException):
    """Raised for authentication errors."""

    default_error_code = AuthErrorCode.NOT_AUTHENTICATED


class NotFoundException(ApplicationException):
    """Raised when a requested record does not exist."""

    default_error_code = ContentErrorCode.NOT_FOUND


class StorageException(ApplicationException):
    """Raised for file storage errors."""

    default_error_code = StorageErrorCode.UPLOAD_FAILED

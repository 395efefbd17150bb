"""
Error Codes

Standardized error codes for portfolio-cms.
"""

from enum import StrEnum
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    """Base error code enum (string-based)."""


class DatabaseErrorCode(ErrorCode):
    """Database-related error codes."""

    CONNECTION_FAILED = "DATABASE_CONNECTION_FAILED"
    QUERY_FAILED = "DATABASE_QUERY_FAILED"
    TRANSACTION_FAILED = "DATABASE_TRANSACTION_FAILED"


class RedisErrorCode(ErrorCode):
    """Redis-related error codes."""

    CONNECTION_FAILED = "REDIS_CONNECTION_FAILED"
    OPERATION_FAILED = "REDIS_OPERATION_FAILED"


class APIErrorCode(ErrorCode):
    """API-related error codes."""

    INVALID_REQUEST = "API_INVALID_REQUEST"
    NOT_FOUND = "API_NOT_FOUND"
    METHOD_NOT_ALLOWED = "API_METHOD_NOT_ALLOWED"
    PAYLOAD_TOO_LARGE = "API_PAYLOAD_TOO_LARGE"
    INTERNAL_ERROR = "API_INTERNAL_ERROR"


class ValidationErrorCode(ErrorCode):
    """Validation-related error codes."""

    INVALID_INPUT = "VALIDATION_INVALID_INPUT"
    MISSING_FIELD = "VALIDATION_MISSING_FIELD"
    INVALID_FORMAT = "VALIDATION_INVALID_FORMAT"
    UNKNOWN_SETTING = "VALIDATION_UNKNOWN_SETTING"


class AuthErrorCode(ErrorCode):
    """Authentication error codes."""

    INVALID_CREDENTIALS = "AUTH_INVALID_CREDENTIALS"
    NOT_AUTHENTICATED = "AUTH_NOT_AUTHENTICATED"
    TOKEN_INVALID = "AUTH_TOKEN_INVALID"
    TOKEN_EXPIRED = "AUTH_TOKEN_EXPIRED"


class ContentErrorCode(ErrorCode):
    """Content collection error codes."""

    UNKNOWN_COLLECTION = "CONTENT_UNKNOWN_COLLECTION"
    NOT_FOUND = "CONTENT_NOT_FOUND"
    DUPLICATE_SLUG = "CONTENT_DUPLICATE_SLUG"
    REORDER_OUT_OF_RANGE = "CONTENT_REORDER_OUT_OF_RANGE"


class StorageErrorCode(ErrorCode):
    """File storage error codes."""

    UPLOAD_FAILED = "STORAGE_UPLOAD_FAILED"
    DELETE_FAILED = "STORAGE_DELETE_FAILED"
    INVALID_PATH = "STORAGE_INVALID_PATH"
    UNSUPPORTED_TYPE = "STORAGE_UNSUPPORTED_TYPE"
    FILE_TOO_LARGE = "STORAGE_FILE_TOO_LARGE"


# Error code to HTTP status mapping
#
# New codes keep their domain prefix in the value (DATABASE_*, AUTH_*,
# CONTENT_*, ...) and must be added here. Business validation uses 400;
# FastAPI's RequestValidationError keeps 422.
ERROR_CODE_MAP: Mapping[ErrorCode, int] = MappingProxyType(
    {
        # Database errors
        DatabaseErrorCode.CONNECTION_FAILED: 503,
        DatabaseErrorCode.QUERY_FAILED: 500,
        DatabaseErrorCode.TRANSACTION_FAILED: 500,
        # Redis errors
        RedisErrorCode.CONNECTION_FAILED: 503,
        RedisErrorCode.OPERATION_FAILED: 500,
        # API errors
        APIErrorCode.INVALID_REQUEST: 400,
        APIErrorCode.NOT_FOUND: 404,
        APIErrorCode.METHOD_NOT_ALLOWED: 405,
        APIErrorCode.PAYLOAD_TOO_LARGE: 413,
        APIErrorCode.INTERNAL_ERROR: 500,
        # Validation errors
        ValidationErrorCode.INVALID_INPUT: 400,
        ValidationErrorCode.MISSING_FIELD: 400,
        ValidationErrorCode.INVALID_FORMAT: 400,
        ValidationErrorCode.UNKNOWN_SETTING: 404,
        # Auth errors
        AuthErrorCode.INVALID_CREDENTIALS: 401,
        AuthErrorCode.NOT_AUTHENTICATED: 401,
        AuthErrorCode.TOKEN_INVALID: 401,
        AuthErrorCode.TOKEN_EXPIRED: 401,
        # Content errors
        ContentErrorCode.UNKNOWN_COLLECTION: 404,
        ContentErrorCode.NOT_FOUND: 404,
        ContentErrorCode.DUPLICATE_SLUG: 409,
        ContentErrorCode.REORDER_OUT_OF_RANGE: 400,
        # Storage errors
        StorageErrorCode.UPLOAD_FAILED: 500,
        StorageErrorCode.DELETE_FAILED: 500,
        StorageErrorCode.INVALID_PATH: 400,
        StorageErrorCode.UNSUPPORTED_TYPE: 415,
        StorageErrorCode.FILE_TOO_LARGE: 413,
    }
)


def get_http_status_code(error_code: ErrorCode | str) -> int:
    """
    Get HTTP status code for an error code.

    Args:
        error_code: Error code enum or its string value

    Returns:
        HTTP status code (defaults to 500 if not found)
    """
    if isinstance(error_code, ErrorCode):
        return ERROR_CODE_MAP.get(error_code, 500)

    for code, status in ERROR_CODE_MAP.items():
        if code.value == error_code:
            return status
    return 500


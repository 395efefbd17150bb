"""
Exception Handlers

Turns every exception raised while serving an API request into an
``ErrorResponse`` JSON body with a matching status code.
"""

import traceback

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio_cms.api.schemas.error import ErrorDetail, ErrorResponse
from portfolio_cms.core.config import settings
from portfolio_cms.core.error_codes import APIErrorCode, ValidationErrorCode
from portfolio_cms.core.exceptions import ApplicationException
from portfolio_cms.core.logger import get_logger

logger = get_logger(__name__)

_HTTP_ERROR_CODES = {
    400: APIErrorCode.INVALID_REQUEST,
    404: APIErrorCode.NOT_FOUND,
    405: APIErrorCode.METHOD_NOT_ALLOWED,
    413: APIErrorCode.PAYLOAD_TOO_LARGE,
}


def _is_site_path(path: str) -> bool:
    """Public page paths get the HTML not-found view instead of JSON."""
    uploads = settings.storage__public_base_url.rstrip("/")
    return not (
        path.startswith("/api/") or path == "/api" or path.startswith(f"{uploads}/")
    )


def _log_exception(request: Request, exc: Exception, status_code: int) -> None:
    msg = "Request error in %s %s: %s"
    args = (request.method, request.url.path, str(exc))

    if status_code >= 500:
        logger.error(msg, *args, exc_info=True)
    elif status_code >= 400:
        logger.warning(msg, *args)
    else:
        logger.info(msg, *args)


def _build_response(
    error: ErrorDetail, request: Request, status_code: int
) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None)

    payload = ErrorResponse(
        error=error,
        request_id=request_id,
        path=request.url.path,
        method=request.method,
    )

    headers = {}
    if request_id:
        headers["X-Request-ID"] = request_id

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(payload.model_dump()),
        headers=headers,
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Global exception handler for all unhandled exceptions.

    Args:
        request: FastAPI request object
        exc: Exception that was raised

    Returns:
        JSONResponse with standardized error format
    """
    if isinstance(exc, ApplicationException):
        status_code = exc.http_status
        _log_exception(request, exc, status_code)

        exc_dict = exc.to_dict()
        error = ErrorDetail(
            type=exc.__class__.__name__,
            message=exc_dict["message"],
            code=exc_dict["code"],
            details=exc_dict["details"] or None,
        )
        return _build_response(error, request, status_code)

    if isinstance(exc, StarletteHTTPException):
        _log_exception(request, exc, exc.status_code)
        if exc.status_code == 404 and _is_site_path(request.url.path):
            from portfolio_cms.api.pages import render_not_found

            return await render_not_found(request, request.url.path)
        code = _HTTP_ERROR_CODES.get(exc.status_code)
        error = ErrorDetail(
            type="HTTPException",
            message=str(exc.detail),
            code=code.value if code else f"HTTP_{exc.status_code}",
        )
        return _build_response(error, request, exc.status_code)

    if isinstance(exc, RequestValidationError):
        _log_exception(request, exc, 422)
        error = ErrorDetail(
            type="ValidationError",
            message="Request validation failed",
            code=ValidationErrorCode.INVALID_INPUT.value,
            details={"validation_errors": jsonable_encoder(exc.errors())},
        )
        return _build_response(error, request, 422)

    _log_exception(request, exc, 500)
    error = ErrorDetail(
        type="InternalServerError",
        message="An unexpected error occurred",
        code=APIErrorCode.INTERNAL_ERROR.value,
    )
    if settings.debug:
        error.debug = {
            "exception_type": exc.__class__.__name__,
            "exception_message": str(exc),
            "traceback": traceback.format_exc(),
        }

    return _build_response(error, request, 500)

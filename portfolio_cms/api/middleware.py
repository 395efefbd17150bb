"""
FastAPI Middleware

Request id propagation and access logging.
"""

import time
import uuid
from typing import Awaitable, Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from portfolio_cms.core.config import settings
from portfolio_cms.core.logger import clear_request_id, get_logger, set_request_id

logger = get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    One log line per request with status and duration.

    Successful requests for uploaded files are logged at debug level so page
    assets do not drown out page and API traffic.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        started = time.perf_counter()
        method, path = request.method, request.url.path
        request_id = getattr(request.state, "request_id", "-")

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "%s %s failed after %.3fs: %s [%s]",
                method,
                path,
                time.perf_counter() - started,
                e,
                request_id,
            )
            raise

        status = response.status_code
        if status >= 500:
            log = logger.error
        elif status >= 400:
            log = logger.warning
        elif path.startswith(settings.storage__public_base_url.rstrip("/") + "/"):
            log = logger.debug
        else:
            log = logger.info
        log(
            "%s %s - %d (%.3fs) [%s]",
            method,
            path,
            status,
            time.perf_counter() - started,
            request_id,
        )
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Tag each request with an id.

    The incoming ``X-Request-ID`` is reused when present. The id is stored on
    ``request.state``, attached to log records while the request runs and
    echoed in the response.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        set_request_id(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_id()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response

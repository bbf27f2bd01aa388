"""Middleware writing one access-log line per request."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from hello_server.core.logging_config import ACCESS_LOGGER_NAME

access_logger = logging.getLogger(ACCESS_LOGGER_NAME)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log method, path, status code and duration of every request to
    the "server.access" logger. The response is passed through unchanged.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.scope.get("path", "")
        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000
        access_logger.info(
            "%s %s %d %.2fms", request.method, path, response.status_code, duration_ms
        )
        return response

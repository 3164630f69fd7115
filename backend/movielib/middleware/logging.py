"""
Movies Library Backend — Request Logging Middleware
=====================================================

What:  One access log line for every HTTP request.
How:   Times the rest of the chain and logs method, path, status, duration,
       request ID and client IP. The level follows the status class:
       5xx → ERROR, 4xx → WARNING, otherwise INFO.

A request whose handler raises is still logged, as a 500, before the
exception continues to the server error handler. Request bodies are never
logged.
"""

import logging
import time
from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from movielib.middleware.request_id import request_id_var

logger = logging.getLogger("movielib.access")

# Polled by monitoring every few seconds; not worth an access line
QUIET_PATHS = frozenset({"/health-check"})


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes an access line for each request outside QUIET_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response: Optional[Response] = None
        try:
            response = await call_next(request)
        finally:
            # response stays None when the handler raised
            status = response.status_code if response is not None else 500
            self._log_access(request, status, time.perf_counter() - started)
        return response

    @staticmethod
    def _log_access(request: Request, status: int, elapsed: float) -> None:
        rid = request_id_var.get("")
        client_ip = request.client.host if request.client else "unknown"
        duration_ms = round(elapsed * 1000, 2)

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            request.url.path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": status,
                "duration_ms": duration_ms,
                "client_ip": client_ip,
            },
        )

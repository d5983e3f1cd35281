"""
Snippetbox: Request Logging Middleware
=======================================

What:  One access log line per request, on the "snippetbox.access" logger.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client address once the response is ready.

Level by status:
    5xx → ERROR
    4xx → WARNING (bad path, bad id, wrong method)
    else → INFO

Request bodies and headers are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snippetbox.middleware.request_id import request_id_var

logger = logging.getLogger("snippetbox.access")


def level_for_status(status: int) -> int:
    """Map an HTTP status code to the log level of its access line."""
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs each request after the response has been produced.

    Must sit inside RequestIDMiddleware so the request id is already set
    when the line is written.
    """

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start_time = time.perf_counter()

        # request.client is None under some test transports
        client_ip = request.client.host if request.client else "unknown"
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        rid = request_id_var.get("")

        logger.log(
            level_for_status(status),
            "%s %s %d %.1fms [%s] from %s",
            method,
            path,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": method,
                "path": path,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )

        return response

"""
Snippetbox: Unexpected Error Middleware
========================================

What:  Turns any exception that no exception handler claimed into a
       plain-text 500.
How:   Wraps call_next in try/except. It is the innermost middleware, so
       the 500 still passes back through RequestLoggingMiddleware and
       RequestIDMiddleware: it gets an access line and an X-Request-ID.

The traceback is logged here once. The exception does not propagate any
further, so Starlette's ServerErrorMiddleware never sees it.
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from snippetbox.middleware.request_id import request_id_var
from snippetbox.responses import plain_text_error

logger = logging.getLogger(__name__)


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    """Catch-all for errors the route and exception handlers did not handle."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as e:
            rid = request_id_var.get("")
            logger.error(
                "[%s] Unexpected error on %s %s: %s",
                rid,
                request.method,
                request.url.path,
                str(e),
                exc_info=True,
            )
            return plain_text_error(500, "Internal Server Error")

"""
Snippetbox: FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Served by snippetbox.server.main(), or directly by
       `uvicorn snippetbox.main:app`.
When:  Once at startup; the route table is fixed from then on.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌────────────┐ ┌─────────┐ ┌──────────────────┐    │
    │  │ Request ID │→│ Logging │→│ Unexpected→500   │    │
    │  └────────────┘ └─────────┘ └──────────────────┘    │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────────────┐  │
    │  │    /     │ │  /snippet   │ │ /snippet/create  │  │
    │  └──────────┘ └─────────────┘ └──────────────────┘  │
    │                                                     │
    │  Exception Handlers (plain text):                   │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFound→404 │ MethodNotAllowed→405 │ Router │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Routing is exact: no trailing-slash redirects and no /docs, /redoc or
/openapi.json, so every unclaimed path is a 404.
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

from snippetbox import __version__
from snippetbox.config import settings
from snippetbox.exceptions import MethodNotAllowedError, NotFoundError
from snippetbox.middleware.errors import UnexpectedErrorMiddleware
from snippetbox.middleware.logging import RequestLoggingMiddleware
from snippetbox.middleware.request_id import RequestIDMiddleware, request_id_var
from snippetbox.responses import plain_text_error
from snippetbox.routes import home, snippets

logger = logging.getLogger(__name__)

# Bodies for framework-raised errors, matching the ones our own handlers write
_STATUS_MESSAGES = {
    404: "404 page not found",
    405: "Method Not Allowed",
}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s, to stdout,
    at settings.log_level. Safe to call more than once (force=True).
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # snippetbox.access already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log startup and shutdown; the app holds no resources to release."""
    setup_logging()
    logger.info("Snippetbox %s ready, %d routes registered", __version__, len(app.routes))

    yield

    logger.info("Snippetbox shutting down")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exceptions to plain-text responses.

    Handler table:
        NotFoundError               → 404 "404 page not found"
        MethodNotAllowedError       → 405 "Method Not Allowed" + Allow
        StarletteHTTPException      → its status, same bodies as above

    Anything else is caught by UnexpectedErrorMiddleware (plain-text 500).

    Context attached to our exceptions is logged, never sent to the client.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.debug("[%s] Not found: %s | Context: %s", rid, request.url.path, exc.context)
        return plain_text_error(404, exc.message)

    @app.exception_handler(MethodNotAllowedError)
    async def handle_method_not_allowed(request: Request, exc: MethodNotAllowedError):
        rid = request_id_var.get("")
        logger.debug("[%s] %s not allowed on %s", rid, exc.method, request.url.path)
        return plain_text_error(405, exc.message, headers={"Allow": exc.allow_header})

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Unmatched routes and other errors raised by the router itself."""
        message = _STATUS_MESSAGES.get(exc.status_code, str(exc.detail))
        return plain_text_error(exc.status_code, message, headers=exc.headers)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Snippetbox",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
        lifespan=lifespan,
    )

    # Middleware executes in REVERSE order of addition:
    # RequestID runs first, then Logging, then the 500 catch-all
    app.add_middleware(UnexpectedErrorMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(home.router)
    app.include_router(snippets.router)

    return app


# uvicorn expects `snippetbox.main:app` to be importable
app = create_app()

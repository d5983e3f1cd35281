"""
Snippetbox: Snippet Route Handlers
===================================

What:  Handles /snippet (show) and /snippet/create (create).
How:   Extracts the id or the method, delegates to SnippetService, returns text.

Status selection:
    /snippet?id=N        200 when N parses and N >= 1, else 404
    /snippet/create      200 on POST, else 405 with "Allow: POST"

Both routes are registered without a method list. The router therefore
never answers 405 on its own; the method check belongs to the service.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from snippetbox.services.snippet_service import snippet_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Snippets"])


async def show_snippet(request: Request) -> PlainTextResponse:
    """
    Display a specific snippet.

    The query string may repeat ``id``; like most query readers we take the
    first occurrence. A missing ``id`` goes through the same parser and
    fails as not-found.
    """
    ids = request.query_params.getlist("id")
    raw_id = ids[0] if ids else None
    return PlainTextResponse(snippet_service.show_snippet(raw_id))


async def create_snippet(request: Request) -> PlainTextResponse:
    """
    Create a new snippet.

    Non-POST requests raise MethodNotAllowedError before anything else runs;
    the exception handler sets ``Allow: POST`` and writes the 405.
    """
    body = snippet_service.create_snippet(request.method)
    logger.info("Snippet creation requested")
    return PlainTextResponse(body)


router.add_route("/snippet", show_snippet, name="show_snippet")
router.add_route("/snippet/create", create_snippet, name="create_snippet")

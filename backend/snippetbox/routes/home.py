"""
Snippetbox: Home Route
=======================

What:  Serves the greeting at the root path.
How:   Registered for exactly "/" with no method list, so every method gets
       the greeting. The app is built with redirect_slashes=False and without
       documentation routes, so any path that no route claims falls through
       to the framework's 404, which the global handler renders as
       "404 page not found".
"""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from snippetbox.services.snippet_service import snippet_service

router = APIRouter(tags=["Home"])


async def home(request: Request) -> PlainTextResponse:
    """Return the fixed greeting with an implicit 200."""
    return PlainTextResponse(snippet_service.home())


router.add_route("/", home, name="home")

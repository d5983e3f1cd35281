"""
Snippetbox: Snippet Service (Handler Logic)
============================================

What:  The decisions behind the three routes, free of any HTTP framework:
       the greeting text, snippet id parsing, and the POST-only check.
How:   Plain methods on a stateless class; failures are raised as
       NotFoundError / MethodNotAllowedError and turned into responses by
       the global exception handlers.
Who:   Called by the route handlers in snippetbox.routes.

Id parsing rules:
    Accepted:  optional sign followed by ASCII digits ("5", "+5", "007")
    Rejected:  "", " 5", "5.0", "1_000", "٣" (non-ASCII digits), and anything
               that does not fit a signed 64-bit integer
    Then:      values < 1 are rejected as well

Python's int() is more lenient than this (it strips whitespace and accepts
underscores and Unicode digits), so the shape is checked with a regex first.
"""

import logging
import re
from typing import Optional

from snippetbox.exceptions import MethodNotAllowedError, NotFoundError

logger = logging.getLogger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Bounds of a signed 64-bit integer
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

HOME_BODY = "Hello from Snippetbox"
SHOW_TEMPLATE = "Display a specific snippet with ID {id}..."
CREATE_BODY = "Create a new snippet..."


def parse_int(raw: Optional[str]) -> Optional[int]:
    """
    Parse a base-10 integer strictly.

    Returns the integer, or None when ``raw`` is missing, malformed, or
    outside the signed 64-bit range.
    """
    if raw is None or not _INT_PATTERN.fullmatch(raw):
        return None
    value = int(raw)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value


class SnippetService:
    """
    Business logic for the snippet routes.

    Responsibilities:
        - home(): Greeting body for the root page
        - show_snippet(): Validate the id and build the display body
        - create_snippet(): Enforce POST and build the creation body

    Stateless: one shared instance serves every request.
    """

    allowed_create_methods = ("POST",)

    def home(self) -> str:
        """Body for ``GET /``."""
        return HOME_BODY

    def parse_snippet_id(self, raw: Optional[str]) -> int:
        """
        Turn the raw ``id`` query value into a snippet id.

        Raises:
            NotFoundError: ``raw`` is missing, not an integer, or < 1.
        """
        snippet_id = parse_int(raw)
        if snippet_id is None:
            raise NotFoundError(reason="invalid snippet id", context={"id": raw})
        if snippet_id < 1:
            raise NotFoundError(reason="snippet id out of range", context={"id": raw})
        return snippet_id

    def show_snippet(self, raw_id: Optional[str]) -> str:
        """Body for ``/snippet?id=N``; see parse_snippet_id for failures."""
        snippet_id = self.parse_snippet_id(raw_id)
        logger.debug("Showing snippet %d", snippet_id)
        return SHOW_TEMPLATE.format(id=snippet_id)

    def create_snippet(self, method: str) -> str:
        """
        Body for ``POST /snippet/create``.

        Raises:
            MethodNotAllowedError: ``method`` is anything but POST, compared
                case-sensitively (``post`` is rejected). The error carries
                the allowed methods for the Allow header.
        """
        if method not in self.allowed_create_methods:
            raise MethodNotAllowedError(method=method, allowed=self.allowed_create_methods)
        return CREATE_BODY


# Singleton instance, imported by route handlers
snippet_service = SnippetService()

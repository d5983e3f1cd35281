"""
Snippetbox: Plain-Text Error Responses
=======================================

What:  The single builder for every error body the service writes.
Who:   The exception handlers in main.py and UnexpectedErrorMiddleware.

Format: the message plus a newline, text/plain; charset=utf-8, and
X-Content-Type-Options: nosniff.
"""

from typing import Dict, Optional

from fastapi.responses import PlainTextResponse


def plain_text_error(
    status_code: int,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> PlainTextResponse:
    """Build a plain-text error response; ``headers`` are added after nosniff."""
    all_headers = {"X-Content-Type-Options": "nosniff"}
    if headers:
        all_headers.update(headers)
    return PlainTextResponse(f"{message}\n", status_code=status_code, headers=all_headers)

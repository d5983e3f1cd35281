"""
Snippetbox: Custom Exception Hierarchy
=======================================

What:  Application-specific exceptions for the few things that can go wrong.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch the HTTP ones
       and return plain-text error responses with the matching status code.
Who:   Raised by the snippet service and the server entry point.
When:  During request processing (client errors) or at startup (bind failure).

Exception Hierarchy:
    SnippetboxError (base)
    ├── NotFoundError            → 404 Not Found
    ├── MethodNotAllowedError    → 405 Method Not Allowed (+ Allow header)
    └── ListenerError            → fatal at startup, never rendered as HTTP

Every client-facing failure is terminal for that request only. Nothing is
retried and no partial state is left behind.
"""

from typing import Any, Dict, Iterable, Optional


class SnippetboxError(Exception):
    """
    Base exception for all Snippetbox application errors.

    Attributes:
        message:  User-facing error description (safe to return in a response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(SnippetboxError):
    """
    Raised when a request does not address anything we serve.

    When:    Unknown path, or a snippet id that is missing, malformed or < 1.
    HTTP:    404 Not Found, body "404 page not found".

    The message is fixed: a malformed id and an unknown path look the same
    to the client. The reason is kept in ``context`` for the logs.
    """

    def __init__(
        self,
        reason: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if reason:
            ctx["reason"] = reason
        super().__init__(message="404 page not found", context=ctx)


class MethodNotAllowedError(SnippetboxError):
    """
    Raised when a method-sensitive route receives the wrong verb.

    When:    Anything but POST on /snippet/create.
    HTTP:    405 Method Not Allowed, with an ``Allow`` header listing
             ``allowed``.
    """

    def __init__(
        self,
        method: str,
        allowed: Iterable[str] = ("POST",),
        context: Optional[Dict[str, Any]] = None,
    ):
        self.method = method
        self.allowed = tuple(allowed)
        ctx = context or {}
        ctx["method"] = method
        ctx["allowed"] = list(self.allowed)
        super().__init__(message="Method Not Allowed", context=ctx)

    @property
    def allow_header(self) -> str:
        """Value for the ``Allow`` response header, e.g. ``POST``."""
        return ", ".join(self.allowed)


class ListenerError(SnippetboxError):
    """
    Raised when the TCP listener cannot be opened.

    When:    Address already in use, permission denied on a low port,
             unknown host name.
    Effect:  The server entry point logs it at CRITICAL and exits with
             status 1. This is the only fatal error in the process.
    """

    def __init__(
        self,
        addr: str,
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"listen tcp {addr}"
        if cause is not None:
            message = f"{message}: {cause}"
        ctx = context or {}
        ctx["addr"] = addr
        super().__init__(message=message, context=ctx)
        self.addr = addr

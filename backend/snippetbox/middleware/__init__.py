# Middleware package init
"""
Snippetbox: Middleware Package
===============================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → [Unexpected Error] → Route Handler

    1. Request ID: assigns the correlation id
    2. Logging: writes the access line, tagged with that id
    3. Unexpected Error: turns an unhandled exception into a plain-text 500

Responses travel back through the chain in reverse, so the access line sees
the final status code and X-Request-ID is set on every response, errors
included.
"""

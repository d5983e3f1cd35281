"""
Snippetbox: Application Package Initializer
============================================

What: A three-route plain-text web service (home, show snippet, create snippet).

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (HTTP Layer)          │  ← pull values out of the request
    ├─────────────────────────────────────┤
    │       Services (Handler Logic)      │  ← id parsing, method check, bodies
    ├─────────────────────────────────────┤
    │   Exceptions → Exception Handlers   │  ← 404 / 405 as plain text
    └─────────────────────────────────────┘

    There is no persistence layer: every request is answered from its own
    path, method and query string.
"""

__version__ = "1.0.0"

# Services package init
"""
Snippetbox: Services Package
=============================

What:  Route logic that does not depend on the HTTP framework.

Services:
    - snippet_service.py: Greeting, snippet id validation, POST-only check

Routes call into services and never contain parsing or validation rules
themselves, so the rules are testable without an HTTP client.
"""

# Routes package init
"""
Snippetbox: Routes Package
===========================

What:  HTTP route handlers that accept requests and return plain-text responses.
How:   Each route module handles one resource.

Route Inventory:
    - home.py:      *    /                  (greeting, exact match only)
    - snippets.py:  *    /snippet?id=N      (show a snippet)
                    POST /snippet/create    (create a snippet; 405 otherwise)

Routes are THIN: they pull values out of the request, call the snippet
service, and wrap the returned text in a response. Errors raised by the
service are rendered by the global exception handlers in main.py.
"""

# Routes are added with add_route() and no method list, so the router matches
# them for every method (including nonstandard ones like PROPFIND) and the
# handler decides what the method means.

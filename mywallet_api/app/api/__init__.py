"""
API package containing the HTTP routes.

``router`` aggregates the resource routers defined in ``endpoints`` and
is included by the application factory in ``main``.
"""

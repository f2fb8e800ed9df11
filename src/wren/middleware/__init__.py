"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    CookieMiddleware -- Parse Cookie headers, write Set-Cookie headers
    PackageResources -- Serve resources packaged inside a Python package
    StaticFiles -- Serve static files from a directory
"""

from wren.middleware.cookies import CookieMiddleware, cookies_request, cookies_response
from wren.middleware.protocol import Middleware, Next
from wren.middleware.static import PackageResources, StaticFiles

__all__ = [
    "CookieMiddleware",
    "Middleware",
    "Next",
    "PackageResources",
    "StaticFiles",
    "cookies_request",
    "cookies_response",
]

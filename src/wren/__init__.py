"""Wren — response construction for Python HTTP servers.

Serves static files and packaged resources safely, and speaks the
cookie protocol in both directions.

Basic usage::

    from wren import ResourceOptions, file_response

    response = file_response("index.html", ResourceOptions(root="./public"))
    if response is None:
        ...  # fall back to a 404

Cookies::

    from wren import parse_cookies, write_cookies

    parse_cookies('session=abc; theme="dark"')
    # {'session': 'abc', 'theme': 'dark'}

    write_cookies({"session": {"value": "abc", "http_only": True}})
    # ['session=abc;HttpOnly']
"""

__version__ = "0.1.0"
__all__ = [
    "CookieMiddleware",
    "CookieOptions",
    "Headers",
    "InvalidCookieAttribute",
    "PackageResources",
    "Request",
    "ResourceOptions",
    "Response",
    "SetCookie",
    "StaticFiles",
    "UnsupportedOrigin",
    "WrenError",
    "file_response",
    "parse_cookies",
    "resource_response",
    "url_response",
    "write_cookies",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("CookieOptions", "ResourceOptions"):
        from wren import config as _config

        return getattr(_config, name)

    if name == "Headers":
        from wren.http.headers import Headers

        return Headers

    if name == "Request":
        from wren.http.request import Request

        return Request

    if name == "Response":
        from wren.http.response import Response

        return Response

    if name in ("SetCookie", "parse_cookies", "write_cookies"):
        from wren.http import cookies as _cookies

        return getattr(_cookies, name)

    if name in ("file_response", "resource_response", "url_response"):
        from wren.resources import responses as _responses

        return getattr(_responses, name)

    if name in ("CookieMiddleware", "PackageResources", "StaticFiles"):
        import wren.middleware as _mw

        return getattr(_mw, name)

    if name in ("InvalidCookieAttribute", "UnsupportedOrigin", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)

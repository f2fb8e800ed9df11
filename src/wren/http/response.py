"""HTTP response with chainable .with_*() transformation API.

Each transformation returns a new Response. Immutable by convention,
built incrementally by design.

The body is opaque: a string, bytes, or an open binary file handle from
the resource loader. Whoever sends the response owns that handle and
closes it once the body has been transmitted.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any

from wren.http.cookies import CookieValue
from wren.http.headers import Headers

_CHARSET_PARAM = re.compile(r";\s*charset=[^;]*")


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    Construct with a body, then chain ``.with_*()`` calls to set
    status, headers, and cookies. Each call returns a new ``Response``.

    ``cookies`` maps cookie names to bare string values or structured
    cookies; they become ``Set-Cookie`` headers when the response passes
    through :func:`wren.middleware.cookies.cookies_response`.
    """

    body: Any = ""
    status: int = 200
    headers: Headers = field(default_factory=Headers)
    cookies: Mapping[str, CookieValue] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.status, bool) or not isinstance(self.status, int) or self.status <= 0:
            msg = f"status must be a positive integer, got {self.status!r}"
            raise ValueError(msg)
        if not isinstance(self.headers, Headers):
            object.__setattr__(self, "headers", Headers(self.headers))

    # -- Chainable transformations --

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: object) -> Response:
        """Return a new Response with *name* set to ``str(value)``.

        Replaces any existing value, matching the name case-insensitively.
        """
        return replace(self, headers=self.headers.set(name, value))

    def add_header(self, name: str, value: object) -> Response:
        """Return a new Response with one more occurrence of *name*."""
        return replace(self, headers=self.headers.add(name, value))

    def with_headers(self, headers: Mapping[str, object]) -> Response:
        """Return a new Response with each of *headers* set."""
        new = self.headers
        for name, value in headers.items():
            new = new.set(name, value)
        return replace(self, headers=new)

    def with_content_type(self, content_type: str) -> Response:
        """Return a new Response with a different ``Content-Type``."""
        return self.with_header("Content-Type", content_type)

    def with_charset(self, charset: str) -> Response:
        """Return a new Response with *charset* on its ``Content-Type``.

        Any existing ``charset`` parameter is replaced; a missing
        ``Content-Type`` starts out as ``text/plain``.
        """
        content_type = self.headers.get("content-type") or "text/plain"
        content_type = _CHARSET_PARAM.sub("", content_type)
        return self.with_content_type(f"{content_type}; charset={charset}")

    def with_cookie(self, name: str, value: str, **attrs: Any) -> Response:
        """Return a new Response that sets cookie *name*.

        Keyword arguments are cookie attributes (``path``, ``domain``,
        ``max_age``, ``expires``, ``secure``, ``http_only``). They are
        validated when the cookie is written.
        """
        cookie: CookieValue = {"value": value, **attrs} if attrs else value
        return replace(self, cookies={**(self.cookies or {}), name: cookie})

    def without_cookie(self, name: str, path: str = "/") -> Response:
        """Return a new Response that deletes a cookie (Max-Age=0)."""
        return self.with_cookie(name, "", path=path, max_age=0)

    def header(self, name: str) -> str | None:
        """Look up a header value case-insensitively."""
        return self.headers.get(name)


# -- Builders --


def response(body: Any) -> Response:
    """A 200 response with *body* and no headers."""
    return Response(body=body)


def redirect(url: str, status: int = 302) -> Response:
    """A redirect to *url* (302 by default)."""
    return Response(body="", status=status, headers=Headers({"Location": url}))


def redirect_after_post(url: str) -> Response:
    """A 303 See Other redirect to *url*."""
    return redirect(url, status=303)


def created(url: str, body: Any = None) -> Response:
    """A 201 Created response pointing at *url*."""
    return Response(body=body, status=201, headers=Headers({"Location": url}))


def not_found(body: Any) -> Response:
    """A 404 response with *body*."""
    return Response(body=body, status=404)


def is_response(value: object) -> bool:
    """True if *value* is a well-formed :class:`Response`."""
    return (
        isinstance(value, Response)
        and isinstance(value.status, int)
        and isinstance(value.headers, Headers)
    )

"""Cookie middleware — parse request cookies, emit response cookies.

Request side: the ``Cookie`` header is parsed into ``request.cookies``
(left alone if something upstream already did it).

Response side: ``response.cookies`` is written out as one ``Set-Cookie``
header per cookie, appended after any ``Set-Cookie`` headers the response
already has, and the ``cookies`` field is cleared.
"""

from dataclasses import replace

from wren.config import CookieOptions
from wren.errors import InvalidCookieAttribute
from wren.http.cookies import (
    Decoder,
    Encoder,
    form_decode,
    form_encode,
    parse_cookies,
    write_cookies,
)
from wren.http.request import Request
from wren.http.response import Response
from wren.middleware.protocol import Next


def cookies_request(request: Request, decoder: Decoder = form_decode) -> Request:
    """Return *request* with its ``Cookie`` header parsed into ``cookies``."""
    if request.cookies is not None:
        return request
    return request.with_cookies(parse_cookies(request.cookie_header, decoder))


def cookies_response(response: Response, encoder: Encoder = form_encode) -> Response:
    """Return *response* with its ``cookies`` moved into ``Set-Cookie`` headers.

    Raises:
        InvalidCookieAttribute: a structured cookie has a bad attribute.
            A streamed body is closed before the error propagates.
    """
    if response.cookies is None:
        return response
    try:
        values = write_cookies(response.cookies, encoder)
    except InvalidCookieAttribute:
        close = getattr(response.body, "close", None)
        if close is not None:
            close()
        raise
    headers = response.headers
    for value in values:
        headers = headers.add("Set-Cookie", value)
    return replace(response, headers=headers, cookies=None)


class CookieMiddleware:
    """Parses request cookies and serializes response cookies.

    Usage::

        app.add_middleware(CookieMiddleware())

        # Custom codecs
        app.add_middleware(CookieMiddleware(CookieOptions(decoder=lambda value: value)))
    """

    __slots__ = ("_options",)

    def __init__(self, options: CookieOptions | None = None) -> None:
        self._options = options or CookieOptions()

    async def __call__(self, request: Request, next: Next) -> Response:
        response = await next(cookies_request(request, self._options.decoder))
        return cookies_response(response, self._options.encoder)

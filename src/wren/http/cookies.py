"""Cookie parsing and Set-Cookie serialization.

Consolidates the read side (``parse_cookies``, used for the request
``Cookie`` header) and the write side (``write_cookies``, used for
response ``Set-Cookie`` headers) in one module.

Parsing follows the RFC 6265 grammar but is permissive: segments that do
not look like ``token=cookie-value`` are skipped, so one malformed
third-party cookie never hides the rest of the header.

A response cookie is either a bare string value or a structured cookie,
given as a mapping (or a :class:`SetCookie`) holding ``value`` plus any
of the attributes in :data:`SET_COOKIE_ATTRS`::

    write_cookies({
        "theme": "dark",
        "session": {"value": "abc", "path": "/", "max_age": 3600, "http_only": True},
    })
    # ['theme=dark', 'session=abc;Path=/;Max-Age=3600;HttpOnly']
"""

import logging
import re
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, TypeAlias
from urllib.parse import unquote_plus, urlencode

from wren.errors import InvalidCookieAttribute
from wren.http.dates import format_http_date

logger = logging.getLogger("wren.cookies")

Decoder: TypeAlias = Callable[[str], str | None]
Encoder: TypeAlias = Callable[[Mapping[str, Any]], str]
CookieValue: TypeAlias = "str | Mapping[str, Any] | SetCookie"

# RFC 2616 token
_TOKEN = r"[!#$%&'*\-+.0-9A-Z\^_`a-z|~]+"

# RFC 6265 cookie-octet: no CTLs, whitespace, DQUOTE, comma, semicolon, backslash
_COOKIE_OCTET = r"[!#$%&'()*+\-./0-9:<=>?@A-Z\[\]\^_`a-z{|}~]"

_COOKIE_VALUE = rf'"{_COOKIE_OCTET}*"|{_COOKIE_OCTET}*'

_COOKIE_PAIR = re.compile(rf"\s*({_TOKEN})=({_COOKIE_VALUE})\s*[;,]?")

#: Attribute keys accepted on a structured cookie, mapped to their header names.
SET_COOKIE_ATTRS: Mapping[str, str] = {
    "domain": "Domain",
    "max_age": "Max-Age",
    "path": "Path",
    "secure": "Secure",
    "expires": "Expires",
    "http_only": "HttpOnly",
}


def form_decode(value: str) -> str | None:
    """Default cookie decoder: URL form decoding.

    Returns ``None`` when the percent-escapes are not valid UTF-8.
    """
    try:
        return unquote_plus(value, errors="strict")
    except UnicodeDecodeError:
        return None


def form_encode(pair: Mapping[str, Any]) -> str:
    """Default cookie encoder: URL form encoding of one ``name=value`` pair."""
    return urlencode(pair)


# ------------------------------------------------------------------
# Read side
# ------------------------------------------------------------------


def parse_cookie_header(header: str) -> Iterator[tuple[str, str]]:
    """Yield raw ``(name, value)`` pairs from a ``Cookie`` header, in order."""
    for match in _COOKIE_PAIR.finditer(header):
        yield match.group(1), match.group(2)


def strip_quotes(value: str) -> str:
    """Drop one pair of surrounding double quotes, if present."""
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        return value[1:-1]
    return value


def parse_cookies(header: str | None, decoder: Decoder = form_decode) -> dict[str, str]:
    """Parse a ``Cookie`` header value into a name-value dict.

    Returns an empty dict for empty or missing headers. Pairs whose value
    the *decoder* rejects (returns ``None``) are dropped. On duplicate
    names the last occurrence wins.
    """
    if not header:
        return {}
    cookies: dict[str, str] = {}
    for name, raw in parse_cookie_header(header):
        value = decoder(strip_quotes(raw))
        if value is None:
            logger.debug("Dropping cookie %r: value could not be decoded", name)
            continue
        cookies[name] = value
    return cookies


# ------------------------------------------------------------------
# Write side
# ------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class SetCookie:
    """A typed structured cookie for the response ``cookies`` mapping.

    Unset attributes (``None``) are not rendered.
    """

    value: str
    domain: str | None = None
    path: str | None = None
    max_age: int | timedelta | None = None
    expires: datetime | str | None = None
    secure: bool | None = None
    http_only: bool | None = None

    def attributes(self) -> dict[str, Any]:
        """Set attributes in header order."""
        return {
            key: getattr(self, key)
            for key in SET_COOKIE_ATTRS
            if getattr(self, key) is not None
        }


def valid_attribute(key: str, value: object) -> bool:
    """Whether *key*/*value* is an acceptable Set-Cookie attribute.

    ``max_age`` takes an int or ``timedelta``; ``expires`` takes a
    ``datetime`` or a preformatted date string. Other attributes accept
    any value whose string form has no ``;``.
    """
    if key not in SET_COOKIE_ATTRS or ";" in str(value):
        return False
    if key == "max_age":
        if isinstance(value, bool):
            return False
        return isinstance(value, (int, timedelta))
    if key == "expires":
        return isinstance(value, (datetime, str))
    return True


def render_attribute(key: str, value: object) -> str:
    """Render one attribute as a ``;Name=value`` segment.

    ``True`` renders as a bare ``;Name``; ``False`` renders nothing at all.
    """
    attr_name = SET_COOKIE_ATTRS[key]
    if isinstance(value, bool):
        return f";{attr_name}" if value else ""
    if isinstance(value, timedelta):
        return f";{attr_name}={int(value.total_seconds())}"
    if isinstance(value, datetime):
        return f";{attr_name}={format_http_date(value)}"
    return f";{attr_name}={value}"


def _split_cookie(value: Mapping[str, Any] | SetCookie) -> tuple[Any, dict[str, Any]]:
    if isinstance(value, SetCookie):
        return value.value, value.attributes()
    attrs = {key: attr for key, attr in value.items() if key != "value" and attr is not None}
    return value.get("value", ""), attrs


def write_cookie(name: str, value: CookieValue, encoder: Encoder = form_encode) -> str:
    """Serialize a single cookie to a ``Set-Cookie`` header value.

    Raises:
        InvalidCookieAttribute: an attribute failed :func:`valid_attribute`.
    """
    if isinstance(value, str):
        return encoder({name: value})

    cookie_value, attrs = _split_cookie(value)
    for key, attr in attrs.items():
        if not valid_attribute(key, attr):
            raise InvalidCookieAttribute(name, key, attr)

    return encoder({name: cookie_value}) + "".join(
        render_attribute(key, attr) for key, attr in attrs.items()
    )


def write_cookies(cookies: Mapping[str, CookieValue], encoder: Encoder = form_encode) -> list[str]:
    """Serialize a cookie mapping to ``Set-Cookie`` header values, one per cookie.

    Each value must be sent as its own ``Set-Cookie`` header; they are
    never comma-joined.
    """
    return [write_cookie(name, value, encoder) for name, value in cookies.items()]

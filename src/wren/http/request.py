"""Immutable HTTP request.

Only the parts response construction reads: method, path, headers and
the parsed cookie mapping. Transport adapters build one per request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from wren._internal.multimap import MultiValueMapping
from wren.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request.

    ``cookies`` stays ``None`` until cookie parsing has run, so a request
    that already carries parsed cookies is never parsed twice.
    """

    method: str = "GET"
    path: str = "/"
    headers: MultiValueMapping = field(default_factory=Headers)
    cookies: Mapping[str, str] | None = None

    @property
    def cookie_header(self) -> str | None:
        """The raw ``Cookie`` header value."""
        return self.headers.get("cookie")

    def with_cookies(self, cookies: Mapping[str, str]) -> Request:
        """Return a new Request carrying parsed *cookies*."""
        return replace(self, cookies=cookies)

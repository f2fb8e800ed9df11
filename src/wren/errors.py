"""Wren exception hierarchy.

Shared across cookie handling, resource loading, and middleware so every
module raises and catches the same types.

Not-found outcomes are never exceptions here: resolvers and loaders
return ``None`` and callers branch on it.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when an options object is invalid."""


class InvalidCookieAttribute(WrenError, ValueError):  # noqa: N818
    """A Set-Cookie attribute failed validation.

    Raised while encoding; the caller built malformed cookie data.
    """

    def __init__(self, name: str, key: str, value: object) -> None:
        self.name = name
        self.key = key
        self.value = value
        super().__init__(f"invalid attribute {key!r}={value!r} for cookie {name!r}")


class UnsupportedOrigin(WrenError, LookupError):  # noqa: N818
    """No resource loader is registered for a locator's origin."""

    def __init__(self, origin: str) -> None:
        self.origin = origin
        super().__init__(f"no resource loader registered for origin {origin!r}")

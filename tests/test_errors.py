"""Tests for wren.errors — exception hierarchy and error messages."""

from wren.errors import (
    ConfigurationError,
    InvalidCookieAttribute,
    UnsupportedOrigin,
    WrenError,
)


class TestHierarchy:
    def test_configuration_error_is_wren_error(self) -> None:
        assert issubclass(ConfigurationError, WrenError)

    def test_invalid_cookie_attribute_is_value_error(self) -> None:
        assert issubclass(InvalidCookieAttribute, WrenError)
        assert issubclass(InvalidCookieAttribute, ValueError)

    def test_unsupported_origin_is_lookup_error(self) -> None:
        assert issubclass(UnsupportedOrigin, WrenError)
        assert issubclass(UnsupportedOrigin, LookupError)


class TestMessages:
    def test_invalid_cookie_attribute(self) -> None:
        err = InvalidCookieAttribute("session", "max_age", "soon")
        assert (err.name, err.key, err.value) == ("session", "max_age", "soon")
        assert str(err) == "invalid attribute 'max_age'='soon' for cookie 'session'"

    def test_unsupported_origin(self) -> None:
        err = UnsupportedOrigin("jar")
        assert err.origin == "jar"
        assert "'jar'" in str(err)

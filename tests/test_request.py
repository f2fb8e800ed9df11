"""Tests for wren.http.request — the immutable Request value."""

import pytest

from wren.http.headers import Headers
from wren.http.request import Request


class TestRequest:
    def test_defaults(self) -> None:
        request = Request()
        assert (request.method, request.path, request.cookies) == ("GET", "/", None)
        assert len(request.headers) == 0

    def test_cookie_header(self) -> None:
        request = Request(headers=Headers({"Cookie": "a=1"}))
        assert request.cookie_header == "a=1"

    def test_with_cookies_returns_new_request(self) -> None:
        request = Request()
        parsed = request.with_cookies({"a": "1"})
        assert parsed.cookies == {"a": "1"}
        assert request.cookies is None

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            Request().path = "/other"  # type: ignore[misc]

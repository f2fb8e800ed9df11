"""Tests for wren.http.dates — HTTP-date formatting and parsing."""

from datetime import UTC, datetime, timedelta, timezone

from wren.http.dates import format_http_date, parse_http_date


class TestFormatHttpDate:
    def test_utc(self) -> None:
        value = datetime(1994, 11, 6, 8, 49, 37, tzinfo=UTC)
        assert format_http_date(value) == "Sun, 06 Nov 1994 08:49:37 GMT"

    def test_naive_is_utc(self) -> None:
        assert format_http_date(datetime(1994, 11, 6, 8, 49, 37)) == "Sun, 06 Nov 1994 08:49:37 GMT"

    def test_converts_other_zones(self) -> None:
        value = datetime(1994, 11, 6, 10, 49, 37, tzinfo=timezone(timedelta(hours=2)))
        assert format_http_date(value) == "Sun, 06 Nov 1994 08:49:37 GMT"


class TestParseHttpDate:
    def test_round_trip(self) -> None:
        value = datetime(2024, 2, 29, 10, 0, 0, tzinfo=UTC)
        assert parse_http_date(format_http_date(value)) == value

    def test_malformed(self) -> None:
        assert parse_http_date("yesterday-ish") is None

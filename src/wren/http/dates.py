"""HTTP-date formatting (RFC 7231 IMF-fixdate, the RFC 1123 profile).

Used for ``Last-Modified`` and the cookie ``Expires`` attribute.
"""

from datetime import UTC, datetime
from email.utils import format_datetime, parsedate_to_datetime


def format_http_date(value: datetime) -> str:
    """Format *value* as ``Sun, 06 Nov 1994 08:49:37 GMT``.

    Naive datetimes are taken to be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return format_datetime(value.astimezone(UTC), usegmt=True)


def parse_http_date(value: str) -> datetime | None:
    """Parse an HTTP-date into an aware UTC datetime, or ``None`` if malformed."""
    try:
        parsed = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)

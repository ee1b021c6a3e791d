"""Instant normalization helpers.

All policy arithmetic runs on absolute UTC instants so that adding a
fixed number of seconds never depends on a local zone's DST rules.
"""

from __future__ import annotations

from datetime import UTC, datetime


def as_utc(instant: datetime) -> datetime:
    """Return *instant* as an aware UTC datetime.

    Naive datetimes are taken to already be UTC.
    """
    if instant.tzinfo is None:
        return instant.replace(tzinfo=UTC)
    return instant.astimezone(UTC)


def utc_now() -> datetime:
    """Current wall-clock instant in UTC."""
    return datetime.now(UTC)


def parse_instant(raw: str) -> datetime:
    """Parse an ISO-8601 timestamp into a UTC instant.

    Raises:
        ValueError: If *raw* is not ISO-8601.
    """
    return as_utc(datetime.fromisoformat(raw))

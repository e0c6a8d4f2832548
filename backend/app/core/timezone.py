"""
Timestamp rendering for API responses.

Records store ``created_at`` as integer nanoseconds since the Unix epoch.
API responses also carry an ISO string with a 'Z' suffix so that frontend
JavaScript parses it as UTC.
"""

from datetime import datetime

import pytz

UTC = pytz.UTC

NANOS_PER_SECOND = 1_000_000_000


def ns_to_datetime(ns: int) -> datetime:
    """Convert epoch nanoseconds to a timezone-aware UTC datetime (microsecond precision)."""
    seconds, remainder = divmod(ns, NANOS_PER_SECOND)
    return datetime.fromtimestamp(seconds, UTC).replace(microsecond=remainder // 1000)


def format_ns_for_api(ns: int | None) -> str | None:
    """
    Convert epoch nanoseconds to a UTC ISO string for API responses.

    Returns format: "2026-01-06T20:43:50.245704Z", or None if ns is None.
    """
    if ns is None:
        return None
    return ns_to_datetime(ns).isoformat().replace('+00:00', 'Z')
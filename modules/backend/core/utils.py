"""
Core Utilities.

Shared utility functions used across the backend.
"""

from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values in the application are timezone-naive and
    assumed to be UTC, matching what the database stores.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_now_after(previous: datetime) -> datetime:
    """
    Return current UTC time, bumped past ``previous`` if the clock has not advanced.

    Used for updated_at so consecutive writes always move the timestamp forward.
    """
    now = utc_now()
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now

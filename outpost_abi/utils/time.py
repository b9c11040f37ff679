"""
Timestamp helpers for candle data.

Candle timestamps travel as integer milliseconds since the Unix epoch and
are only turned into datetimes on request.
"""

from datetime import UTC, datetime


def ms_to_utc(timestamp_ms: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Args:
        timestamp_ms: Milliseconds since the Unix epoch

    Returns:
        UTC datetime
    """
    return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=UTC)


"""
Utility functions module.

Candle timestamps are epoch milliseconds; helpers here convert them to UTC
datetimes.
"""

from .time import ms_to_utc

__all__ = ["ms_to_utc"]

"""
Immutable market data records handed to plugin functions.

A ``Candle`` is generic over its price type: the payload supplies
``Candle[float]`` and the fixed-point view produces ``Candle[Decimal]``.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Generic, Iterator, TypeVar

from outpost_abi.utils.time import ms_to_utc

from .precision import to_decimal

P = TypeVar("P", float, Decimal)


@dataclass(frozen=True)
class Candle(Generic[P]):
    """One OHLCV observation."""
    timestamp: int      # Epoch milliseconds
    open: P
    high: P
    low: P
    close: P
    volume: P

    @property
    def ts(self) -> datetime:
        """Timestamp as a UTC datetime."""
        return ms_to_utc(self.timestamp)

    def to_decimal(self, precision: int, rounding: str = ROUND_HALF_UP) -> "Candle[Decimal]":
        """Rescale every price and volume field to ``precision`` fractional digits."""
        return Candle(
            timestamp=self.timestamp,
            open=to_decimal(self.open, precision, rounding),
            high=to_decimal(self.high, precision, rounding),
            low=to_decimal(self.low, precision, rounding),
            close=to_decimal(self.close, precision, rounding),
            volume=to_decimal(self.volume, precision, rounding),
        )


@dataclass(frozen=True)
class TickersData:
    """Candle series for one ticker label together with its declared precision."""
    symbol: str
    exchange: str
    candles: tuple[Candle[float], ...]   # Chronological, as supplied
    precision: int                        # Fractional digits for this series only

    def iter_candles(self) -> Iterator[Candle[float]]:
        return iter(self.candles)

    def iter_decimal_candles(self, rounding: str = ROUND_HALF_UP) -> Iterator[Candle[Decimal]]:
        """Lazily rescale each candle with this series' precision."""
        precision = self.precision
        for candle in self.candles:
            yield candle.to_decimal(precision, rounding)

    def decimal_candles(self, rounding: str = ROUND_HALF_UP) -> list[Candle[Decimal]]:
        return list(self.iter_decimal_candles(rounding))

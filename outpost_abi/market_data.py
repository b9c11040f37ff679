"""
Read-only access to ticker candle series and piped upstream payloads.

Two query paths exist for candles: ``get_series`` returns the float candles
exactly as supplied, ``get_decimal_series`` rescales them to the series'
own precision. The fixed-point view is recomputed on every call.
"""

from decimal import ROUND_HALF_UP, Decimal
from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from outpost_abi.data.models import Candle, TickersData
from outpost_abi.errors import PipeSourceNotFound, TickerNotFound
from outpost_abi.logging import get_logger

logger = get_logger(__name__)


class MarketDataRepository:
    """Ticker series keyed by label, plus raw text keyed by pipe source."""

    def __init__(
        self,
        tickers_data: Optional[Mapping[str, TickersData]] = None,
        piped_data: Optional[Mapping[str, str]] = None,
        rounding: str = ROUND_HALF_UP,
    ):
        self._tickers = MappingProxyType(dict(tickers_data or {}))
        self._piped = MappingProxyType(dict(piped_data or {}))
        self.rounding = rounding

    def __repr__(self) -> str:
        return (f"MarketDataRepository(labels={sorted(self._tickers)!r}, "
                f"pipe_sources={sorted(self._piped)!r})")

    def list_labels(self) -> frozenset[str]:
        return frozenset(self._tickers)

    def get_ticker(self, label: str) -> TickersData:
        """
        Full record for ``label``.

        Raises:
            TickerNotFound: If the label is absent
        """
        try:
            return self._tickers[label]
        except KeyError:
            logger.debug("Ticker lookup failed", label=label)
            raise TickerNotFound(label) from None

    def get_series(self, label: str) -> tuple[Candle[float], ...]:
        """Float candles for ``label`` in supplied order."""
        return self.get_ticker(label).candles

    def iter_series(self, label: str) -> Iterator[Candle[float]]:
        # Lookup happens here, not on first next()
        return self.get_ticker(label).iter_candles()

    def iter_decimal_series(self, label: str) -> Iterator[Candle[Decimal]]:
        """
        Lazily rescale the candles for ``label`` to the ticker's precision.

        Raises:
            TickerNotFound: If the label is absent (raised immediately)
        """
        return self.get_ticker(label).iter_decimal_candles(self.rounding)

    def get_decimal_series(self, label: str) -> list[Candle[Decimal]]:
        """
        Fixed-point candles for ``label``.

        Every price and volume is rounded to the ticker's own precision.
        Conversion never fails; see ``outpost_abi.data.precision`` for the
        float precision boundary.

        Raises:
            TickerNotFound: If the label is absent
        """
        ticker = self.get_ticker(label)
        candles = ticker.decimal_candles(self.rounding)
        logger.debug(
            "Decimal series computed",
            label=label,
            precision=ticker.precision,
            candles=len(candles),
        )
        return candles

    def list_pipe_sources(self) -> frozenset[str]:
        return frozenset(self._piped)

    def get_pipe_payload(self, source: str) -> str:
        """
        Raw text piped from ``source``.

        Raises:
            PipeSourceNotFound: If the source is absent
        """
        try:
            return self._piped[source]
        except KeyError:
            logger.debug("Pipe source lookup failed", source=source)
            raise PipeSourceNotFound(source) from None

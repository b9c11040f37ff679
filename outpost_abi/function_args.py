"""
Per-invocation snapshot of everything a plugin function receives.

``FunctionArgs`` is built once from the host payload and owns one
``ArgumentStore`` and one ``MarketDataRepository``. It exposes the
familiar accessor names used by plugin code and delegates to those two
components.
"""

from decimal import Decimal
from typing import Any, Iterator, Mapping, Optional, Union

from outpost_abi.arguments import ArgumentStore
from outpost_abi.config.defaults import AbiConfig, get_default_config
from outpost_abi.data.models import Candle, TickersData
from outpost_abi.data.parsers import parse_json_payload, split_payload
from outpost_abi.market_data import MarketDataRepository


class FunctionArgs:
    """Immutable view over one plugin invocation's input."""

    def __init__(self, arguments: ArgumentStore, market_data: MarketDataRepository):
        self.arguments = arguments
        self.market_data = market_data

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any],
                     config: Optional[AbiConfig] = None) -> "FunctionArgs":
        """
        Build from an already decoded payload mapping.

        Raises:
            MalformedPayloadError: If a section is structurally invalid
        """
        config = config or get_default_config()
        tickers, piped, call_arguments = split_payload(payload, config.payload)
        return cls(
            arguments=ArgumentStore(call_arguments),
            market_data=MarketDataRepository(tickers, piped, rounding=config.decimal.rounding),
        )

    @classmethod
    def from_json(cls, raw_data: Union[bytes, str],
                  config: Optional[AbiConfig] = None) -> "FunctionArgs":
        """
        Build from the raw JSON payload handed over by the host.

        Raises:
            MalformedPayloadError: If the payload is not valid JSON or is malformed
        """
        return cls.from_payload(parse_json_payload(raw_data), config)

    # Market data

    def get_labels(self) -> frozenset[str]:
        return self.market_data.list_labels()

    def get_candles(self, label: str) -> tuple[Candle[float], ...]:
        return self.market_data.get_series(label)

    def get_candles_iter(self, label: str) -> Iterator[Candle[float]]:
        return self.market_data.iter_series(label)

    def get_ticker(self, label: str) -> TickersData:
        return self.market_data.get_ticker(label)

    def get_candles_decimal(self, label: str) -> list[Candle[Decimal]]:
        """Candles as Decimal; precision is taken from the ticker."""
        return self.market_data.get_decimal_series(label)

    def get_candles_decimal_iter(self, label: str) -> Iterator[Candle[Decimal]]:
        """Lazy form of ``get_candles_decimal``."""
        return self.market_data.iter_decimal_series(label)

    def get_pipe_sources(self) -> frozenset[str]:
        return self.market_data.list_pipe_sources()

    def get_data_from_pipe(self, source: str) -> str:
        return self.market_data.get_pipe_payload(source)

    # Call arguments

    def get_call_arguments(self) -> Mapping[str, Any]:
        """All call arguments, untyped, as a read-only mapping."""
        return self.arguments.as_mapping()

    def get_call_argument_names(self) -> frozenset[str]:
        return self.arguments.list_argument_names()

    def get_call_argument(self, name: str, target: Any = str) -> Any:
        """Argument ``name`` decoded as ``target`` (``str`` unless given)."""
        return self.arguments.get(name, target)

    def get_raw_call_argument(self, name: str) -> Any:
        return self.arguments.get_raw(name)

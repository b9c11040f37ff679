"""
Payload parsers for the plugin host input.

The host hands over one JSON document per invocation:

{
    "tickers_data": {
        "<label>": {
            "symbol": "BTCUSDT",
            "exchange": "binance",
            "candles": [[1597026383085, 3.721, 3.743, 3.677, 3.708, 8422410.0], ...],
            "precision": 2
        }
    },
    "piped_data": {"<source>": "<raw text>"},
    "call_arguments": {"<name>": <any JSON value>}
}

Missing or null top-level sections decode as empty mappings. Unknown
top-level keys are ignored unless the payload config says otherwise.
"""

from typing import Any, Mapping, Optional, Union

import orjson

from outpost_abi.config.defaults import PayloadParams
from outpost_abi.errors import MalformedPayloadError
from outpost_abi.logging import get_logger

from .models import Candle, TickersData
from .precision import MAX_PRECISION

logger = get_logger(__name__)

TOP_LEVEL_KEYS = ("tickers_data", "piped_data", "call_arguments")
CANDLE_FIELDS = ("timestamp", "open", "high", "low", "close", "volume")


def parse_json_payload(raw_data: Union[bytes, bytearray, memoryview, str]) -> dict[str, Any]:
    """
    Parse raw JSON bytes or text into a dictionary.

    Args:
        raw_data: Raw payload as received from the host

    Returns:
        Parsed dictionary

    Raises:
        MalformedPayloadError: If the JSON is invalid or not an object
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise MalformedPayloadError(f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedPayloadError(
            f"Payload must be a JSON object, got {type(payload).__name__}"
        )
    return payload


def split_payload(payload: Mapping[str, Any],
                  params: Optional[PayloadParams] = None) -> tuple[dict, dict, dict]:
    """
    Split a decoded payload into its three top-level sections.

    Returns:
        (tickers_data, piped_data, call_arguments) with tickers parsed into
        ``TickersData`` records

    Raises:
        MalformedPayloadError: On structural problems in any section
    """
    params = params or PayloadParams()

    unknown = sorted(set(payload) - set(TOP_LEVEL_KEYS))
    if unknown:
        if not params.ignore_unknown_keys:
            raise MalformedPayloadError(f"Unknown top-level keys: {unknown}", path="$")
        logger.debug("Ignoring unknown payload keys", keys=unknown)

    tickers_raw = _section(payload, "tickers_data")
    piped_raw = _section(payload, "piped_data")
    arguments = dict(_section(payload, "call_arguments"))

    tickers = {label: parse_ticker(label, record) for label, record in tickers_raw.items()}
    piped = parse_piped_data(piped_raw)

    logger.debug(
        "Payload decoded",
        tickers=len(tickers),
        pipe_sources=len(piped),
        call_arguments=len(arguments),
    )
    return tickers, piped, arguments


def _section(payload: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    section = payload.get(key)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise MalformedPayloadError(
            f"'{key}' must be an object, got {type(section).__name__}", path=key
        )
    return section


def parse_piped_data(piped_raw: Mapping[str, Any]) -> dict[str, str]:
    """Validate pipe payloads; the text itself is never parsed."""
    piped = {}
    for source, text in piped_raw.items():
        if not isinstance(text, str):
            raise MalformedPayloadError(
                f"Pipe source {source} must be a string, got {type(text).__name__}",
                path=f"piped_data.{source}",
            )
        piped[source] = text
    return piped


def parse_ticker(label: str, record: Any) -> TickersData:
    """
    Parse one ticker record.

    Args:
        label: Caller-chosen lookup key for the record
        record: Raw record mapping

    Returns:
        TickersData with candles in supplied order

    Raises:
        MalformedPayloadError: If a field is missing or mistyped
    """
    path = f"tickers_data.{label}"
    if not isinstance(record, Mapping):
        raise MalformedPayloadError(f"Ticker {label} must be an object", path=path)

    missing = [f for f in ("symbol", "exchange", "candles", "precision") if f not in record]
    if missing:
        raise MalformedPayloadError(f"Ticker {label} missing fields: {missing}", path=path)

    symbol = record["symbol"]
    exchange = record["exchange"]
    precision = record["precision"]
    candles_raw = record["candles"]

    if not isinstance(symbol, str) or not isinstance(exchange, str):
        raise MalformedPayloadError(
            f"Ticker {label} symbol and exchange must be strings", path=path
        )
    # bool is an int subclass
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise MalformedPayloadError(
            f"Ticker {label} precision must be an integer, got {precision!r}",
            path=f"{path}.precision",
            raw_data=precision,
        )
    if not 0 <= precision <= MAX_PRECISION:
        raise MalformedPayloadError(
            f"Ticker {label} precision must be between 0 and {MAX_PRECISION}, got {precision}",
            path=f"{path}.precision",
            raw_data=precision,
        )
    if not isinstance(candles_raw, list):
        raise MalformedPayloadError(
            f"Ticker {label} candles must be a list", path=f"{path}.candles"
        )

    candles = tuple(
        parse_candle(candle_data, f"{path}.candles[{i}]")
        for i, candle_data in enumerate(candles_raw)
    )
    return TickersData(symbol=symbol, exchange=exchange, candles=candles, precision=precision)


def parse_candle(candle_data: Any, path: str = "candle") -> Candle[float]:
    """
    Parse a single candle.

    Accepts either ``[timestamp, open, high, low, close, volume]`` or an
    object with those keys. Numbers may be JSON numbers or numeric strings.
    """
    if isinstance(candle_data, (list, tuple)):
        if len(candle_data) != len(CANDLE_FIELDS):
            raise MalformedPayloadError(
                f"Invalid candle at {path}: expected {len(CANDLE_FIELDS)} elements, "
                f"got {len(candle_data)}",
                path=path,
                raw_data=candle_data,
            )
        values = dict(zip(CANDLE_FIELDS, candle_data))
    elif isinstance(candle_data, Mapping):
        missing = [f for f in CANDLE_FIELDS if f not in candle_data]
        if missing:
            raise MalformedPayloadError(
                f"Invalid candle at {path}: missing fields {missing}",
                path=path,
                raw_data=candle_data,
            )
        values = {f: candle_data[f] for f in CANDLE_FIELDS}
    else:
        raise MalformedPayloadError(
            f"Invalid candle at {path}: expected array or object",
            path=path,
            raw_data=candle_data,
        )

    try:
        return Candle(
            timestamp=_to_timestamp(values["timestamp"]),
            open=_to_float(values["open"]),
            high=_to_float(values["high"]),
            low=_to_float(values["low"]),
            close=_to_float(values["close"]),
            volume=_to_float(values["volume"]),
        )
    except (TypeError, ValueError) as e:
        raise MalformedPayloadError(
            f"Invalid candle at {path}: {e}", path=path, raw_data=candle_data
        ) from e


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError(f"boolean is not a number: {value!r}")
    return float(value)


def _to_timestamp(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError(f"boolean is not a timestamp: {value!r}")
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"timestamp must be whole milliseconds: {value!r}")
        return int(value)
    return int(value)

"""Pytest configuration and shared fixtures."""

from typing import Any, Dict

import pytest

from outpost_abi.arguments import ArgumentStore
from outpost_abi.data.models import Candle, TickersData
from outpost_abi.market_data import MarketDataRepository


@pytest.fixture
def call_arguments() -> Dict[str, Any]:
    """Call arguments covering native and string-encoded values."""
    return {
        "string_arg": "hello world",
        "int_arg": 42,
        "float_arg": 3.14,
        "bool_arg": True,
        "object_arg": {"name": "test", "value": 100},
        "array_arg": [1, 2, 3, 4, 5],
        "num_str_arg": "12345",
        "bool_str_arg": "true",
        "bool_str_arg_f": "false",
        "invalid_num_str_arg": "not_a_number",
        "array_str_arg": "[1, 2, 3]",
        "null_arg": None,
        "object_str_arg": '{"name": "test", "value": 100}',
    }


@pytest.fixture
def store(call_arguments) -> ArgumentStore:
    return ArgumentStore(call_arguments)


@pytest.fixture
def btc_ticker() -> TickersData:
    """Two-decimal BTC series."""
    return TickersData(
        symbol="BTCUSDT",
        exchange="binance",
        candles=(
            Candle(1700000000000, 12300.004, 12400.5, 12250.125, 12345.678, 1.23456),
            Candle(1700000060000, 12345.678, 12360.0, 12340.1, 12350.255, 0.5),
        ),
        precision=2,
    )


@pytest.fixture
def eth_ticker() -> TickersData:
    """Four-decimal ETH series."""
    return TickersData(
        symbol="ETHUSDT",
        exchange="kraken",
        candles=(
            Candle(1700000000000, 2000.12345, 2001.0, 1999.5, 2000.56789, 10.0),
        ),
        precision=4,
    )


@pytest.fixture
def repository(btc_ticker, eth_ticker) -> MarketDataRepository:
    return MarketDataRepository(
        tickers_data={"BTCUSD": btc_ticker, "ETH": eth_ticker},
        piped_data={"news": "BTC breaks out", "signals": '{"score": 0.7}'},
    )


@pytest.fixture
def sample_payload(call_arguments) -> Dict[str, Any]:
    """Full host payload as the plugin receives it."""
    return {
        "tickers_data": {
            "BTCUSD": {
                "symbol": "BTCUSDT",
                "exchange": "binance",
                "candles": [
                    [1700000000000, 12300.0, 12400.5, 12250.0, 12345.678, 1.5],
                    [1700000060000, 12345.678, 12360.0, 12340.1, 12350.0, 0.5],
                ],
                "precision": 2,
            },
            "ETH": {
                "symbol": "ETHUSDT",
                "exchange": "kraken",
                "candles": [
                    {"timestamp": 1700000000000, "open": 2000.12345, "high": 2001.0,
                     "low": 1999.5, "close": 2000.56789, "volume": 10.0},
                ],
                "precision": 4,
            },
        },
        "piped_data": {"news": "BTC breaks out"},
        "call_arguments": call_arguments,
    }

#!/usr/bin/env python3
"""
Example plugin: simple moving average crossover.

Reads its configuration from call arguments (numbers may arrive as JSON
numbers or numeric strings), computes short and long SMAs over exact
Decimal closes and prints a JSON result.

Run: python examples/sma_crossover.py
"""

import sys
from decimal import Decimal

import orjson

from outpost_abi import FunctionArgs, FunctionArgsError
from outpost_abi.config import load_config
from outpost_abi.logging import configure_logging_from_config, get_logger

logger = get_logger(__name__)

SAMPLE_PAYLOAD = {
    "tickers_data": {
        "BTCUSD": {
            "symbol": "BTCUSDT",
            "exchange": "binance",
            "precision": 2,
            "candles": [
                [1700000000000 + i * 60_000, 100.0 + i, 101.0 + i, 99.0 + i, 100.5 + i * 1.01, 10.0]
                for i in range(30)
            ],
        }
    },
    "call_arguments": {
        "symbol": "BTCUSD",
        "short_period": "5",
        "long_period": 20,
    },
}


def sma(values: list[Decimal], period: int) -> Decimal:
    if len(values) < period:
        raise ValueError(f"Not enough data for SMA({period}), have {len(values)}")
    return sum(values[-period:], Decimal(0)) / period


def run(args: FunctionArgs) -> dict:
    label = args.get_call_argument("symbol", str)
    short_period = args.get_call_argument("short_period", int)
    long_period = args.get_call_argument("long_period", int)

    closes = [candle.close for candle in args.get_candles_decimal(label)]
    short_ma = sma(closes, short_period)
    long_ma = sma(closes, long_period)

    signal = "HOLD"
    if short_ma > long_ma:
        signal = "BUY"
    elif short_ma < long_ma:
        signal = "SELL"

    logger.info("Signal computed", label=label, signal=signal)
    return {
        "label": label,
        "signal": signal,
        "short_ma": str(short_ma),
        "long_ma": str(long_ma),
        "last_close": str(closes[-1]),
    }


def main() -> int:
    config = load_config()
    configure_logging_from_config(config.logging)
    args = FunctionArgs.from_json(orjson.dumps(SAMPLE_PAYLOAD), config)
    try:
        result = run(args)
    except FunctionArgsError as e:
        print(orjson.dumps(e.to_dict()).decode())
        return int(e.code)
    print(orjson.dumps(result).decode())
    return 0


if __name__ == "__main__":
    sys.exit(main())

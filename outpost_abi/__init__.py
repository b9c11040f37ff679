"""
Outpost ABI - typed call arguments and precision-correct market data
for plugin functions.

A plugin invocation receives one loosely-typed payload: named call
arguments, ticker candle series and piped upstream text. ``FunctionArgs``
turns it into read-only, strongly-typed views.
"""

from .arguments import ArgumentStore
from .data.models import Candle, TickersData
from .errors import (
    ArgumentNotFound,
    ErrorCode,
    FunctionArgsError,
    MalformedPayloadError,
    PipeSourceNotFound,
    TickerNotFound,
    TypeCoercionFailed,
)
from .function_args import FunctionArgs
from .market_data import MarketDataRepository

__version__ = "0.1.0"
__author__ = "Outpost Team"

__all__ = [
    "ArgumentNotFound",
    "ArgumentStore",
    "Candle",
    "ErrorCode",
    "FunctionArgs",
    "FunctionArgsError",
    "MalformedPayloadError",
    "MarketDataRepository",
    "PipeSourceNotFound",
    "TickerNotFound",
    "TickersData",
    "TypeCoercionFailed",
]

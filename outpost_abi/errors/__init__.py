"""
Error taxonomy for the argument store and market data repository.

Each exception carries a stable numeric ``code`` the plugin host reports
alongside the human-readable message.
"""

from .codes import ErrorCode, FunctionArgsError
from .lookup import (
    LookupFailedError,
    ArgumentNotFound,
    TickerNotFound,
    PipeSourceNotFound,
)
from .coercion import (
    TypeCoercionFailed,
    MalformedPayloadError,
)

__all__ = [
    # Base
    "ErrorCode",
    "FunctionArgsError",
    # Lookups
    "LookupFailedError",
    "ArgumentNotFound",
    "TickerNotFound",
    "PipeSourceNotFound",
    # Decoding
    "TypeCoercionFailed",
    "MalformedPayloadError",
]

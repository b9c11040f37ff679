"""
Stable numeric return codes surfaced to the plugin host.

Every error raised by this package carries one of these codes so the host
can report it without inspecting the exception class.
"""

from enum import IntEnum
from typing import Any, Dict, Optional


class ErrorCode(IntEnum):
    """Host-visible error codes."""
    PIPE_SOURCE_NOT_FOUND = 2
    TICKER_NOT_FOUND = 3
    ARGUMENT_NOT_FOUND = 4
    TYPE_COERCION_FAILED = 5
    MALFORMED_PAYLOAD = 6


class FunctionArgsError(Exception):
    """Base class for every failure reported by the argument and market data layers."""

    code: ErrorCode

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Host-facing representation: numeric code plus readable message."""
        return {
            "code": int(self.code),
            "error": type(self).__name__,
            "message": self.message,
        }

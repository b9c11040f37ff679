"""
Coercion and payload decoding failures.
"""

from typing import Any, Optional

from .codes import ErrorCode, FunctionArgsError


class TypeCoercionFailed(FunctionArgsError):
    """Argument is present but could not be decoded as the requested type.

    ``details`` holds the structured errors of the direct decode attempt,
    which is the primary diagnostic even when the string fallback also ran.
    """

    code = ErrorCode.TYPE_COERCION_FAILED

    def __init__(self, name: str, target: str, reason: str,
                 details: Optional[list] = None, fallback_attempted: bool = False,
                 **kwargs):
        super().__init__(f"Failed to parse call argument {name} as {target}: {reason}", **kwargs)
        self.name = name
        self.target = target
        self.reason = reason
        self.details = details or []
        self.fallback_attempted = fallback_attempted


class MalformedPayloadError(FunctionArgsError):
    """Inbound payload does not match the expected structure."""

    code = ErrorCode.MALFORMED_PAYLOAD

    def __init__(self, message: str, path: Optional[str] = None,
                 raw_data: Optional[Any] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path
        self.raw_data = raw_data

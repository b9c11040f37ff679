"""
Lookup failures for keys absent from the invocation snapshot.
"""

from typing import Optional

from .codes import ErrorCode, FunctionArgsError


class LookupFailedError(FunctionArgsError):
    """A requested key is not part of the snapshot."""

    def __init__(self, message: str, key: str, **kwargs):
        super().__init__(message, **kwargs)
        self.key = key


class ArgumentNotFound(LookupFailedError):
    """Call argument is absent, or present as null for a non-nullable target."""

    code = ErrorCode.ARGUMENT_NOT_FOUND

    def __init__(self, name: str, present_but_null: bool = False,
                 target: Optional[str] = None, **kwargs):
        if present_but_null:
            message = f"Call argument {name} is null and cannot be read as {target}"
        else:
            message = f"Call argument {name} not found"
        super().__init__(message, key=name, **kwargs)
        self.name = name
        self.present_but_null = present_but_null
        self.target = target


class TickerNotFound(LookupFailedError):
    """Ticker label is absent from the market data."""

    code = ErrorCode.TICKER_NOT_FOUND

    def __init__(self, label: str, **kwargs):
        super().__init__(f"Ticker {label} not found", key=label, **kwargs)
        self.label = label


class PipeSourceNotFound(LookupFailedError):
    """Pipe source name is absent from the piped data."""

    code = ErrorCode.PIPE_SOURCE_NOT_FOUND

    def __init__(self, source: str, **kwargs):
        super().__init__(f"Source {source} not found", key=source, **kwargs)
        self.source = source

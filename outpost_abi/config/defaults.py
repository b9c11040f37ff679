"""Default configuration parameters for argument and market data access."""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP


@dataclass(frozen=True)
class DecimalParams:
    """Float to fixed-point conversion parameters."""
    rounding: str = ROUND_HALF_UP                    # Half away from zero


@dataclass(frozen=True)
class LoggingParams:
    """structlog output parameters."""
    level: str = "WARNING"
    format_json: bool = False
    include_timestamp: bool = True


@dataclass(frozen=True)
class PayloadParams:
    """Inbound payload decoding parameters."""
    ignore_unknown_keys: bool = True                 # False rejects extra top-level keys


@dataclass(frozen=True)
class AbiConfig:
    """Complete configuration."""
    decimal: DecimalParams
    logging: LoggingParams
    payload: PayloadParams


def get_default_config() -> AbiConfig:
    """Get the default configuration instance."""
    return AbiConfig(
        decimal=DecimalParams(),
        logging=LoggingParams(),
        payload=PayloadParams(),
    )

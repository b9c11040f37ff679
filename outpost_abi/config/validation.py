"""Configuration validation utilities."""

import decimal
from dataclasses import dataclass
from typing import Any

ROUNDING_MODES = frozenset({
    decimal.ROUND_CEILING,
    decimal.ROUND_DOWN,
    decimal.ROUND_FLOOR,
    decimal.ROUND_HALF_DOWN,
    decimal.ROUND_HALF_EVEN,
    decimal.ROUND_HALF_UP,
    decimal.ROUND_UP,
    decimal.ROUND_05UP,
})

LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_decimal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate decimal conversion parameters."""
        errors = []

        if "rounding" in params:
            value = params["rounding"]
            if value not in ROUNDING_MODES:
                errors.append(ValidationError(
                    field="decimal.rounding",
                    message=f"Must be one of {sorted(ROUNDING_MODES)}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="logging.level",
                    message=f"Must be one of {sorted(LOG_LEVELS)}",
                    value=value
                ))

        for flag in ("format_json", "include_timestamp"):
            if flag in params and not isinstance(params[flag], bool):
                errors.append(ValidationError(
                    field=f"logging.{flag}",
                    message="Must be a boolean",
                    value=params[flag]
                ))

        return errors

    @staticmethod
    def validate_payload_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate payload decoding parameters."""
        errors = []

        if "ignore_unknown_keys" in params:
            value = params["ignore_unknown_keys"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="payload.ignore_unknown_keys",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "decimal" in config:
            errors.extend(ConfigValidator.validate_decimal_params(config["decimal"]))

        if "logging" in config:
            errors.extend(ConfigValidator.validate_logging_params(config["logging"]))

        if "payload" in config:
            errors.extend(ConfigValidator.validate_payload_params(config["payload"]))

        return errors

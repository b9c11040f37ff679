"""Configuration loader: YAML overrides merged over frozen defaults."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import (
    AbiConfig,
    DecimalParams,
    LoggingParams,
    PayloadParams,
    get_default_config,
)
from .validation import ConfigValidator

CONFIG_ENV_VAR = "OUTPOST_ABI_CONFIG"


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message)
        self.errors = errors or []


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with file-over-defaults precedence."""

    config_path: Optional[Path]
    defaults: AbiConfig

    @classmethod
    def create(cls, config_path: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader, falling back to $OUTPOST_ABI_CONFIG."""
        if config_path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            config_path = Path(env_path) if env_path else None

        return cls(
            config_path=Path(config_path) if config_path is not None else None,
            defaults=get_default_config(),
        )

    def load_file_config(self) -> dict[str, Any]:
        """Load overrides from the YAML file, if one is configured."""
        if self.config_path is None or not self.config_path.exists():
            return {}

        try:
            with open(self.config_path) as f:
                file_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if file_config is None:
            return {}
        if not isinstance(file_config, dict):
            raise ConfigError(f"Top level of {self.config_path} must be a mapping")
        return file_config

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration.

        Priority order:
        1. Explicit overrides (highest priority)
        2. YAML file
        3. Defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_file_config())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> AbiConfig:
        """Merge, validate and materialise the configuration."""
        merged = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            summary = "; ".join(f"{e.field}: {e.message}" for e in errors)
            raise ConfigError(f"Invalid configuration: {summary}", errors=errors)

        try:
            return AbiConfig(
                decimal=DecimalParams(**merged["decimal"]),
                logging=LoggingParams(**merged["logging"]),
                payload=PayloadParams(**merged["payload"]),
            )
        except TypeError as e:
            raise ConfigError(f"Unknown configuration key: {e}") from e

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(config_path: Optional[Path] = None,
                overrides: Optional[dict[str, Any]] = None) -> AbiConfig:
    """Shortcut for ``ConfigLoader.create(config_path).load(overrides)``."""
    return ConfigLoader.create(config_path).load(overrides)

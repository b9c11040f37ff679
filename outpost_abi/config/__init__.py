"""
Configuration management.

Frozen-dataclass defaults, optionally overridden by a YAML file.
"""

from .defaults import AbiConfig, get_default_config
from .loader import ConfigError, ConfigLoader, load_config

__all__ = ["AbiConfig", "ConfigError", "ConfigLoader", "get_default_config", "load_config"]

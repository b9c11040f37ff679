#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

from outpost_abi.config.loader import ConfigError, ConfigLoader
from outpost_abi.config.validation import ConfigValidator


def main() -> int:
    """Validate the YAML file given on the command line (or $OUTPOST_ABI_CONFIG)."""
    config_path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_path)

    if loader.config_path is None:
        print("No configuration file given; defaults apply.")
        return 0

    print(f"Validating {loader.config_path}...")

    try:
        merged = loader.merge_config()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    errors = ConfigValidator.validate_config(merged)
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value!r})")
        return 1

    try:
        loader.load()
    except ConfigError as e:
        print(f"Error: {e}")
        return 1

    print("Configuration is valid")
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Centralized logging configuration for the plugin argument layer.

This module provides standardized logging configuration using structlog.
All modules obtain their loggers through ``get_logger`` so that host
processes embedding the package get consistent, structured output.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from outpost_abi.config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the embedding process.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    # Plugin stdout is usually the result channel, so logs go to stderr
    logging.basicConfig(
        level=log_level,
        stream=sys.stderr,
        format="%(message)s"
    )
    # basicConfig is a no-op once the host has installed root handlers
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                        structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_logging_from_config(params: LoggingParams,
                                  extra_processors: Optional[list] = None) -> None:
    """
    Configure logging from the ``logging`` section of the loaded configuration.

    Args:
        params: Logging parameters, typically ``load_config().logging``
        extra_processors: Additional structlog processors to include
    """
    configure_logging(
        level=params.level,
        format_json=params.format_json,
        include_timestamp=params.include_timestamp,
        extra_processors=extra_processors,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def log_coercion(
    logger: FilteringBoundLogger,
    name: str,
    target: str,
    stage: str,
    succeeded: bool,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log one coercion attempt with standardized fields.

    Args:
        logger: Structlog logger instance
        name: Argument name being read
        target: Display name of the requested type
        stage: "direct" or "string_fallback"
        succeeded: Whether the attempt produced a value
        context: Additional context data
    """
    bound_logger = logger.bind(
        subsystem="arguments",
        argument=name,
        target=target,
        stage=stage,
        result="OK" if succeeded else "FAIL",
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Argument coercion")

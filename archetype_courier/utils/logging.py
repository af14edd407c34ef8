"""
Logging Utilities

This module provides structlog-based logging for the resolvers.
"""

import logging
import sys
from typing import Any, Optional

import structlog

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def get_logger(name: str, **context: Any) -> Any:
    """
    Get a logger for the specified name

    Args:
        name: Logger name (usually module or component name)
        **context: Key/values bound to every event of the logger

    Returns:
        structlog BoundLogger
    """
    if not structlog.is_configured():
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                *_SHARED_PROCESSORS,
                structlog.dev.ConsoleRenderer(colors=False),
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

    logger = structlog.get_logger(name)
    if context:
        logger = logger.bind(**context)
    return logger


def configure_logging(
    level: str = "INFO", format_string: Optional[str] = None, json_output: bool = False
) -> None:
    """
    Configure logging for the resolvers and the CLI

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Format string for the stdlib handler
        json_output: Render events as JSON instead of console key/values
    """
    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=format_string or "%(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

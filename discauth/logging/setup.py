"""Structlog configuration for discauth."""

import logging
import sys
from typing import TextIO

import structlog

from discauth.config import ProviderConfig, LogFormat


def configure_logging(
    config: ProviderConfig | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Configure structlog for the host application.

    The adapter itself never calls this; frameworks embedding it may, or may
    install their own structlog configuration instead.

    Args:
        config: ProviderConfig instance, uses defaults if None
        stream: Output stream, defaults to stderr
    """
    if config is None:
        config = ProviderConfig()
    stream = stream or sys.stderr

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(format="%(message)s", stream=stream, level=log_level)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    if config.log_format == LogFormat.JSON:
        processors.extend([
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ])
    else:
        processors.extend([
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=stream.isatty()),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """
    Get a logger bound to the discord provider.

    Args:
        name: Optional component name, bound as ``logger_name``
    """
    logger = structlog.get_logger().bind(provider="discord")
    if name:
        logger = logger.bind(logger_name=name)
    return logger

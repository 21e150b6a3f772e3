"""
Logging setup.

Routes structlog through the standard library so uvicorn's own loggers and
ours share one set of handlers and one format.
"""

from __future__ import annotations

import logging
import sys

import structlog

from src.core.config.logging_config import LoggingConfig


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and structlog from a LoggingConfig.

    Args:
        logging_config: Level, format string and optional log file path.

    Example:
        configure_logging(config.logging)
        structlog.get_logger().info("server_started", port=3000)
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    logging.basicConfig(
        level=logging_config.level,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.KeyValueRenderer(key_order=["event"], drop_missing=True),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

"""
Logging Setup
=============
Sets up structured logging for the scout.

Logs go to stderr so that stdout carries nothing but the results table.
Uses 'structlog' on top of the standard logging module.

Log levels:
- DEBUG: individual pairs rejected by the filter, request URLs
- INFO: pipeline progress (profiles fetched, tokens scanned)
- WARNING: configuration problems
- ERROR: failed API calls (the run carries on with empty data)
"""

import sys
import logging
from pathlib import Path
from typing import TextIO

import structlog


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, stream: TextIO | None = None) -> None:
    """
    Configure logging for the whole application.

    Args:
        log_level: DEBUG, INFO, WARNING or ERROR
        log_dir: Optional directory to also save logs to a file
        stream: Where console logs go (defaults to stderr)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)
    stream = stream or sys.stderr

    logging.basicConfig(
        format="%(message)s",
        stream=stream,
        level=numeric_level,
    )

    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path / "scout.log")
        file_handler.setLevel(numeric_level)
        logging.getLogger().addHandler(file_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S"),
            structlog.dev.ConsoleRenderer(colors=stream.isatty()),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(module_name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a logger for a specific module.

    Usage:
        from utils.logger import get_logger
        logger = get_logger(__name__)
        logger.info("profiles_fetched", count=30)
    """
    return structlog.get_logger(module_name)

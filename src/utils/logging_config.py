"""
Logging configuration for EDM Graph.

This module sets up logging with consistent formatting across the
application, for the command line and for library callers alike.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional, TextIO

from .constants import DEFAULT_LOG_LEVEL, LOG_FORMAT


def setup_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure application-wide logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to env var or INFO.
        format_string: Custom log format string. Defaults to standard format.
        stream: Output stream for log records. Defaults to stdout.

    Example:
        >>> setup_logging(level="DEBUG")
        >>> logger = logging.getLogger(__name__)
        >>> logger.info("Extraction started")
    """
    # Get log level from env or parameter
    log_level = level or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)

    # Convert string to logging constant
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=format_string or LOG_FORMAT,
        handlers=[logging.StreamHandler(stream or sys.stdout)],
        force=True,  # Override any existing configuration
    )

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured with level: %s", log_level)

"""
Logging configuration for command-line runs.
Call configure_logging() once at startup; library modules only create loggers.
"""

import logging
from typing import Optional


def configure_logging(level: int = logging.WARNING, format_string: Optional[str] = None) -> None:
    """Configure the root logger.

    Args:
        level:         Logging level (logging.DEBUG, logging.INFO, ...).
        format_string: Custom format string (optional).
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(level=level, format=format_string, force=True)
    # botocore is chatty at DEBUG
    logging.getLogger("botocore").setLevel(max(level, logging.INFO))

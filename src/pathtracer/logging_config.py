"""Logging configuration for the pathtracer command line."""

import logging
from typing import Optional

from pathtracer.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None, name: str = "pathtracer") -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
            Defaults to config.LOG_LEVEL.
        name: Logger to configure.

    Returns:
        The configured logger.
    """
    if level is None:
        level = LOG_LEVEL
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Calling twice must not duplicate output.
    for handler in list(logger.handlers):
        if getattr(handler, "_pathtracer_console", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._pathtracer_console = True
    logger.addHandler(console_handler)

    return logger

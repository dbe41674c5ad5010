"""Logging configuration for spheretrace."""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: Optional[str] = "INFO", name: str = "spheretrace") -> logging.Logger:
    """
    Set up console logging for the package.

    Library modules only create loggers; handlers are installed here, once,
    by the command-line entry point.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        name: Logger to configure

    Returns:
        Configured logger instance
    """
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)

    logger = logging.getLogger(name)
    logger.setLevel(numeric_level)

    # Re-running setup (e.g. in tests) must not stack handlers.
    for handler in list(logger.handlers):
        if getattr(handler, "_spheretrace", False):
            logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(numeric_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    console_handler._spheretrace = True
    logger.addHandler(console_handler)

    return logger

"""
Logger factory for the correlationvector package.

The package never configures output itself: records propagate to whatever
handlers the host application installs. A NullHandler keeps Python's
last-resort handler quiet when the host configures nothing.

Level override priority:
1. Function parameter (level=)
2. Environment variable (LOG_LEVEL)
3. Unset (inherited from the parent logger)
"""

import logging
import os


def get_logger(name: str, level: str | None = None) -> logging.Logger:
    """
    Get the package logger for a module.

    Args:
        name: Logger name (usually __name__)
        level: Optional level override (DEBUG, INFO, WARNING, ERROR)

    Returns:
        Logger that propagates to the host application's handlers
    """
    logger = logging.getLogger(name)

    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())

    override = level or os.getenv("LOG_LEVEL")
    if override:
        logger.setLevel(getattr(logging, override.upper(), logging.NOTSET))

    return logger

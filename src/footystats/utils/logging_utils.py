"""
Logging utilities for FootyStats.

Provides a simple, consistent logger configuration so that every module can log
to stdout with a formatted timestamp and log level.
"""

import logging
from typing import Optional

from footystats.config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger with the given name.

    If the root logger has no handlers configured yet, this function also
    configures a basic StreamHandler at the level named by ``LOG_LEVEL``
    (falling back to INFO for unknown level names).

    Parameters
    ----------
    name : str | None
        Logger name. If None, the "footystats" package logger is returned.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger_name = name if name is not None else "footystats"
    logger = logging.getLogger(logger_name)

    if not logging.getLogger().handlers:
        level = getattr(logging, LOG_LEVEL, logging.INFO)
        logging.basicConfig(level=level, format=LOG_FORMAT)

    return logger

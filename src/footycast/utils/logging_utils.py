"""
Logging utilities for FootyCast.

Provides a simple, consistent logger configuration so that every module can log
to stdout with a formatted timestamp and log level.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a configured logger with the given name.

    If the root logger has no handlers configured yet, this function also
    configures a basic StreamHandler.

    Parameters
    ----------
    name : str | None
        Logger name. If None, the "footycast" logger is returned.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    logger_name = name if name is not None else "footycast"
    logger = logging.getLogger(logger_name)

    if not logging.getLogger().handlers:
        # Configure root logger once
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

    return logger


def set_verbosity(verbose: bool) -> None:
    """
    Switch the package loggers between INFO and DEBUG.

    Only the "footycast" logger changes level; third-party loggers such as
    urllib3 stay at the root level so request URLs (which carry the API key
    as a query parameter) are never logged.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.getLogger("footycast").setLevel(level)

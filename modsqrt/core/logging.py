"""
File for logging

Each modsqrt module creates its logger once at import with get_logger(__name__). Records go to stdout and, when a
path is given, to a log file as well.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from modsqrt.core.formats import LOGGING

__all__ = ["get_logger"]


def _attach(logger: logging.Logger, handler: logging.Handler, formatter: logging.Formatter):
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def get_logger(name: str, log_level: str = LOGGING.LEVEL, log_file: Optional[Path] = None,
               format_string: Optional[str] = None) -> logging.Logger:
    """
    Returns the named logger, configuring it on first use.

    Args:
        name: Logger name, usually the calling module's __name__
        log_level: One of DEBUG, INFO, WARNING, ERROR, CRITICAL (case-insensitive)
        log_file: Optional path for a file handler; parent directories are created
        format_string: Optional format string, LOGGING.FORMAT otherwise

    A logger that already has handlers is returned unchanged.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    logger.setLevel(level)

    formatter = logging.Formatter(format_string or LOGGING.FORMAT)
    _attach(logger, logging.StreamHandler(stream=sys.stdout), formatter)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        _attach(logger, logging.FileHandler(log_file), formatter)

    return logger

"""logger configuration for seqops"""

import logging
import sys
from typing import Optional

from .config import get_settings
from .errors import InvalidArgumentError

__all__ = ["setup_logger"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "seqops",
    level: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    attach a stdout handler to the seqops logger and set its level.

    :param name: logger name, the package logger by default
    :param level: DEBUG, INFO, WARNING, ERROR or CRITICAL; falls back to settings.log_level
    :param format_string: custom format string
    :return: the configured logger
    """
    level = level or get_settings().log_level
    format_string = format_string or DEFAULT_FORMAT

    logger = logging.getLogger(name)

    # only add a stream handler once, the package NullHandler doesn't count
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
        logger.propagate = False

    resolved = getattr(logging, level.upper(), None)
    if not isinstance(resolved, int):
        raise InvalidArgumentError(f"unknown log level: {level!r}")
    logger.setLevel(resolved)
    return logger

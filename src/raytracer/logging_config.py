# logging_config.py
"""Logging configuration for the ray tracer."""

import logging
from typing import Optional

from raytracer.config import LOG_FORMAT, LOG_LEVEL


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Set up console logging for the ``raytracer`` package.

    Library modules only create loggers; handlers are attached here, by the driver.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The configured package logger
    """
    if level is None:
        level = LOG_LEVEL

    logger = logging.getLogger('raytracer')
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(console_handler)

    return logger

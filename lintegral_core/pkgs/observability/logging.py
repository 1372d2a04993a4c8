"""Logging setup for the ``lintegral_core`` package logger."""

import logging
import sys

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

FORMATS = {
    "structured": '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    "plain": '%(levelname)s - %(message)s',
}


def setup_logging(level: str = "INFO", format_type: str = "structured") -> logging.Logger:
    """
    Route engine logs to stdout.

    Non-convergence and zero-fallback restrictions log at WARNING; horizons
    and integral values at DEBUG. Unknown levels fall back to INFO and
    unknown formats to ``plain``. The root logger is left untouched.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(FORMATS.get(format_type, FORMATS["plain"])))

    logger = logging.getLogger('lintegral_core')
    logger.setLevel(LEVELS.get(level.upper(), logging.INFO))
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False
    return logger

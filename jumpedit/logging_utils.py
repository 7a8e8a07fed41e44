"""
Logging — stderr diagnostics for je

stdout carries the shell command the wrapper evals, so log records only
ever go to stderr. Level comes from logging.level (or JE_LOG_LEVEL).
"""

import logging
import sys


LOGGER_NAME = "jumpedit"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logger(name: str = LOGGER_NAME, level: str = "WARNING") -> logging.Logger:
    """Setup the package logger on stderr; stdout carries shell commands."""
    logger = logging.getLogger(name)

    if not logger.handlers:  # Avoid duplicate handlers
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, str(level).upper()))
    logger.propagate = False
    return logger

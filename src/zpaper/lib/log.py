"""
Logging setup shared by the library and the CLI.
"""

import logging
import os

from zpaper import config

_logger = logging.getLogger("zpaper")


def _setup_logging():
    """Attach a stderr handler to the package logger, once."""
    if not _logger.handlers:
        handler = logging.StreamHandler()

        level = os.getenv(config.LOG_LEVEL_ENV, config.DEFAULT_LOG_LEVEL).upper()
        _logger.setLevel(getattr(logging, level, logging.WARNING))

        formatter = logging.Formatter(
            "[%(asctime)s.%(msecs)03d] %(levelname)s [%(name)s]: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        _logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    _setup_logging()
    return _logger.getChild(name)


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional key=value context."""
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)

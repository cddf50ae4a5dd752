"""Package-wide logger: one stdout handler on the `pressure_release` logger,
module loggers hang below it and inherit its level."""

import logging
import sys

ROOT_LOGGER_NAME = "pressure_release"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def _configure() -> logging.Logger:
    global _configured
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _configured:
        return root_logger
    root_logger.setLevel(logging.INFO)
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    # caplog listens on the root logger
    root_logger.propagate = True
    _configured = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    _configure()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_log_level(level: int) -> None:
    """Search progress (index and cache sizes) is logged at DEBUG, results at
    INFO."""
    root_logger = _configure()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    set_log_level(logging.DEBUG)


def reset_logging() -> None:
    """Drop the handler so the next logger lookup installs a fresh one"""
    global _configured
    _configured = False
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


_configure()

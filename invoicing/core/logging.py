"""
Logging setup for the invoicing backend.

Modules log through ``logging.getLogger(__name__)``; the application factory
calls :func:`configure_logging` once so every ``invoicing.*`` logger shares a
single stream handler.

Never log passwords, password hashes or raw form payloads.
"""

import logging

LOGGER_NAME = "invoicing"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """
    Attach a stream handler to the package logger and set its level.

    Calling it again only updates the level (no duplicate handlers).
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)

    return logger

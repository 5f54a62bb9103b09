"""Logger wiring for the client and the CLI."""

from __future__ import annotations

import logging
import os

from crypto_compare.config import Settings

LOGGER_NAME = "crypto_compare"
HTTP_LOGGER_NAME = f"{LOGGER_NAME}.http"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _has_file_handler(logger: logging.Logger, path: str) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.FileHandler) and handler.baseFilename == target
        for handler in logger.handlers
    )


def setup_logger(settings: Settings) -> logging.Logger:
    """Configure the package logger from ``settings``.

    The library itself only emits DEBUG records under ``crypto_compare.http``
    (one per dispatch, one per failure), so they show up only when
    ``settings.log_level`` is DEBUG. Records go to the console and, when
    ``settings.log_file`` is set, to that file as well. Calling it again
    adjusts the level and adds a file handler for a new path; the console
    handler is never duplicated.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)
    logger.propagate = False
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not any(type(handler) is logging.StreamHandler for handler in logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if settings.log_file and not _has_file_handler(logger, settings.log_file):
        file_handler = logging.FileHandler(settings.log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger

"""Logging helpers."""

from .logger import HTTP_LOGGER_NAME, LOGGER_NAME, setup_logger

__all__ = ["HTTP_LOGGER_NAME", "LOGGER_NAME", "setup_logger"]

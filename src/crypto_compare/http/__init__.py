"""HTTP transport layer."""

from .client import DEFAULT_TIMEOUT_MS, HttpClient

__all__ = ["DEFAULT_TIMEOUT_MS", "HttpClient"]

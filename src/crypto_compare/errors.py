"""Custom exceptions for clearer error handling across the client."""

from __future__ import annotations


class CryptoCompareError(Exception):
    """Base exception for all client-specific errors."""


class ConfigError(CryptoCompareError):
    """Raised when environment configuration is invalid or missing."""


class PayloadError(CryptoCompareError):
    """Raised when a decoded payload cannot be reshaped as requested."""


class RequestFailedError(CryptoCompareError):
    """Raised by ``Failure.unwrap()`` for callers who prefer exceptions."""

    def __init__(self, kind: str, reason: str) -> None:
        super().__init__(f"{kind}: {reason}")
        self.kind = kind
        self.reason = reason

"""Environment-driven client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self
from urllib.parse import urlparse

from dotenv import load_dotenv

from crypto_compare.domain.models import ApiHost
from crypto_compare.errors import ConfigError

DEFAULT_MIN_API_URL = "https://min-api.cryptocompare.com/"
DEFAULT_API_URL = "https://www.cryptocompare.com/api/data/"
DEFAULT_REQUEST_TIMEOUT_MS = 8000


def parse_optional_positive_int(value: str | None, *, field_name: str) -> int | None:
    """Parse optional positive integer values from env strings."""
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None
    try:
        parsed = int(text)
    except ValueError as exc:
        raise ConfigError(f"{field_name} must be an integer, got {text!r}") from exc
    if parsed <= 0:
        raise ConfigError(f"{field_name} must be positive")
    return parsed


def _is_absolute_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in {"http", "https"} and bool(parsed.netloc)


@dataclass(frozen=True)
class Settings:
    """Immutable client settings, built once at process start."""

    request_timeout_ms: int = DEFAULT_REQUEST_TIMEOUT_MS
    min_api_url: str = DEFAULT_MIN_API_URL
    api_url: str = DEFAULT_API_URL
    log_level: str = "WARNING"
    extra_params: str = ""
    log_file: str | None = None

    @classmethod
    def from_env(cls) -> Self:
        """Create settings from environment variables (and a local .env file)."""
        load_dotenv()
        timeout_ms = parse_optional_positive_int(
            os.getenv("CRYPTOCOMPARE_REQUEST_TIMEOUT_MS"),
            field_name="request_timeout_ms",
        )
        raw = cls(
            request_timeout_ms=timeout_ms or DEFAULT_REQUEST_TIMEOUT_MS,
            min_api_url=str(
                os.getenv("CRYPTOCOMPARE_MIN_API_URL", DEFAULT_MIN_API_URL)
            ).strip(),
            api_url=str(os.getenv("CRYPTOCOMPARE_API_URL", DEFAULT_API_URL)).strip(),
            log_level=str(os.getenv("LOG_LEVEL", "WARNING")).strip().upper(),
            extra_params=str(os.getenv("CRYPTOCOMPARE_EXTRA_PARAMS", "")).strip(),
            log_file=str(os.getenv("LOG_FILE", "")).strip() or None,
        )
        return raw.validate()

    def with_overrides(self, **kwargs: object) -> Self:
        """Return a new settings object with updated values."""
        updated = replace(self, **kwargs)
        return updated.validate()

    def host_url(self, host: ApiHost) -> str:
        """Resolve the base URL serving ``host`` endpoints."""
        if host == ApiHost.FULL:
            return self.api_url
        return self.min_api_url

    def validate(self) -> Self:
        """Validate settings fields."""
        if not isinstance(self.request_timeout_ms, int) or self.request_timeout_ms <= 0:
            raise ConfigError("request_timeout_ms must be a positive integer")
        if not _is_absolute_http_url(self.min_api_url):
            raise ConfigError(f"min_api_url must be an absolute http(s) URL: {self.min_api_url!r}")
        if not _is_absolute_http_url(self.api_url):
            raise ConfigError(f"api_url must be an absolute http(s) URL: {self.api_url!r}")
        if self.log_level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ConfigError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return self

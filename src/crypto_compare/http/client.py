"""Single-attempt HTTP client for one CryptoCompare host."""

from __future__ import annotations

import json
import logging
import time
from typing import Any

import requests
import urllib3

from crypto_compare.domain.models import (
    ErrorKind,
    Failure,
    HttpMethod,
    Params,
    ParamValue,
    Request,
    Result,
    Success,
)
from crypto_compare.logging import HTTP_LOGGER_NAME

DEFAULT_TIMEOUT_MS = 8000
READ_CHUNK_BYTES = 64 * 1024


class HttpClient:
    """Small wrapper around a ``requests.Session`` bound to one base URL.

    Every call is made exactly once. Transport errors, timeouts and
    undecodable bodies come back as ``Failure`` values instead of being raised.
    """

    def __init__(
        self,
        base_url: str,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout_ms = timeout_ms
        self.logger = logging.getLogger(HTTP_LOGGER_NAME)
        self.session = session or requests.Session()
        self.session.headers.update({"Accept": "application/json"})

    def url_for(self, path: str) -> str:
        """Concatenate ``path`` onto the base URL without normalization."""
        return f"{self.base_url}{path}"

    def build_request(
        self,
        method: HttpMethod,
        path: str,
        params: Params | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
        timeout_ms: int | None = None,
    ) -> Request:
        """Assemble a request; an explicit ``timeout_ms`` wins over the default."""
        return Request(
            url=self.url_for(path),
            method=method,
            params=list(params or []),
            body=body,
            headers=dict(headers or {}),
            timeout_ms=self.timeout_ms if timeout_ms is None else timeout_ms,
        )

    def get_body(
        self,
        path: str,
        params: Params | None = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """GET ``path`` with ordered query params and decode the response."""
        return self.send(self.build_request("GET", path, params=params, timeout_ms=timeout_ms))

    def post_body(
        self,
        path: str,
        body: Any,
        headers: dict[str, str] | None = None,
        *,
        params: Params | None = None,
        timeout_ms: int | None = None,
    ) -> Result:
        """POST ``body`` to ``path``.

        A ``str`` or ``bytes`` body is sent as-is; anything else is encoded as JSON.
        """
        request = self.build_request(
            "POST",
            path,
            params=params,
            body=body,
            headers=headers,
            timeout_ms=timeout_ms,
        )
        return self.send(request)

    def send(self, request: Request) -> Result:
        """Dispatch one request and turn the outcome into a result value.

        ``timeout_ms`` bounds the whole call: connecting, waiting for headers
        and reading the body. A server that trickles bytes is cut off once
        the deadline passes.
        """
        if request.timeout_ms <= 0:
            return Failure(
                kind=ErrorKind.TRANSPORT,
                reason=f"timeout_ms must be positive, got {request.timeout_ms}",
            )
        kwargs: dict[str, Any] = {
            "params": self.encode_params(request.params),
            "headers": request.headers or None,
            "timeout": request.timeout_seconds,
            "stream": True,
        }
        if isinstance(request.body, (str, bytes)):
            kwargs["data"] = request.body
        elif request.body is not None:
            kwargs["json"] = request.body

        self.logger.debug(
            "%s %s params=%s timeout_ms=%s",
            request.method,
            request.url,
            request.params,
            request.timeout_ms,
        )
        deadline = time.monotonic() + request.timeout_seconds
        try:
            response = self.session.request(method=request.method, url=request.url, **kwargs)
        except requests.Timeout as exc:
            return self._timed_out(request, exc)
        except requests.RequestException as exc:
            self.logger.debug("transport failure for %s: %s", request.url, exc)
            return Failure(
                kind=ErrorKind.TRANSPORT,
                reason=f"Request to {request.url} failed: {exc}",
            )

        try:
            content = self._read_body(response, deadline)
        except TimeoutError as exc:
            return self._timed_out(request, exc)
        except (requests.RequestException, urllib3.exceptions.HTTPError) as exc:
            # A per-read socket timeout surfaces as a connection error here.
            if time.monotonic() >= deadline:
                return self._timed_out(request, exc)
            self.logger.debug("body read failed for %s: %s", request.url, exc)
            return Failure(
                kind=ErrorKind.TRANSPORT,
                reason=f"Reading response from {request.url} failed: {exc}",
                status_code=response.status_code,
            )
        finally:
            response.close()
        return self.decode_body(content, response.status_code)

    @staticmethod
    def _read_body(response: requests.Response, deadline: float) -> bytes:
        """Read the streamed body, checking the deadline between socket reads."""
        chunks: list[bytes] = []
        while True:
            if time.monotonic() >= deadline:
                raise TimeoutError("deadline passed while reading the response body")
            chunk = response.raw.read1(READ_CHUNK_BYTES, decode_content=True)
            if not chunk:
                return b"".join(chunks)
            chunks.append(chunk)

    def _timed_out(self, request: Request, exc: BaseException) -> Failure:
        self.logger.debug("timeout after %sms for %s", request.timeout_ms, request.url)
        return Failure(
            kind=ErrorKind.TIMEOUT,
            reason=f"Request to {request.url} timed out after {request.timeout_ms}ms: {exc}",
        )

    def decode_body(self, content: bytes, status_code: int) -> Result:
        """Decode a response body as JSON; an empty body yields ``{}``."""
        if not content:
            return Success(payload={}, status_code=status_code)
        try:
            payload = json.loads(content)
        except ValueError as exc:
            detail = content[:200].decode("utf-8", errors="replace").strip()
            self.logger.debug("undecodable body (status %s): %s", status_code, detail)
            return Failure(
                kind=ErrorKind.DECODE,
                reason=f"Invalid JSON response: {exc}",
                status_code=status_code,
            )
        return Success(payload=payload, status_code=status_code)

    @staticmethod
    def encode_params(params: Params) -> list[tuple[str, str]]:
        """Render param values as the strings sent on the wire."""
        return [(key, HttpClient._encode_value(value)) for key, value in params]

    @staticmethod
    def _encode_value(value: ParamValue) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def close(self) -> None:
        self.session.close()

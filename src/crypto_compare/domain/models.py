"""Request and result models shared by the builder and the HTTP client."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, Literal, NoReturn, TypeAlias

from crypto_compare.errors import RequestFailedError

HttpMethod = Literal["GET", "POST"]
ParamValue: TypeAlias = str | bool | int | float
Params: TypeAlias = list[tuple[str, ParamValue]]
Symbols: TypeAlias = str | Sequence[str]


class ApiHost(StrEnum):
    """Which base URL an endpoint lives under."""

    MINI = "mini"
    FULL = "full"


class ErrorKind(StrEnum):
    """Failure categories reported by the HTTP client."""

    TRANSPORT = "transport"
    TIMEOUT = "timeout"
    DECODE = "decode"


@dataclass(frozen=True)
class Endpoint:
    """Remote operation path and the host serving it."""

    path: str
    host: ApiHost = ApiHost.MINI


@dataclass(frozen=True)
class Request:
    """One outbound call, built immediately before dispatch."""

    url: str
    method: HttpMethod = "GET"
    params: Params = field(default_factory=list)
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout_ms: int = 8000

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0


@dataclass(frozen=True)
class Success:
    """Decoded response body.

    The body is returned whatever the HTTP status was; ``status_code`` and
    ``ok`` let callers tell remote errors apart when they need to.
    """

    payload: Any
    status_code: int = 200

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def unwrap(self) -> Any:
        return self.payload


@dataclass(frozen=True)
class Failure:
    """Transport, timeout or decode failure for a single call."""

    kind: ErrorKind
    reason: str
    status_code: int | None = None

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise RequestFailedError(self.kind.value, self.reason)


Result: TypeAlias = Success | Failure

"""Module-level operations bound to a lazily built default client."""

from __future__ import annotations

import threading
from typing import Any

from crypto_compare.api import CryptoCompare, ExtraParams
from crypto_compare.config import Settings
from crypto_compare.domain.models import ApiHost, Result, Symbols

_default_client: CryptoCompare | None = None
_default_lock = threading.Lock()


def default_client() -> CryptoCompare:
    """Return the shared client, building it from the environment on first use."""
    global _default_client
    with _default_lock:
        if _default_client is None:
            _default_client = CryptoCompare(Settings.from_env())
        return _default_client


def reset_default_client() -> None:
    """Close and forget the shared client so the next call re-reads settings."""
    global _default_client
    with _default_lock:
        client, _default_client = _default_client, None
    if client is not None:
        client.close()


def coin_list(params: ExtraParams = None, *, timeout_ms: int | None = None) -> Result:
    return default_client().coin_list(params, timeout_ms=timeout_ms)


def price(
    fsym: Symbols, tsyms: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().price(fsym, tsyms, params, timeout_ms=timeout_ms)


def pricemulti(
    fsyms: Symbols, tsyms: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().pricemulti(fsyms, tsyms, params, timeout_ms=timeout_ms)


def pricemultifull(
    fsyms: Symbols, tsyms: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().pricemultifull(fsyms, tsyms, params, timeout_ms=timeout_ms)


def generate_avg(
    fsym: Symbols,
    tsym: Symbols,
    markets: Symbols,
    params: ExtraParams = None,
    *,
    timeout_ms: int | None = None,
) -> Result:
    return default_client().generate_avg(fsym, tsym, markets, params, timeout_ms=timeout_ms)


def day_avg(
    fsym: Symbols, tsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().day_avg(fsym, tsym, params, timeout_ms=timeout_ms)


def price_historical(
    fsym: Symbols, tsyms: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().price_historical(fsym, tsyms, params, timeout_ms=timeout_ms)


def coin_snapshot(
    fsym: Symbols, tsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().coin_snapshot(fsym, tsym, params, timeout_ms=timeout_ms)


def coin_snapshot_full_by_id(
    coin_id: str | int, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().coin_snapshot_full_by_id(coin_id, params, timeout_ms=timeout_ms)


def mining_equipment(params: ExtraParams = None, *, timeout_ms: int | None = None) -> Result:
    return default_client().mining_equipment(params, timeout_ms=timeout_ms)


def mining_contracts(params: ExtraParams = None, *, timeout_ms: int | None = None) -> Result:
    return default_client().mining_contracts(params, timeout_ms=timeout_ms)


def histo_minute(
    fsym: Symbols, tsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().histo_minute(fsym, tsym, params, timeout_ms=timeout_ms)


def histo_hour(
    fsym: Symbols, tsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().histo_hour(fsym, tsym, params, timeout_ms=timeout_ms)


def histo_day(
    fsym: Symbols, tsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None
) -> Result:
    return default_client().histo_day(fsym, tsym, params, timeout_ms=timeout_ms)


def top_pairs(fsym: Symbols, params: ExtraParams = None, *, timeout_ms: int | None = None) -> Result:
    return default_client().top_pairs(fsym, params, timeout_ms=timeout_ms)


def post_body(
    path: str,
    body: Any,
    headers: dict[str, str] | None = None,
    *,
    host: ApiHost = ApiHost.MINI,
    timeout_ms: int | None = None,
) -> Result:
    return default_client().post_body(path, body, headers, host=host, timeout_ms=timeout_ms)

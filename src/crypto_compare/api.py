"""CryptoCompare operations: argument coercion and parameter assembly."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypeAlias

from crypto_compare.config import Settings
from crypto_compare.domain.models import (
    ApiHost,
    Endpoint,
    Params,
    ParamValue,
    Result,
    Symbols,
)
from crypto_compare.http.client import HttpClient

ExtraParams: TypeAlias = Mapping[str, ParamValue] | Iterable[tuple[str, ParamValue]] | None

ENDPOINTS: dict[str, Endpoint] = {
    "coin_list": Endpoint("coinlist", ApiHost.FULL),
    "price": Endpoint("price"),
    "pricemulti": Endpoint("pricemulti"),
    "pricemultifull": Endpoint("pricemultifull"),
    "generate_avg": Endpoint("generateAvg"),
    "day_avg": Endpoint("dayAvg"),
    "price_historical": Endpoint("pricehistorical"),
    "coin_snapshot": Endpoint("coinsnapshot", ApiHost.FULL),
    "coin_snapshot_full_by_id": Endpoint("coinsnapshotfullbyid", ApiHost.FULL),
    "mining_equipment": Endpoint("miningequipment", ApiHost.FULL),
    "mining_contracts": Endpoint("miningcontracts", ApiHost.FULL),
    "histo_minute": Endpoint("histominute"),
    "histo_hour": Endpoint("histohour"),
    "histo_day": Endpoint("histoday"),
    "top_pairs": Endpoint("top/pairs"),
}


def coerce_symbols(symbols: Symbols) -> str:
    """Join a symbol collection with commas; a plain string passes through.

    Examples:
    - "ETH" -> "ETH"
    - ["ETH", "DASH"] -> "ETH,DASH"
    """
    if isinstance(symbols, str):
        return symbols
    return ",".join(str(symbol) for symbol in symbols)


def build_params(required: Params, extra: ExtraParams = None) -> Params:
    """Append caller params after the required ones.

    Keys are not merged: a caller key that repeats a required key is sent twice.
    """
    params: Params = list(required)
    if extra is None:
        return params
    items = extra.items() if isinstance(extra, Mapping) else extra
    params.extend((str(key), value) for key, value in items)
    return params


class CryptoCompare:
    """Client exposing each remote operation as a method.

    Symbol arguments take a single string or an ordered collection of strings.
    Every method also accepts ``params`` (extra query params, appended
    verbatim) and ``timeout_ms`` (per-call override of the configured timeout)
    and returns a ``Success`` or ``Failure``.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        mini_client: HttpClient | None = None,
        full_client: HttpClient | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.logger = logging.getLogger("crypto_compare.api")
        self.clients: dict[ApiHost, HttpClient] = {
            ApiHost.MINI: mini_client
            or HttpClient(self.settings.host_url(ApiHost.MINI), self.settings.request_timeout_ms),
            ApiHost.FULL: full_client
            or HttpClient(self.settings.host_url(ApiHost.FULL), self.settings.request_timeout_ms),
        }

    def request(
        self,
        operation: str,
        required: Params,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Build the parameter set for ``operation`` and dispatch it."""
        endpoint = ENDPOINTS[operation]
        query = build_params(required, params)
        if self.settings.extra_params:
            query.append(("extraParams", self.settings.extra_params))
        self.logger.debug("%s -> %s (%s host)", operation, endpoint.path, endpoint.host)
        client = self.clients[endpoint.host]
        return client.get_body(endpoint.path, query, timeout_ms=timeout_ms)

    def coin_list(self, params: ExtraParams = None, *, timeout_ms: int | None = None) -> Result:
        """General info for all the coins available on the website."""
        return self.request("coin_list", [], params, timeout_ms=timeout_ms)

    def price(
        self,
        fsym: Symbols,
        tsyms: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Latest price of ``fsym`` in one or more currencies.

        Optional params: ``e`` (exchange, default CCCAGG), ``extraParams``
        (application name), ``sign`` (bool), ``tryConversion`` (bool).
        """
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsyms", coerce_symbols(tsyms))]
        return self.request("price", required, params, timeout_ms=timeout_ms)

    def pricemulti(
        self,
        fsyms: Symbols,
        tsyms: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Price matrix for several from-symbols."""
        required: Params = [("fsyms", coerce_symbols(fsyms)), ("tsyms", coerce_symbols(tsyms))]
        return self.request("pricemulti", required, params, timeout_ms=timeout_ms)

    def pricemultifull(
        self,
        fsyms: Symbols,
        tsyms: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Full trading info (price, volume, open, high, low, ...) with RAW and DISPLAY values."""
        required: Params = [("fsyms", coerce_symbols(fsyms)), ("tsyms", coerce_symbols(tsyms))]
        return self.request("pricemultifull", required, params, timeout_ms=timeout_ms)

    def generate_avg(
        self,
        fsym: Symbols,
        tsym: Symbols,
        markets: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Volume weighted average of a pair across the requested markets."""
        required: Params = [
            ("fsym", coerce_symbols(fsym)),
            ("tsym", coerce_symbols(tsym)),
            ("markets", coerce_symbols(markets)),
        ]
        return self.request("generate_avg", required, params, timeout_ms=timeout_ms)

    def day_avg(
        self,
        fsym: Symbols,
        tsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Day average price.

        Optional params: ``e``, ``extraParams``, ``sign``, ``tryConversion``,
        ``avgType`` (HourVWAP, MidHighLow, VolFVolT), ``UTCHourDiff``, ``toTs``.
        """
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsym", coerce_symbols(tsym))]
        return self.request("day_avg", required, params, timeout_ms=timeout_ms)

    def price_historical(
        self,
        fsym: Symbols,
        tsyms: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """End-of-day price at a given timestamp (``ts`` param)."""
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsyms", coerce_symbols(tsyms))]
        return self.request("price_historical", required, params, timeout_ms=timeout_ms)

    def coin_snapshot(
        self,
        fsym: Symbols,
        tsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsym", coerce_symbols(tsym))]
        return self.request("coin_snapshot", required, params, timeout_ms=timeout_ms)

    def coin_snapshot_full_by_id(
        self,
        coin_id: str | int,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        return self.request(
            "coin_snapshot_full_by_id", [("id", coin_id)], params, timeout_ms=timeout_ms
        )

    def mining_equipment(
        self, params: ExtraParams = None, *, timeout_ms: int | None = None
    ) -> Result:
        return self.request("mining_equipment", [], params, timeout_ms=timeout_ms)

    def mining_contracts(
        self, params: ExtraParams = None, *, timeout_ms: int | None = None
    ) -> Result:
        return self.request("mining_contracts", [], params, timeout_ms=timeout_ms)

    def histo_minute(
        self,
        fsym: Symbols,
        tsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Minute OHLCV candles. Optional params: ``e``, ``limit``, ``aggregate``, ``toTs``."""
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsym", coerce_symbols(tsym))]
        return self.request("histo_minute", required, params, timeout_ms=timeout_ms)

    def histo_hour(
        self,
        fsym: Symbols,
        tsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Hourly OHLCV candles."""
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsym", coerce_symbols(tsym))]
        return self.request("histo_hour", required, params, timeout_ms=timeout_ms)

    def histo_day(
        self,
        fsym: Symbols,
        tsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Daily OHLCV candles."""
        required: Params = [("fsym", coerce_symbols(fsym)), ("tsym", coerce_symbols(tsym))]
        return self.request("histo_day", required, params, timeout_ms=timeout_ms)

    def top_pairs(
        self,
        fsym: Symbols,
        params: ExtraParams = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        """Top trading pairs for ``fsym`` by volume."""
        required: Params = [("fsym", coerce_symbols(fsym))]
        return self.request("top_pairs", required, params, timeout_ms=timeout_ms)

    def post_body(
        self,
        path: str,
        body: Any,
        headers: dict[str, str] | None = None,
        *,
        host: ApiHost = ApiHost.MINI,
        timeout_ms: int | None = None,
    ) -> Result:
        """POST a raw or JSON-encoded body to an arbitrary path on ``host``."""
        return self.clients[host].post_body(path, body, headers, timeout_ms=timeout_ms)

    def close(self) -> None:
        for client in self.clients.values():
            client.close()

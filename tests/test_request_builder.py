from __future__ import annotations

import pytest

from crypto_compare.api import ENDPOINTS, CryptoCompare, build_params, coerce_symbols
from crypto_compare.config import Settings
from crypto_compare.domain.models import ApiHost, Params, Result, Success
from crypto_compare.http.client import HttpClient


class _CaptureHttpClient(HttpClient):
    def __init__(self, base_url: str) -> None:
        super().__init__(base_url=base_url)
        self.requests: list[dict] = []

    def get_body(
        self,
        path: str,
        params: Params | None = None,
        *,
        timeout_ms: int | None = None,
    ) -> Result:
        self.requests.append(
            {"url": self.url_for(path), "path": path, "params": params, "timeout_ms": timeout_ms}
        )
        return Success(payload={"path": path})

    def post_body(self, path, body, headers=None, *, params=None, timeout_ms=None) -> Result:
        self.requests.append(
            {"url": self.url_for(path), "path": path, "body": body, "headers": headers}
        )
        return Success(payload={})


def _client(
    settings: Settings | None = None,
) -> tuple[CryptoCompare, _CaptureHttpClient, _CaptureHttpClient]:
    settings = settings or Settings()
    mini = _CaptureHttpClient(settings.min_api_url)
    full = _CaptureHttpClient(settings.api_url)
    return CryptoCompare(settings, mini_client=mini, full_client=full), mini, full


def test_coerce_symbols_joins_collections_in_order() -> None:
    assert coerce_symbols(["ETH", "DASH"]) == "ETH,DASH"
    assert coerce_symbols(("BTC", "LTC", "XMR")) == "BTC,LTC,XMR"
    assert coerce_symbols("ETH") == "ETH"
    assert coerce_symbols("BTC,USD") == "BTC,USD"


def test_build_params_appends_extras_without_dedupe() -> None:
    params = build_params([("fsym", "ETH"), ("tsyms", "BTC")], {"fsym": "BTC", "e": "Kraken"})

    assert params == [("fsym", "ETH"), ("tsyms", "BTC"), ("fsym", "BTC"), ("e", "Kraken")]


def test_build_params_accepts_pair_sequences() -> None:
    params = build_params([("fsym", "ETH")], [("e", "Kraken"), ("e", "Coinbase")])

    assert params == [("fsym", "ETH"), ("e", "Kraken"), ("e", "Coinbase")]


def test_price_with_symbol_list_targets_mini_host() -> None:
    client, mini, full = _client()

    result = client.price("ETH", ["BTC", "LTC"])

    assert result == Success(payload={"path": "price"})
    assert full.requests == []
    assert mini.requests[0]["url"] == "https://min-api.cryptocompare.com/price"
    assert mini.requests[0]["params"] == [("fsym", "ETH"), ("tsyms", "BTC,LTC")]


def test_price_appends_exchange_after_required_params() -> None:
    client, mini, _ = _client()

    client.price("ETH", ["USD", "EUR"], {"e": "Coinbase"})

    assert mini.requests[0]["params"] == [("fsym", "ETH"), ("tsyms", "USD,EUR"), ("e", "Coinbase")]


def test_top_pairs_uses_nested_endpoint_path() -> None:
    client, mini, _ = _client()

    client.top_pairs("BTC")

    assert mini.requests[0]["path"] == "top/pairs"
    assert mini.requests[0]["url"] == "https://min-api.cryptocompare.com/top/pairs"
    assert mini.requests[0]["params"] == [("fsym", "BTC")]


def test_single_symbol_and_one_element_list_build_same_request() -> None:
    client, mini, _ = _client()

    client.pricemulti("ETH", "BTC", {"sign": True})
    client.pricemulti(["ETH"], ["BTC"], {"sign": True})

    assert mini.requests[0] == mini.requests[1]


def test_generate_avg_joins_markets() -> None:
    client, mini, _ = _client()

    client.generate_avg("BTC", "USD", ["Coinbase", "Bitfinex"])

    assert mini.requests[0]["path"] == "generateAvg"
    assert mini.requests[0]["params"] == [
        ("fsym", "BTC"),
        ("tsym", "USD"),
        ("markets", "Coinbase,Bitfinex"),
    ]


@pytest.mark.parametrize(
    ("operation", "args", "expected_params"),
    [
        ("coin_list", (), []),
        ("pricemultifull", (["ETH", "DASH"], ["BTC", "USD"]), [("fsyms", "ETH,DASH"), ("tsyms", "BTC,USD")]),
        ("day_avg", ("ETH", "USD"), [("fsym", "ETH"), ("tsym", "USD")]),
        ("price_historical", ("ETH", ["BTC"]), [("fsym", "ETH"), ("tsyms", "BTC")]),
        ("coin_snapshot", ("BTC", "USD"), [("fsym", "BTC"), ("tsym", "USD")]),
        ("coin_snapshot_full_by_id", (1182,), [("id", 1182)]),
        ("mining_equipment", (), []),
        ("mining_contracts", (), []),
        ("histo_minute", ("BTC", "USD"), [("fsym", "BTC"), ("tsym", "USD")]),
        ("histo_hour", ("BTC", "USD"), [("fsym", "BTC"), ("tsym", "USD")]),
        ("histo_day", ("BTC", "USD"), [("fsym", "BTC"), ("tsym", "USD")]),
    ],
)
def test_operations_route_to_their_endpoint_and_host(
    operation: str, args: tuple, expected_params: list
) -> None:
    client, mini, full = _client()

    getattr(client, operation)(*args)

    endpoint = ENDPOINTS[operation]
    capture = full if endpoint.host == ApiHost.FULL else mini
    assert len(capture.requests) == 1
    assert capture.requests[0]["path"] == endpoint.path
    assert capture.requests[0]["params"] == expected_params


def test_full_host_serves_coin_and_mining_endpoints() -> None:
    full_host = {name for name, endpoint in ENDPOINTS.items() if endpoint.host == ApiHost.FULL}

    assert full_host == {
        "coin_list",
        "coin_snapshot",
        "coin_snapshot_full_by_id",
        "mining_equipment",
        "mining_contracts",
    }


def test_configured_application_name_is_sent_after_caller_params() -> None:
    client, mini, _ = _client(Settings(extra_params="my super app"))

    client.price("ETH", "BTC", {"e": "Kraken"})

    assert mini.requests[0]["params"] == [
        ("fsym", "ETH"),
        ("tsyms", "BTC"),
        ("e", "Kraken"),
        ("extraParams", "my super app"),
    ]


def test_timeout_override_is_forwarded() -> None:
    client, mini, _ = _client()

    client.histo_day("BTC", "USD", {"limit": 10}, timeout_ms=250)
    client.histo_day("BTC", "USD")

    assert mini.requests[0]["timeout_ms"] == 250
    assert mini.requests[1]["timeout_ms"] is None


def test_post_body_uses_requested_host() -> None:
    client, mini, full = _client()

    client.post_body("custom", '{"raw": true}', {"Content-Type": "application/json"})
    client.post_body("custom", {"a": 1}, host=ApiHost.FULL)

    assert mini.requests[0]["body"] == '{"raw": true}'
    assert mini.requests[0]["headers"] == {"Content-Type": "application/json"}
    assert full.requests[0]["url"] == "https://www.cryptocompare.com/api/data/custom"
    assert full.requests[0]["body"] == {"a": 1}

"""Command-line interface for one-off CryptoCompare queries."""

from __future__ import annotations

import argparse
import json
import sys

from crypto_compare.api import ENDPOINTS, CryptoCompare
from crypto_compare.config import Settings
from crypto_compare.domain.models import Failure, Params
from crypto_compare.errors import ConfigError
from crypto_compare.logging import setup_logger

OPERATION_ARGS: dict[str, list[str]] = {
    "coin_list": [],
    "price": ["fsym", "tsyms"],
    "pricemulti": ["fsyms", "tsyms"],
    "pricemultifull": ["fsyms", "tsyms"],
    "generate_avg": ["fsym", "tsym", "markets"],
    "day_avg": ["fsym", "tsym"],
    "price_historical": ["fsym", "tsyms"],
    "coin_snapshot": ["fsym", "tsym"],
    "coin_snapshot_full_by_id": ["id"],
    "mining_equipment": [],
    "mining_contracts": [],
    "histo_minute": ["fsym", "tsym"],
    "histo_hour": ["fsym", "tsym"],
    "histo_day": ["fsym", "tsym"],
    "top_pairs": ["fsym"],
}


def build_parser() -> argparse.ArgumentParser:
    """Build CLI parser."""
    parser = argparse.ArgumentParser(description="Query the CryptoCompare market-data API")
    parser.add_argument("operation", choices=sorted(ENDPOINTS), help="Operation to call")
    parser.add_argument(
        "args",
        nargs="*",
        help="Required arguments in order; lists are comma-separated (e.g. ETH BTC,USD)",
    )
    parser.add_argument(
        "--param",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Extra query parameter, repeatable",
    )
    parser.add_argument("--timeout-ms", type=int, help="Override the request timeout")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level",
    )
    return parser


def parse_param_pairs(values: list[str]) -> Params:
    """Parse repeated KEY=VALUE flags, keeping order and duplicates."""
    pairs: Params = []
    for raw in values:
        key, sep, value = raw.partition("=")
        if not sep or not key.strip():
            raise ValueError(f"--param expects KEY=VALUE, got {raw!r}")
        pairs.append((key.strip(), value))
    return pairs


def apply_cli_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply CLI values onto environment-derived settings."""
    expected = OPERATION_ARGS[args.operation]
    if len(args.args) != len(expected):
        names = " ".join(expected) or "no arguments"
        raise ValueError(f"{args.operation} expects: {names}")
    if args.timeout_ms is not None and args.timeout_ms <= 0:
        raise ValueError("--timeout-ms must be positive")

    overrides: dict[str, object] = {}
    if args.log_level:
        overrides["log_level"] = args.log_level
    return settings.with_overrides(**overrides)


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = apply_cli_overrides(Settings.from_env(), args)
        extra = parse_param_pairs(args.param)
    except (ValueError, ConfigError) as exc:
        print(f"Configuration error: {exc}")
        return 2

    setup_logger(settings)
    client = CryptoCompare(settings)
    try:
        operation = getattr(client, args.operation)
        result = operation(*args.args, extra, timeout_ms=args.timeout_ms)
    finally:
        client.close()

    if isinstance(result, Failure):
        print(f"error | {result.kind} | {result.reason}")
        return 1
    print(json.dumps(result.payload, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())

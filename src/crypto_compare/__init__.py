"""CryptoCompare market-data API client."""

from .api import ENDPOINTS, CryptoCompare, build_params, coerce_symbols
from .config import Settings
from .default import (
    coin_list,
    coin_snapshot,
    coin_snapshot_full_by_id,
    day_avg,
    default_client,
    generate_avg,
    histo_day,
    histo_hour,
    histo_minute,
    mining_contracts,
    mining_equipment,
    post_body,
    price,
    price_historical,
    pricemulti,
    pricemultifull,
    reset_default_client,
    top_pairs,
)
from .domain import ApiHost, Endpoint, ErrorKind, Failure, Result, Success
from .errors import ConfigError, CryptoCompareError, PayloadError, RequestFailedError

__all__ = [
    "ENDPOINTS",
    "ApiHost",
    "ConfigError",
    "CryptoCompare",
    "CryptoCompareError",
    "Endpoint",
    "ErrorKind",
    "Failure",
    "PayloadError",
    "RequestFailedError",
    "Result",
    "Settings",
    "Success",
    "build_params",
    "coerce_symbols",
    "coin_list",
    "coin_snapshot",
    "coin_snapshot_full_by_id",
    "day_avg",
    "default_client",
    "generate_avg",
    "histo_day",
    "histo_hour",
    "histo_minute",
    "mining_contracts",
    "mining_equipment",
    "post_body",
    "price",
    "price_historical",
    "pricemulti",
    "pricemultifull",
    "reset_default_client",
    "top_pairs",
]

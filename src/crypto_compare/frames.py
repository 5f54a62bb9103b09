"""pandas helpers for reshaping decoded payloads."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pandas as pd

from crypto_compare.errors import PayloadError

OHLCV_COLUMNS = ["open", "high", "low", "close", "volumefrom", "volumeto"]


def histo_to_frame(payload: Mapping[str, Any]) -> pd.DataFrame:
    """Convert a histominute/histohour/histoday payload into an OHLCV frame.

    Returns:
        DataFrame with a UTC datetime index and columns:
        open, high, low, close, volumefrom, volumeto
    """
    candles = payload.get("Data")
    if isinstance(candles, Mapping):
        # Newer v2 responses nest the candle list one level deeper.
        candles = candles.get("Data")
    if not isinstance(candles, list):
        message = payload.get("Message") or "no Data list in payload"
        raise PayloadError(f"Cannot build candles frame: {message}")

    frame = pd.DataFrame(candles)
    if frame.empty:
        return pd.DataFrame(
            columns=OHLCV_COLUMNS,
            index=pd.DatetimeIndex([], tz="UTC", name="time"),
            dtype=float,
        )

    required = {"time", "open", "high", "low", "close"}
    missing = sorted(required - set(frame.columns))
    if missing:
        raise PayloadError(f"Candle payload missing fields: {missing}")

    for column in ("volumefrom", "volumeto"):
        if column not in frame.columns:
            frame[column] = 0.0

    frame.index = pd.to_datetime(frame["time"], unit="s", utc=True)
    frame.index.name = "time"
    frame = frame.sort_index()
    frame = frame[OHLCV_COLUMNS]
    return frame.apply(pd.to_numeric, errors="coerce").dropna(
        subset=["open", "high", "low", "close"]
    )


def price_to_frame(payload: Mapping[str, Any]) -> pd.DataFrame:
    """Flatten a pricemulti matrix into a from-symbol x to-symbol frame."""
    rows = {
        fsym: quotes
        for fsym, quotes in payload.items()
        if isinstance(quotes, Mapping)
    }
    if not rows:
        message = payload.get("Message") or "no price rows in payload"
        raise PayloadError(f"Cannot build price frame: {message}")
    frame = pd.DataFrame.from_dict(rows, orient="index")
    frame.index.name = "fsym"
    return frame.apply(pd.to_numeric, errors="coerce")

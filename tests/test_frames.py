from __future__ import annotations

import pandas as pd
import pytest

from crypto_compare.errors import PayloadError
from crypto_compare.frames import OHLCV_COLUMNS, histo_to_frame, price_to_frame


def _histo_payload() -> dict:
    return {
        "Response": "Success",
        "Type": 100,
        "Aggregated": False,
        "Data": [
            {
                "time": 1505779200,
                "close": 3910.3,
                "high": 4120.0,
                "low": 3860.5,
                "open": 4093.1,
                "volumefrom": 101234.5,
                "volumeto": 402345678.1,
            },
            {
                "time": 1505692800,
                "close": 4093.1,
                "high": 4130.0,
                "low": 3678.0,
                "open": 3685.0,
                "volumefrom": 98765.4,
                "volumeto": 385432101.9,
            },
        ],
        "TimeTo": 1505779200,
        "TimeFrom": 1505692800,
    }


def test_histo_to_frame_sorts_and_indexes_by_utc_time() -> None:
    frame = histo_to_frame(_histo_payload())

    assert list(frame.columns) == OHLCV_COLUMNS
    assert len(frame) == 2
    assert str(frame.index.tz) == "UTC"
    assert frame.index[0] == pd.Timestamp("2017-09-18", tz="UTC")
    assert float(frame["close"].iloc[-1]) == 3910.3


def test_histo_to_frame_fills_missing_volume_columns() -> None:
    payload = {"Data": [{"time": 1505692800, "open": 1, "high": 2, "low": 0.5, "close": 1.5}]}

    frame = histo_to_frame(payload)

    assert float(frame["volumefrom"].iloc[0]) == 0.0
    assert float(frame["volumeto"].iloc[0]) == 0.0


def test_histo_to_frame_accepts_empty_candle_list() -> None:
    frame = histo_to_frame({"Data": []})

    assert frame.empty
    assert list(frame.columns) == OHLCV_COLUMNS


def test_histo_to_frame_raises_on_remote_error_payload() -> None:
    payload = {"Response": "Error", "Message": "There is no data for the symbol XYZ .", "Data": {}}

    with pytest.raises(PayloadError, match="no data for the symbol"):
        histo_to_frame(payload)


def test_histo_to_frame_raises_on_missing_ohlc_fields() -> None:
    with pytest.raises(PayloadError, match="missing fields"):
        histo_to_frame({"Data": [{"time": 1505692800, "close": 1.0}]})


def test_price_to_frame_builds_symbol_matrix() -> None:
    payload = {"DASH": {"BTC": 0.08289, "USD": 337.4}, "ETH": {"BTC": 0.07306, "USD": 297.98}}

    frame = price_to_frame(payload)

    assert list(frame.index) == ["DASH", "ETH"]
    assert float(frame.loc["ETH", "USD"]) == 297.98


def test_price_to_frame_raises_without_rows() -> None:
    with pytest.raises(PayloadError, match="fsyms param is empty"):
        price_to_frame({"Response": "Error", "Message": "fsyms param is empty or null."})

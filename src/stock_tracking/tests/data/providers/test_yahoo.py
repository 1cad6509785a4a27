# tests/data/providers/test_yahoo.py
import math
from datetime import date, timezone
from unittest.mock import MagicMock, patch

import pandas as pd
import polars as pl
import pytest

from stock_tracking.data.providers.yahoo import (
    QuoteFetchError,
    SymbolNotFoundError,
    YahooQuoteProvider,
)
from stock_tracking.data.schema import validate_quotes_schema

TICKER = "stock_tracking.data.providers.yahoo.yf.Ticker"


def history_frame(adjclose, tz="America/New_York"):
    index = pd.date_range("2020-03-02", periods=len(adjclose), freq="D", tz=tz)
    return pd.DataFrame(
        {
            "Open": adjclose,
            "High": adjclose,
            "Low": adjclose,
            "Close": [p + 1 for p in adjclose],
            "Adj Close": adjclose,
            "Volume": [100] * len(adjclose),
        },
        index=index,
    )


def test_fetch_history():
    ticker = MagicMock()
    ticker.history.return_value = history_frame([10.0, float("nan"), 12.0])

    with patch(TICKER, return_value=ticker) as ticker_cls:
        df = YahooQuoteProvider().fetch_history(
            "MSFT", date(2020, 3, 1), date(2020, 3, 5)
        )

    ticker_cls.assert_called_once_with("MSFT")
    kwargs = ticker.history.call_args.kwargs
    assert kwargs["start"] == "2020-03-01"
    assert kwargs["end"] == "2020-03-06"
    assert kwargs["interval"] == "1d"
    assert kwargs["auto_adjust"] is False

    assert validate_quotes_schema(df) == (True, "")
    assert df.height == 3
    assert df["symbol"].to_list() == ["MSFT"] * 3
    adj = df["adjclose"].to_list()
    assert adj[0] == 10.0 and math.isnan(adj[1]) and adj[2] == 12.0
    assert df["close"][0] == 11.0
    assert df["timestamp"][0].tzinfo is not None
    assert df["timestamp"][0].astimezone(timezone.utc).hour == 5


def test_fetch_history_naive_index():
    ticker = MagicMock()
    ticker.history.return_value = history_frame([1.0, 2.0], tz=None)

    with patch(TICKER, return_value=ticker):
        df = YahooQuoteProvider().fetch_history("AAPL", date(2020, 3, 1), date(2020, 3, 5))

    assert df["timestamp"].dtype == pl.Datetime("us", "UTC")


def test_symbol_not_found():
    ticker = MagicMock()
    ticker.history.return_value = pd.DataFrame()

    with patch(TICKER, return_value=ticker):
        with pytest.raises(SymbolNotFoundError):
            YahooQuoteProvider().fetch_history("NOPE", date(2020, 3, 1), date(2020, 3, 5))


def test_provider_failure_is_wrapped():
    ticker = MagicMock()
    ticker.history.side_effect = ConnectionError("network down")

    with patch(TICKER, return_value=ticker):
        with pytest.raises(QuoteFetchError) as excinfo:
            YahooQuoteProvider().fetch_history("MSFT", date(2020, 3, 1), date(2020, 3, 5))

    assert isinstance(excinfo.value.__cause__, ConnectionError)


def test_missing_adjusted_close():
    ticker = MagicMock()
    ticker.history.return_value = history_frame([1.0]).drop(columns=["Adj Close"])

    with patch(TICKER, return_value=ticker):
        with pytest.raises(QuoteFetchError):
            YahooQuoteProvider().fetch_history("MSFT", date(2020, 3, 1), date(2020, 3, 5))

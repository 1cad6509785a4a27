import logging
from datetime import date, timedelta

import polars as pl
import yfinance as yf

from stock_tracking.config import QUOTE_INTERVAL
from stock_tracking.data.schema import QUOTES_SCHEMA

logger = logging.getLogger(__name__)

ADJ_CLOSE_COLUMN = "Adj Close"
CLOSE_COLUMN = "Close"


class QuoteError(Exception):
    """Base error of the quote client."""


class SymbolNotFoundError(QuoteError):
    pass


class QuoteFetchError(QuoteError):
    pass


class YahooQuoteProvider:
    """
    Daily quote history from Yahoo Finance, returned as a polars frame

    Schema:
        symbol (Utf8), timestamp (Datetime us UTC), close (Float64),
        adjclose (Float64, NaN for missing observations)
    """

    def __init__(self, interval: str = QUOTE_INTERVAL):
        self.interval = interval

    def fetch_history(self, symbol: str, start: date, end: date) -> pl.DataFrame:
        """
        Fetch quotes for [start, end], both inclusive.

        Raises:
            SymbolNotFoundError: the provider has no rows for the symbol
            QuoteFetchError: the provider call failed or returned an odd frame
        """
        logger.info(f"Fetching {symbol} quotes from {start} to {end}")

        try:
            # yfinance treats `end` as exclusive
            hist = yf.Ticker(symbol).history(
                start=start.isoformat(),
                end=(end + timedelta(days=1)).isoformat(),
                interval=self.interval,
                auto_adjust=False,
                actions=False,
            )
        except Exception as e:
            raise QuoteFetchError(f"Failed to fetch quotes for {symbol}: {e}") from e

        if hist is None or hist.empty:
            raise SymbolNotFoundError(f"No quotes found for {symbol}")

        if ADJ_CLOSE_COLUMN not in hist.columns:
            raise QuoteFetchError(
                f"Quotes for {symbol} have no '{ADJ_CLOSE_COLUMN}' column"
            )

        df = self._to_polars(symbol, hist)
        logger.debug(f"{symbol}: {df.height} quotes")
        return df

    @staticmethod
    def _to_polars(symbol: str, hist) -> pl.DataFrame:
        index = hist.index
        if index.tz is None:
            index = index.tz_localize("UTC")
        else:
            index = index.tz_convert("UTC")

        adjclose = hist[ADJ_CLOSE_COLUMN].astype(float).tolist()
        if CLOSE_COLUMN in hist.columns:
            close = hist[CLOSE_COLUMN].astype(float).tolist()
        else:
            close = adjclose

        return (
            pl.DataFrame(
                {
                    "symbol": [symbol] * len(adjclose),
                    "timestamp": list(index.to_pydatetime()),
                    "close": close,
                    "adjclose": adjclose,
                },
                schema=QUOTES_SCHEMA,
            )
            .with_columns(pl.col("close", "adjclose").fill_null(float("nan")))
            .sort("timestamp")
        )

import logging
from datetime import datetime
from typing import Optional

import polars as pl

from stock_tracking.core.series import maximum, minimum, price_change, windowed_average
from stock_tracking.data.schema import Quote, SymbolSummary, validate_quotes_schema

logger = logging.getLogger(__name__)


def latest_quote(quotes: pl.DataFrame) -> Optional[Quote]:
    if quotes.is_empty():
        return None
    row = quotes.sort("timestamp").tail(1).row(0, named=True)
    return Quote(symbol=row["symbol"], timestamp=row["timestamp"], price=row["adjclose"])


def summarize(
    symbol: str, quotes: pl.DataFrame, period_start: datetime, window: int
) -> SymbolSummary:
    """
    Build the report row of one symbol.

    Args:
        symbol: ticker symbol
        quotes: quote frame, see data.schema.QUOTES_SCHEMA
        period_start: start of the reporting period
        window: SMA window

    Returns:
        SymbolSummary, fields are None where no value can be computed
    """
    ok, message = validate_quotes_schema(quotes)
    if not ok:
        raise ValueError(f"Invalid quotes for {symbol}: {message}")

    prices = quotes.sort("timestamp")["adjclose"]
    latest = latest_quote(quotes)

    change = price_change(prices)
    change_pct, change_abs = change if change is not None else (None, None)

    sma = windowed_average(window, prices)

    summary = SymbolSummary(
        period_start=period_start,
        symbol=symbol,
        price=latest.price if latest is not None else None,
        change_pct=change_pct,
        change_abs=change_abs,
        minimum=minimum(prices),
        maximum=maximum(prices),
        sma=sma[-1] if sma else None,
        window=window,
    )
    logger.debug(f"{symbol}: {len(prices)} prices, {len(sma)} SMA points")
    return summary

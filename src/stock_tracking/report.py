import math
from typing import Iterable, Optional

import polars as pl

from stock_tracking.data.schema import SymbolSummary


def _money(value: Optional[float]) -> Optional[str]:
    if value is None or math.isnan(value):
        return None
    return f"${value:.2f}"


def _percent(value: Optional[float]) -> Optional[str]:
    if value is None or math.isnan(value):
        return None
    return f"{value:.2f}%"


def headers(window: int) -> list[str]:
    return ["period start", "symbol", "price", "change %", "min", "max", f"{window}d avg"]


def to_frame(summaries: Iterable[SymbolSummary], window: int) -> pl.DataFrame:
    """
    Report rows as strings, one per symbol, missing values as null
    """
    columns = headers(window)
    rows = [
        (
            s.period_start.isoformat(),
            s.symbol,
            _money(s.price),
            _percent(s.change_pct),
            _money(s.minimum),
            _money(s.maximum),
            _money(s.sma),
        )
        for s in summaries
    ]
    return pl.DataFrame(rows, schema={c: pl.Utf8 for c in columns}, orient="row")


def render_csv(summaries: Iterable[SymbolSummary], window: int) -> str:
    return to_frame(summaries, window).write_csv(null_value="")

import logging
from datetime import datetime
from typing import Optional

import polars as pl
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

QUOTES_SCHEMA = {
    "symbol": pl.Utf8,
    "timestamp": pl.Datetime("us", "UTC"),
    "close": pl.Float64,
    "adjclose": pl.Float64,
}


class Quote(BaseModel):
    symbol: str = Field(..., description="Stock ticker symbol")
    timestamp: datetime = Field(..., description="Quote time (UTC)")
    price: float = Field(..., description="Adjusted close price")


class SymbolSummary(BaseModel):
    period_start: datetime = Field(..., description="Start of reporting period")
    symbol: str = Field(..., description="Stock ticker symbol")
    price: Optional[float] = Field(None, description="Latest adjusted close")
    change_pct: Optional[float] = Field(
        None, description="Percentage change over the period"
    )
    change_abs: Optional[float] = Field(
        None,
        description="Absolute change over the period, kept for callers, not in the CSV",
    )
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    sma: Optional[float] = Field(None, description="Latest simple moving average")
    window: int = Field(..., gt=0, description="SMA window in trading days")


def empty_quotes() -> pl.DataFrame:
    return pl.DataFrame(schema=QUOTES_SCHEMA)


def validate_quotes_schema(df: pl.DataFrame) -> tuple[bool, str]:
    """
    Fast quote DataFrame schema validation
    """
    missing = set(QUOTES_SCHEMA.keys()) - set(df.columns)
    if missing:
        return False, f"Missing columns: {sorted(missing)}"

    for col, expected_type in QUOTES_SCHEMA.items():
        if df[col].dtype != expected_type:
            return (
                False,
                f"Column '{col}' type mismatch: {df[col].dtype} vs {expected_type}",
            )

    # prices may be NaN, never null
    null_counts = df.null_count()
    null_cols = [col for col in QUOTES_SCHEMA.keys() if null_counts[col][0] > 0]
    if null_cols:
        return False, f"Null values in columns: {null_cols}"

    return True, ""

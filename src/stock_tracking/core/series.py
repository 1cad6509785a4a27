from typing import Iterator, List, Optional, Sequence, Tuple, Union

import polars as pl

PriceSeries = Union[Sequence[float], pl.Series]


def _as_series(series: PriceSeries) -> pl.Series:
    if isinstance(series, pl.Series):
        return series.cast(pl.Float64)
    return pl.Series("price", list(series), dtype=pl.Float64)


def filter_nan(series: PriceSeries) -> pl.Series:
    """
    Observations of a price series that are not NaN, in order.
    """
    s = _as_series(series)
    return s.filter(s.is_not_nan())


def minimum(series: PriceSeries) -> Optional[float]:
    """
    Smallest price of the series, NaN ignored.

    Returns:
        the minimum, or None when nothing is left after dropping NaN
    """
    return filter_nan(series).min()


def maximum(series: PriceSeries) -> Optional[float]:
    """
    Largest price of the series, NaN ignored.

    Returns:
        the maximum, or None when nothing is left after dropping NaN
    """
    return filter_nan(series).max()


def sliding_windows(n: int, series: PriceSeries) -> Iterator[pl.Series]:
    """
    Yield every run of n consecutive NaN-free prices, left to right, stride 1.

    Windows are zero-copy slices of the filtered series.
    """
    if n < 1:
        raise ValueError(f"window length must be positive, got {n}")

    filtered = filter_nan(series)
    for offset in range(filtered.len() - n + 1):
        yield filtered.slice(offset, n)


def windowed_average(n: int, series: PriceSeries) -> List[float]:
    """
    Simple moving average over n observations.

    NaN are dropped before windowing, so the result has
    max(0, len(filtered) - n + 1) values. Too short a series gives [].

    Args:
        n: window length, >= 1
        series: adjusted close prices, oldest first

    Returns:
        one mean per window position
    """
    if n < 1:
        raise ValueError(f"window length must be positive, got {n}")

    return filter_nan(series).rolling_mean(window_size=n).drop_nulls().to_list()


def price_change(series: PriceSeries) -> Optional[Tuple[float, float]]:
    """
    Change between the first and the last observation of the period.

    Boundaries are taken by position and are not NaN-filtered.

    Returns:
        (percentage change, absolute change), or None for an empty series
        or a zero first price
    """
    if len(series) == 0:
        return None

    first, last = float(series[0]), float(series[-1])
    if first == 0.0:
        return None

    diff = last - first
    return diff / first * 100, abs(diff)

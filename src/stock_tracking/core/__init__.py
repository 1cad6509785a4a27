from .series import (
    filter_nan,
    maximum,
    minimum,
    price_change,
    sliding_windows,
    windowed_average,
)

__all__ = [
    "filter_nan",
    "minimum",
    "maximum",
    "sliding_windows",
    "windowed_average",
    "price_change",
]

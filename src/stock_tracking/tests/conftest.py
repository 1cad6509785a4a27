import logging
from datetime import datetime, timedelta, timezone

import polars as pl
import pytest

from stock_tracking.data.schema import QUOTES_SCHEMA


def make_quotes(symbol, prices, start=datetime(2020, 3, 2, 14, 30, tzinfo=timezone.utc)):
    return pl.DataFrame(
        {
            "symbol": [symbol] * len(prices),
            "timestamp": [start + timedelta(days=i) for i in range(len(prices))],
            "close": prices,
            "adjclose": prices,
        },
        schema=QUOTES_SCHEMA,
    )


@pytest.fixture
def quotes_factory():
    return make_quotes


@pytest.fixture(autouse=True)
def reset_package_logger():
    # handlers bind the stderr of the test that created them
    yield
    logger = logging.getLogger("stock_tracking")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

# Simple Stock Tracking
# quote provider (yfinance)
#    ↓ (data)
# polars quote frame per symbol, adjusted close
#    ↓ (core.series)
# min / max / SMA / price change, NaN excluded
#    ↓ (report)
# CSV on stdout

__version__ = "0.1.0"

import argparse
import logging
import sys

from stock_tracking import config
from stock_tracking.core.summary import summarize
from stock_tracking.data.date import DateParseError, from_string, to_utc_datetime, today_utc
from stock_tracking.data.providers.yahoo import QuoteError, YahooQuoteProvider
from stock_tracking.report import render_csv
from stock_tracking.utils.logger import setup_logger

logger = logging.getLogger(__name__)


class CliError(Exception):
    pass


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}")
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stock-tracking",
        description="Simple Stock Tracking - per-symbol price summary as CSV",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  stock-tracking --symbols MSFT GOOG AAPL --from 2020-03-01

  # 10 day moving average instead of the default
  stock-tracking -s MSFT -f 2020-03-01 -w 10
        """,
    )

    parser.add_argument(
        "-s",
        "--symbols",
        nargs="+",
        required=True,
        help="Sets stock symbols",
    )
    parser.add_argument(
        "-f",
        "--from",
        dest="from_date",
        required=True,
        help="Sets from date yyyy-mm-dd",
    )
    parser.add_argument(
        "-w",
        "--window",
        type=positive_int,
        default=str(config.SMA_WINDOW),
        help=f"Moving average window in trading days (default: {config.SMA_WINDOW})",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help=f"Logging level (default: {config.LOG_LEVEL})",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        default=config.LOG_TO_FILE,
        help="Also write logs to a dated file in the log directory",
    )
    return parser


def run(args: argparse.Namespace, provider: YahooQuoteProvider | None = None) -> str:
    """
    Fetch, summarize and render every requested symbol.

    Raises:
        CliError: invalid from date
        QuoteError: quote retrieval failed for a symbol
    """
    try:
        start = from_string(args.from_date)
    except DateParseError as e:
        raise CliError("Date parsing error. follow pattern yyyy-mm-dd") from e

    end = today_utc()
    if start > end:
        raise CliError("from-date should be past date")

    provider = provider or YahooQuoteProvider()
    period_start = to_utc_datetime(start)

    summaries = []
    for symbol in args.symbols:
        quotes = provider.fetch_history(symbol, start, end)
        summaries.append(summarize(symbol, quotes, period_start, args.window))

    return render_csv(summaries, args.window)


def main(argv: list[str] | None = None, provider: YahooQuoteProvider | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(
        "stock_tracking",
        level=getattr(logging, args.log_level),
        log_to_file=args.log_file,
    )

    try:
        report = run(args, provider)
    except (CliError, QuoteError, ValueError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    sys.stdout.write(report)
    return 0

from datetime import date, datetime, timezone

from stock_tracking.config import DATE_FORMAT


class DateParseError(ValueError):
    pass


def from_string(text: str) -> date:
    """
    Parse a yyyy-mm-dd date. Both the layout and the calendar are checked,
    so 2020/01/01 and 2021-02-29 are rejected.
    """
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise DateParseError(f"Date parse error: {text!r}") from e


def to_utc_datetime(d: date) -> datetime:
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def today_utc() -> date:
    return datetime.now(timezone.utc).date()

"""Date parsing helpers for records coming back from the store."""
from datetime import date, datetime, time, timezone
from typing import Union


DateLike = Union[date, datetime, str]

# Tried in order after ISO-8601 parsing fails.
_FALLBACK_FORMATS = (
    "%Y/%m/%d",
    "%d %b %Y",
    "%b %d, %Y",
)


def parse_match_date(value: DateLike) -> date:
    """
    Parse a stored match date into a calendar date.

    Accepts ``date`` and ``datetime`` objects as well as strings in ISO-8601
    form (with or without a time part or trailing ``Z``), surrounded by any
    whitespace. Two different representations of the same calendar day parse
    to equal values.

    Args:
        value: Raw date value

    Returns:
        Calendar date

    Raises:
        ValueError: If the value cannot be parsed

    Examples:
        >>> parse_match_date(" 2024-03-01 ")
        datetime.date(2024, 3, 1)
        >>> parse_match_date("2024-03-01T18:30:00Z")
        datetime.date(2024, 3, 1)
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    text = value.strip()
    if not text:
        raise ValueError("Date is required")

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    raise ValueError(f"Invalid date: {value!r}")


def parse_timestamp(value: Union[datetime, str]) -> datetime:
    """
    Parse a stored creation timestamp into an aware UTC datetime.

    Naive values are taken to be UTC (MongoDB returns naive UTC datetimes).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_store_datetime(value: date) -> datetime:
    """Convert a calendar date to the midnight datetime MongoDB can store."""
    return datetime.combine(value, time.min)

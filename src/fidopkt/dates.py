"""The fixed 20-byte message date field: ``DD Mon YY  HH:MM:SS`` plus NUL."""

from __future__ import annotations

import re
from datetime import datetime

from fidopkt.constants import DATE_TIME_SIZE, DATE_TIME_TEXT_SIZE
from fidopkt.errors import DateFormatError, DateRangeError

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Two-digit years 69..99 are 1969..1999, 00..68 are 2000..2068
PIVOT_YEAR = 69
FIRST_YEAR = 1900 + PIVOT_YEAR
LAST_YEAR = 2000 + PIVOT_YEAR - 1

_DATE_PATTERN = re.compile(
    r"([0-9]{2}) ([A-Z][a-z]{2}) ([0-9]{2})  ([0-9]{2}):([0-9]{2}):([0-9]{2})"
)


def format_message_date(value: datetime) -> bytes:
    """Format a datetime into exactly 20 bytes.

    Month names are emitted directly so the output does not depend on locale.
    Raises DateRangeError for years the two-digit field would read back as
    a different century.
    """
    if not FIRST_YEAR <= value.year <= LAST_YEAR:
        raise DateRangeError(value, FIRST_YEAR, LAST_YEAR)
    text = (
        f"{value.day:02d} {MONTHS[value.month - 1]} {value.year % 100:02d}  "
        f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    return text.encode("ascii").ljust(DATE_TIME_SIZE, b"\x00")


def parse_message_date(raw: bytes) -> datetime:
    """Parse the first 19 bytes of the date field."""
    head = bytes(raw[:DATE_TIME_TEXT_SIZE])
    try:
        text = head.decode("ascii")
    except UnicodeDecodeError as exc:
        raise DateFormatError(f"Message date is not ASCII: {head!r}") from exc

    match = _DATE_PATTERN.fullmatch(text)
    if match is None or match.group(2) not in MONTHS:
        raise DateFormatError(f"Message date doesn't match 'DD Mon YY  HH:MM:SS': {text!r}")

    day, month_name, yy, hour, minute, second = match.groups()
    year = int(yy)
    year += 1900 if year >= PIVOT_YEAR else 2000
    try:
        return datetime(year, MONTHS.index(month_name) + 1, int(day),
                        int(hour), int(minute), int(second))
    except ValueError as exc:
        raise DateFormatError(f"Message date out of range: {text!r}") from exc

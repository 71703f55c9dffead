"""Timestamps, sentinels, and the single-side date/time grammar.

Grammar accepted by :func:`parse_datetime`::

    "<"            -> MIN
    ">"            -> MAX
    "now"          -> current local time, truncated to the minute
    "M/D[/Y]"      -> date at the caller's default time
    "H:M"          -> today at the given time
    "M/D[/Y] H:M"  -> date and time

Times are offsets from midnight, so "3/15 24:00" is midnight of 16 March.

Timestamps are naive ``datetime`` values at minute resolution.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta

from timefield.domain.errors import InvalidDateTimeFormat

# Range of the Gregorian calendar the scheduler supports. MAX keeps a
# 23:59 time-of-day, which the formatter special-cases.
MIN = datetime(1400, 1, 1, 0, 0)
MAX = datetime(9999, 12, 31, 23, 59)

MIDNIGHT = time(0, 0)

MIN_TOKEN = "<"
MAX_TOKEN = ">"
NOW_TOKEN = "now"

_UNSIGNED_INT = re.compile(r"\d+")


def local_today() -> date:
    """The current local calendar date."""
    return date.today()


def now_minute() -> datetime:
    """The current local time truncated to the minute."""
    return datetime.now().replace(second=0, microsecond=0)


def is_sentinel(value: datetime) -> bool:
    """Return True for MIN or MAX."""
    return value == MIN or value == MAX


def _to_int(text: str, what: str, source: str) -> int:
    if not _UNSIGNED_INT.fullmatch(text):
        msg = f"Invalid {what} {text!r} in {source!r}"
        raise InvalidDateTimeFormat(msg)
    return int(text)


def parse_date(text: str, default_year: int) -> date:
    """Parse ``M/D`` or ``M/D/Y``; *default_year* fills a missing year.

    Raises:
        InvalidDateTimeFormat: On non-integer parts, a wrong number of parts,
            an impossible calendar date, or a year outside ``[MIN, MAX]``.
    """
    parts = text.split("/")
    if len(parts) not in (2, 3):
        msg = f"Expected M/D or M/D/Y, got {text!r}"
        raise InvalidDateTimeFormat(msg)

    month = _to_int(parts[0], "month", text)
    day = _to_int(parts[1], "day", text)
    year = _to_int(parts[2], "year", text) if len(parts) == 3 else default_year

    if not MIN.year <= year <= MAX.year:
        msg = f"Year {year} outside {MIN.year}..{MAX.year}"
        raise InvalidDateTimeFormat(msg)
    try:
        return date(year, month, day)
    except ValueError as exc:
        msg = f"Invalid calendar date {text!r}: {exc}"
        raise InvalidDateTimeFormat(msg) from exc


def parse_time(text: str) -> timedelta:
    """Parse ``H:M`` into an offset from midnight (seconds are always zero).

    Hours and minutes are not range-checked: ``24:00`` is the following
    midnight and ``9:75`` is 10:15.
    """
    hours_text, sep, minutes_text = text.partition(":")
    if not sep:
        msg = f"Expected H:M, got {text!r}"
        raise InvalidDateTimeFormat(msg)

    hours = _to_int(hours_text, "hour", text)
    minutes = _to_int(minutes_text, "minute", text)
    try:
        return timedelta(hours=hours, minutes=minutes)
    except OverflowError as exc:
        msg = f"Time {text!r} is too large"
        raise InvalidDateTimeFormat(msg) from exc


def parse_datetime(
    text: str,
    default_time: time,
    default_year: int,
    today: date,
    *,
    now: datetime | None = None,
) -> datetime:
    """Parse one side of an interval into a timestamp.

    Args:
        text: The side to parse (already trimmed by the caller).
        default_time: Time-of-day used when only a date is given.
        default_year: Year used when a date omits one.
        today: Date used when only a time is given.
        now: Value for the ``now`` keyword; defaults to the wall clock.

    Raises:
        InvalidDateTimeFormat: When *text* matches none of the shapes.
    """
    if text == MIN_TOKEN:
        return MIN
    if text == MAX_TOKEN:
        return MAX
    if text == NOW_TOKEN:
        return (now or now_minute()).replace(second=0, microsecond=0)

    date_text = ""
    time_text = ""
    if " " in text:
        head, _, tail = text.partition(" ")
        date_text = head.strip()
        time_text = tail.strip()
    elif "/" in text:
        date_text = text
    elif ":" in text:
        time_text = text
    else:
        msg = f"Not a date or time: {text!r}"
        raise InvalidDateTimeFormat(msg)

    day = parse_date(date_text, default_year) if date_text else today
    if not time_text:
        return datetime.combine(day, default_time)
    offset = parse_time(time_text)
    try:
        return datetime.combine(day, MIDNIGHT) + offset
    except OverflowError as exc:
        msg = f"{text!r} lies beyond the calendar"
        raise InvalidDateTimeFormat(msg) from exc

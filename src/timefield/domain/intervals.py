"""Interval value type and the working-interval command grammar.

Three mutually exclusive forms, tried in order:

1. Explicit range ``<begin> - <end>``: each side goes through
   :func:`~timefield.domain.datetimes.parse_datetime`.
2. Single calendar date ``M/D[/Y]``: the whole day.
3. Shortcut phrase: ``today``, or ``prev|this|next`` followed by
   ``day|week``, resolved against the current working interval.

Weeks start on Sunday (day-of-week 0).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta

from timefield.domain.datetimes import (
    MAX,
    MIDNIGHT,
    MIN,
    local_today,
    parse_date,
    parse_datetime,
)
from timefield.domain.errors import InvalidDateTimeFormat, InvalidInterval

ONE_DAY = timedelta(days=1)
ONE_WEEK = timedelta(days=7)

RANGE_SEPARATOR = "-"
DATE_SEPARATOR = "/"


@dataclass(frozen=True)
class Interval:
    """Immutable ``[begin, end)`` span of time with ``begin <= end``."""

    begin: datetime
    end: datetime

    def __post_init__(self) -> None:
        if self.begin > self.end:
            msg = f"Interval begin ({self.begin}) must be <= end ({self.end})"
            raise ValueError(msg)

    @classmethod
    def day(cls, day: date) -> Interval:
        """The 24 hours starting at midnight of *day*."""
        begin = datetime.combine(day, MIDNIGHT)
        return cls(begin, begin + ONE_DAY)

    @property
    def duration(self) -> timedelta:
        return self.end - self.begin

    def contains(self, moment: datetime) -> bool:
        return self.begin <= moment < self.end

    def intersects(self, other: Interval) -> bool:
        """True when either interval begins inside the other."""
        return self.contains(other.begin) or other.contains(self.begin)


@dataclass(frozen=True)
class ShortcutWords:
    """Vocabulary for shortcut phrases; localizable via the string table."""

    today: str = "today"
    prev: str = "prev"
    this: str = "this"
    next: str = "next"
    day: str = "day"
    week: str = "week"


DEFAULT_WORDS = ShortcutWords()


def day_of_week(day: date) -> int:
    """Day-of-week index with Sunday as 0."""
    return (day.weekday() + 1) % 7


def week_start(day: date) -> date:
    """The Sunday on or before *day*."""
    return day - timedelta(days=day_of_week(day))


def validate_bounds(begin: datetime, end: datetime) -> Interval:
    """Build an :class:`Interval`, enforcing ordering and the sentinel range.

    Raises:
        InvalidInterval: If ``begin > end`` or either end lies outside
            ``[MIN, MAX]``.
    """
    if begin > end:
        msg = f"Interval begins after it ends ({begin} > {end})"
        raise InvalidInterval(msg)
    if begin < MIN or end > MAX:
        msg = f"Interval outside supported range ({begin} - {end})"
        raise InvalidInterval(msg)
    return Interval(begin, end)


def _parse_range(
    text: str,
    current: Interval,
    today: date,
    now: datetime | None,
) -> tuple[datetime, datetime]:
    begin_text, _, end_text = text.partition(RANGE_SEPARATOR)
    year = current.begin.year
    # Both sides default to midnight; an end date without a time is the
    # start of that day, not its end.
    begin = parse_datetime(begin_text.strip(), MIDNIGHT, year, today, now=now)
    end = parse_datetime(end_text.strip(), MIDNIGHT, year, today, now=now)
    return begin, end


def _parse_single_day(text: str, current: Interval) -> tuple[datetime, datetime]:
    begin = datetime.combine(parse_date(text, current.begin.year), MIDNIGHT)
    return begin, begin + ONE_DAY


def _parse_shortcut(
    text: str,
    current: Interval,
    today: date,
    words: ShortcutWords,
) -> tuple[datetime, datetime]:
    first, _, second = text.partition(" ")
    second = second.strip()

    if first == words.today and not second:
        begin = datetime.combine(today, MIDNIGHT)
        return begin, begin + ONE_DAY

    anchor = current.begin.date()
    offsets = {words.prev: -1, words.this: 0, words.next: 1}
    if first not in offsets:
        msg = f"Unrecognised interval {text!r}"
        raise InvalidInterval(msg)
    step = offsets[first]

    if second == words.day:
        begin = datetime.combine(anchor, MIDNIGHT) + step * ONE_DAY
        return begin, begin + ONE_DAY
    if second == words.week:
        begin = datetime.combine(week_start(anchor), MIDNIGHT) + step * ONE_WEEK
        return begin, begin + ONE_WEEK

    msg = f"Unrecognised interval {text!r}"
    raise InvalidInterval(msg)


def parse_interval(
    text: str,
    current: Interval,
    *,
    words: ShortcutWords = DEFAULT_WORDS,
    today: date | None = None,
    now: datetime | None = None,
) -> Interval:
    """Parse interval command text relative to the *current* working interval.

    Args:
        text: User input, e.g. ``"next week"``, ``"3/15"``, ``"< - 3/1/2012"``.
        current: Working interval that anchors relative phrases and
            supplies the default year.
        words: Shortcut vocabulary (localized).
        today: Local calendar date; defaults to the wall clock.
        now: Value for the ``now`` keyword; defaults to the wall clock.

    Raises:
        InvalidInterval: On any parse or validation failure. Date/time
            errors are chained as the ``__cause__``.
    """
    text = text.strip()
    today = today or local_today()

    try:
        if RANGE_SEPARATOR in text:
            begin, end = _parse_range(text, current, today, now)
        elif DATE_SEPARATOR in text:
            begin, end = _parse_single_day(text, current)
        else:
            begin, end = _parse_shortcut(text, current, today, words)
    except InvalidDateTimeFormat as exc:
        msg = f"Invalid interval {text!r}: {exc}"
        raise InvalidInterval(msg) from exc
    except OverflowError as exc:
        msg = f"Interval {text!r} falls outside the calendar"
        raise InvalidInterval(msg) from exc

    return validate_bounds(begin, end)

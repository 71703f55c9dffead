"""Render intervals in the canonical bracketed form shown at the prompt.

Examples (``month_style="number"``)::

    [10 12 2011]                     a single full day
    [4 12 2011 - 11 12 2011]         whole days
    [15 3 2011 09:00 - 15 3 2011 17:30]
    [< - 1 3 2012]                   open-ended
"""

from __future__ import annotations

import calendar
from datetime import datetime
from typing import Literal

from timefield.domain.datetimes import MAX, MAX_TOKEN, MIDNIGHT, MIN, MIN_TOKEN, is_sentinel
from timefield.domain.intervals import ONE_DAY, Interval

MonthStyle = Literal["number", "short", "long"]


def format_time(moment: datetime) -> str:
    """Time-of-day suffix, e.g. ``" 09:05"``; empty for sentinels."""
    if is_sentinel(moment):
        return ""
    return f" {moment.hour:02d}:{moment.minute:02d}"


def format_month(month: int, style: MonthStyle = "number") -> str:
    if style == "short":
        return calendar.month_abbr[month]
    if style == "long":
        return calendar.month_name[month]
    return str(month)


def format_timestamp(
    moment: datetime,
    time_suffix: str,
    *,
    month_style: MonthStyle = "number",
) -> str:
    """Render ``D M Y`` plus *time_suffix*, or ``<``/``>`` for sentinels."""
    if moment == MIN:
        return MIN_TOKEN
    if moment == MAX:
        return MAX_TOKEN
    month = format_month(moment.month, month_style)
    return f"{moment.day} {month} {moment.year}{time_suffix}"


def is_full_day(interval: Interval) -> bool:
    """True when times are suppressed: both ends at midnight, or end at MAX.

    MAX carries a 23:59 time-of-day yet still counts as a day boundary.
    """
    if interval.begin.time() != MIDNIGHT:
        return False
    return interval.end.time() == MIDNIGHT or interval.end == MAX


def format_interval(interval: Interval, *, month_style: MonthStyle = "number") -> str:
    """Render *interval* as ``[begin]`` for one full day, else ``[begin - end]``."""
    full_day = is_full_day(interval)
    begin_time = "" if full_day else format_time(interval.begin)
    end_time = "" if full_day else format_time(interval.end)

    begin_text = format_timestamp(interval.begin, begin_time, month_style=month_style)
    single_day = full_day and interval.end.date() - interval.begin.date() == ONE_DAY
    if single_day:
        return f"[{begin_text}]"

    end_text = format_timestamp(interval.end, end_time, month_style=month_style)
    return f"[{begin_text} - {end_text}]"

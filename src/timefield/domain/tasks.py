"""Task value type, durations, and the persistence record mapping."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any

from timefield.domain.errors import InvalidDuration
from timefield.domain.intervals import Interval

_DURATION_PART = re.compile(r"\d+")


def parse_duration(text: str) -> timedelta:
    """Parse ``H``, ``H:M`` or ``H:M:S`` into a :class:`timedelta`.

    Minutes and seconds may exceed 59; they are normalized.

    Raises:
        InvalidDuration: On empty input, more than three parts, or a
            component that is not a non-negative integer, or a total too
            large for :class:`timedelta`.
    """
    parts = text.strip().split(":")
    if len(parts) > 3 or not all(_DURATION_PART.fullmatch(p) for p in parts):
        msg = f"Expected H[:M[:S]], got {text!r}"
        raise InvalidDuration(msg)
    hours, minutes, seconds = ([int(p) for p in parts] + [0, 0])[:3]
    try:
        return timedelta(hours=hours, minutes=minutes, seconds=seconds)
    except OverflowError as exc:
        msg = f"Duration {text!r} is too long"
        raise InvalidDuration(msg) from exc


def format_duration(duration: timedelta) -> str:
    """Render as ``HH:MM:SS``; hours may exceed 24."""
    total = int(duration.total_seconds())
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def format_stamp(moment: datetime) -> str:
    return moment.isoformat(sep=" ", timespec="seconds")


def parse_stamp(text: str) -> datetime:
    return datetime.fromisoformat(text.strip())


@dataclass(frozen=True)
class Task:
    """A unit of work with a release/due interval and an effort estimate."""

    title: str
    notes: str
    interval: Interval
    duration: timedelta

    def to_record(self) -> dict[str, str]:
        return {
            "title": self.title,
            "notes": self.notes,
            "release-date": format_stamp(self.interval.begin),
            "due-date": format_stamp(self.interval.end),
            "duration": format_duration(self.duration),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> Task:
        """Build a task from a stored record.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a date or duration does not parse, or the
                interval is out of order.
        """
        interval = Interval(
            parse_stamp(str(record["release-date"])),
            parse_stamp(str(record["due-date"])),
        )
        return cls(
            title=str(record["title"]),
            notes=str(record.get("notes") or ""),
            interval=interval,
            duration=parse_duration(str(record["duration"])),
        )

"""Time-interval model for interview sessions.

A session occupies the closed-open interval ``[start, start + duration)``.
Only sessions sharing a calendar date are ever compared, so a session is
assumed never to span midnight.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any

_TIME_FORMATS = ("%H:%M", "%H:%M:%S", "%I:%M %p", "%I:%M%p")


def parse_time(text: str) -> time:
    """Parse ``HH:MM`` (24-hour) or ``h:MM AM/PM`` clock text.

    Raises:
        ValueError: If the text matches none of the accepted formats.
    """

    raw = " ".join((text or "").strip().upper().split())
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(raw, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Unrecognised time of day: {text!r}")


def parse_date(text: str) -> date:
    """Parse an ISO ``YYYY-MM-DD`` calendar date."""

    try:
        return datetime.strptime((text or "").strip(), "%Y-%m-%d").date()
    except ValueError as exc:
        raise ValueError(f"Expected a YYYY-MM-DD date, got {text!r}") from exc


def normalize_time(text: str) -> str:
    return parse_time(text).strftime("%H:%M")


def normalize_date(text: str) -> str:
    return parse_date(text).isoformat()


@dataclass(frozen=True)
class TimeInterval:  # Temporal footprint of a session on one calendar date
    date: str
    start: datetime
    end: datetime

    @classmethod
    def build(cls, day: str, clock: str, duration_minutes: int) -> "TimeInterval":
        if duration_minutes <= 0:
            raise ValueError("duration_minutes must be positive")
        start = datetime.combine(parse_date(day), parse_time(clock))
        return cls(
            date=start.date().isoformat(),
            start=start,
            end=start + timedelta(minutes=duration_minutes),
        )

    def overlaps(self, other: "TimeInterval") -> bool:
        # touching endpoints (self.end == other.start) do not overlap
        if self.date != other.date:
            return False
        return self.start < other.end and other.start < self.end


def overlaps(a: TimeInterval, b: TimeInterval) -> bool:
    return a.overlaps(b)


def interval_of(session: Any) -> TimeInterval:
    """Build the interval of anything exposing ``date``, ``time`` and ``duration_minutes``."""

    return TimeInterval.build(session.date, session.time, session.duration_minutes)


__all__ = [
    "TimeInterval",
    "interval_of",
    "normalize_date",
    "normalize_time",
    "overlaps",
    "parse_date",
    "parse_time",
]

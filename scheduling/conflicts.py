"""Conflict detection between interview slots."""
from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .intervals import TimeInterval
from .models import InterviewSession

BLOCKING_STATUSES: Tuple[str, ...] = ("scheduled",)


def _same_day(
    sessions: Iterable[InterviewSession],
    candidate: TimeInterval,
    exclude_id: Optional[int],
    statuses: Sequence[str],
) -> Iterator[InterviewSession]:
    for session in sessions:
        if exclude_id is not None and session.id == exclude_id:
            continue
        if session.status not in statuses or session.date != candidate.date:
            continue
        yield session


def find_conflict(
    sessions: Iterable[InterviewSession],
    candidate: TimeInterval,
    exclude_id: Optional[int] = None,
    statuses: Sequence[str] = BLOCKING_STATUSES,
) -> Optional[InterviewSession]:
    """Return a session whose slot overlaps ``candidate``, or ``None``.

    Only sessions in ``statuses`` occupy a slot. When several sessions overlap,
    which one is returned is unspecified.
    """

    for session in _same_day(sessions, candidate, exclude_id, statuses):
        if session.interval.overlaps(candidate):
            return session
    return None


def find_conflicts(
    sessions: Iterable[InterviewSession],
    candidate: TimeInterval,
    exclude_id: Optional[int] = None,
    statuses: Sequence[str] = BLOCKING_STATUSES,
) -> List[InterviewSession]:
    """Return every session whose slot overlaps ``candidate``."""

    return [
        session
        for session in _same_day(sessions, candidate, exclude_id, statuses)
        if session.interval.overlaps(candidate)
    ]


def detect_double_bookings(
    sessions: Iterable[InterviewSession],
) -> List[Tuple[InterviewSession, InterviewSession]]:
    """Return overlapping pairs among scheduled sessions, e.g. in a loaded collection."""

    scheduled = [session for session in sessions if session.status in BLOCKING_STATUSES]
    pairs: List[Tuple[InterviewSession, InterviewSession]] = []
    for index, first in enumerate(scheduled):
        for second in scheduled[index + 1 :]:
            if first.interval.overlaps(second.interval):
                pairs.append((first, second))
    return pairs


__all__ = ["BLOCKING_STATUSES", "detect_double_bookings", "find_conflict", "find_conflicts"]

"""Read-only list, calendar and summary views over filtered sessions."""
from __future__ import annotations

from datetime import date as Date
from typing import Dict, Iterable, List, Union

from pydantic import BaseModel

from .models import InterviewSession


class CalendarDay(BaseModel):  # Sessions sharing one calendar date
    date: str
    sessions: List[InterviewSession]


class ScheduleSummary(BaseModel):  # Dashboard counters
    today: int
    upcoming: int
    completed: int
    pending: int
    total: int


def list_view(sessions: Iterable[InterviewSession]) -> List[InterviewSession]:
    """Sessions in their incoming order; no sort is applied."""

    return list(sessions)


def calendar_view(sessions: Iterable[InterviewSession]) -> List[CalendarDay]:
    """Group sessions by date, earliest date first, each day ordered by time."""

    grouped: Dict[str, List[InterviewSession]] = {}
    for session in sessions:
        grouped.setdefault(session.date, []).append(session)
    return [
        CalendarDay(date=day, sessions=sorted(grouped[day], key=lambda session: session.time))
        for day in sorted(grouped)
    ]


def summarize(sessions: Iterable[InterviewSession], today: Union[Date, str]) -> ScheduleSummary:
    day = today.isoformat() if isinstance(today, Date) else today
    active = [session for session in sessions if session.status != "cancelled"]
    return ScheduleSummary(
        today=sum(1 for session in active if session.date == day),
        upcoming=sum(1 for session in active if session.status == "scheduled"),
        completed=sum(1 for session in active if session.status == "completed"),
        pending=sum(1 for session in active if session.status == "pending"),
        total=len(active),
    )


__all__ = ["CalendarDay", "ScheduleSummary", "calendar_view", "list_view", "summarize"]

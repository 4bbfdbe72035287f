"""CSV export of the current filtered view."""
from __future__ import annotations

import csv
import io
from datetime import date as Date
from typing import Iterable, List, Optional

from config.settings import settings

from .models import InterviewSession

HEADERS: List[str] = [
    "Candidate",
    "Position",
    "Date",
    "Time",
    "Duration",
    "Type",
    "Round",
    "Status",
    "Interviewers",
    "Location",
    "Rating",
]
INTERVIEWER_SEPARATOR = "; "


def _format_rating(rating: Optional[float]) -> str:
    if rating is None:
        return ""
    return f"{rating:g}"


def export_row(session: InterviewSession) -> List[str]:
    return [
        session.candidate_name,
        session.position,
        session.date,
        session.time,
        f"{session.duration_minutes} min",
        session.interview_type,
        session.round,
        session.status,
        INTERVIEWER_SEPARATOR.join(session.interviewers),
        session.location,
        _format_rating(session.rating),
    ]


def serialize(sessions: Iterable[InterviewSession], *, delimiter: Optional[str] = None) -> str:
    """Render sessions as delimited text with a header row.

    Fields containing the delimiter, quotes or line breaks are quoted and
    embedded quotes are doubled, so spreadsheet tools read them back intact.
    """

    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter or settings.EXPORT_DELIMITER,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writerow(HEADERS)
    for session in sessions:
        writer.writerow(export_row(session))
    return buffer.getvalue()


def export_filename(today: Optional[Date] = None) -> str:
    day = today or Date.today()
    return f"interviews_{day.isoformat()}.csv"


__all__ = ["HEADERS", "INTERVIEWER_SEPARATOR", "export_filename", "export_row", "serialize"]

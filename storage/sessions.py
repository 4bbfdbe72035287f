"""Persistence helpers for interview sessions."""
from __future__ import annotations

import datetime as dt
import json
from typing import List

from scheduling.models import Feedback, InterviewSession

from .sqlite import get_conn


def upsert_session(session: InterviewSession) -> None:
    """Insert or replace the stored row for ``session``."""

    timestamp = dt.datetime.now(dt.timezone.utc).isoformat()
    feedback_json = session.feedback.model_dump_json(exclude={"overall_score"}) if session.feedback else None
    with get_conn() as conn:
        conn.execute(
            """INSERT OR REPLACE INTO interview_sessions
               (id, candidate_name, position, date, time, duration_minutes, round,
                interview_type, status, interviewers_json, location, notes,
                feedback_json, cancelled_at, updated_at)
               VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)""",
            (
                session.id,
                session.candidate_name,
                session.position,
                session.date,
                session.time,
                session.duration_minutes,
                session.round,
                session.interview_type,
                session.status,
                json.dumps(session.interviewers, ensure_ascii=False),
                session.location,
                session.notes,
                feedback_json,
                session.cancelled_at,
                timestamp,
            ),
        )


def load_sessions() -> List[InterviewSession]:
    """Load every stored session, tombstones included, ordered by id."""

    with get_conn() as conn:
        rows = conn.execute(
            """
            SELECT id, candidate_name, position, date, time, duration_minutes, round,
                   interview_type, status, interviewers_json, location, notes,
                   feedback_json, cancelled_at
            FROM interview_sessions
            ORDER BY id ASC
            """
        ).fetchall()
    return [
        InterviewSession(
            id=row["id"],
            candidate_name=row["candidate_name"],
            position=row["position"],
            date=row["date"],
            time=row["time"],
            duration_minutes=row["duration_minutes"],
            round=row["round"],
            interview_type=row["interview_type"],
            status=row["status"],
            interviewers=json.loads(row["interviewers_json"]),
            location=row["location"],
            notes=row["notes"],
            feedback=Feedback.model_validate_json(row["feedback_json"]) if row["feedback_json"] else None,
            cancelled_at=row["cancelled_at"],
        )
        for row in rows
    ]


def count_sessions() -> int:
    with get_conn() as conn:
        return int(conn.execute("SELECT COUNT(*) FROM interview_sessions").fetchone()[0])

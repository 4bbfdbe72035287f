"""Persistence helpers for the scheduling audit log."""
from __future__ import annotations

import datetime as dt
import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .sqlite import get_conn


class ScheduleEventPayload(BaseModel):
    session_id: Optional[int] = None
    action: str
    outcome: str
    conflict_id: Optional[int] = None
    warning: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)


class ScheduleEventRow(ScheduleEventPayload):
    id: int
    timestamp: str


def insert_schedule_event(**data: Any) -> int:
    """Insert an audit row and return its primary key."""

    payload = ScheduleEventPayload(**data)
    timestamp = dt.datetime.now(dt.timezone.utc).isoformat()
    with get_conn() as conn:
        cur = conn.cursor()
        cur.execute(
            """INSERT INTO schedule_events
               (timestamp, session_id, action, outcome, conflict_id, warning, metadata)
               VALUES (?, ?, ?, ?, ?, ?, ?)""",
            (
                timestamp,
                payload.session_id,
                payload.action,
                payload.outcome,
                payload.conflict_id,
                payload.warning,
                json.dumps(payload.metadata),
            ),
        )
        return int(cur.lastrowid)


def recent_events(limit: int = 20, session_id: Optional[int] = None) -> List[ScheduleEventRow]:
    """Return the newest audit rows first."""

    query = """
        SELECT id, timestamp, session_id, action, outcome, conflict_id, warning, metadata
        FROM schedule_events
    """
    params: tuple = ()
    if session_id is not None:
        query += " WHERE session_id = ?"
        params = (session_id,)
    query += " ORDER BY id DESC LIMIT ?"
    with get_conn() as conn:
        rows = conn.execute(query, params + (limit,)).fetchall()
    return [
        ScheduleEventRow(
            id=row["id"],
            timestamp=row["timestamp"],
            session_id=row["session_id"],
            action=row["action"],
            outcome=row["outcome"],
            conflict_id=row["conflict_id"],
            warning=row["warning"],
            metadata=json.loads(row["metadata"]) if row["metadata"] else {},
        )
        for row in rows
    ]

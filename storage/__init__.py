"""SQLite persistence for interview sessions and the scheduling audit log."""
from .events import ScheduleEventRow, insert_schedule_event, recent_events
from .migrate import migrate
from .sessions import count_sessions, load_sessions, upsert_session
from .sqlite import get_conn

__all__ = [
    "ScheduleEventRow",
    "count_sessions",
    "get_conn",
    "insert_schedule_event",
    "load_sessions",
    "migrate",
    "recent_events",
    "upsert_session",
]

"""SQLite schema migrations."""
from __future__ import annotations

import os
import sqlite3
from typing import Iterable, Optional

from config.settings import settings

SCHEMA: Iterable[str] = [
    """
CREATE TABLE IF NOT EXISTS interview_sessions (
  id INTEGER PRIMARY KEY,
  candidate_name TEXT NOT NULL,
  position TEXT NOT NULL,
  date TEXT NOT NULL,
  time TEXT NOT NULL,
  duration_minutes INTEGER NOT NULL CHECK (duration_minutes > 0),
  round TEXT NOT NULL,
  interview_type TEXT NOT NULL,
  status TEXT NOT NULL,
  interviewers_json TEXT NOT NULL,
  location TEXT NOT NULL,
  notes TEXT NOT NULL,
  feedback_json TEXT,
  cancelled_at TEXT,
  updated_at TEXT NOT NULL
);
""",
    """
CREATE INDEX IF NOT EXISTS idx_interview_sessions_date
  ON interview_sessions (date, time);
""",
    """
CREATE TABLE IF NOT EXISTS schedule_events (
  id INTEGER PRIMARY KEY AUTOINCREMENT,
  timestamp TEXT NOT NULL,
  session_id INTEGER,
  action TEXT NOT NULL,
  outcome TEXT NOT NULL,
  conflict_id INTEGER,
  warning TEXT,
  metadata TEXT
);
""",
]


def migrate(db_path: Optional[str] = None) -> None:
    """Apply schema migrations to the SQLite database."""

    path = db_path or settings.DB_PATH
    directory = os.path.dirname(path) or "."
    os.makedirs(directory, exist_ok=True)
    conn = sqlite3.connect(path)
    try:
        cur = conn.cursor()
        for stmt in SCHEMA:
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


if __name__ == "__main__":
    migrate()

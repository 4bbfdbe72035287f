"""Lightweight CLI helpers for inspecting the interview schedule."""
from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional

from config.catalog import get_catalog
from scheduling.export import export_filename, serialize
from scheduling.projector import FilterCriteria, project
from scheduling.views import calendar_view
from storage.events import recent_events
from storage.migrate import migrate
from storage.sessions import load_sessions


def tail_events(limit: int = 20) -> None:
    for event in recent_events(limit):
        conflict = f" conflict={event.conflict_id}" if event.conflict_id else ""
        print(f"[{event.timestamp}] #{event.session_id} {event.action} -> {event.outcome}{conflict}")


def print_calendar(date_from: Optional[str] = None, date_to: Optional[str] = None) -> None:
    criteria = FilterCriteria(date_from=date_from, date_to=date_to)
    catalog = get_catalog()
    for day in calendar_view(project(load_sessions(), criteria)):
        print(day.date)
        for session in day.sessions:
            print(
                f"  {session.time} ({session.duration_minutes} min) {session.candidate_name}"
                f" [{catalog.round_label(session.round)}/{session.status}] {session.location}"
            )


def export_csv(target: Optional[str] = None) -> Path:
    path = Path(target) if target else Path(export_filename())
    path.write_text(serialize(project(load_sessions())), encoding="utf-8")
    print(f"wrote {path}")
    return path


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--tail-events", type=int, help="Show the latest scheduling audit events")
    parser.add_argument("--calendar", action="store_true", help="Print the calendar view")
    parser.add_argument("--date-from", help="Calendar start date (YYYY-MM-DD)")
    parser.add_argument("--date-to", help="Calendar end date (YYYY-MM-DD)")
    parser.add_argument("--export", nargs="?", const="", help="Write the CSV export")
    args = parser.parse_args()

    migrate()
    if args.tail_events:
        tail_events(args.tail_events)
    if args.calendar:
        print_calendar(args.date_from, args.date_to)
    if args.export is not None:
        export_csv(args.export or None)


if __name__ == "__main__":
    main()

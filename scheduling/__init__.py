"""Interview scheduling and conflict resolution engine."""
from .conflicts import detect_double_bookings, find_conflict, find_conflicts
from .export import export_filename, serialize
from .intervals import TimeInterval, interval_of, overlaps
from .models import Feedback, InterviewSession, MutationResult, SessionDraft
from .projector import DebouncedProjector, FilterCriteria, project
from .store import SessionStore
from .views import CalendarDay, ScheduleSummary, calendar_view, list_view, summarize

__all__ = [
    "CalendarDay",
    "DebouncedProjector",
    "Feedback",
    "FilterCriteria",
    "InterviewSession",
    "MutationResult",
    "ScheduleSummary",
    "SessionDraft",
    "SessionStore",
    "TimeInterval",
    "calendar_view",
    "detect_double_bookings",
    "export_filename",
    "find_conflict",
    "find_conflicts",
    "interval_of",
    "list_view",
    "overlaps",
    "project",
    "serialize",
    "summarize",
]

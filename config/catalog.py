"""Scheduling catalog: interviewer roster, rounds, durations and meeting types."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel, Field

from .settings import settings

logger = logging.getLogger(__name__)


class InterviewerEntry(BaseModel):
    """Roster member who can sit on an interview panel."""

    id: str
    name: str
    role: str = ""


class CatalogOption(BaseModel):
    value: str
    label: str


class DurationOption(BaseModel):
    minutes: int = Field(gt=0)
    label: str


class SchedulingCatalog(BaseModel):
    """Fixed choices offered by the scheduling form."""

    interviewers: List[InterviewerEntry] = Field(default_factory=list)
    rounds: List[CatalogOption] = Field(default_factory=list)
    durations: List[DurationOption] = Field(default_factory=list)
    interview_types: List[CatalogOption] = Field(default_factory=list)

    def round_label(self, value: str) -> str:
        for option in self.rounds:
            if option.value == value:
                return option.label
        return value

    def duration_minutes(self) -> List[int]:
        return [option.minutes for option in self.durations]

    def allows_duration(self, minutes: int) -> bool:
        # a catalog without duration options accepts any positive length
        return not self.durations or minutes in self.duration_minutes()


def default_catalog() -> SchedulingCatalog:
    """Return the built-in roster used when no catalog file is configured."""

    return SchedulingCatalog(
        interviewers=[
            InterviewerEntry(id="fatima", name="Dr. Fatima Hassan", role="Principal"),
            InterviewerEntry(id="mohammed", name="Prof. Mohammed Saeed", role="VP Academic"),
            InterviewerEntry(id="khalid", name="Dr. Khalid Omar", role="Head of Subject"),
            InterviewerEntry(id="layla", name="Layla Mohammed", role="HR Manager"),
            InterviewerEntry(id="omar", name="Omar Ali", role="Department Head"),
        ],
        rounds=[
            CatalogOption(value="screening", label="Screening Call"),
            CatalogOption(value="technical", label="Technical Interview"),
            CatalogOption(value="demo", label="Teaching Demo"),
            CatalogOption(value="hr", label="HR Interview"),
            CatalogOption(value="final", label="Final Panel"),
        ],
        durations=[
            DurationOption(minutes=15, label="15 minutes"),
            DurationOption(minutes=30, label="30 minutes"),
            DurationOption(minutes=45, label="45 minutes"),
            DurationOption(minutes=60, label="1 hour"),
            DurationOption(minutes=90, label="1.5 hours"),
            DurationOption(minutes=120, label="2 hours"),
        ],
        interview_types=[
            CatalogOption(value="video", label="Video Call (Microsoft Teams)"),
            CatalogOption(value="video-zoom", label="Video Call (Zoom)"),
            CatalogOption(value="video-meet", label="Video Call (Google Meet)"),
            CatalogOption(value="in-person", label="In-Person"),
            CatalogOption(value="phone", label="Phone Interview"),
        ],
    )


def load_catalog(path: Optional[Path] = None) -> SchedulingCatalog:
    """Load the catalog from disk, falling back to the built-in one."""

    if path is None:
        return default_catalog()
    data = Path(path).read_text(encoding="utf-8")
    return SchedulingCatalog.model_validate_json(data)


def resolve_interviewers(catalog: SchedulingCatalog, ids: Iterable[str]) -> List[str]:
    """Map roster ids to display names, preserving order.

    Raises:
        KeyError: If an id is not on the roster.
    """

    by_id = {entry.id: entry.name for entry in catalog.interviewers}
    names: List[str] = []
    for interviewer_id in ids:
        if interviewer_id not in by_id:
            raise KeyError(f"Interviewer '{interviewer_id}' missing from roster")
        names.append(by_id[interviewer_id])
    return names


_cached: Optional[Tuple[Optional[str], SchedulingCatalog]] = None
_cache_guard = threading.Lock()


def get_catalog() -> SchedulingCatalog:
    """Return the catalog for ``settings.CATALOG_PATH``, read once per path.

    A configured file that does not exist falls back to the built-in
    catalog with a warning; a malformed file still raises.
    """

    global _cached
    path = settings.CATALOG_PATH or None
    with _cache_guard:
        if _cached is not None and _cached[0] == path:
            return _cached[1]
        try:
            catalog = load_catalog(Path(path) if path else None)
        except FileNotFoundError:
            logger.warning("Catalog file %s missing, serving built-in catalog", path)
            catalog = default_catalog()
        _cached = (path, catalog)
        return catalog


def reset_catalog() -> None:
    global _cached
    with _cache_guard:
        _cached = None

"""Filter/search projection over the session collection.

``project`` evaluates immediately. ``DebouncedProjector`` wraps it for
interactive search boxes: free-text changes only trigger a re-evaluation
once typing has paused for the quiescence window, and the last keystroke
always wins.
"""
from __future__ import annotations

import threading
import time
from typing import Any, Callable, Dict, Iterable, List, Literal, Optional, Union

from pydantic import BaseModel, field_validator

from config.settings import settings
from observability.logger import log_event

from .intervals import normalize_date
from .models import InterviewSession, Round, Status

SessionSource = Callable[[], Iterable[InterviewSession]]
UpdateCallback = Callable[[List[InterviewSession]], None]


class FilterCriteria(BaseModel):
    """Optional predicates; all active ones are ANDed together."""

    status: Union[Status, Literal["all"]] = "all"
    round: Union[Round, Literal["all"]] = "all"
    free_text: str = ""
    date_from: Optional[str] = None
    date_to: Optional[str] = None
    include_cancelled: bool = False

    @field_validator("status", "round", mode="before")
    @classmethod
    def _blank_means_all(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return "all"
        return value

    @field_validator("free_text", mode="before")
    @classmethod
    def _blank_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("date_from", "date_to", mode="before")
    @classmethod
    def _iso_bounds(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return None
        return normalize_date(value)


def matches(session: InterviewSession, criteria: FilterCriteria) -> bool:
    if session.status == "cancelled" and not (criteria.include_cancelled or criteria.status == "cancelled"):
        return False
    if criteria.status != "all" and session.status != criteria.status:
        return False
    if criteria.round != "all" and session.round != criteria.round:
        return False
    needle = criteria.free_text.strip().lower()
    if needle and needle not in session.candidate_name.lower() and needle not in session.position.lower():
        return False
    # ISO dates compare chronologically as strings
    if criteria.date_from and session.date < criteria.date_from:
        return False
    if criteria.date_to and session.date > criteria.date_to:
        return False
    return True


def project(
    sessions: Iterable[InterviewSession],
    criteria: Optional[FilterCriteria] = None,
) -> List[InterviewSession]:
    """Return the sessions matching ``criteria``, keeping their order."""

    criteria = criteria or FilterCriteria()
    return [session for session in sessions if matches(session, criteria)]


class DebouncedProjector:  # Search-as-you-type wrapper around ``project``
    def __init__(
        self,
        source: SessionSource,
        criteria: Optional[FilterCriteria] = None,
        *,
        delay_ms: Optional[int] = None,
        on_update: Optional[UpdateCallback] = None,
    ) -> None:
        self._source = source
        self._criteria = criteria or FilterCriteria()
        delay = settings.SEARCH_DEBOUNCE_MS if delay_ms is None else delay_ms
        self._delay = max(delay, 0) / 1000.0
        self._on_update = on_update
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._pending_text: Optional[str] = None
        self._generation = 0
        # bumped whenever the criteria change; only the newest evaluation may publish
        self._revision = 0
        self.evaluations = 0
        self._results: List[InterviewSession] = []
        self._evaluate({})

    @property
    def criteria(self) -> FilterCriteria:
        with self._lock:
            return self._criteria

    @property
    def results(self) -> List[InterviewSession]:
        with self._lock:
            return list(self._results)

    @property
    def pending(self) -> bool:
        with self._lock:
            return self._pending_text is not None

    def set_query(self, text: str) -> None:
        """Record a keystroke; re-evaluation waits for the quiescence window."""

        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._pending_text = text or ""
            self._timer = threading.Timer(self._delay, self._fire, args=(self._generation,))
            self._timer.daemon = True
            self._timer.start()

    def set_filters(self, **changes: Any) -> List[InterviewSession]:
        """Change non-text predicates and re-evaluate immediately."""

        changes.pop("free_text", None)
        return self._evaluate(changes)

    def refresh(self) -> List[InterviewSession]:
        """Re-run the current criteria, e.g. after the store changed."""

        return self._evaluate({})

    def flush(self) -> List[InterviewSession]:
        """Run a pending search now instead of waiting for the timer."""

        text = self._take_pending()
        if text is not None:
            self._evaluate({"free_text": text})
        return self.results

    def cancel(self) -> None:
        self._take_pending()

    def _take_pending(self) -> Optional[str]:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1
            text, self._pending_text = self._pending_text, None
            return text

    def _fire(self, generation: int) -> None:
        with self._lock:
            # a newer keystroke or a flush superseded this timer
            if generation != self._generation or self._pending_text is None:
                return
            text, self._pending_text = self._pending_text, None
            self._timer = None
        self._evaluate({"free_text": text})

    def _evaluate(self, changes: Dict[str, Any]) -> List[InterviewSession]:
        """Merge ``changes`` into the live criteria and evaluate them.

        The merge happens under the lock, so concurrent filter and text
        changes accumulate instead of overwriting each other. An evaluation
        that finishes after a newer one started is returned to its caller
        but not published.
        """

        with self._lock:
            data = self._criteria.model_dump()
            data.update(changes)
            criteria = FilterCriteria.model_validate(data)
            self._criteria = criteria
            self._revision += 1
            revision = self._revision

        started = time.perf_counter()
        results = project(self._source(), criteria)
        log_event(
            "search",
            None,
            results=len(results),
            ms=round((time.perf_counter() - started) * 1000, 2),
        )

        with self._lock:
            if revision != self._revision:
                return list(results)
            self._results = results
            self.evaluations += 1
        if self._on_update is not None:
            self._on_update(list(results))
        return list(results)


__all__ = ["DebouncedProjector", "FilterCriteria", "matches", "project"]

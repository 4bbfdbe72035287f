"""In-memory interview session store and mutator.

Every mutation runs under one re-entrant lock and reports its outcome as a
``MutationResult``. A detected conflict is returned, never raised, so the
caller can show an inline warning and let the operator resubmit.
"""
from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from threading import RLock
from typing import Dict, Iterable, List, Literal, Optional

from observability.logger import log_event

from .conflicts import find_conflict
from .intervals import TimeInterval
from .models import Action, Feedback, InterviewSession, MutationResult, Outcome, SessionDraft, conflict_warning

CreateStatus = Literal["scheduled", "pending"]


class SessionStore:  # Thread-safe in-memory session collection
    def __init__(self, sessions: Iterable[InterviewSession] = (), *, next_id: Optional[int] = None) -> None:
        self._lock = RLock()
        self._sessions: Dict[int, InterviewSession] = {}
        for session in sessions:
            if session.id in self._sessions:
                raise ValueError(f"Duplicate interview id {session.id}")
            self._sessions[session.id] = session
        # ids come from a monotonic counter and are never reused after a cancel
        start = max(self._sessions, default=0) + 1
        if next_id is not None:
            start = max(start, next_id)
        self._ids = count(start)

    def __len__(self) -> int:  # Number of sessions visible in the default views
        with self._lock:
            return sum(1 for session in self._sessions.values() if session.status != "cancelled")

    def __contains__(self, session_id: object) -> bool:
        with self._lock:
            return session_id in self._sessions

    def get(self, session_id: int) -> Optional[InterviewSession]:
        with self._lock:
            return self._sessions.get(session_id)

    def sessions(self, *, include_cancelled: bool = False) -> List[InterviewSession]:
        """Snapshot of the collection in insertion order."""

        with self._lock:
            return [
                session
                for session in self._sessions.values()
                if include_cancelled or session.status != "cancelled"
            ]

    def feedback_for(self, session_id: int) -> Optional[Feedback]:
        with self._lock:
            session = self._sessions.get(session_id)
        return session.feedback if session else None

    def create(self, draft: SessionDraft, *, status: CreateStatus = "scheduled") -> MutationResult:
        """Add a new session; scheduled sessions must land in a free slot."""

        if status not in ("scheduled", "pending"):
            raise ValueError(f"Interviews cannot be created as '{status}'")
        with self._lock:
            if status == "scheduled":
                candidate = TimeInterval.build(draft.date, draft.time, draft.duration_minutes)
                conflict = find_conflict(self._sessions.values(), candidate)
                if conflict is not None:
                    return self._conflict("create", None, conflict)
            session = InterviewSession(id=next(self._ids), status=status, **draft.model_dump())
            self._sessions[session.id] = session
            return self._result("create", "applied", session.id, session=session)

    def reschedule(
        self,
        session_id: int,
        *,
        date: Optional[str] = None,
        time: Optional[str] = None,
        duration_minutes: Optional[int] = None,
    ) -> MutationResult:
        """Move a session; omitted fields keep their current values."""

        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                return self._result("reschedule", "not_found", session_id)
            if current.status not in ("scheduled", "pending"):
                return self._result(
                    "reschedule",
                    "rejected",
                    session_id,
                    session=current,
                    warning=f"Cannot reschedule a {current.status} interview",
                )
            revised = current.revise(
                date=date or current.date,
                time=time or current.time,
                duration_minutes=duration_minutes or current.duration_minutes,
            )
            if revised.status == "scheduled":
                conflict = find_conflict(self._sessions.values(), revised.interval, exclude_id=session_id)
                if conflict is not None:
                    return self._conflict("reschedule", current, conflict)
            self._sessions[session_id] = revised
            return self._result("reschedule", "applied", session_id, session=revised)

    def assign(
        self,
        session_id: int,
        *,
        date: str,
        time: str,
        duration_minutes: Optional[int] = None,
    ) -> MutationResult:
        """Confirm a pending session into a concrete, conflict-free slot."""

        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                return self._result("assign", "not_found", session_id)
            if current.status != "pending":
                return self._result(
                    "assign",
                    "rejected",
                    session_id,
                    session=current,
                    warning=f"Only pending interviews can be assigned a slot, this one is {current.status}",
                )
            revised = current.revise(
                date=date,
                time=time,
                duration_minutes=duration_minutes or current.duration_minutes,
                status="scheduled",
            )
            conflict = find_conflict(self._sessions.values(), revised.interval, exclude_id=session_id)
            if conflict is not None:
                return self._conflict("assign", current, conflict)
            self._sessions[session_id] = revised
            return self._result("assign", "applied", session_id, session=revised)

    def cancel(self, session_id: int) -> MutationResult:
        """Mark a session cancelled; the tombstone stays for auditing."""

        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                return self._result("cancel", "not_found", session_id)
            if current.status == "cancelled":
                return self._result("cancel", "unchanged", session_id, session=current)
            if current.status == "completed":
                return self._result(
                    "cancel",
                    "rejected",
                    session_id,
                    session=current,
                    warning="Completed interviews cannot be cancelled",
                )
            cancelled = current.revise(
                status="cancelled",
                cancelled_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
            )
            self._sessions[session_id] = cancelled
            return self._result("cancel", "applied", session_id, session=cancelled)

    def complete(self, session_id: int, feedback: Feedback) -> MutationResult:
        """Attach panel feedback and close the session.

        Feedback on a completed session is read-only: a second submission
        leaves the stored values untouched.
        """

        with self._lock:
            current = self._sessions.get(session_id)
            if current is None:
                return self._result("complete", "not_found", session_id)
            if current.status == "completed":
                return self._result(
                    "complete",
                    "unchanged",
                    session_id,
                    session=current,
                    warning="Feedback has already been submitted for this interview",
                )
            if current.status != "scheduled":
                return self._result(
                    "complete",
                    "rejected",
                    session_id,
                    session=current,
                    warning=f"Cannot complete a {current.status} interview",
                )
            completed = current.revise(status="completed", feedback=feedback)
            self._sessions[session_id] = completed
            return self._result("complete", "applied", session_id, session=completed)

    def _conflict(
        self,
        action: Action,
        session: Optional[InterviewSession],
        conflict: InterviewSession,
    ) -> MutationResult:
        return self._result(
            action,
            "conflict",
            session.id if session else None,
            session=session,
            conflict=conflict,
            warning=conflict_warning(conflict),
        )

    def _result(
        self,
        action: Action,
        outcome: Outcome,
        session_id: Optional[int],
        *,
        session: Optional[InterviewSession] = None,
        conflict: Optional[InterviewSession] = None,
        warning: Optional[str] = None,
    ) -> MutationResult:
        log_event(
            action,
            session_id,
            outcome=outcome,
            status=session.status if session else None,
            date=session.date if session else None,
            time=session.time if session else None,
            conflict_id=conflict.id if conflict else None,
        )
        return MutationResult(
            action=action,
            outcome=outcome,
            session_id=session_id,
            session=session,
            conflict=conflict,
            warning=warning,
        )


__all__ = ["SessionStore"]

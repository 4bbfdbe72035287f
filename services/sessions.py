"""Helpers for loading the session store and persisting its mutations."""
from __future__ import annotations

import threading
from typing import Callable, Optional

from config.settings import settings
from scheduling.conflicts import detect_double_bookings
from scheduling.models import MutationResult
from scheduling.store import SessionStore
from observability.logger import log_event
from storage.events import insert_schedule_event
from storage.migrate import migrate
from storage.seed import seed_demo_sessions
from storage.sessions import load_sessions, upsert_session

from .invites import send_invite

_INVITE_ACTIONS = {"create": "scheduled", "assign": "scheduled", "reschedule": "rescheduled"}

_store: Optional[SessionStore] = None
_store_guard = threading.Lock()
# held across a store mutation and its write-back so SQLite sees writes in memory order
_write_guard = threading.RLock()


def load_store() -> SessionStore:
    """Build a store from the persisted collection."""

    migrate(settings.DB_PATH)
    if settings.SEED_DEMO_DATA:
        seed_demo_sessions()
    sessions = load_sessions()
    for first, second in detect_double_bookings(sessions):
        log_event("double_booking", first.id, conflict_id=second.id, date=first.date, time=first.time)
    return SessionStore(sessions)


def get_store() -> SessionStore:
    """Return the process-wide store, loading it on first use."""

    global _store
    with _store_guard:
        if _store is None:
            _store = load_store()
        return _store


def reset_store() -> None:
    global _store
    with _store_guard:
        _store = None


def _persist(result: MutationResult) -> None:
    if result.applied and result.session is not None:
        upsert_session(result.session)
    insert_schedule_event(
        session_id=result.session_id,
        action=result.action,
        outcome=result.outcome,
        conflict_id=result.conflict.id if result.conflict else None,
        warning=result.warning,
        metadata={"status": result.session.status} if result.session else {},
    )


def _notify(result: MutationResult) -> None:
    invite_action = _INVITE_ACTIONS.get(result.action)
    if (
        invite_action
        and result.applied
        and result.session is not None
        and result.session.status == "scheduled"
    ):
        send_invite(result.session, invite_action)


def mutate(change: Callable[[SessionStore], MutationResult]) -> MutationResult:
    """Apply ``change`` to the process store and persist it as one step.

    Concurrent callers are serialised, so the durable copy always matches
    the in-memory order of mutations. Invites go out after the write lock
    is released.
    """

    store = get_store()
    with _write_guard:
        result = change(store)
        _persist(result)
    _notify(result)
    return result


__all__ = ["get_store", "load_store", "mutate", "reset_store"]

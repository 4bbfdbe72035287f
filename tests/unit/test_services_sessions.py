import threading
import time

import services.sessions as session_service
from config.registry import INVITE_KEY, bind_hook
from config.settings import settings
from scheduling.models import SessionDraft
from services.invites import send_invite
from services.sessions import get_store, load_store, mutate, reset_store
from storage.events import recent_events
from storage.sessions import load_sessions


def _draft(name: str, clock: str, minutes: int = 60) -> SessionDraft:
    return SessionDraft(candidate_name=name, date="2024-01-20", time=clock, duration_minutes=minutes)


def test_store_is_loaded_once_per_process():
    assert get_store() is get_store()
    first = get_store()
    reset_store()
    assert get_store() is not first


def test_applied_results_are_persisted_and_reloaded():
    created = mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00")))
    mutate(lambda store: store.reschedule(created.session.id, time="11:00"))

    assert [s.time for s in load_sessions()] == ["11:00"]

    reset_store()
    reloaded = get_store()
    assert reloaded.get(created.session.id).time == "11:00"
    assert reloaded.create(_draft("Sara Abdullah", "11:30", 30)).outcome == "conflict"


def test_conflicts_are_audited_but_not_persisted():
    mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00")))
    mutate(lambda store: store.create(_draft("Sara Abdullah", "10:30", 30)))

    assert len(load_sessions()) == 1
    latest = recent_events(1)[0]
    assert latest.outcome == "conflict"
    assert latest.conflict_id == 1
    assert "Ahmad Al-Rashid" in latest.warning


def test_cancel_tombstone_survives_reload():
    sid = mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00"))).session.id
    mutate(lambda store: store.cancel(sid))

    reset_store()
    reloaded = get_store()
    assert len(reloaded) == 0
    assert reloaded.get(sid).status == "cancelled"
    assert reloaded.create(_draft("Sara Abdullah", "10:00")).session.id == sid + 1


def test_invites_follow_scheduling_changes(invites):
    sid = mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00"))).session.id
    mutate(lambda store: store.create(_draft("Sara Abdullah", "10:30", 30)))
    mutate(lambda store: store.create(_draft("Mariam Khalil", "15:00"), status="pending"))
    mutate(lambda store: store.reschedule(sid, time="12:00"))
    mutate(lambda store: store.cancel(sid))

    assert [(call["session"].candidate_name, call["action"]) for call in invites] == [
        ("Ahmad Al-Rashid", "scheduled"),
        ("Ahmad Al-Rashid", "rescheduled"),
    ]


def test_send_invite_without_or_with_failing_hook():
    session = get_store().create(_draft("Ahmad Al-Rashid", "10:00")).session
    assert send_invite(session, "scheduled") is False

    def boom(**_):
        raise RuntimeError("smtp down")

    bind_hook(INVITE_KEY, boom)
    assert send_invite(session, "scheduled") is False


def test_demo_seed_on_load(monkeypatch):
    monkeypatch.setattr(settings, "SEED_DEMO_DATA", True, raising=False)
    store = load_store()
    assert len(store) == 7
    assert store.get(3).rating == 4.5


def test_concurrent_mutations_reach_database_in_memory_order(monkeypatch):
    sid = mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00"))).session.id
    real_upsert = session_service.upsert_session
    writing_first = threading.Event()

    def slow_upsert(session):
        if session.time == "11:00":
            writing_first.set()
            time.sleep(0.2)
        real_upsert(session)

    monkeypatch.setattr(session_service, "upsert_session", slow_upsert)
    first = threading.Thread(target=mutate, args=(lambda store: store.reschedule(sid, time="11:00"),))
    first.start()
    assert writing_first.wait(timeout=2.0)
    second = threading.Thread(target=mutate, args=(lambda store: store.reschedule(sid, time="12:00"),))
    second.start()
    first.join()
    second.join()

    assert get_store().get(sid).time == "12:00"
    assert [s.time for s in load_sessions()] == ["12:00"]


def test_mutate_sends_invites_for_applied_changes(invites):
    mutate(lambda store: store.create(_draft("Ahmad Al-Rashid", "10:00")))
    clash = mutate(lambda store: store.create(_draft("Sara Abdullah", "10:30", 30)))
    assert clash.outcome == "conflict"
    assert [call["action"] for call in invites] == ["scheduled"]

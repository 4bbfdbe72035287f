import sqlite3

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import router
from config.settings import settings


app = FastAPI()
app.include_router(router)
client = TestClient(app)


def _create(name, time, minutes=60, **extra):
    body = {"candidate_name": name, "date": "2024-01-20", "time": time, "duration_minutes": minutes}
    body.update(extra)
    return client.post("/api/interviews", json=body)


def test_create_conflict_then_free_slot(invites):
    first = _create("Ahmad Al-Rashid", "10:00", interviewer_ids=["fatima"])
    assert first.status_code == 201
    body = first.json()
    assert body["outcome"] == "applied"
    assert body["session"]["id"] == 1
    assert body["session"]["interviewers"] == ["Dr. Fatima Hassan"]
    assert body["session"]["position"] == "Pending Assignment"

    clash = _create("Sara Abdullah", "10:30", 45)
    assert clash.status_code == 409
    clash_body = clash.json()
    assert clash_body["outcome"] == "conflict"
    assert clash_body["conflict"]["id"] == 1
    assert clash_body["warning"].startswith("Time conflict with Ahmad Al-Rashid")

    touching = _create("Sara Abdullah", "11:00", 45)
    assert touching.status_code == 201
    assert touching.json()["session"]["id"] == 2

    listed = client.get("/api/interviews").json()
    assert [s["candidate_name"] for s in listed] == ["Ahmad Al-Rashid", "Sara Abdullah"]
    assert [call["session"].id for call in invites] == [1, 2]

    conn = sqlite3.connect(settings.DB_PATH)
    outcomes = [row[0] for row in conn.execute("SELECT outcome FROM schedule_events ORDER BY id")]
    conn.close()
    assert outcomes == ["applied", "conflict", "applied"]


def test_twelve_hour_input_is_normalised():
    resp = _create("Aisha Mohammed", "2:30 PM", 30)
    assert resp.status_code == 201
    assert resp.json()["session"]["time"] == "14:30"


def test_reschedule_cancel_and_reuse_slot():
    _create("Ahmad Al-Rashid", "10:00")
    _create("Khalid Ibrahim", "11:00")

    blocked = client.post("/api/interviews/2/reschedule", json={"time": "10:30"})
    assert blocked.status_code == 409
    assert blocked.json()["conflict"]["id"] == 1
    assert client.get("/api/interviews/2").json()["time"] == "11:00"

    moved = client.post("/api/interviews/2/reschedule", json={"time": "12:00", "duration_minutes": 30})
    assert moved.status_code == 200
    assert moved.json()["session"]["time"] == "12:00"
    assert moved.json()["session"]["duration_minutes"] == 30

    cancelled = client.post("/api/interviews/1/cancel")
    assert cancelled.status_code == 200
    assert cancelled.json()["session"]["status"] == "cancelled"
    again = client.post("/api/interviews/1/cancel")
    assert again.json()["outcome"] == "unchanged"

    assert [s["id"] for s in client.get("/api/interviews").json()] == [2]
    assert [s["id"] for s in client.get("/api/interviews?include_cancelled=true").json()] == [1, 2]

    reuse = _create("Hassan Ali", "10:00")
    assert reuse.status_code == 201
    assert reuse.json()["session"]["id"] == 3


def test_pending_then_assign(invites):
    _create("Ahmad Al-Rashid", "10:00")
    pending = client.post(
        "/api/interviews?status=pending",
        json={"candidate_name": "Mariam Khalil", "date": "2024-01-20", "time": "10:15"},
    )
    assert pending.status_code == 201
    assert pending.json()["session"]["status"] == "pending"

    clash = client.post("/api/interviews/2/assign", json={"date": "2024-01-20", "time": "10:30"})
    assert clash.status_code == 409

    assigned = client.post("/api/interviews/2/assign", json={"date": "2024-01-21", "time": "09:00"})
    assert assigned.status_code == 200
    assert assigned.json()["session"]["status"] == "scheduled"
    assert [(call["session"].id, call["action"]) for call in invites] == [(1, "scheduled"), (2, "scheduled")]

    twice = client.post("/api/interviews/2/assign", json={"date": "2024-01-22", "time": "09:00"})
    assert twice.status_code == 400

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import router
from config.settings import settings


app = FastAPI()
app.include_router(router)
client = TestClient(app)


def test_unknown_interview_is_404():
    assert client.get("/api/interviews/99").status_code == 404
    assert client.post("/api/interviews/99/cancel").status_code == 404
    assert client.post("/api/interviews/99/reschedule", json={"time": "10:00"}).status_code == 404
    assert client.get("/api/interviews/99/feedback").status_code == 404


def test_unknown_interviewer_is_400():
    resp = client.post(
        "/api/interviews",
        json={
            "candidate_name": "Ahmad Al-Rashid",
            "date": "2024-01-20",
            "time": "10:00",
            "interviewer_ids": ["nobody"],
        },
    )
    assert resp.status_code == 400
    assert "nobody" in resp.json()["detail"]
    assert client.get("/api/interviews").json() == []


def test_invalid_payloads_are_422():
    base = {"candidate_name": "Ahmad Al-Rashid", "date": "2024-01-20", "time": "10:00"}
    assert client.post("/api/interviews", json={**base, "candidate_name": "   "}).status_code == 422
    assert client.post("/api/interviews", json={**base, "time": "25:99"}).status_code == 422
    assert client.post("/api/interviews", json={**base, "date": "20/01/2024"}).status_code == 422
    assert client.post("/api/interviews", json={**base, "duration_minutes": 0}).status_code == 422
    assert client.post("/api/interviews?status=completed", json=base).status_code == 422


def test_missing_catalog_file_falls_back_to_builtin_roster(monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "CATALOG_PATH", str(tmp_path / "missing.json"), raising=False)
    resp = client.post(
        "/api/interviews",
        json={
            "candidate_name": "Ahmad Al-Rashid",
            "date": "2024-01-20",
            "time": "10:00",
            "interviewer_ids": ["layla"],
        },
    )
    assert resp.status_code == 201
    assert resp.json()["session"]["interviewers"] == ["Layla Mohammed"]


def test_durations_outside_catalog_are_400():
    base = {"candidate_name": "Ahmad Al-Rashid", "date": "2024-01-20", "time": "10:00"}
    resp = client.post("/api/interviews", json={**base, "duration_minutes": 50})
    assert resp.status_code == 400
    assert "50 minutes" in resp.json()["detail"]
    assert client.get("/api/interviews").json() == []

    assert client.post("/api/interviews", json={**base, "duration_minutes": 45}).status_code == 201
    assert client.post("/api/interviews/1/reschedule", json={"duration_minutes": 50}).status_code == 400
    assert client.get("/api/interviews/1").json()["duration_minutes"] == 45

from fastapi import FastAPI
from fastapi.testclient import TestClient

from api.routes import router


app = FastAPI()
app.include_router(router)
client = TestClient(app)

RATINGS = {"technical_skills": 4, "communication": 3, "teaching_ability": 4, "culture_fit": 4}


def _scheduled():
    resp = client.post(
        "/api/interviews",
        json={"candidate_name": "Hassan Ali", "date": "2024-01-18", "time": "15:00", "round": "final"},
    )
    return resp.json()["session"]["id"]


def test_feedback_completes_interview():
    sid = _scheduled()
    before = client.get(f"/api/interviews/{sid}/feedback").json()
    assert before == {"session_id": sid, "feedback": None, "read_only": False}

    done = client.post(f"/api/interviews/{sid}/feedback", json={**RATINGS, "comments": "Experienced"})
    assert done.status_code == 200
    session = done.json()["session"]
    assert session["status"] == "completed"
    assert session["rating"] == 3.75

    after = client.get(f"/api/interviews/{sid}/feedback").json()
    assert after["read_only"] is True
    assert after["feedback"]["overall_score"] == 3.75
    assert after["feedback"]["comments"] == "Experienced"


def test_feedback_is_read_only_once_completed():
    sid = _scheduled()
    client.post(f"/api/interviews/{sid}/feedback", json=RATINGS)

    again = client.post(f"/api/interviews/{sid}/feedback", json={**RATINGS, "culture_fit": 1})
    assert again.status_code == 200
    assert again.json()["outcome"] == "unchanged"
    assert client.get(f"/api/interviews/{sid}").json()["rating"] == 3.75

    cancel = client.post(f"/api/interviews/{sid}/cancel")
    assert cancel.status_code == 400


def test_feedback_requires_ratings_in_range():
    sid = _scheduled()
    resp = client.post(f"/api/interviews/{sid}/feedback", json={**RATINGS, "communication": 6})
    assert resp.status_code == 422
    assert client.get(f"/api/interviews/{sid}").json()["status"] == "scheduled"


def test_pending_interview_cannot_be_completed():
    resp = client.post(
        "/api/interviews?status=pending",
        json={"candidate_name": "Mariam Khalil", "date": "2024-01-21", "time": "09:00"},
    )
    sid = resp.json()["session"]["id"]
    assert client.post(f"/api/interviews/{sid}/feedback", json=RATINGS).status_code == 400

"""Demo interview data for local development."""
from __future__ import annotations

from typing import Any, Dict, List

from scheduling.models import InterviewSession

from .sessions import count_sessions, upsert_session

DEMO_SESSIONS: List[Dict[str, Any]] = [
    {
        "id": 1,
        "candidate_name": "Ahmad Al-Rashid",
        "position": "Expert Teacher - Mathematics",
        "date": "2024-01-20",
        "time": "10:00",
        "duration_minutes": 60,
        "interview_type": "video",
        "status": "scheduled",
        "round": "technical",
        "interviewers": ["Dr. Fatima Hassan", "Prof. Mohammed Saeed"],
        "location": "Microsoft Teams",
    },
    {
        "id": 2,
        "candidate_name": "Sara Abdullah",
        "position": "Head of Subject - Science",
        "date": "2024-01-20",
        "time": "14:00",
        "duration_minutes": 45,
        "interview_type": "in-person",
        "status": "scheduled",
        "round": "demo",
        "interviewers": ["Dr. Khalid Omar"],
        "location": "Room 305, Admin Building",
    },
    {
        "id": 3,
        "candidate_name": "Noura Ahmed",
        "position": "Teacher T1 - Arabic",
        "date": "2024-01-19",
        "time": "11:00",
        "duration_minutes": 30,
        "interview_type": "video",
        "status": "completed",
        "round": "hr",
        "interviewers": ["Layla Mohammed"],
        "location": "Zoom",
        "feedback": {
            "technical_skills": 4,
            "communication": 5,
            "teaching_ability": 5,
            "culture_fit": 4,
            "comments": "Excellent candidate with strong teaching methodology.",
        },
    },
    {
        "id": 4,
        "candidate_name": "Hassan Ibrahim",
        "position": "Assistant Teacher - PE",
        "date": "2024-01-18",
        "time": "15:00",
        "duration_minutes": 60,
        "interview_type": "in-person",
        "status": "completed",
        "round": "final",
        "interviewers": ["Omar Ali", "Dr. Fatima Hassan"],
        "location": "Sports Office",
        "feedback": {
            "technical_skills": 4,
            "communication": 3,
            "teaching_ability": 4,
            "culture_fit": 4,
            "comments": "Good practical skills, needs to improve verbal communication.",
        },
    },
    {
        "id": 5,
        "candidate_name": "Mariam Khalil",
        "position": "Teacher - English",
        "date": "2024-01-21",
        "time": "09:00",
        "duration_minutes": 45,
        "interview_type": "video",
        "status": "pending",
        "round": "screening",
        "interviewers": [],
        "location": "TBD",
    },
    {
        "id": 6,
        "candidate_name": "Khalid Mansour",
        "position": "Senior Teacher - Physics",
        "date": "2024-01-20",
        "time": "11:00",
        "duration_minutes": 60,
        "interview_type": "video",
        "status": "scheduled",
        "round": "technical",
        "interviewers": ["Prof. Mohammed Saeed"],
        "location": "Microsoft Teams",
    },
    {
        "id": 7,
        "candidate_name": "Aisha Rahman",
        "position": "Teacher - Chemistry",
        "date": "2024-01-22",
        "time": "10:30",
        "duration_minutes": 45,
        "interview_type": "in-person",
        "status": "scheduled",
        "round": "demo",
        "interviewers": ["Dr. Khalid Omar", "Dr. Fatima Hassan"],
        "location": "Science Lab",
    },
]


def demo_sessions() -> List[InterviewSession]:
    return [InterviewSession.model_validate(entry) for entry in DEMO_SESSIONS]


def seed_demo_sessions() -> int:
    """Insert the demo sessions into an empty database; return rows written."""

    if count_sessions():
        return 0
    sessions = demo_sessions()
    for session in sessions:
        upsert_session(session)
    return len(sessions)

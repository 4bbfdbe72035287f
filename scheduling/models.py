"""Shared type definitions for interview scheduling."""
from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, computed_field, field_validator, model_validator

from config.settings import settings

from .intervals import TimeInterval, normalize_date, normalize_time

Round = Literal["screening", "technical", "demo", "hr", "final"]
Status = Literal["pending", "scheduled", "completed", "cancelled"]
InterviewType = Literal["video", "video-zoom", "video-meet", "in-person", "phone"]
Action = Literal["create", "reschedule", "assign", "cancel", "complete"]
Outcome = Literal["applied", "conflict", "not_found", "unchanged", "rejected"]

ROUNDS: tuple[str, ...] = ("screening", "technical", "demo", "hr", "final")
STATUSES: tuple[str, ...] = ("pending", "scheduled", "completed", "cancelled")
DEFAULT_POSITION = "Pending Assignment"


class Feedback(BaseModel):
    """Panel ratings captured when an interview is completed."""

    technical_skills: int = Field(ge=1, le=5)
    communication: int = Field(ge=1, le=5)
    teaching_ability: int = Field(ge=1, le=5)
    culture_fit: int = Field(ge=1, le=5)
    comments: str = ""

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def overall_score(self) -> float:
        total = self.technical_skills + self.communication + self.teaching_ability + self.culture_fit
        return total / 4


class _SlotFields(BaseModel):
    candidate_name: str = Field(min_length=1)
    position: str = DEFAULT_POSITION
    date: str
    time: str
    duration_minutes: int = Field(gt=0)
    round: Round = "screening"
    interview_type: InterviewType = "video"
    interviewers: List[str] = Field(default_factory=list)
    location: str = ""
    notes: str = ""

    @field_validator("candidate_name")
    @classmethod
    def _strip_candidate(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("candidate_name must not be blank")
        return value

    @field_validator("position")
    @classmethod
    def _default_position(cls, value: str) -> str:
        return value.strip() or DEFAULT_POSITION

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        return normalize_date(value)

    @field_validator("time")
    @classmethod
    def _clock_time(cls, value: str) -> str:
        return normalize_time(value)

    @field_validator("interviewers")
    @classmethod
    def _dedupe_interviewers(cls, value: List[str]) -> List[str]:
        seen: List[str] = []
        for name in value:
            name = name.strip()
            if name and name not in seen:
                seen.append(name)
        return seen


class SessionDraft(_SlotFields):
    """Operator-supplied fields for a new interview."""

    duration_minutes: int = Field(default_factory=lambda: settings.DEFAULT_DURATION_MINUTES, gt=0)


class InterviewSession(_SlotFields):
    """One interview event linking a candidate, a time slot and a panel."""

    id: int = Field(gt=0)
    status: Status = "scheduled"
    feedback: Optional[Feedback] = None
    cancelled_at: Optional[str] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _feedback_matches_status(self) -> "InterviewSession":
        if self.status == "completed" and self.feedback is None:
            raise ValueError("completed interviews require feedback")
        if self.status != "completed" and self.feedback is not None:
            raise ValueError("feedback is only allowed on completed interviews")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def rating(self) -> Optional[float]:
        return self.feedback.overall_score if self.feedback else None

    @property
    def interval(self) -> TimeInterval:
        return TimeInterval.build(self.date, self.time, self.duration_minutes)

    def revise(self, **changes: Any) -> "InterviewSession":
        """Return a validated copy with ``changes`` applied."""

        data = self.model_dump(exclude={"rating"})
        data.update(changes)
        return InterviewSession.model_validate(data)


class MutationResult(BaseModel):
    """Outcome of a store mutation; conflicts are reported here, never raised."""

    action: Action
    outcome: Outcome
    session_id: Optional[int] = None
    session: Optional[InterviewSession] = None
    conflict: Optional[InterviewSession] = None
    warning: Optional[str] = None

    @property
    def applied(self) -> bool:
        return self.outcome == "applied"


def conflict_warning(conflict: InterviewSession) -> str:
    """Inline warning naming the conflicting candidate and slot."""

    return (
        f"Time conflict with {conflict.candidate_name} on {conflict.date} at "
        f"{conflict.time} ({conflict.duration_minutes} min)"
    )


__all__ = [
    "Action",
    "DEFAULT_POSITION",
    "Feedback",
    "InterviewSession",
    "InterviewType",
    "MutationResult",
    "Outcome",
    "ROUNDS",
    "Round",
    "STATUSES",
    "SessionDraft",
    "Status",
    "conflict_warning",
]

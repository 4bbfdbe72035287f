"""Pydantic schemas for the interview scheduling API."""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from scheduling.intervals import normalize_date, normalize_time
from scheduling.models import Feedback, SessionDraft


class CreateReq(SessionDraft):
    interviewer_ids: List[str] = Field(default_factory=list)


class RescheduleReq(BaseModel):
    date: Optional[str] = None
    time: Optional[str] = None
    duration_minutes: Optional[int] = Field(default=None, gt=0)

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: Optional[str]) -> Optional[str]:
        return normalize_date(value) if value else None

    @field_validator("time")
    @classmethod
    def _clock_time(cls, value: Optional[str]) -> Optional[str]:
        return normalize_time(value) if value else None


class AssignReq(BaseModel):
    date: str
    time: str
    duration_minutes: Optional[int] = Field(default=None, gt=0)

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        return normalize_date(value)

    @field_validator("time")
    @classmethod
    def _clock_time(cls, value: str) -> str:
        return normalize_time(value)


class FeedbackResp(BaseModel):
    session_id: int
    feedback: Optional[Feedback] = None
    read_only: bool = False

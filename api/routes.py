"""FastAPI routes for interview scheduling."""
from __future__ import annotations

from datetime import date as Date
from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from api.schemas import AssignReq, CreateReq, FeedbackResp, RescheduleReq
from config.catalog import get_catalog, resolve_interviewers
from scheduling.export import export_filename, serialize
from scheduling.models import Feedback, InterviewSession, MutationResult, SessionDraft
from scheduling.projector import FilterCriteria, project
from scheduling.views import CalendarDay, ScheduleSummary, calendar_view, list_view, summarize
from services.sessions import get_store, mutate


router = APIRouter(prefix="/api/interviews")


def _criteria(
    status: str,
    round_: str,
    q: str,
    date_from: Optional[str],
    date_to: Optional[str],
    include_cancelled: bool,
) -> FilterCriteria:
    try:
        return FilterCriteria(
            status=status,
            round=round_,
            free_text=q,
            date_from=date_from,
            date_to=date_to,
            include_cancelled=include_cancelled,
        )
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


def _filtered(criteria: FilterCriteria) -> List[InterviewSession]:
    return project(get_store().sessions(include_cancelled=True), criteria)


def _check_duration(minutes: Optional[int]) -> None:
    if minutes is not None and not get_catalog().allows_duration(minutes):
        raise HTTPException(status_code=400, detail=f"{minutes} minutes is not an offered interview length")


def _respond(result: MutationResult, response: Response, *, applied_code: int = 200) -> MutationResult:
    if result.outcome == "not_found":
        raise HTTPException(status_code=404, detail="interview not found")
    if result.outcome == "rejected":
        raise HTTPException(status_code=400, detail=result.warning or "transition not allowed")
    if result.outcome == "conflict":
        response.status_code = 409
    elif result.outcome == "applied":
        response.status_code = applied_code
    return result


@router.get("", response_model=List[InterviewSession])
def list_interviews(
    status: str = "all",
    round_: str = Query("all", alias="round"),
    q: str = "",
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    include_cancelled: bool = False,
) -> List[InterviewSession]:
    criteria = _criteria(status, round_, q, date_from, date_to, include_cancelled)
    return list_view(_filtered(criteria))


@router.get("/calendar", response_model=List[CalendarDay])
def interview_calendar(
    status: str = "all",
    round_: str = Query("all", alias="round"),
    q: str = "",
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    include_cancelled: bool = False,
) -> List[CalendarDay]:
    criteria = _criteria(status, round_, q, date_from, date_to, include_cancelled)
    return calendar_view(_filtered(criteria))


@router.get("/summary", response_model=ScheduleSummary)
def interview_summary(today: Optional[Date] = None) -> ScheduleSummary:
    return summarize(get_store().sessions(), today or Date.today())


@router.get("/export.csv")
def export_interviews(
    status: str = "all",
    round_: str = Query("all", alias="round"),
    q: str = "",
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
    include_cancelled: bool = False,
) -> Response:
    criteria = _criteria(status, round_, q, date_from, date_to, include_cancelled)
    payload = serialize(_filtered(criteria))
    headers = {"Content-Disposition": f'attachment; filename="{export_filename()}"'}
    return Response(content=payload.encode("utf-8"), media_type="text/csv; charset=utf-8", headers=headers)

@router.post("", response_model=MutationResult)
def create_interview(
    req: CreateReq,
    response: Response,
    status: Literal["scheduled", "pending"] = "scheduled",
) -> MutationResult:
    _check_duration(req.duration_minutes)
    try:
        roster_names = resolve_interviewers(get_catalog(), req.interviewer_ids)
    except KeyError as exc:
        raise HTTPException(status_code=400, detail=str(exc.args[0])) from exc
    draft = SessionDraft.model_validate(
        {
            **req.model_dump(exclude={"interviewer_ids"}),
            "interviewers": [*req.interviewers, *roster_names],
        }
    )
    result = mutate(lambda store: store.create(draft, status=status))
    return _respond(result, response, applied_code=201)


@router.get("/{session_id}", response_model=InterviewSession)
def fetch_interview(session_id: int) -> InterviewSession:
    session = get_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="interview not found")
    return session


@router.post("/{session_id}/reschedule", response_model=MutationResult)
def reschedule_interview(session_id: int, req: RescheduleReq, response: Response) -> MutationResult:
    _check_duration(req.duration_minutes)
    result = mutate(
        lambda store: store.reschedule(
            session_id,
            date=req.date,
            time=req.time,
            duration_minutes=req.duration_minutes,
        )
    )
    return _respond(result, response)


@router.post("/{session_id}/assign", response_model=MutationResult)
def assign_interview(session_id: int, req: AssignReq, response: Response) -> MutationResult:
    _check_duration(req.duration_minutes)
    result = mutate(
        lambda store: store.assign(
            session_id,
            date=req.date,
            time=req.time,
            duration_minutes=req.duration_minutes,
        )
    )
    return _respond(result, response)


@router.post("/{session_id}/cancel", response_model=MutationResult)
def cancel_interview(session_id: int, response: Response) -> MutationResult:
    return _respond(mutate(lambda store: store.cancel(session_id)), response)


@router.post("/{session_id}/feedback", response_model=MutationResult)
def submit_feedback(session_id: int, req: Feedback, response: Response) -> MutationResult:
    return _respond(mutate(lambda store: store.complete(session_id, req)), response)


@router.get("/{session_id}/feedback", response_model=FeedbackResp)
def fetch_feedback(session_id: int) -> FeedbackResp:
    session = get_store().get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="interview not found")
    return FeedbackResp(
        session_id=session.id,
        feedback=session.feedback,
        read_only=session.status == "completed",
    )

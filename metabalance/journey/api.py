# -*- coding: utf-8 -*-
"""Journey — API endpoints.

Four routers: phases under ``/api/journey``, the supplement catalog and intake
log under ``/api/journey/supplements``, extended fasts under
``/api/journey/fasting`` and lab results under ``/api/journey/blood-work``.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..params import resolve_day
from ..profile.models import SuccessResponse
from . import blood_work, fasting, intake, phases
from .catalog import list_catalog
from .models import (
    AdvancePhaseRequest,
    BloodWork,
    BloodWorkRequest,
    FastEndRequest,
    FastingStats,
    FastSession,
    FastStartRequest,
    InitializePhasesRequest,
    IntakeLog,
    IntakeLogRequest,
    JourneyInitialization,
    JourneySupplement,
    Phase,
    PhaseProgressRequest,
    Reminder,
    ReminderCreateRequest,
    ReminderUpdateRequest,
)

router = APIRouter(prefix="/api/journey", tags=["Journey"])
supplements_router = APIRouter(prefix="/api/journey/supplements", tags=["Journey Supplements"])
fasting_router = APIRouter(prefix="/api/journey/fasting", tags=["Extended Fasting"])
blood_work_router = APIRouter(prefix="/api/journey/blood-work", tags=["Blood Work"])


# ---- phases ----


@router.post("/phases", response_model=List[Phase], summary="Plan a four-phase journey")
def post_phases(request: InitializePhasesRequest, user: dict = Depends(get_current_user)):
    return phases.initialize_phases(
        user_id=user["id"], start_weight=request.start_weight, target_weight=request.target_weight
    )


@router.get("/phases", response_model=List[Phase], summary="All phases in order")
def get_phases(user: dict = Depends(get_current_user)):
    return phases.list_phases(user_id=user["id"])


@router.get("/phases/current", response_model=Optional[Phase], summary="Phase covering the current time")
def get_current(user: dict = Depends(get_current_user)):
    return phases.current_phase(user_id=user["id"])


@router.put("/phases/progress", response_model=Phase, summary="Record weight lost in a phase")
def put_progress(request: PhaseProgressRequest, user: dict = Depends(get_current_user)):
    return phases.update_phase_progress(
        user_id=user["id"],
        phase_number=request.phase_number,
        actual_weight_loss=request.actual_weight_loss,
        status=request.status,
    )


@router.get("/initialization", response_model=Optional[JourneyInitialization], summary="Journey start record")
def get_initialization(user: dict = Depends(get_current_user)):
    return phases.get_initialization(user_id=user["id"])


@router.post("/advance", response_model=JourneyInitialization, summary="Move to another phase")
def post_advance(request: AdvancePhaseRequest, user: dict = Depends(get_current_user)):
    return phases.advance_phase(user_id=user["id"], new_phase=request.new_phase)


@router.delete("", response_model=SuccessResponse, summary="Delete all journey data")
def delete_journey(user: dict = Depends(get_current_user)):
    phases.reset_journey(user_id=user["id"])
    return {"success": True}


# ---- supplements ----


@supplements_router.get("", response_model=List[JourneySupplement], summary="Full supplement catalog")
def get_catalog(user: dict = Depends(get_current_user)):
    return list_catalog()


@supplements_router.get("/phase/{phase_number}", response_model=List[JourneySupplement], summary="Supplements introduced by a phase")
def get_catalog_for_phase(phase_number: int, user: dict = Depends(get_current_user)):
    if phase_number < 1:
        raise HTTPException(status_code=400, detail="phase_number must be >= 1")
    return list_catalog(up_to_phase=phase_number)


@supplements_router.post("/log", response_model=IntakeLog, summary="Record intake for a day")
def post_intake(request: IntakeLogRequest, user: dict = Depends(get_current_user)):
    return intake.log_intake(
        user_id=user["id"],
        supplement_id=request.supplement_id,
        day=request.date,
        taken=request.taken,
        notes=request.notes,
    )


@supplements_router.get("/log", response_model=List[IntakeLog], summary="Intake entries for a day")
def get_intake(date: Optional[str] = Query(default=None), user: dict = Depends(get_current_user)):
    return intake.list_intake_for_day(user_id=user["id"], day=resolve_day(date))


@supplements_router.get("/reminders", response_model=List[Reminder], summary="Enabled reminders")
def get_reminders(user: dict = Depends(get_current_user)):
    return intake.list_reminders(user_id=user["id"])


@supplements_router.post("/reminders", response_model=Reminder, summary="Create a daily reminder")
def post_reminder(request: ReminderCreateRequest, user: dict = Depends(get_current_user)):
    return intake.create_reminder(
        user_id=user["id"], supplement_id=request.supplement_id, reminder_time=request.reminder_time
    )


@supplements_router.put("/reminders/{reminder_id}", response_model=Reminder, summary="Change a reminder")
def put_reminder(reminder_id: str, request: ReminderUpdateRequest, user: dict = Depends(get_current_user)):
    return intake.update_reminder(
        user_id=user["id"],
        reminder_id=reminder_id,
        reminder_time=request.reminder_time,
        enabled=request.enabled,
    )


# ---- extended fasting ----


@fasting_router.post("/sessions", response_model=FastSession, summary="Start an extended fast")
def post_session(request: FastStartRequest, user: dict = Depends(get_current_user)):
    return fasting.start_session(
        user_id=user["id"],
        fasting_type=request.fasting_type,
        target_duration=request.target_duration,
        weight_before=request.weight_before,
    )


@fasting_router.post("/sessions/{session_id}/end", response_model=FastSession, summary="End an extended fast")
def post_end_session(session_id: str, request: FastEndRequest, user: dict = Depends(get_current_user)):
    return fasting.end_session(user_id=user["id"], session_id=session_id, **request.model_dump())


@fasting_router.get("/sessions/active", response_model=Optional[FastSession], summary="Fast in progress")
def get_active(user: dict = Depends(get_current_user)):
    return fasting.active_session(user_id=user["id"])


@fasting_router.get("/sessions", response_model=List[FastSession], summary="Recent fasts (newest first)")
def get_sessions(limit: int = Query(default=10, ge=1, le=100), user: dict = Depends(get_current_user)):
    return fasting.list_sessions(user_id=user["id"], limit=limit)


@fasting_router.get("/stats", response_model=FastingStats, summary="Extended fasting rollup")
def get_stats(user: dict = Depends(get_current_user)):
    return fasting.refresh_stats(user_id=user["id"])


# ---- blood work ----


@blood_work_router.post("", response_model=BloodWork, summary="Record lab results")
def post_blood_work(request: BloodWorkRequest, user: dict = Depends(get_current_user)):
    return blood_work.add_result(user_id=user["id"], fields=request.model_dump())


@blood_work_router.get("", response_model=List[BloodWork], summary="Lab results (newest first)")
def get_blood_work(user: dict = Depends(get_current_user)):
    return blood_work.list_results(user_id=user["id"])


@blood_work_router.get("/latest", response_model=Optional[BloodWork], summary="Most recent lab results")
def get_latest_blood_work(user: dict = Depends(get_current_user)):
    return blood_work.latest_result(user_id=user["id"])

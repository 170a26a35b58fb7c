# -*- coding: utf-8 -*-
"""Intermittent fasting — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .models import AdherenceLog, AdherenceLogRequest, Schedule, ScheduleCreateRequest
from .storage import create_schedule, get_active_schedule, list_logs, list_schedules, log_adherence

router = APIRouter(prefix="/api/fasting", tags=["Fasting"])


@router.get("/schedules/active", response_model=Optional[Schedule], summary="Active fasting schedule")
def get_active(user: dict = Depends(get_current_user)):
    return get_active_schedule(user_id=user["id"])


@router.get("/schedules", response_model=List[Schedule], summary="All fasting schedules")
def list_all(user: dict = Depends(get_current_user)):
    return list_schedules(user_id=user["id"])


@router.post("/schedules", response_model=Schedule, summary="Create a schedule (deactivates others)")
def create(request: ScheduleCreateRequest, user: dict = Depends(get_current_user)):
    return create_schedule(user_id=user["id"], fields=request.model_dump())


@router.post("/logs", response_model=AdherenceLog, summary="Log fasting adherence for a day")
def create_log(request: AdherenceLogRequest, user: dict = Depends(get_current_user)):
    return log_adherence(user_id=user["id"], fields=request.model_dump())


@router.get("/schedules/{schedule_id}/logs", response_model=List[AdherenceLog], summary="Adherence logs")
def get_logs(
    schedule_id: str,
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    user: dict = Depends(get_current_user),
):
    return list_logs(user_id=user["id"], schedule_id=schedule_id, start=start, end=end)

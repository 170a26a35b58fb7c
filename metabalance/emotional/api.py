# -*- coding: utf-8 -*-
"""Emotional eating — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..auth.security import get_current_user
from ..dates import end_of_day, iso, normalize_timestamp, start_of_day
from . import medications
from .analytics import summarize_episodes
from .models import (
    AdherenceStats,
    Episode,
    EpisodeAnalytics,
    EpisodeCreateRequest,
    Medication,
    MedicationCreateRequest,
    MedicationLog,
    MedicationLogRequest,
    MedicationUpdateRequest,
)
from .storage import create_episode, episodes_since, list_episodes

router = APIRouter(prefix="/api/emotional-eating", tags=["Emotional Eating"])


def _bound(value: Optional[str], *, upper: bool) -> Optional[str]:
    """Accept a day or a timestamp; a bare day covers the whole day."""
    if not value:
        return None
    try:
        if len(value.strip()) == 10:
            return iso(end_of_day(value) if upper else start_of_day(value))
        return normalize_timestamp(value)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=f"Invalid date: {value}") from exc


# ---- episodes ----


@router.post("/episodes", response_model=Episode, summary="Log an emotional eating episode")
def post_episode(request: EpisodeCreateRequest, user: dict = Depends(get_current_user)):
    return create_episode(user_id=user["id"], fields=request.model_dump())


@router.get("/episodes", response_model=List[Episode], summary="Episode history (newest first)")
def get_episodes(
    start: Optional[str] = Query(default=None, description="Day or timestamp"),
    end: Optional[str] = Query(default=None, description="Day or timestamp"),
    limit: int = Query(default=50, ge=1, le=500),
    user: dict = Depends(get_current_user),
):
    if start and end:
        return list_episodes(user_id=user["id"], start=_bound(start, upper=False), end=_bound(end, upper=True))
    return list_episodes(user_id=user["id"], limit=limit)


@router.get("/analytics", response_model=EpisodeAnalytics, summary="Trigger patterns over a window")
def get_analytics(days: int = Query(default=30, ge=1, le=365), user: dict = Depends(get_current_user)):
    return summarize_episodes(episodes_since(user_id=user["id"], days=days), days)


# ---- medications ----


@router.post("/medications", response_model=Medication, summary="Add a medication")
def post_medication(request: MedicationCreateRequest, user: dict = Depends(get_current_user)):
    return medications.create_medication(user_id=user["id"], fields=request.model_dump())


@router.get("/medications", response_model=List[Medication], summary="Medications (newest start first)")
def get_medications(active_only: bool = Query(default=False), user: dict = Depends(get_current_user)):
    return medications.list_medications(user_id=user["id"], active_only=active_only)


@router.patch("/medications/{medication_id}", response_model=Medication, summary="Update a medication")
def patch_medication(medication_id: str, request: MedicationUpdateRequest, user: dict = Depends(get_current_user)):
    return medications.update_medication(
        user_id=user["id"], medication_id=medication_id, fields=request.model_dump(exclude_unset=True)
    )


@router.post("/medications/logs", response_model=MedicationLog, summary="Record a dose")
def post_dose(request: MedicationLogRequest, user: dict = Depends(get_current_user)):
    return medications.log_dose(user_id=user["id"], fields=request.model_dump())


@router.get("/medications/logs", response_model=List[MedicationLog], summary="Dose history")
def get_doses(
    medication_id: Optional[str] = Query(default=None),
    start: Optional[str] = Query(default=None),
    end: Optional[str] = Query(default=None),
    limit: int = Query(default=100, ge=1, le=1000),
    user: dict = Depends(get_current_user),
):
    return medications.list_doses(
        user_id=user["id"],
        medication_id=medication_id,
        start=_bound(start, upper=False),
        end=_bound(end, upper=True),
        limit=limit,
    )


@router.get("/medications/{medication_id}/adherence", response_model=AdherenceStats, summary="Dose adherence")
def get_adherence(
    medication_id: str,
    days: int = Query(default=30, ge=1, le=365),
    user: dict = Depends(get_current_user),
):
    return medications.adherence(user_id=user["id"], medication_id=medication_id, days=days)

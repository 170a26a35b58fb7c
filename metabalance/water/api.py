# -*- coding: utf-8 -*-
"""Water intake — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..params import resolve_day
from .models import WaterIntake, WaterUpsertRequest
from .storage import get_intake, list_intake_between, upsert_intake

router = APIRouter(prefix="/api/water", tags=["Water"])


@router.put("", response_model=WaterIntake, summary="Set glasses of water for a day")
def upsert(request: WaterUpsertRequest, user: dict = Depends(get_current_user)):
    return upsert_intake(user_id=user["id"], day=request.date, glasses=request.glasses)


@router.get("/today", response_model=Optional[WaterIntake], summary="Water intake for a day")
def get_today(date: Optional[str] = Query(default=None), user: dict = Depends(get_current_user)):
    return get_intake(user_id=user["id"], day=resolve_day(date))


@router.get("/weekly", response_model=List[WaterIntake], summary="Water intake over a date range")
def get_weekly(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    return list_intake_between(user_id=user["id"], start_day=resolve_day(start), end_day=resolve_day(end))

# -*- coding: utf-8 -*-
"""Daily insights — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from .coach import get_today_insight
from .models import DailyInsight
from .storage import mark_viewed

router = APIRouter(prefix="/api/insights", tags=["Insights"])


@router.get("/today", response_model=DailyInsight, summary="Today's AI insight (generated once per day)")
def get_today(user: dict = Depends(get_current_user)):
    return get_today_insight(user_id=user["id"])


@router.post("/{insight_id}/viewed", summary="Mark an insight as viewed")
def viewed(insight_id: str, user: dict = Depends(get_current_user)):
    mark_viewed(user_id=user["id"], insight_id=insight_id)
    return {"success": True}

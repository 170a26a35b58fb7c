# -*- coding: utf-8 -*-
"""Daily goals — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..params import resolve_day
from .models import DailyGoal, DailyGoalUpdateRequest, StreakSummary, ToggleGoalRequest
from .storage import get_goal, list_all_goals, list_week, toggle_goal, upsert_goal
from .streaks import summarize

router = APIRouter(prefix="/api/goals", tags=["Daily Goals"])


@router.get("/daily", response_model=Optional[DailyGoal], summary="Daily goals for a day")
def get_daily(date: Optional[str] = Query(default=None), user: dict = Depends(get_current_user)):
    return get_goal(user_id=user["id"], day=resolve_day(date))


@router.put("/daily", response_model=DailyGoal, summary="Update daily goals")
def update_daily(request: DailyGoalUpdateRequest, user: dict = Depends(get_current_user)):
    flags = request.model_dump(exclude={"date"})
    return upsert_goal(user_id=user["id"], day=request.date, flags=flags)


@router.post("/daily/toggle", response_model=DailyGoal, summary="Flip one daily goal")
def toggle_daily(request: ToggleGoalRequest, user: dict = Depends(get_current_user)):
    return toggle_goal(user_id=user["id"], day=request.date, goal_id=request.goal_id)


@router.get("/week", response_model=List[DailyGoal], summary="Daily goals for a 7-day week")
def get_week(week_start: str = Query(..., description="YYYY-MM-DD"), user: dict = Depends(get_current_user)):
    return list_week(user_id=user["id"], week_start=resolve_day(week_start))


@router.get("/streaks", response_model=StreakSummary, summary="Streak and daily-win summary")
def get_streaks(user: dict = Depends(get_current_user)):
    return summarize(list_all_goals(user_id=user["id"]))

# -*- coding: utf-8 -*-
"""Meals — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..params import resolve_day
from .models import Meal, MealCreateRequest, NutritionTotals, WeeklyNutritionResponse
from .storage import create_meal, daily_totals, delete_meal, list_meals_for_day, weekly_totals

router = APIRouter(prefix="/api/meals", tags=["Meals"])


@router.get("", response_model=List[Meal], summary="Meals logged on a day")
def get_by_date(
    date: Optional[str] = Query(default=None, description="YYYY-MM-DD or ISO8601; defaults to today"),
    user: dict = Depends(get_current_user),
):
    return list_meals_for_day(user_id=user["id"], day=resolve_day(date))


@router.get("/totals", response_model=NutritionTotals, summary="Nutrition totals for a day")
def get_daily_totals(
    date: Optional[str] = Query(default=None),
    user: dict = Depends(get_current_user),
):
    return daily_totals(user_id=user["id"], day=resolve_day(date))


@router.get("/weekly", response_model=WeeklyNutritionResponse, summary="Per-day nutrition totals")
def get_weekly_data(
    start: str = Query(..., description="YYYY-MM-DD"),
    end: str = Query(..., description="YYYY-MM-DD"),
    user: dict = Depends(get_current_user),
):
    days = weekly_totals(user_id=user["id"], start_day=resolve_day(start), end_day=resolve_day(end))
    return WeeklyNutritionResponse(days=days)


@router.post("", response_model=Meal, summary="Log a meal")
def create(request: MealCreateRequest, user: dict = Depends(get_current_user)):
    return create_meal(user_id=user["id"], fields=request.model_dump(mode="json"))


@router.delete("/{meal_id}", summary="Delete a meal")
def delete(meal_id: str, user: dict = Depends(get_current_user)):
    delete_meal(user_id=user["id"], meal_id=meal_id)
    return {"success": True}

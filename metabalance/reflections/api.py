# -*- coding: utf-8 -*-
"""Weekly reflections — API endpoints."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from ..params import resolve_day
from .models import ReflectionCreateRequest, WeeklyReflection
from .service import create_reflection
from .storage import get_reflection, list_recent

router = APIRouter(prefix="/api/reflections", tags=["Weekly Reflections"])


@router.post("", response_model=WeeklyReflection, summary="Submit a weekly reflection")
def create(request: ReflectionCreateRequest, user: dict = Depends(get_current_user)):
    return create_reflection(user_id=user["id"], fields=request.model_dump())


@router.get("", response_model=Optional[WeeklyReflection], summary="Reflection for a week")
def get_one(week_start: str = Query(..., description="YYYY-MM-DD"), user: dict = Depends(get_current_user)):
    return get_reflection(user_id=user["id"], week_start=resolve_day(week_start))


@router.get("/recent", response_model=List[WeeklyReflection], summary="Recent reflections")
def get_recent(limit: int = Query(default=10, ge=1, le=100), user: dict = Depends(get_current_user)):
    return list_recent(user_id=user["id"], limit=limit)

# -*- coding: utf-8 -*-
"""Achievements — API endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from ..auth.security import get_current_user
from ..profile.models import SuccessResponse
from .definitions import ACHIEVEMENTS
from .models import AchievementStatus, CheckResponse, MarkViewedRequest, UnviewedAchievement
from .service import all_with_status, check_and_unlock
from .storage import list_unviewed, mark_viewed

router = APIRouter(prefix="/api/achievements", tags=["Achievements"])


@router.get("", response_model=List[AchievementStatus], summary="All achievements with unlock state")
def get_all(user: dict = Depends(get_current_user)):
    return all_with_status(user_id=user["id"])


@router.get("/unviewed", response_model=List[UnviewedAchievement], summary="Unlocked but not yet seen")
def get_unviewed(user: dict = Depends(get_current_user)):
    out = []
    for row in list_unviewed(user_id=user["id"]):
        achievement = ACHIEVEMENTS.get(row["achievement_id"])
        if achievement is None:
            continue
        out.append({**row, "definition": achievement.as_dict()})
    return out


@router.post("/viewed", response_model=SuccessResponse, summary="Mark achievements as viewed")
def post_viewed(request: MarkViewedRequest, user: dict = Depends(get_current_user)):
    mark_viewed(user_id=user["id"], achievement_ids=request.achievement_ids)
    return {"success": True}


@router.post("/check", response_model=CheckResponse, summary="Evaluate and unlock new achievements")
def post_check(user: dict = Depends(get_current_user)):
    return {"new_achievements": check_and_unlock(user_id=user["id"])}

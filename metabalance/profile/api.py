# -*- coding: utf-8 -*-
"""Profile — API endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..auth.security import get_current_user, is_owner
from ..numbers import round_half_up
from .models import MetabolismResponse, NutritionGoals, Profile, ProfileUpsertRequest, SuccessResponse
from .nutrition import activity_multiplier, calculate_bmr, calculate_nutrition_goals, calculate_tdee, has_metabolic_inputs
from .storage import OWNER_DEFAULTS, ensure_profile_initialized, get_profile, upsert_profile

router = APIRouter(prefix="/api/profile", tags=["Profile"])


@router.get("", response_model=Optional[Profile], summary="Get the metabolic profile")
def read_profile(user: dict = Depends(get_current_user)):
    if is_owner(user):
        ensure_profile_initialized(user_id=user["id"], defaults=OWNER_DEFAULTS)
    return get_profile(user_id=user["id"])


@router.put("", response_model=SuccessResponse, summary="Create or update the metabolic profile")
def write_profile(request: ProfileUpsertRequest, user: dict = Depends(get_current_user)):
    upsert_profile(user_id=user["id"], fields=request.model_dump(exclude_unset=True))
    return SuccessResponse()


@router.get("/nutrition-goals", response_model=NutritionGoals, summary="Daily calorie and macro targets")
def nutrition_goals(user: dict = Depends(get_current_user)):
    return calculate_nutrition_goals(get_profile(user_id=user["id"]))


@router.get("/metabolism", response_model=MetabolismResponse, summary="BMR and TDEE from the profile")
def metabolism(user: dict = Depends(get_current_user)):
    profile = get_profile(user_id=user["id"])
    if profile is None or not has_metabolic_inputs(profile):
        raise HTTPException(status_code=400, detail="Profile is missing weight, height, age, gender or activity level")
    bmr = calculate_bmr(float(profile["current_weight"]), float(profile["height"]), int(profile["age"]), profile["gender"])
    return MetabolismResponse(
        bmr=round_half_up(bmr),
        tdee=round_half_up(calculate_tdee(bmr, profile["activity_level"])),
        activity_multiplier=activity_multiplier(profile["activity_level"]),
    )

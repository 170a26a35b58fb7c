# -*- coding: utf-8 -*-
"""Profile — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

Gender = Literal["male", "female", "other"]
StressLevel = Literal["low", "moderate", "high"]
SleepQuality = Literal["poor", "fair", "good", "excellent"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]


class ProfileUpsertRequest(BaseModel):
    current_weight: Optional[float] = Field(None, gt=0, description="lbs")
    target_weight: Optional[float] = Field(None, gt=0, description="lbs")
    height: Optional[float] = Field(None, gt=0, description="inches")
    age: Optional[int] = Field(None, ge=1, le=130)
    gender: Optional[Gender] = None

    has_obesity: Optional[bool] = None
    has_diabetes: Optional[bool] = None
    has_metabolic_syndrome: Optional[bool] = None
    has_nafld: Optional[bool] = None
    current_medications: Optional[str] = Field(None, max_length=2000)
    taking_glp1: Optional[bool] = None

    stress_level: Optional[StressLevel] = None
    sleep_quality: Optional[SleepQuality] = None
    activity_level: Optional[ActivityLevel] = None

    susceptible_to_linoleic_acid: Optional[bool] = None
    low_nad_levels: Optional[bool] = None
    poor_gut_health: Optional[bool] = None

    primary_goal: Optional[str] = Field(None, max_length=500)
    target_date: Optional[str] = Field(None, description="YYYY-MM-DD")

    notifications_enabled: Optional[bool] = None
    daily_reminder_time: Optional[str] = Field(None, pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    streak_alerts_enabled: Optional[bool] = None
    milestone_alerts_enabled: Optional[bool] = None


class Profile(BaseModel):
    id: str
    user_id: str
    current_weight: Optional[float] = None
    target_weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    has_obesity: bool = False
    has_diabetes: bool = False
    has_metabolic_syndrome: bool = False
    has_nafld: bool = False
    current_medications: Optional[str] = None
    taking_glp1: bool = False
    stress_level: Optional[str] = None
    sleep_quality: Optional[str] = None
    activity_level: Optional[str] = None
    susceptible_to_linoleic_acid: bool = False
    low_nad_levels: bool = False
    poor_gut_health: bool = False
    primary_goal: Optional[str] = None
    target_date: Optional[str] = None
    notifications_enabled: bool = True
    daily_reminder_time: str = "09:00"
    streak_alerts_enabled: bool = True
    milestone_alerts_enabled: bool = True
    created_at: str
    updated_at: str


class NutritionGoals(BaseModel):
    daily_calories: int
    daily_protein: int
    daily_carbs: int
    daily_fats: int
    daily_fiber: int


class MetabolismResponse(BaseModel):
    bmr: int
    tdee: int
    activity_multiplier: float


class SuccessResponse(BaseModel):
    success: bool = True

# -*- coding: utf-8 -*-
"""Meals — Pydantic models."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import normalize_timestamp


class MealType(str, Enum):
    breakfast = "breakfast"
    lunch = "lunch"
    dinner = "dinner"
    snack = "snack"


class MealCreateRequest(BaseModel):
    logged_at: str = Field(..., description="ISO8601 timestamp")
    meal_type: MealType
    food_name: str = Field(..., min_length=1, max_length=500)
    serving_size: Optional[str] = Field(None, max_length=100)
    calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fats: Optional[float] = Field(None, ge=0)
    fiber: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("logged_at")
    @classmethod
    def _utc_logged_at(cls, v: str) -> str:
        return normalize_timestamp(v)


class Meal(BaseModel):
    id: str
    user_id: str
    logged_at: str
    meal_type: MealType
    food_name: str
    serving_size: Optional[str] = None
    calories: Optional[float] = None
    protein: Optional[float] = None
    carbs: Optional[float] = None
    fats: Optional[float] = None
    fiber: Optional[float] = None
    notes: Optional[str] = None
    created_at: str


class NutritionTotals(BaseModel):
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0
    fiber: float = 0.0


class DailyNutrition(NutritionTotals):
    date: str


class WeeklyNutritionResponse(BaseModel):
    days: List[DailyNutrition] = []

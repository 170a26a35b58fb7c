# -*- coding: utf-8 -*-
"""Daily goals — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import day_key

GoalId = Literal["meal_logging", "protein", "fasting", "exercise", "water"]


class _DayModel(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")

    @field_validator("date")
    @classmethod
    def _day(cls, v: str) -> str:
        return day_key(v)


class DailyGoalUpdateRequest(_DayModel):
    meal_logging_complete: Optional[bool] = None
    protein_goal_complete: Optional[bool] = None
    fasting_goal_complete: Optional[bool] = None
    exercise_goal_complete: Optional[bool] = None
    water_goal_complete: Optional[bool] = None


class ToggleGoalRequest(_DayModel):
    goal_id: GoalId


class DailyGoal(BaseModel):
    id: str
    user_id: str
    date: str
    meal_logging_complete: bool
    protein_goal_complete: bool
    fasting_goal_complete: bool
    exercise_goal_complete: bool
    water_goal_complete: bool
    win_score: int = Field(..., ge=0, le=5)
    created_at: str
    updated_at: str


class StreakSummary(BaseModel):
    current_streak: int
    longest_streak: int
    total_days: int
    average_win_score: float
    perfect_days: int
    consecutive_perfect_days: int

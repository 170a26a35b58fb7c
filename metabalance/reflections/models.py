# -*- coding: utf-8 -*-
"""Weekly reflections — Pydantic models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import day_key


class ReflectionCreateRequest(BaseModel):
    week_start: str = Field(..., description="YYYY-MM-DD")
    week_end: str = Field(..., description="YYYY-MM-DD")
    went_well: str = Field(..., max_length=5000)
    challenges: str = Field(..., max_length=5000)
    next_week_plan: str = Field(..., max_length=5000)

    @field_validator("week_start", "week_end")
    @classmethod
    def _day(cls, v: str) -> str:
        return day_key(v)


class WeeklyReflection(BaseModel):
    id: str
    user_id: str
    week_start: str
    week_end: str
    went_well: Optional[str] = None
    challenges: Optional[str] = None
    next_week_plan: Optional[str] = None
    ai_insights: Optional[str] = None
    weight_change: Optional[float] = None
    avg_win_score: int
    days_logged: int
    created_at: str
    updated_at: str

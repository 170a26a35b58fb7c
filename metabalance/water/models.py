# -*- coding: utf-8 -*-
"""Water intake — Pydantic models."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from ..dates import day_key

MAX_GLASSES = 20
DAILY_TARGET_GLASSES = 8


class WaterUpsertRequest(BaseModel):
    date: str = Field(..., description="YYYY-MM-DD")
    glasses: int = Field(..., ge=0, le=MAX_GLASSES)

    @field_validator("date")
    @classmethod
    def _day(cls, v: str) -> str:
        return day_key(v)


class WaterIntake(BaseModel):
    id: str
    user_id: str
    date: str
    glasses: int
    created_at: str
    updated_at: str

# -*- coding: utf-8 -*-
"""Progress — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import normalize_timestamp

EnergyLevel = Literal["very_low", "low", "moderate", "high", "very_high"]
Mood = Literal["poor", "fair", "good", "excellent"]
SleepQuality = Literal["poor", "fair", "good", "excellent"]


class ProgressCreateRequest(BaseModel):
    logged_at: str = Field(..., description="ISO8601 timestamp")
    weight: Optional[float] = Field(None, gt=0, description="lbs")
    waist_circumference: Optional[float] = Field(None, gt=0, description="inches")
    hip_circumference: Optional[float] = Field(None, gt=0, description="inches")
    chest_circumference: Optional[float] = Field(None, gt=0, description="inches")
    energy_level: Optional[EnergyLevel] = None
    mood: Optional[Mood] = None
    sleep_quality: Optional[SleepQuality] = None
    photo_front_url: Optional[str] = Field(None, max_length=2000)
    photo_side_url: Optional[str] = Field(None, max_length=2000)
    photo_back_url: Optional[str] = Field(None, max_length=2000)
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("logged_at")
    @classmethod
    def _utc_logged_at(cls, v: str) -> str:
        return normalize_timestamp(v)


class ProgressLog(BaseModel):
    id: str
    user_id: str
    logged_at: str
    weight: Optional[float] = None
    waist_circumference: Optional[float] = None
    hip_circumference: Optional[float] = None
    chest_circumference: Optional[float] = None
    energy_level: Optional[str] = None
    mood: Optional[str] = None
    sleep_quality: Optional[str] = None
    photo_front_url: Optional[str] = None
    photo_side_url: Optional[str] = None
    photo_back_url: Optional[str] = None
    notes: Optional[str] = None
    created_at: str


class PDFExportResponse(BaseModel):
    pdf: str = Field(..., description="Base64-encoded PDF")
    filename: str

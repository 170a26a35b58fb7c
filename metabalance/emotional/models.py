# -*- coding: utf-8 -*-
"""Emotional eating and medications — Pydantic models."""

from __future__ import annotations

from typing import Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import day_key, normalize_timestamp

TriggerEmotion = Literal["stress", "anxiety", "sadness", "boredom", "anger", "loneliness", "other"]
MedicationType = Literal["glp1_agonist", "ssri", "stimulant", "combination", "other"]


class EpisodeCreateRequest(BaseModel):
    trigger_emotion: TriggerEmotion
    trigger_description: Optional[str] = Field(None, max_length=2000)
    situation: Optional[str] = Field(None, max_length=2000)
    food_consumed: str = Field(..., min_length=1, max_length=2000)
    estimated_calories: Optional[int] = Field(None, gt=0, le=20000)
    intensity: int = Field(..., ge=1, le=10)
    coping_strategy_used: Optional[str] = Field(None, max_length=2000)
    effectiveness_rating: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=5000)
    timestamp: Optional[str] = Field(None, description="ISO-8601; defaults to now")

    @field_validator("timestamp")
    @classmethod
    def _ts(cls, v: Optional[str]) -> Optional[str]:
        return normalize_timestamp(v) if v else v


class Episode(BaseModel):
    id: str
    user_id: str
    timestamp: str
    trigger_emotion: TriggerEmotion
    trigger_description: Optional[str] = None
    situation: Optional[str] = None
    food_consumed: str
    estimated_calories: Optional[int] = None
    intensity: int
    coping_strategy_used: Optional[str] = None
    effectiveness_rating: Optional[int] = None
    notes: Optional[str] = None
    created_at: str


class EpisodeAnalytics(BaseModel):
    total_episodes: int
    emotion_counts: Dict[str, int]
    avg_intensity: float
    episodes_with_coping: int
    coping_usage_rate: int
    avg_coping_effectiveness: float
    most_common_hour: Optional[int] = None
    period_days: int


class MedicationCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: MedicationType
    dosage: str = Field(..., min_length=1, max_length=200)
    frequency: str = Field(..., min_length=1, max_length=200)
    start_date: str = Field(..., description="YYYY-MM-DD")
    end_date: Optional[str] = None
    prescribed_for: Optional[str] = Field(None, max_length=500)
    side_effects: Optional[str] = Field(None, max_length=2000)
    effectiveness: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=5000)
    active: bool = True

    @field_validator("start_date", "end_date")
    @classmethod
    def _day(cls, v: Optional[str]) -> Optional[str]:
        return day_key(v) if v else v


class MedicationUpdateRequest(BaseModel):
    dosage: Optional[str] = Field(None, min_length=1, max_length=200)
    frequency: Optional[str] = Field(None, min_length=1, max_length=200)
    end_date: Optional[str] = None
    side_effects: Optional[str] = Field(None, max_length=2000)
    effectiveness: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=5000)
    active: Optional[bool] = None

    @field_validator("end_date")
    @classmethod
    def _day(cls, v: Optional[str]) -> Optional[str]:
        return day_key(v) if v else v


class Medication(BaseModel):
    id: str
    user_id: str
    name: str
    type: MedicationType
    dosage: str
    frequency: str
    start_date: str
    end_date: Optional[str] = None
    prescribed_for: Optional[str] = None
    side_effects: Optional[str] = None
    effectiveness: Optional[int] = None
    notes: Optional[str] = None
    active: bool
    created_at: str
    updated_at: str


class MedicationLogRequest(BaseModel):
    medication_id: str
    taken_at: str
    dosage_taken: str = Field(..., min_length=1, max_length=200)
    side_effects_noted: Optional[str] = Field(None, max_length=2000)
    notes: Optional[str] = Field(None, max_length=5000)

    @field_validator("taken_at")
    @classmethod
    def _ts(cls, v: str) -> str:
        return normalize_timestamp(v)


class MedicationLog(BaseModel):
    id: str
    user_id: str
    medication_id: str
    taken_at: str
    dosage_taken: str
    side_effects_noted: Optional[str] = None
    notes: Optional[str] = None
    created_at: str


class AdherenceStats(BaseModel):
    total_doses: int
    expected_doses: int
    adherence_rate: int
    period_days: int
    medication_name: str

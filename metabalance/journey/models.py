# -*- coding: utf-8 -*-
"""Journey — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import day_key, normalize_timestamp

PhaseStatus = Literal["upcoming", "active", "completed", "skipped"]
SupplementCategory = Literal["foundation", "advanced", "optional"]
ExtendedFastType = Literal["24hr", "3-5day", "7-10day"]


# ---- phases ----


class InitializePhasesRequest(BaseModel):
    start_weight: float = Field(..., gt=0, le=1500)
    target_weight: float = Field(..., gt=0, le=1500)


class Phase(BaseModel):
    id: str
    user_id: str
    phase_number: int
    phase_name: str
    start_date: str
    end_date: str
    goal_weight_loss: float
    actual_weight_loss: Optional[float] = None
    status: PhaseStatus
    created_at: str
    updated_at: str


class PhaseProgressRequest(BaseModel):
    phase_number: int = Field(..., ge=1, le=4)
    actual_weight_loss: float
    status: Optional[PhaseStatus] = None


class JourneyInitialization(BaseModel):
    id: str
    user_id: str
    start_date: str
    initial_weight: float
    goal_weight: float
    current_phase: int
    completed_phases: int
    created_at: str
    updated_at: str


class AdvancePhaseRequest(BaseModel):
    new_phase: int = Field(..., ge=1, le=4)


# ---- supplements ----


class JourneySupplement(BaseModel):
    id: str
    name: str
    dosage: str
    frequency: str
    monthly_cost: Optional[float] = None
    category: SupplementCategory
    phase_introduced: int
    benefits: Optional[str] = None
    brands: Optional[str] = None
    sort_order: int = 0


class IntakeLogRequest(BaseModel):
    supplement_id: str
    date: str = Field(..., description="YYYY-MM-DD")
    taken: bool
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("date")
    @classmethod
    def _day(cls, v: str) -> str:
        return day_key(v)


class IntakeLog(BaseModel):
    id: str
    user_id: str
    supplement_id: str
    date: str
    taken: bool
    notes: Optional[str] = None
    created_at: str


class ReminderCreateRequest(BaseModel):
    supplement_id: str
    reminder_time: str = Field(..., pattern=r"^([01]\d|2[0-3]):[0-5]\d$")


class ReminderUpdateRequest(BaseModel):
    reminder_time: str = Field(..., pattern=r"^([01]\d|2[0-3]):[0-5]\d$")
    enabled: bool


class Reminder(BaseModel):
    id: str
    user_id: str
    supplement_id: str
    reminder_time: str
    enabled: bool
    frequency: str
    created_at: str
    updated_at: str


# ---- extended fasting ----


class FastStartRequest(BaseModel):
    fasting_type: ExtendedFastType
    target_duration: int = Field(..., gt=0, le=24 * 14, description="Hours")
    weight_before: Optional[float] = Field(None, gt=0, le=1500)


class FastEndRequest(BaseModel):
    weight_after: Optional[float] = Field(None, gt=0, le=1500)
    electrolytes_log: Optional[str] = Field(None, max_length=5000)
    notes: Optional[str] = Field(None, max_length=5000)


class FastSession(BaseModel):
    id: str
    user_id: str
    fasting_type: ExtendedFastType
    start_time: str
    end_time: Optional[str] = None
    target_duration: int
    actual_duration: Optional[int] = None
    weight_before: Optional[float] = None
    weight_after: Optional[float] = None
    electrolytes_log: Optional[str] = None
    notes: Optional[str] = None
    completed: bool
    created_at: str


class FastingStats(BaseModel):
    total_fasts: int
    completed_fasts: int
    abandoned_fasts: int
    total_weight_lost: str
    average_fast_duration: int


# ---- blood work ----


class BloodWorkRequest(BaseModel):
    test_date: str
    glucose: Optional[float] = None
    a1c: Optional[float] = None
    total_cholesterol: Optional[float] = None
    ldl: Optional[float] = None
    hdl: Optional[float] = None
    triglycerides: Optional[float] = None
    tsh: Optional[float] = None
    alt: Optional[float] = None
    ast: Optional[float] = None
    notes: Optional[str] = Field(None, max_length=5000)

    @field_validator("test_date")
    @classmethod
    def _ts(cls, v: str) -> str:
        return normalize_timestamp(v)


class BloodWork(BaseModel):
    id: str
    user_id: str
    test_date: str
    glucose: Optional[float] = None
    a1c: Optional[float] = None
    total_cholesterol: Optional[float] = None
    ldl: Optional[float] = None
    hdl: Optional[float] = None
    triglycerides: Optional[float] = None
    tsh: Optional[float] = None
    alt: Optional[float] = None
    ast: Optional[float] = None
    notes: Optional[str] = None
    created_at: str

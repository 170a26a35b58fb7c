# -*- coding: utf-8 -*-
"""Intermittent fasting — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field

FastingType = Literal["adf", "tre", "wdf"]


class ScheduleCreateRequest(BaseModel):
    fasting_type: FastingType
    eating_window_start: Optional[int] = Field(None, ge=0, le=23, description="Hour of day")
    eating_window_end: Optional[int] = Field(None, ge=0, le=23, description="Hour of day")
    fasting_days: Optional[str] = Field(None, max_length=200, description="e.g. 'mon,wed,fri'")
    start_date: str = Field(..., description="YYYY-MM-DD")
    end_date: Optional[str] = None


class Schedule(BaseModel):
    id: str
    user_id: str
    fasting_type: FastingType
    eating_window_start: Optional[int] = None
    eating_window_end: Optional[int] = None
    fasting_days: Optional[str] = None
    is_active: bool
    start_date: str
    end_date: Optional[str] = None
    created_at: str
    updated_at: str


class AdherenceLogRequest(BaseModel):
    schedule_id: str
    date: str = Field(..., description="YYYY-MM-DD")
    adhered: bool
    actual_eating_start: Optional[str] = Field(None, description="HH:MM")
    actual_eating_end: Optional[str] = Field(None, description="HH:MM")
    notes: Optional[str] = Field(None, max_length=2000)


class AdherenceLog(BaseModel):
    id: str
    user_id: str
    schedule_id: str
    date: str
    adhered: bool
    actual_eating_start: Optional[str] = None
    actual_eating_end: Optional[str] = None
    notes: Optional[str] = None
    created_at: str

# -*- coding: utf-8 -*-
"""Supplements — Pydantic models."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from ..dates import normalize_timestamp

SupplementType = Literal["berberine", "probiotic", "nmn", "resveratrol", "other"]


class SupplementCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    type: SupplementType
    dosage: Optional[str] = Field(None, max_length=100)
    frequency: Optional[str] = Field(None, max_length=100)
    timing: Optional[str] = Field(None, max_length=100)
    start_date: str = Field(..., description="YYYY-MM-DD")
    end_date: Optional[str] = None
    notes: Optional[str] = Field(None, max_length=2000)


class SupplementUpdateRequest(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    dosage: Optional[str] = Field(None, max_length=100)
    frequency: Optional[str] = Field(None, max_length=100)
    timing: Optional[str] = Field(None, max_length=100)
    end_date: Optional[str] = None
    is_active: Optional[bool] = None
    notes: Optional[str] = Field(None, max_length=2000)


class Supplement(BaseModel):
    id: str
    user_id: str
    name: str
    type: SupplementType
    dosage: Optional[str] = None
    frequency: Optional[str] = None
    timing: Optional[str] = None
    start_date: str
    end_date: Optional[str] = None
    is_active: bool
    notes: Optional[str] = None
    created_at: str
    updated_at: str


class SupplementLogRequest(BaseModel):
    supplement_id: str
    taken_at: str = Field(..., description="ISO8601 timestamp")
    adhered: bool
    notes: Optional[str] = Field(None, max_length=2000)

    @field_validator("taken_at")
    @classmethod
    def _utc_taken_at(cls, v: str) -> str:
        return normalize_timestamp(v)


class SupplementLog(BaseModel):
    id: str
    user_id: str
    supplement_id: str
    taken_at: str
    adhered: bool
    notes: Optional[str] = None
    created_at: str

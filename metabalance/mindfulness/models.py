# -*- coding: utf-8 -*-
"""Mindfulness — Pydantic models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

ExerciseCategory = Literal["breathing", "urge_surfing", "mindful_eating", "body_scan", "meditation", "grounding"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
SessionTrigger = Literal["scheduled", "craving", "stress", "emotional", "before_meal", "other"]
Mood = Literal["very_low", "low", "neutral", "good", "great"]


class Exercise(BaseModel):
    id: str
    name: str
    description: str
    category: ExerciseCategory
    duration: int
    difficulty: Difficulty
    instructions: str
    benefits: List[str] = Field(default_factory=list)
    best_for: Optional[str] = None
    audio_url: Optional[str] = None
    image_url: Optional[str] = None
    sort_order: int = 0


class SessionStartRequest(BaseModel):
    exercise_id: str
    trigger: Optional[SessionTrigger] = None
    mood_before: Optional[Mood] = None
    craving_intensity_before: Optional[int] = Field(None, ge=1, le=10)


class SessionStartResponse(BaseModel):
    session_id: str


class SessionCompleteRequest(BaseModel):
    duration_minutes: int = Field(..., ge=0, le=24 * 60)
    mood_after: Optional[Mood] = None
    craving_intensity_after: Optional[int] = Field(None, ge=1, le=10)
    notes: Optional[str] = Field(None, max_length=5000)


class Session(BaseModel):
    id: str
    user_id: str
    exercise_id: str
    started_at: str
    completed_at: Optional[str] = None
    duration_minutes: Optional[int] = None
    trigger: Optional[SessionTrigger] = None
    mood_before: Optional[Mood] = None
    mood_after: Optional[Mood] = None
    craving_intensity_before: Optional[int] = None
    craving_intensity_after: Optional[int] = None
    notes: Optional[str] = None
    completed: bool


class SessionWithExercise(BaseModel):
    session: Session
    exercise: Exercise


class SessionStats(BaseModel):
    total_sessions: int
    total_minutes: int
    sessions_this_week: int
    current_streak: int
    favorite_exercise: Optional[Exercise] = None


class CategoryBreakdown(BaseModel):
    category: ExerciseCategory
    count: int
    total_minutes: int

# -*- coding: utf-8 -*-
"""Mindfulness — API endpoints.

The exercise catalog reads are public; sessions require a signed-in user.
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query

from ..auth.security import get_current_user
from .models import (
    CategoryBreakdown,
    Exercise,
    ExerciseCategory,
    SessionCompleteRequest,
    Session,
    SessionStartRequest,
    SessionStartResponse,
    SessionStats,
    SessionWithExercise,
)
from .storage import (
    complete_session,
    list_exercises,
    recent_sessions,
    require_exercise,
    session_stats,
    sessions_by_category,
    start_session,
)

router = APIRouter(prefix="/api/mindfulness", tags=["Mindfulness"])


@router.get("/exercises", response_model=List[Exercise], summary="Active exercises")
def get_exercises():
    return list_exercises()


@router.get("/exercises/category/{category}", response_model=List[Exercise], summary="Exercises in a category")
def get_exercises_by_category(category: ExerciseCategory):
    return list_exercises(category=category)


@router.get("/exercises/{exercise_id}", response_model=Exercise, summary="One exercise")
def get_exercise(exercise_id: str):
    return require_exercise(exercise_id)


@router.post("/sessions", response_model=SessionStartResponse, summary="Start a practice session")
def post_session(request: SessionStartRequest, user: dict = Depends(get_current_user)):
    session_id = start_session(user_id=user["id"], **request.model_dump())
    return {"session_id": session_id}


@router.post("/sessions/{session_id}/complete", response_model=Session, summary="Finish a practice session")
def post_complete(session_id: str, request: SessionCompleteRequest, user: dict = Depends(get_current_user)):
    return complete_session(user_id=user["id"], session_id=session_id, fields=request.model_dump())


@router.get("/sessions", response_model=List[SessionWithExercise], summary="Recent sessions")
def get_sessions(limit: int = Query(default=10, ge=1, le=100), user: dict = Depends(get_current_user)):
    return recent_sessions(user_id=user["id"], limit=limit)


@router.get("/stats", response_model=SessionStats, summary="Practice totals and streak")
def get_stats(user: dict = Depends(get_current_user)):
    return session_stats(user_id=user["id"])


@router.get("/stats/categories", response_model=List[CategoryBreakdown], summary="Completed sessions per category")
def get_category_stats(user: dict = Depends(get_current_user)):
    return sessions_by_category(user_id=user["id"])

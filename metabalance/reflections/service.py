# -*- coding: utf-8 -*-
"""Weekly reflections — stats and AI feedback."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import HTTPException

from .. import llm
from ..goals.storage import list_week
from ..numbers import round_half_up
from ..profile.storage import get_profile
from ..progress.storage import list_progress
from .storage import save_reflection

log = logging.getLogger(__name__)

FALLBACK_INSIGHTS = (
    "Thanks for reflecting on your week. Build on what went well, pick one challenge to tackle next week, "
    "and keep logging consistently so your progress stays visible."
)


def week_stats(goals: List[Mapping[str, Any]]) -> Dict[str, int]:
    days_logged = sum(1 for g in goals if g.get("meal_logging_complete"))
    avg = round_half_up(sum(int(g.get("win_score") or 0) for g in goals) / len(goals)) if goals else 0
    return {"days_logged": days_logged, "avg_win_score": avg}


def week_weight_change(progress: List[Mapping[str, Any]]) -> Optional[float]:
    """First minus last weigh-in of the week (positive = lost); ``progress`` is oldest first."""
    weights = [p["weight"] for p in progress if p.get("weight") is not None]
    if len(weights) < 2:
        return None
    return round_half_up(weights[0] - weights[-1], 1)


def _system_prompt(profile: Optional[Mapping[str, Any]]) -> str:
    profile = profile or {}
    return (
        "You are a metabolic health coach analyzing a user's weekly reflection. Provide 2-3 specific, "
        "actionable insights based on their answers and weekly stats. "
        f"User profile: {profile.get('current_weight')} lbs current, {profile.get('target_weight')} lbs target, "
        f"{profile.get('activity_level')} activity level."
    )


def _user_prompt(fields: Mapping[str, Any], stats: Mapping[str, int]) -> str:
    return (
        "Weekly Reflection:\n\n"
        f"What went well: {fields['went_well']}\n\n"
        f"Challenges: {fields['challenges']}\n\n"
        f"Next week plan: {fields['next_week_plan']}\n\n"
        f"Stats: Logged {stats['days_logged']}/7 days, Average daily win score: {stats['avg_win_score']}/5 stars"
    )


def create_reflection(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    stats = week_stats(list_week(user_id=user_id, week_start=fields["week_start"]))
    progress = [
        p
        for p in reversed(list_progress(user_id=user_id, start=fields["week_start"], end=fields["week_end"]))
    ]

    try:
        ai_insights = llm.complete(_system_prompt(get_profile(user_id=user_id)), _user_prompt(fields, stats))
    except HTTPException as exc:
        log.warning("weekly reflection feedback unavailable: %s", exc.detail)
        ai_insights = FALLBACK_INSIGHTS

    return save_reflection(
        user_id=user_id,
        fields={
            **fields,
            **stats,
            "ai_insights": ai_insights,
            "weight_change": week_weight_change(progress),
        },
    )

# -*- coding: utf-8 -*-
"""Progress — PDF export assembly."""

from __future__ import annotations

import base64
from typing import Any, Dict, List, Mapping

from ..dates import days_ago_key, today_key, utc_now
from ..goals.storage import list_goals_between
from ..goals.streaks import export_streaks, is_perfect_day
from ..meals.storage import list_meals_between
from ..profile.storage import get_profile
from .report import ProgressPDFGenerator, ProgressReport, WeightEntry
from .storage import list_progress

GOAL_WINDOW_DAYS = 30
NUTRITION_WINDOW_DAYS = 7


def nutrition_averages(meals: List[Mapping[str, Any]]) -> Dict[str, float]:
    """Per-meal averages (an empty list averages to zero)."""
    count = max(len(meals), 1)
    return {
        f"avg_{key}": sum(float(m.get(key) or 0) for m in meals) / count
        for key in ("calories", "protein", "carbs", "fats")
    }


def daily_win_stats(goals: List[Mapping[str, Any]]) -> Dict[str, Any]:
    total = len(goals)
    stars = sum(int(g.get("win_score") or 0) for g in goals)
    return {
        "total_days": total,
        "avg_stars": stars / max(total, 1),
        "perfect_days": sum(1 for g in goals if is_perfect_day(g)),
    }


def build_progress_report(user: Mapping[str, Any]) -> ProgressReport:
    user_id = user["id"]
    profile = get_profile(user_id=user_id) or {}
    logs = [log for log in list_progress(user_id=user_id) if log.get("weight") is not None]

    today = today_key()
    goals = list_goals_between(user_id=user_id, start_day=days_ago_key(GOAL_WINDOW_DAYS), end_day=today)
    meals = list_meals_between(
        user_id=user_id,
        start_day=days_ago_key(NUTRITION_WINDOW_DAYS - 1),
        end_day=today,
    )

    current = profile.get("current_weight")
    if current is None and logs:
        current = logs[0]["weight"]

    return ProgressReport(
        user_name=user.get("name") or user.get("email") or "User",
        current_weight=float(current or 0),
        target_weight=float(profile.get("target_weight") or 0),
        weight_logs=[WeightEntry(weight=float(log["weight"]), logged_at=log["logged_at"]) for log in logs],
        nutrition_stats=nutrition_averages(meals),
        streaks=export_streaks(goals),
        daily_wins=daily_win_stats(goals),
        generated_at=utc_now(),
    )


def export_progress_pdf(user: Mapping[str, Any]) -> Dict[str, str]:
    pdf_bytes = ProgressPDFGenerator().generate_report(build_progress_report(user))
    return {
        "pdf": base64.b64encode(pdf_bytes).decode("ascii"),
        "filename": f"metabalance-progress-{today_key()}.pdf",
    }

# -*- coding: utf-8 -*-
"""Achievements — stats gathering and unlock checks."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from ..goals import streaks
from ..goals.storage import list_all_goals
from ..meals.storage import count_meals, meal_days
from ..profile.storage import get_profile
from ..progress.storage import weight_history
from .definitions import ACHIEVEMENTS, UserStats, check_unlocked
from .storage import list_unlocked, unlock

log = logging.getLogger(__name__)


def build_user_stats(*, user_id: str) -> UserStats:
    profile = get_profile(user_id=user_id) or {}
    profile_weight = float(profile.get("current_weight") or 0)
    weights = weight_history(user_id=user_id)
    goals = list_all_goals(user_id=user_id)
    tracked_days = set(meal_days(user_id=user_id)) | {g["date"] for g in goals}

    return UserStats(
        starting_weight=float(weights[0]["weight"]) if weights else profile_weight,
        current_weight=float(weights[-1]["weight"]) if weights else profile_weight,
        current_streak=streaks.current_streak(goals),
        longest_streak=streaks.longest_streak(goals),
        total_meals_logged=count_meals(user_id=user_id),
        total_perfect_days=streaks.perfect_day_count(goals),
        consecutive_perfect_days=streaks.consecutive_perfect_days(goals),
        days_tracking=len(tracked_days),
    )


def all_with_status(*, user_id: str) -> List[Dict[str, Any]]:
    unlocked = {u["achievement_id"]: u for u in list_unlocked(user_id=user_id)}
    out = []
    for aid, achievement in ACHIEVEMENTS.items():
        entry = achievement.as_dict()
        entry["unlocked"] = aid in unlocked
        entry["unlocked_at"] = unlocked[aid]["unlocked_at"] if aid in unlocked else None
        out.append(entry)
    return out


def check_and_unlock(*, user_id: str) -> List[Dict[str, Any]]:
    stats = build_user_stats(user_id=user_id)
    existing = [u["achievement_id"] for u in list_unlocked(user_id=user_id)]
    new_ids = check_unlocked(stats, existing)
    if new_ids:
        unlock(user_id=user_id, achievement_ids=new_ids)
        log.info("user %s unlocked %s", user_id, ", ".join(new_ids))
    return [ACHIEVEMENTS[aid].as_dict() for aid in new_ids]

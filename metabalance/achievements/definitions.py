# -*- coding: utf-8 -*-
"""Achievement catalog and unlock rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple


@dataclass(frozen=True)
class Achievement:
    id: str
    name: str
    description: str
    icon: str
    category: str  # weight | streak | consistency | milestone
    tier: str  # bronze | silver | gold | platinum

    def as_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "icon": self.icon,
            "category": self.category,
            "tier": self.tier,
        }


@dataclass
class UserStats:
    current_weight: float = 0.0
    starting_weight: float = 0.0
    current_streak: int = 0
    longest_streak: int = 0
    total_meals_logged: int = 0
    total_perfect_days: int = 0
    consecutive_perfect_days: int = 0
    days_tracking: int = 0

    @property
    def weight_lost(self) -> float:
        return self.starting_weight - self.current_weight


_CATALOG: Tuple[Achievement, ...] = (
    Achievement("first_week", "First Week Complete", "Completed your first week of tracking", "🌱", "milestone", "bronze"),
    Achievement("first_meal_logged", "Meal Logger", "Logged your first meal", "🍽️", "milestone", "bronze"),
    Achievement("weight_5lbs", "5 Pounds Down", "Lost 5 pounds from your starting weight", "🎯", "weight", "bronze"),
    Achievement("weight_10lbs", "10 Pounds Down", "Lost 10 pounds from your starting weight", "💪", "weight", "silver"),
    Achievement("weight_25lbs", "25 Pounds Down", "Lost 25 pounds from your starting weight", "🏆", "weight", "gold"),
    Achievement("weight_50lbs", "50 Pounds Down", "Lost 50 pounds from your starting weight", "👑", "weight", "platinum"),
    Achievement("weight_100lbs", "100 Pounds Down", "Lost 100 pounds from your starting weight", "🌟", "weight", "platinum"),
    Achievement("streak_7", "Week Warrior", "7-day streak of 3+ stars", "🔥", "streak", "bronze"),
    Achievement("streak_30", "Month Master", "30-day streak of 3+ stars", "🔥", "streak", "silver"),
    Achievement("streak_100", "Century Club", "100-day streak of 3+ stars", "🔥", "streak", "gold"),
    Achievement("streak_365", "Year Legend", "365-day streak of 3+ stars", "🔥", "streak", "platinum"),
    Achievement("perfect_week", "Perfect Week", "7 consecutive days with 5 stars", "⭐", "consistency", "silver"),
    Achievement("perfect_month", "Perfect Month", "30 consecutive days with 5 stars", "⭐", "consistency", "gold"),
    Achievement("meal_tracker_pro", "Meal Tracker Pro", "Logged 100 meals", "📊", "consistency", "silver"),
    Achievement("goal_crusher", "Goal Crusher", "Achieved 50 perfect days (5 stars)", "💯", "consistency", "gold"),
)

ACHIEVEMENTS: Dict[str, Achievement] = {a.id: a for a in _CATALOG}

WEIGHT_THRESHOLDS = ((5, "weight_5lbs"), (10, "weight_10lbs"), (25, "weight_25lbs"), (50, "weight_50lbs"), (100, "weight_100lbs"))
STREAK_THRESHOLDS = ((7, "streak_7"), (30, "streak_30"), (100, "streak_100"), (365, "streak_365"))
PERFECT_RUN_THRESHOLDS = ((7, "perfect_week"), (30, "perfect_month"))


def earned(stats: UserStats) -> List[str]:
    """Every achievement id ``stats`` qualifies for, in evaluation order."""
    ids: List[str] = []
    ids += [aid for threshold, aid in WEIGHT_THRESHOLDS if stats.weight_lost >= threshold]
    ids += [aid for threshold, aid in STREAK_THRESHOLDS if stats.current_streak >= threshold]
    ids += [aid for threshold, aid in PERFECT_RUN_THRESHOLDS if stats.consecutive_perfect_days >= threshold]
    if stats.total_meals_logged >= 100:
        ids.append("meal_tracker_pro")
    if stats.total_perfect_days >= 50:
        ids.append("goal_crusher")
    if stats.days_tracking >= 7:
        ids.append("first_week")
    if stats.total_meals_logged >= 1:
        ids.append("first_meal_logged")
    return ids


def check_unlocked(stats: UserStats, existing: Iterable[str]) -> List[str]:
    have = set(existing)
    return [aid for aid in earned(stats) if aid not in have]

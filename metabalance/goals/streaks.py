# -*- coding: utf-8 -*-
"""Daily-win scoring and streak arithmetic.

A day "counts" toward a streak when at least three of the five daily goals are
complete; a perfect day has all five.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, List, Mapping, Sequence

from ..dates import parse_day
from ..numbers import round_half_up

WIN_THRESHOLD = 3
PERFECT_SCORE = 5

# goal id -> daily_goals column
GOAL_COLUMNS: Dict[str, str] = {
    "meal_logging": "meal_logging_complete",
    "protein": "protein_goal_complete",
    "fasting": "fasting_goal_complete",
    "exercise": "exercise_goal_complete",
    "water": "water_goal_complete",
}


def win_score(goal: Mapping[str, Any]) -> int:
    return sum(1 for column in GOAL_COLUMNS.values() if goal.get(column))


def is_win_day(goal: Mapping[str, Any]) -> bool:
    return int(goal.get("win_score") or 0) >= WIN_THRESHOLD


def is_perfect_day(goal: Mapping[str, Any]) -> bool:
    return int(goal.get("win_score") or 0) >= PERFECT_SCORE


def export_streaks(goals: Sequence[Mapping[str, Any]]) -> Dict[str, int]:
    """Row-wise streak walk used by the progress report.

    Rows are walked newest to oldest without regard to calendar gaps; the
    current streak is the first non-empty run of win days.
    """
    ordered = sorted(goals, key=lambda g: g["date"], reverse=True)
    current = longest = run = 0
    for goal in ordered:
        if is_win_day(goal):
            run += 1
            longest = max(longest, run)
        else:
            if current == 0:
                current = run
            run = 0
    if current == 0:
        current = run
    return {"current_streak": current, "longest_streak": longest}


def _runs(goals: Sequence[Mapping[str, Any]], predicate) -> List[int]:
    """Lengths of runs of consecutive calendar days satisfying ``predicate``, oldest first."""
    days = sorted({parse_day(g["date"]) for g in goals if predicate(g)})
    runs: List[int] = []
    previous = None
    for day in days:
        if previous is not None and day - previous == timedelta(days=1):
            runs[-1] += 1
        else:
            runs.append(1)
        previous = day
    return runs


def _trailing_run(goals: Sequence[Mapping[str, Any]], predicate) -> int:
    if not goals:
        return 0
    latest = max(goals, key=lambda g: g["date"])
    if not predicate(latest):
        return 0
    runs = _runs(goals, predicate)
    return runs[-1] if runs else 0


def current_streak(goals: Sequence[Mapping[str, Any]]) -> int:
    """Consecutive win days ending at the most recent goal row."""
    return _trailing_run(goals, is_win_day)


def longest_streak(goals: Sequence[Mapping[str, Any]]) -> int:
    return max(_runs(goals, is_win_day), default=0)


def consecutive_perfect_days(goals: Sequence[Mapping[str, Any]]) -> int:
    return _trailing_run(goals, is_perfect_day)


def perfect_day_count(goals: Sequence[Mapping[str, Any]]) -> int:
    return sum(1 for g in goals if is_perfect_day(g))


def summarize(goals: Sequence[Mapping[str, Any]]) -> Dict[str, Any]:
    total = len(goals)
    avg = sum(int(g.get("win_score") or 0) for g in goals) / total if total else 0.0
    return {
        "current_streak": current_streak(goals),
        "longest_streak": longest_streak(goals),
        "total_days": total,
        "average_win_score": round_half_up(avg, 1),
        "perfect_days": perfect_day_count(goals),
        "consecutive_perfect_days": consecutive_perfect_days(goals),
    }

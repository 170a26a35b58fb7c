# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from metabalance.achievements.definitions import ACHIEVEMENTS, UserStats, check_unlocked, earned
from metabalance.goals import streaks


def _goal(day: str, score: int) -> dict:
    return {"date": day, "win_score": score}


class TestStreaks(unittest.TestCase):
    def setUp(self) -> None:
        scores = (5, 5, 3, 1, 4, 5)
        self.goals = [_goal(f"2026-01-0{i}", s) for i, s in enumerate(scores, 1)]

    def test_win_score_counts_completed_goals(self) -> None:
        goal = {"meal_logging_complete": 1, "protein_goal_complete": True, "water_goal_complete": 0}
        self.assertEqual(streaks.win_score(goal), 2)
        self.assertEqual(streaks.win_score({}), 0)

    def test_summary(self) -> None:
        self.assertEqual(
            streaks.summarize(self.goals),
            {
                "current_streak": 2,
                "longest_streak": 3,
                "total_days": 6,
                "average_win_score": 3.8,
                "perfect_days": 3,
                "consecutive_perfect_days": 1,
            },
        )

    def test_summary_empty(self) -> None:
        summary = streaks.summarize([])
        self.assertEqual(summary["current_streak"], 0)
        self.assertEqual(summary["longest_streak"], 0)
        self.assertEqual(summary["average_win_score"], 0.0)

    def test_latest_day_below_threshold_breaks_streak(self) -> None:
        goals = self.goals + [_goal("2026-01-07", 2)]
        self.assertEqual(streaks.current_streak(goals), 0)
        self.assertEqual(streaks.longest_streak(goals), 3)

    def test_export_streaks_walk_rows(self) -> None:
        self.assertEqual(streaks.export_streaks(self.goals), {"current_streak": 2, "longest_streak": 3})

        # Row walk ignores the missing day; calendar streaks do not.
        gapped = [_goal("2026-01-01", 5), _goal("2026-01-03", 5)]
        self.assertEqual(streaks.export_streaks(gapped)["current_streak"], 2)
        self.assertEqual(streaks.current_streak(gapped), 1)


class TestAchievementRules(unittest.TestCase):
    def test_catalog(self) -> None:
        self.assertEqual(len(ACHIEVEMENTS), 15)
        self.assertEqual(ACHIEVEMENTS["goal_crusher"].tier, "gold")

    def test_earned(self) -> None:
        stats = UserStats(starting_weight=250, current_weight=238, current_streak=8, total_meals_logged=1)
        self.assertEqual(stats.weight_lost, 12)
        self.assertEqual(earned(stats), ["weight_5lbs", "weight_10lbs", "streak_7", "first_meal_logged"])
        self.assertEqual(
            check_unlocked(stats, ["weight_5lbs"]),
            ["weight_10lbs", "streak_7", "first_meal_logged"],
        )

    def test_consistency_thresholds(self) -> None:
        stats = UserStats(total_meals_logged=100, total_perfect_days=50, consecutive_perfect_days=30, days_tracking=7)
        self.assertEqual(
            earned(stats),
            ["perfect_week", "perfect_month", "meal_tracker_pro", "goal_crusher", "first_week", "first_meal_logged"],
        )

    def test_weight_gain_earns_nothing(self) -> None:
        self.assertEqual(earned(UserStats(starting_weight=200, current_weight=210)), [])


if __name__ == "__main__":
    unittest.main()

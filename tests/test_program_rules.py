# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timezone

from metabalance.emotional.analytics import most_common_hour, summarize_episodes
from metabalance.journey.catalog import catalog_rows, slugify
from metabalance.journey.fasting import compute_stats
from metabalance.journey.phases import plan_phases
from metabalance.mindfulness.catalog import EXERCISES
from metabalance.mindfulness.storage import practice_streak


class TestEpisodeAnalytics(unittest.TestCase):
    def test_summary(self) -> None:
        episodes = [
            {
                "timestamp": "2026-03-01T14:10:00Z",
                "trigger_emotion": "stress",
                "intensity": 6,
                "coping_strategy_used": "walk",
                "effectiveness_rating": 7,
            },
            {"timestamp": "2026-03-01T14:50:00Z", "trigger_emotion": "stress", "intensity": 8},
            {
                "timestamp": "2026-03-02T09:00:00Z",
                "trigger_emotion": "boredom",
                "intensity": 3,
                "coping_strategy_used": "tea",
                "effectiveness_rating": 4,
            },
        ]
        summary = summarize_episodes(episodes, 14)
        self.assertEqual(summary["total_episodes"], 3)
        self.assertEqual(summary["emotion_counts"], {"stress": 2, "boredom": 1})
        self.assertEqual(summary["avg_intensity"], 5.7)
        self.assertEqual(summary["episodes_with_coping"], 2)
        self.assertEqual(summary["coping_usage_rate"], 67)
        self.assertEqual(summary["avg_coping_effectiveness"], 5.5)
        self.assertEqual(summary["most_common_hour"], 14)
        self.assertEqual(summary["period_days"], 14)

    def test_coping_rate_rounds_half_up(self) -> None:
        episodes = [{"timestamp": "2026-03-01T14:10:00Z", "trigger_emotion": "stress", "intensity": 5}] * 7
        episodes.append({**episodes[0], "coping_strategy_used": "walk"})
        self.assertEqual(summarize_episodes(episodes, 30)["coping_usage_rate"], 13)

    def test_hour_tie_goes_to_earliest(self) -> None:
        episodes = [{"timestamp": "2026-03-01T21:00:00Z"}, {"timestamp": "2026-03-02T09:30:00Z"}]
        self.assertEqual(most_common_hour(episodes), 9)

    def test_empty(self) -> None:
        summary = summarize_episodes([], 30)
        self.assertIsNone(summary["most_common_hour"])
        self.assertEqual(summary["avg_intensity"], 0.0)
        self.assertEqual(summary["coping_usage_rate"], 0)


class TestJourneyPlanning(unittest.TestCase):
    def test_phase_plan(self) -> None:
        start = datetime(2026, 1, 31, 8, 0, tzinfo=timezone.utc)
        planned = plan_phases(300, 200, start=start)
        self.assertEqual([p["goal_weight_loss"] for p in planned], [22.0, 28.0, 28.0, 22.0])
        self.assertEqual(planned[0]["start_date"], "2026-01-31T08:00:00.000Z")
        # month-end clamps
        self.assertEqual(planned[0]["end_date"], "2026-04-30T08:00:00.000Z")
        self.assertEqual(planned[1]["end_date"], "2026-07-31T08:00:00.000Z")
        self.assertEqual(planned[3]["end_date"], "2027-01-31T08:00:00.000Z")
        self.assertEqual(planned[0]["status"], "active")
        self.assertEqual({p["status"] for p in planned[1:]}, {"upcoming"})

    def test_catalog_ids(self) -> None:
        rows = catalog_rows()
        self.assertEqual(len(rows), 16)
        self.assertEqual(len({r["id"] for r in rows}), 16)
        self.assertEqual(slugify("NMN (Nicotinamide Mononucleotide)"), "nmn-nicotinamide-mononucleotide")

    def test_fasting_stats(self) -> None:
        sessions = [
            {"end_time": "2026-02-02T06:00:00Z", "weight_before": 250.0, "weight_after": 247.5, "actual_duration": 30},
            {"end_time": "2026-02-10T06:00:00Z", "weight_before": 247.0, "weight_after": 247.0, "actual_duration": 24},
            {"end_time": None, "weight_before": 246.0, "weight_after": None, "actual_duration": None},
        ]
        self.assertEqual(
            compute_stats(sessions),
            {
                "total_fasts": 3,
                "completed_fasts": 2,
                "abandoned_fasts": 1,
                "total_weight_lost": "2.5",
                "average_fast_duration": 27,
            },
        )
        self.assertEqual(compute_stats([])["total_weight_lost"], "0.0")


class TestMindfulness(unittest.TestCase):
    def test_practice_streak(self) -> None:
        days = ["2026-03-10T08:00:00Z", "2026-03-09T21:15:00Z", "2026-03-07T07:00:00Z"]
        self.assertEqual(practice_streak(days, anchor="2026-03-10"), 2)
        self.assertEqual(practice_streak(days, anchor="2026-03-11"), 0)
        self.assertEqual(practice_streak([], anchor="2026-03-10"), 0)

    def test_exercise_catalog(self) -> None:
        self.assertEqual(len(EXERCISES), 10)
        self.assertEqual(len({e["id"] for e in EXERCISES}), 10)
        self.assertTrue(all(e["benefits"] for e in EXERCISES))


if __name__ == "__main__":
    unittest.main()

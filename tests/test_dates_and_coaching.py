# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import date, datetime, timezone

from metabalance import dates
from metabalance.insights.coach import build_context, momentum_label, parse_structured_insight
from metabalance.numbers import round_half_up
from metabalance.progress.export import nutrition_averages
from metabalance.reflections.service import week_stats, week_weight_change


class TestDates(unittest.TestCase):
    def test_week_runs_sunday_to_saturday(self) -> None:
        start, end = dates.week_range("2026-10-14")
        self.assertEqual(start.date(), date(2026, 10, 11))
        self.assertEqual(end.date(), date(2026, 10, 17))
        self.assertEqual(dates.week_range("2026-10-11")[0].date(), date(2026, 10, 11))

    def test_add_months_clamps(self) -> None:
        self.assertEqual(dates.add_months("2026-01-31", 1), date(2026, 2, 28))
        self.assertEqual(dates.add_months("2024-01-31", 1), date(2024, 2, 29))
        self.assertEqual(dates.add_months("2026-11-30", 3), date(2027, 2, 28))

    def test_month_range(self) -> None:
        start, end = dates.month_range("2026-02-10")
        self.assertEqual((start.date(), end.date()), (date(2026, 2, 1), date(2026, 2, 28)))
        self.assertEqual(dates.month_range("2026-12-05")[1].date(), date(2026, 12, 31))

    def test_normalize_timestamp(self) -> None:
        self.assertEqual(dates.normalize_timestamp("2026-03-01T10:00:00+02:00"), "2026-03-01T08:00:00.000Z")
        self.assertEqual(dates.normalize_timestamp("2026-03-01T10:00:00"), "2026-03-01T10:00:00.000Z")
        self.assertEqual(dates.day_key("2026-03-01T23:59:00Z"), "2026-03-01")

    def test_timestamps_have_fixed_width(self) -> None:
        whole = datetime(2026, 1, 5, 23, 59, 59, tzinfo=timezone.utc)
        self.assertEqual(dates.iso(whole), "2026-01-05T23:59:59.000Z")
        self.assertEqual(dates.iso(dates.end_of_day("2026-01-05")), "2026-01-05T23:59:59.999Z")
        # Lexical order matches time order.
        self.assertLess(dates.normalize_timestamp("2026-01-05T23:59:59Z"), dates.iso(dates.end_of_day("2026-01-05")))

    def test_past_days(self) -> None:
        start, end = dates.past_days_range(7, now="2026-03-10")
        self.assertEqual(start.date(), date(2026, 3, 3))
        self.assertEqual(end.date(), date(2026, 3, 10))
        self.assertEqual(dates.days_ago_key(1, now="2026-03-01"), "2026-02-28")
        self.assertEqual(len(list(dates.iter_days("2026-02-27", "2026-03-02"))), 4)


class TestRounding(unittest.TestCase):
    def test_halves_round_up(self) -> None:
        self.assertEqual(round_half_up(190.5), 191)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(12.5), 13)
        self.assertEqual(round_half_up(-2.5), -2)
        self.assertEqual(round_half_up(2.49), 2)
        self.assertIsInstance(round_half_up(7.0), int)

    def test_places(self) -> None:
        self.assertEqual(round_half_up(3.75, 1), 3.8)
        self.assertEqual(round_half_up(0.125, 2), 0.13)


class TestInsightParsing(unittest.TestCase):
    def test_json_reply(self) -> None:
        reply = '{"title": "Protein first", "content": "Start with eggs.", "type": "tip"}'
        self.assertEqual(
            parse_structured_insight(reply),
            {"title": "Protein first", "content": "Start with eggs.", "type": "tip"},
        )

    def test_embedded_json_with_unknown_type(self) -> None:
        parsed = parse_structured_insight('Sure! {"title": "Hydrate", "content": "Drink water.", "type": "rant"}')
        self.assertEqual(parsed["title"], "Hydrate")
        self.assertEqual(parsed["type"], "motivation")

    def test_plain_prose(self) -> None:
        text = "You logged every meal this week. Keep it up!"
        self.assertEqual(parse_structured_insight(text), {"title": "Daily Insight", "content": text, "type": "motivation"})
        self.assertEqual(parse_structured_insight("{not json}")["content"], "{not json}")

    def test_context(self) -> None:
        self.assertEqual(momentum_label(4.2), " - Excellent momentum!")
        self.assertEqual(momentum_label(0), "")
        context = build_context(
            {"current_weight": 230, "target_weight": 180, "has_diabetes": True, "taking_glp1": True},
            [{"weight": 230.0}, {"weight": 232.5}],
            3,
            [{"win_score": 3}, {"win_score": 4}],
        )
        self.assertIn("- Weight to lose: 50 lbs", context)
        self.assertIn("- Recent weight change (7 days): -2.5 lbs", context)
        self.assertIn("- Health conditions: Diabetes", context)
        self.assertIn("- Taking GLP-1: Yes", context)
        self.assertIn("3.5/5.0 stars - Good consistency!", context)
        self.assertIn("- Stress Level: unknown", context)


class TestWeeklySummaries(unittest.TestCase):
    def test_week_stats(self) -> None:
        goals = [
            {"meal_logging_complete": 1, "win_score": 4},
            {"meal_logging_complete": 0, "win_score": 3},
            {"meal_logging_complete": True, "win_score": 4},
        ]
        self.assertEqual(week_stats(goals), {"days_logged": 2, "avg_win_score": 4})
        self.assertEqual(week_stats([]), {"days_logged": 0, "avg_win_score": 0})
        # Halves round up.
        self.assertEqual(week_stats([{"win_score": 2}, {"win_score": 3}])["avg_win_score"], 3)

    def test_week_weight_change(self) -> None:
        progress = [{"weight": 240.0}, {"weight": None}, {"weight": 237.4}]
        self.assertEqual(week_weight_change(progress), 2.6)
        self.assertIsNone(week_weight_change([{"weight": 240.0}]))

    def test_nutrition_averages(self) -> None:
        self.assertEqual(
            nutrition_averages([]),
            {"avg_calories": 0.0, "avg_protein": 0.0, "avg_carbs": 0.0, "avg_fats": 0.0},
        )
        averages = nutrition_averages([{"calories": 500, "protein": 40}, {"calories": 700, "protein": None}])
        self.assertEqual(averages["avg_calories"], 600)
        self.assertEqual(averages["avg_protein"], 20)


if __name__ == "__main__":
    unittest.main()

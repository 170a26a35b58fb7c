# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest

from metabalance.profile.nutrition import (
    DEFAULT_GOALS,
    activity_multiplier,
    calculate_bmr,
    calculate_nutrition_goals,
)


class TestNutritionGoals(unittest.TestCase):
    def test_female_profile(self) -> None:
        profile = {
            "current_weight": 180,
            "height": 65,
            "age": 35,
            "gender": "female",
            "activity_level": "light",
        }
        self.assertAlmostEqual(calculate_bmr(180, 65, 35, "female"), 1512.3406, places=3)
        goals = calculate_nutrition_goals(profile)
        self.assertEqual(
            goals,
            {
                "daily_calories": 1579,
                "daily_protein": 135,
                "daily_carbs": 118,
                "daily_fats": 63,
                "daily_fiber": 35,
            },
        )

    def test_half_pound_macros_round_up(self) -> None:
        profile = {
            "current_weight": 254,
            "height": 70,
            "age": 45,
            "gender": "male",
            "activity_level": "sedentary",
        }
        goals = calculate_nutrition_goals(profile)
        # 254 * 0.75 = 190.5
        self.assertEqual(goals["daily_protein"], 191)
        self.assertEqual(goals["daily_fats"], 89)

    def test_other_gender_uses_male_constant(self) -> None:
        self.assertEqual(calculate_bmr(200, 70, 40, "other"), calculate_bmr(200, 70, 40, "male"))
        self.assertAlmostEqual(
            calculate_bmr(200, 70, 40, "male") - calculate_bmr(200, 70, 40, "female"), 166.0, places=6
        )

    def test_unknown_activity_is_sedentary(self) -> None:
        self.assertEqual(activity_multiplier(None), 1.2)
        self.assertEqual(activity_multiplier("couch"), 1.2)
        self.assertEqual(activity_multiplier("very_active"), 1.9)

    def test_missing_inputs_fall_back_to_defaults(self) -> None:
        self.assertEqual(calculate_nutrition_goals(None), DEFAULT_GOALS)
        self.assertEqual(calculate_nutrition_goals({"current_weight": 200, "height": 70}), DEFAULT_GOALS)
        goals = calculate_nutrition_goals({})
        goals["daily_calories"] = 1
        # callers get a copy
        self.assertEqual(DEFAULT_GOALS["daily_calories"], 2000)


if __name__ == "__main__":
    unittest.main()

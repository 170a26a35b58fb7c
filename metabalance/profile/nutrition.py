# -*- coding: utf-8 -*-
"""Daily nutrition targets derived from the metabolic profile.

BMR uses the Mifflin-St Jeor equation on imperial inputs (lbs / inches), TDEE
applies an activity multiplier, and the calorie target is a 500 kcal deficit.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from ..numbers import round_half_up

LBS_TO_KG = 0.453592
INCHES_TO_CM = 2.54

ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
}

DEFAULT_GOALS: Dict[str, int] = {
    "daily_calories": 2000,
    "daily_protein": 150,
    "daily_carbs": 200,
    "daily_fats": 65,
    "daily_fiber": 30,
}

CALORIE_DEFICIT = 500
PROTEIN_PER_LB = 0.75
FAT_PER_LB = 0.35
FIBER_TARGET = 35


def calculate_bmr(weight_lbs: float, height_in: float, age: int, gender: str) -> float:
    weight_kg = weight_lbs * LBS_TO_KG
    height_cm = height_in * INCHES_TO_CM
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    # "other" uses the male constant.
    return base - 161 if gender == "female" else base + 5


def activity_multiplier(activity_level: Optional[str]) -> float:
    return ACTIVITY_MULTIPLIERS.get(activity_level or "", 1.2)


def calculate_tdee(bmr: float, activity_level: Optional[str]) -> float:
    return bmr * activity_multiplier(activity_level)


def has_metabolic_inputs(profile: Optional[Mapping[str, Any]]) -> bool:
    if not profile:
        return False
    keys = ("current_weight", "height", "age", "gender", "activity_level")
    return all(profile.get(k) for k in keys)


def calculate_nutrition_goals(profile: Optional[Mapping[str, Any]]) -> Dict[str, int]:
    if profile is None or not has_metabolic_inputs(profile):
        return dict(DEFAULT_GOALS)

    weight = float(profile["current_weight"])
    bmr = calculate_bmr(weight, float(profile["height"]), int(profile["age"]), str(profile["gender"]))
    tdee = calculate_tdee(bmr, profile.get("activity_level"))

    calories = round_half_up(tdee - CALORIE_DEFICIT)
    protein = round_half_up(weight * PROTEIN_PER_LB)
    fats = round_half_up(weight * FAT_PER_LB)
    carbs = round_half_up((calories - protein * 4 - fats * 9) / 4)

    return {
        "daily_calories": calories,
        "daily_protein": protein,
        "daily_carbs": carbs,
        "daily_fats": fats,
        "daily_fiber": FIBER_TARGET,
    }

# -*- coding: utf-8 -*-
"""Meals — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import date_prefix, utc_now_iso
from ..numbers import round_half_up

MACRO_FIELDS = ("calories", "protein", "carbs", "fats", "fiber")


def compute_totals(meals: Iterable[Mapping[str, Any]]) -> Dict[str, float]:
    totals = {k: 0.0 for k in MACRO_FIELDS}
    for meal in meals:
        for key in MACRO_FIELDS:
            totals[key] += float(meal.get(key) or 0.0)
    return {k: round_half_up(v, 1) for k, v in totals.items()}


def create_meal(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    meal_id = str(uuid4())
    now = utc_now_iso()
    meal = {
        "id": meal_id,
        "user_id": user_id,
        "logged_at": fields["logged_at"],
        "meal_type": fields["meal_type"],
        "food_name": fields["food_name"],
        "serving_size": fields.get("serving_size"),
        "calories": fields.get("calories"),
        "protein": fields.get("protein"),
        "carbs": fields.get("carbs"),
        "fats": fields.get("fats"),
        "fiber": fields.get("fiber"),
        "notes": fields.get("notes"),
        "created_at": now,
    }
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO meals (
                id, user_id, logged_at, meal_type, food_name, serving_size,
                calories, protein, carbs, fats, fiber, notes, created_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            """,
            tuple(meal.values()),
        )
    return meal


def list_meals_between(*, user_id: str, start_day: str, end_day: str) -> List[Dict[str, Any]]:
    """Meals whose calendar day falls in [start_day, end_day], oldest first."""
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            """
            SELECT * FROM meals
            WHERE user_id = ? AND substr(logged_at, 1, 10) BETWEEN ? AND ?
            ORDER BY logged_at ASC
            """,
            (user_id, start_day, end_day),
        ).fetchall()
    return [dict(r) for r in rows]


def list_meals_for_day(*, user_id: str, day: str) -> List[Dict[str, Any]]:
    return list_meals_between(user_id=user_id, start_day=day, end_day=day)


def daily_totals(*, user_id: str, day: str) -> Dict[str, float]:
    return compute_totals(list_meals_for_day(user_id=user_id, day=day))


def weekly_totals(*, user_id: str, start_day: str, end_day: str) -> List[Dict[str, Any]]:
    by_day: Dict[str, List[Dict[str, Any]]] = {}
    for meal in list_meals_between(user_id=user_id, start_day=start_day, end_day=end_day):
        by_day.setdefault(date_prefix(meal["logged_at"]), []).append(meal)
    return [{"date": day, **compute_totals(items)} for day, items in sorted(by_day.items())]


def delete_meal(*, user_id: str, meal_id: str) -> bool:
    with db_conn(settings.app_db_path) as conn:
        cur = conn.execute("DELETE FROM meals WHERE id = ? AND user_id = ?", (meal_id, user_id))
        return cur.rowcount > 0


def count_meals(*, user_id: str) -> int:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT COUNT(*) AS n FROM meals WHERE user_id = ?", (user_id,)).fetchone()
    return int(row["n"])


def meal_days(*, user_id: str) -> List[str]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT DISTINCT substr(logged_at, 1, 10) AS day FROM meals WHERE user_id = ?",
            (user_id,),
        ).fetchall()
    return [r["day"] for r in rows]

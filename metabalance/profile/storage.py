# -*- coding: utf-8 -*-
"""Profile — DB storage helpers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso

log = logging.getLogger(__name__)

BOOL_FIELDS = (
    "has_obesity",
    "has_diabetes",
    "has_metabolic_syndrome",
    "has_nafld",
    "taking_glp1",
    "susceptible_to_linoleic_acid",
    "low_nad_levels",
    "poor_gut_health",
    "notifications_enabled",
    "streak_alerts_enabled",
    "milestone_alerts_enabled",
)

PROFILE_FIELDS = (
    "current_weight",
    "target_weight",
    "height",
    "age",
    "gender",
    "current_medications",
    "stress_level",
    "sleep_quality",
    "activity_level",
    "primary_goal",
    "target_date",
    "daily_reminder_time",
) + BOOL_FIELDS

_NOT_NULL_FIELDS = frozenset(BOOL_FIELDS + ("daily_reminder_time",))

OWNER_DEFAULTS: Dict[str, Any] = {
    "current_weight": 312,
    "target_weight": 225,
    "height": 72,
    "age": 61,
    "gender": "male",
    "activity_level": "very_active",
}

# Placeholder values written by early test accounts; such profiles get re-seeded.
_TEST_WEIGHTS = (200, 160)


def _row_to_profile(row: Mapping[str, Any]) -> Dict[str, Any]:
    out = dict(row)
    for key in BOOL_FIELDS:
        out[key] = bool(out.get(key))
    return out


def get_profile(*, user_id: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute("SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)).fetchone()
    return _row_to_profile(row) if row else None


def upsert_profile(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge ``fields`` into the stored profile (omitted keys keep their values)."""
    # NOT NULL columns keep their stored (or default) value when sent as null.
    updates = {
        k: v
        for k, v in fields.items()
        if k in PROFILE_FIELDS and not (v is None and k in _NOT_NULL_FIELDS)
    }
    for key in BOOL_FIELDS:
        if key in updates:
            updates[key] = 1 if updates[key] else 0
    now = utc_now_iso()

    with db_conn(settings.app_db_path) as conn:
        existing = conn.execute("SELECT id FROM user_profiles WHERE user_id = ?", (user_id,)).fetchone()
        if existing:
            if updates:
                assignments = ", ".join(f"{k} = ?" for k in updates)
                conn.execute(
                    f"UPDATE user_profiles SET {assignments}, updated_at = ? WHERE user_id = ?",
                    (*updates.values(), now, user_id),
                )
        else:
            columns = ["id", "user_id", *updates.keys(), "created_at", "updated_at"]
            placeholders = ", ".join("?" for _ in columns)
            conn.execute(
                f"INSERT INTO user_profiles ({', '.join(columns)}) VALUES ({placeholders})",
                (str(uuid4()), user_id, *updates.values(), now, now),
            )
        row = conn.execute("SELECT * FROM user_profiles WHERE user_id = ?", (user_id,)).fetchone()
    log.info("profile updated for user %s (%d fields)", user_id, len(updates))
    return _row_to_profile(row)


def needs_initialization(profile: Optional[Mapping[str, Any]]) -> bool:
    if not profile:
        return True
    return (profile.get("current_weight"), profile.get("target_weight")) == _TEST_WEIGHTS


def ensure_profile_initialized(*, user_id: str, defaults: Mapping[str, Any]) -> bool:
    """Seed a profile from ``defaults`` when missing or still holding test data.

    Returns True when the profile was (re)written.
    """
    if not needs_initialization(get_profile(user_id=user_id)):
        return False

    current = float(defaults["current_weight"])
    target = float(defaults["target_weight"])
    seeded = {
        "current_weight": current,
        "target_weight": target,
        "height": defaults.get("height"),
        "age": defaults.get("age"),
        "gender": defaults.get("gender"),
        "activity_level": defaults.get("activity_level"),
        "has_obesity": current > 200,
        "has_diabetes": False,
        "has_metabolic_syndrome": False,
        "has_nafld": False,
        "taking_glp1": False,
        "stress_level": "moderate",
        "sleep_quality": "good",
        "susceptible_to_linoleic_acid": True,
        "low_nad_levels": False,
        "poor_gut_health": False,
        "primary_goal": f"Lose {current - target:g} lbs",
    }
    upsert_profile(user_id=user_id, fields=seeded)
    log.info("initialized profile defaults for user %s", user_id)
    return True

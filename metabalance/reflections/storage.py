# -*- coding: utf-8 -*-
"""Weekly reflections — DB storage helpers."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional
from uuid import uuid4

from ..app_db import db_conn
from ..config import settings
from ..dates import utc_now_iso


def save_reflection(*, user_id: str, fields: Mapping[str, Any]) -> Dict[str, Any]:
    """Insert or replace the reflection for ``fields['week_start']``."""
    now = utc_now_iso()
    with db_conn(settings.app_db_path) as conn:
        conn.execute(
            """
            INSERT INTO weekly_reflections (
                id, user_id, week_start, week_end, went_well, challenges, next_week_plan,
                ai_insights, weight_change, avg_win_score, days_logged, created_at, updated_at
            ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
            ON CONFLICT(user_id, week_start) DO UPDATE SET
                week_end = excluded.week_end,
                went_well = excluded.went_well,
                challenges = excluded.challenges,
                next_week_plan = excluded.next_week_plan,
                ai_insights = excluded.ai_insights,
                weight_change = excluded.weight_change,
                avg_win_score = excluded.avg_win_score,
                days_logged = excluded.days_logged,
                updated_at = excluded.updated_at
            """,
            (
                str(uuid4()),
                user_id,
                fields["week_start"],
                fields["week_end"],
                fields.get("went_well"),
                fields.get("challenges"),
                fields.get("next_week_plan"),
                fields.get("ai_insights"),
                fields.get("weight_change"),
                int(fields.get("avg_win_score") or 0),
                int(fields.get("days_logged") or 0),
                now,
                now,
            ),
        )
        row = conn.execute(
            "SELECT * FROM weekly_reflections WHERE user_id = ? AND week_start = ?",
            (user_id, fields["week_start"]),
        ).fetchone()
    return dict(row)


def get_reflection(*, user_id: str, week_start: str) -> Optional[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        row = conn.execute(
            "SELECT * FROM weekly_reflections WHERE user_id = ? AND week_start = ?",
            (user_id, week_start),
        ).fetchone()
    return dict(row) if row else None


def list_recent(*, user_id: str, limit: int = 10) -> List[Dict[str, Any]]:
    with db_conn(settings.app_db_path) as conn:
        rows = conn.execute(
            "SELECT * FROM weekly_reflections WHERE user_id = ? ORDER BY week_start DESC LIMIT ?",
            (user_id, int(limit)),
        ).fetchall()
    return [dict(r) for r in rows]
